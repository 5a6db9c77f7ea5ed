"""Single-select list widget."""

from dataclasses import dataclass

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.wizard.events import DOWN, ENTER, SPACE, UP, Event, KeyEvent


@dataclass(frozen=True)
class SelectItem:
    """An entry in a select list."""

    title: str
    value: str
    description: str = ""


class SelectList:
    """A vertical list with a cursor and a confirmed selection."""

    def __init__(self, items: list[SelectItem], theme: Theme = DEFAULT_THEME):
        self.items = items
        self.theme = theme
        self.cursor = 0
        self.selected: int | None = None

    def reset(self) -> None:
        """Clear the selection; the cursor stays where it is."""
        self.selected = None

    def move_to(self, value: str) -> None:
        """Put the cursor on the item with ``value``, if present."""
        for index, item in enumerate(self.items):
            if item.value == value:
                self.cursor = index
                return

    def handle(self, event: Event) -> None:
        if not isinstance(event, KeyEvent):
            return

        if event.key == UP or event.is_char("k"):
            if self.cursor > 0:
                self.cursor -= 1
        elif event.key == DOWN or event.is_char("j"):
            if self.cursor < len(self.items) - 1:
                self.cursor += 1
        elif event.key in (ENTER, SPACE):
            self.selected = self.cursor

    @property
    def is_selected(self) -> bool:
        return self.selected is not None

    @property
    def selected_item(self) -> SelectItem | None:
        if self.selected is not None and 0 <= self.selected < len(self.items):
            return self.items[self.selected]
        return None

    @property
    def selected_value(self) -> str:
        item = self.selected_item
        return item.value if item else ""

    @property
    def current_item(self) -> SelectItem:
        return self.items[self.cursor]

    def render(self) -> Text:
        text = Text()
        for index, item in enumerate(self.items):
            if index == self.cursor:
                text.append("> ", style=self.theme["cursor"])
                text.append(item.title, style=self.theme["item-selected"])
            else:
                text.append("  ")
                text.append(item.title, style=self.theme["item"])
            text.append("\n")

            if item.description:
                text.append(f"    {item.description}\n", style=self.theme["subtitle"])
        return text
