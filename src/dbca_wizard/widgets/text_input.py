"""Single-line text input widget."""

from rich.style import Style
from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.wizard.events import (
    BACKSPACE,
    DELETE,
    END,
    HOME,
    LEFT,
    RIGHT,
    CursorBlink,
    Event,
    KeyEvent,
)
from dbca_wizard.wizard.protocol import DeferredAction


class TextInput:
    """Editable text with a blinking cursor, optionally masked."""

    def __init__(
        self,
        placeholder: str = "",
        char_limit: int = 256,
        password: bool = False,
        mask: str = "*",
        theme: Theme = DEFAULT_THEME,
    ):
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.password = password
        self.mask = mask
        self.theme = theme
        self._value = ""
        self.position = 0
        self.focused = False
        self.cursor_visible = True

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value[: self.char_limit]
        self.position = len(self._value)

    def focus(self) -> DeferredAction:
        self.focused = True
        self.cursor_visible = True
        return DeferredAction.BLINK

    def blur(self) -> None:
        self.focused = False
        self.cursor_visible = True

    def handle(self, event: Event) -> DeferredAction | None:
        """Edit the value; only acts while focused."""
        if not self.focused:
            return None

        if isinstance(event, CursorBlink):
            self.cursor_visible = not self.cursor_visible
            return DeferredAction.BLINK

        if not isinstance(event, KeyEvent):
            return None

        self.cursor_visible = True

        if event.key == BACKSPACE:
            if self.position > 0:
                self._value = self._value[: self.position - 1] + self._value[self.position :]
                self.position -= 1
        elif event.key == DELETE:
            self._value = self._value[: self.position] + self._value[self.position + 1 :]
        elif event.key == LEFT:
            self.position = max(0, self.position - 1)
        elif event.key == RIGHT:
            self.position = min(len(self._value), self.position + 1)
        elif event.key == HOME:
            self.position = 0
        elif event.key == END:
            self.position = len(self._value)
        elif event.is_printable and len(self._value) < self.char_limit:
            self._value = self._value[: self.position] + event.character + self._value[self.position :]
            self.position += 1

        return None

    def render(self) -> Text:
        style = self.theme["input-focused"] if self.focused else self.theme["input"]
        shown = self.mask * len(self._value) if self.password else self._value

        text = Text("> ", style=style)
        if not shown and not self.focused:
            text.append(self.placeholder, style=self.theme["placeholder"])
            return text

        if not self.focused:
            text.append(shown, style=style)
            return text

        text.append(shown[: self.position], style=style)
        under_cursor = shown[self.position : self.position + 1] or " "
        cursor_style = style + Style(reverse=True) if self.cursor_visible else style
        text.append(under_cursor, style=cursor_style)
        text.append(shown[self.position + 1 :], style=style)
        return text
