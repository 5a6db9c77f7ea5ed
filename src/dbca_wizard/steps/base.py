"""
Base classes for wizard steps.

``ListStep`` covers the steps that are a single choice. ``FormStep`` covers
the steps built from text inputs and checkboxes with a focus ring: Tab/Down
and Shift+Tab/Up cycle focus, Enter validates, and each checkbox has a
dedicated toggle key that works while it has focus.
"""

from abc import abstractmethod
from enum import Enum

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.widgets.select_list import SelectItem, SelectList
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.events import DOWN, ENTER, ESCAPE, SHIFT_TAB, SPACE, TAB, UP, Event, KeyEvent
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction, Step, StepResult

StepOutcome = tuple[Step, StepResult, DeferredAction | None]


class BaseStep(Step):
    """Common state: theme, the configuration being edited, a validation message."""

    TITLE = ""

    def __init__(self, theme: Theme = DEFAULT_THEME):
        self.theme = theme
        self.config = DBConfig()
        self.error = ""

    def title(self) -> str:
        return self.TITLE

    def stay(self, action: DeferredAction | None = None) -> StepOutcome:
        return self, StepResult.STAY, action

    def go(self, result: StepResult) -> StepOutcome:
        return self, result, None


class ListStep(BaseStep):
    """A step that is one select list bound to one configuration field."""

    PROMPT = ""
    FIELD = ""
    ITEMS: list[SelectItem] = []

    # Signal sent when Escape is pressed
    ESCAPE_RESULT = StepResult.BACK

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.list = SelectList(list(self.ITEMS), theme)

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.list.reset()
        value = getattr(config, self.FIELD)
        self.list.move_to(value.value if isinstance(value, Enum) else value)
        return None

    def handle_event(self, event: Event) -> StepOutcome:
        if isinstance(event, KeyEvent):
            if event.key == ESCAPE:
                return self.go(self.ESCAPE_RESULT)

            self.list.handle(event)
            if self.list.is_selected:
                return self.go(StepResult.CONTINUE)

        return self.stay()

    def render(self) -> Text:
        text = Text(f"{self.PROMPT}\n\n", style=self.theme["subtitle"])
        text.append_text(self.list.render())
        return text

    def apply(self, config: DBConfig) -> None:
        field_type = type(getattr(config, self.FIELD))
        setattr(config, self.FIELD, field_type(self.list.selected_value))


class FormStep(BaseStep):
    """A step made of text inputs and checkboxes with a focus ring.

    Subclasses create ``self.inputs`` (name -> TextInput), list the checkbox
    names and their toggle keys in ``TOGGLES``, and implement
    ``focus_order`` and ``validate``.
    """

    TOGGLES: dict[str, str] = {}

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.inputs: dict[str, TextInput] = {}
        self.focus = ""

    @abstractmethod
    def focus_order(self) -> list[str]:
        """Names of the focusable fields, in Tab order."""

    @abstractmethod
    def validate(self) -> bool:
        """Check the draft; set ``self.error`` and return False on failure."""

    def toggle(self, name: str) -> DeferredAction | None:
        """Flip the checkbox ``name``. Steps without checkboxes keep this no-op."""
        return None

    def on_escape(self) -> StepOutcome:
        return self.go(StepResult.BACK)

    def value(self, name: str) -> str:
        return self.inputs[name].value.strip()

    def set_focus(self, name: str) -> DeferredAction | None:
        for input_ in self.inputs.values():
            input_.blur()
        self.focus = name
        if name in self.inputs:
            return self.inputs[name].focus()
        return None

    def cycle_focus(self, delta: int) -> DeferredAction | None:
        order = self.focus_order()
        if self.focus in order:
            index = (order.index(self.focus) + delta) % len(order)
        else:
            index = 0
        return self.set_focus(order[index])

    def handle_event(self, event: Event) -> StepOutcome:
        if isinstance(event, KeyEvent):
            if event.key == ESCAPE:
                return self.on_escape()
            if event.key in (TAB, DOWN):
                return self.stay(self.cycle_focus(1))
            if event.key in (SHIFT_TAB, UP):
                return self.stay(self.cycle_focus(-1))
            if event.key == ENTER:
                if self.validate():
                    return self.go(StepResult.CONTINUE)
                return self.stay()

            toggle_key = self.TOGGLES.get(self.focus)
            if toggle_key and (event.key == SPACE or event.is_char(toggle_key)):
                return self.stay(self.toggle(self.focus))

        input_ = self.inputs.get(self.focus)
        if input_ is not None:
            return self.stay(input_.handle(event))
        return self.stay()


def parse_int(value: str) -> int | None:
    """Parse a whole number typed by the user; None if it is not one."""
    try:
        return int(value.strip())
    except ValueError:
        return None
