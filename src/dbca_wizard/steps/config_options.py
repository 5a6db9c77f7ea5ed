"""Step 10: memory, character set and connection mode."""

from enum import IntEnum

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import BaseStep, StepOutcome, parse_int
from dbca_wizard.widgets import render
from dbca_wizard.widgets.select_list import SelectItem, SelectList
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.events import ENTER, ESCAPE, SPACE, Event, KeyEvent
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction, StepResult

MIN_MEMORY = 256  # MB
NATIONAL_CHARACTER_SET = "AL16UTF16"

MEMORY_ITEMS = [
    SelectItem(
        "Automatic Memory Management",
        "AUTO",
        "Let Oracle automatically manage memory allocation (recommended)",
    ),
    SelectItem(
        "Automatic Shared Memory Management",
        "AUTO_SGA",
        "Manually set total SGA, let Oracle manage PGA",
    ),
    SelectItem("Manual Memory Management", "MANUAL", "Manually configure SGA and PGA sizes"),
]

CHARSET_ITEMS = [
    SelectItem(
        "AL32UTF8 (Recommended)",
        "AL32UTF8",
        "Unicode UTF-8 Universal character set, supports all languages",
    ),
    SelectItem("UTF8", "UTF8", "Unicode 3.0 UTF-8 Universal character set"),
    SelectItem("US7ASCII", "US7ASCII", "US 7-bit ASCII character set"),
    SelectItem("WE8ISO8859P1", "WE8ISO8859P1", "ISO 8859-1 West European character set"),
]

CONNECTION_ITEMS = [
    SelectItem(
        "Dedicated Server Mode",
        "DEDICATED",
        "Each client connection gets a dedicated server process",
    ),
    SelectItem(
        "Shared Server Mode",
        "SHARED",
        "Multiple client connections share server processes",
    ),
]


class Phase(IntEnum):
    MEMORY_TYPE = 0
    MEMORY_SIZE = 1
    CHARSET = 2
    CONNECTION = 3


class ConfigOptionsStep(BaseStep):
    """Walks through four sub-screens; Escape steps back one sub-screen at a time.

    The connection mode screen only appears in advanced mode. Typical mode
    finishes on the character set screen.
    """

    TITLE = "Configuration Options"

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.memory_list = SelectList(list(MEMORY_ITEMS), theme)
        self.charset_list = SelectList(list(CHARSET_ITEMS), theme)
        self.connection_list = SelectList(list(CONNECTION_ITEMS), theme)
        self.memory_input = TextInput(placeholder="2048", char_limit=10, theme=theme)
        self.phase = Phase.MEMORY_TYPE
        self.enable_sample_schemas = False

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.phase = Phase.MEMORY_TYPE
        self.error = ""
        self.enable_sample_schemas = config.enable_sample_schemas

        for list_, value in (
            (self.memory_list, config.memory_management),
            (self.charset_list, config.character_set),
            (self.connection_list, config.connection_mode),
        ):
            list_.reset()
            list_.move_to(value)

        self.memory_input.set_value(str(config.total_memory))
        self.memory_input.blur()
        return None

    def handle_event(self, event: Event) -> StepOutcome:
        if isinstance(event, KeyEvent) and event.key == ESCAPE:
            return self._unwind()

        if self.phase == Phase.MEMORY_SIZE:
            return self._update_memory_size(event)
        if not isinstance(event, KeyEvent):
            return self.stay()
        if self.phase == Phase.MEMORY_TYPE:
            return self._update_memory_type(event)
        if self.phase == Phase.CHARSET:
            return self._update_charset(event)
        return self._update_connection(event)

    def _unwind(self) -> StepOutcome:
        if self.phase == Phase.MEMORY_TYPE:
            return self.go(StepResult.BACK)

        self.phase = Phase(self.phase - 1)
        self.error = ""
        if self.phase == Phase.MEMORY_TYPE:
            self.memory_input.blur()
            self.memory_list.reset()
            return self.stay()
        if self.phase == Phase.MEMORY_SIZE:
            self.charset_list.reset()
            return self.stay(self.memory_input.focus())

        self.connection_list.reset()
        self.charset_list.reset()
        return self.stay()

    def _update_memory_type(self, event: KeyEvent) -> StepOutcome:
        self.memory_list.handle(event)
        if event.key in (ENTER, SPACE) and self.memory_list.is_selected:
            self.phase = Phase.MEMORY_SIZE
            return self.stay(self.memory_input.focus())
        return self.stay()

    def _update_memory_size(self, event: Event) -> StepOutcome:
        if isinstance(event, KeyEvent) and event.key == ENTER:
            size = parse_int(self.memory_input.value)
            if size is None or size < MIN_MEMORY:
                self.error = f"Memory size must be at least {MIN_MEMORY} MB"
                return self.stay()
            self.error = ""
            self.memory_input.blur()
            self.phase = Phase.CHARSET
            return self.stay()
        return self.stay(self.memory_input.handle(event))

    def _update_charset(self, event: KeyEvent) -> StepOutcome:
        self.charset_list.handle(event)
        if event.key in (ENTER, SPACE) and self.charset_list.is_selected:
            if not self.config.is_advanced():
                return self.go(StepResult.CONTINUE)
            self.phase = Phase.CONNECTION
        return self.stay()

    def _update_connection(self, event: KeyEvent) -> StepOutcome:
        if event.is_char("s"):
            self.enable_sample_schemas = not self.enable_sample_schemas
            return self.stay()

        self.connection_list.handle(event)
        if event.key in (ENTER, SPACE) and self.connection_list.is_selected:
            return self.go(StepResult.CONTINUE)
        return self.stay()

    def render(self) -> Text:
        if self.phase == Phase.MEMORY_TYPE:
            text = render.subtitle("Select memory management mode:", self.theme)
            text.append_text(self.memory_list.render())
            return text

        if self.phase == Phase.MEMORY_SIZE:
            item = self.memory_list.selected_item
            text = render.subtitle(f"Memory Management: {item.title if item else ''}", self.theme)
            text.append_text(render.field("Total Memory (MB)", self.memory_input, self.theme))
            text.append_text(render.hint("Recommended: At least 2048 MB", self.theme))
            text.append_text(render.error(self.error, self.theme))
            text.append("\nPress Enter to continue", style=self.theme["subtitle"])
            return text

        if self.phase == Phase.CHARSET:
            text = render.subtitle("Select database character set:", self.theme)
            text.append_text(self.charset_list.render())
            return text

        text = render.subtitle("Select connection mode:", self.theme)
        text.append_text(self.connection_list.render())
        text.append("\n")
        text.append_text(
            render.checkbox("Install sample schemas (HR, OE, etc.)", self.enable_sample_schemas, False, self.theme)
        )
        text.append_text(render.hint("Press 's' to toggle", self.theme))
        return text

    def apply(self, config: DBConfig) -> None:
        config.memory_management = self.memory_list.selected_value or config.memory_management
        config.total_memory = parse_int(self.memory_input.value) or config.total_memory
        config.character_set = self.charset_list.selected_value or config.character_set
        config.national_character_set = NATIONAL_CHARACTER_SET

        if config.is_advanced():
            config.connection_mode = self.connection_list.selected_value or config.connection_mode
            config.enable_sample_schemas = self.enable_sample_schemas
        else:
            config.connection_mode = "DEDICATED"
            config.enable_sample_schemas = False

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create()
