"""Step 11: Enterprise Manager (advanced mode only)."""

from enum import IntEnum

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import FormStep, StepOutcome, parse_int
from dbca_wizard.steps.network import valid_port
from dbca_wizard.widgets import render
from dbca_wizard.widgets.select_list import SelectItem, SelectList
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.events import ENTER, ESCAPE, SPACE, Event, KeyEvent
from dbca_wizard.wizard.models import DBConfig, EMConfiguration
from dbca_wizard.wizard.protocol import DeferredAction, StepResult

ITEMS = [
    SelectItem(
        "Do not configure Enterprise Manager",
        EMConfiguration.NONE.value,
        "Skip Enterprise Manager configuration",
    ),
    SelectItem(
        "Configure Enterprise Manager Database Express",
        EMConfiguration.DB_EXPRESS.value,
        "Built-in web-based database management (port 5500)",
    ),
    SelectItem(
        "Register with Enterprise Manager Cloud Control",
        EMConfiguration.CENTRAL.value,
        "Register with an existing Cloud Control installation",
    ),
]


class Phase(IntEnum):
    SELECT = 0
    DETAILS = 1


class ManagementStep(FormStep):
    TITLE = "Management Options"

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.list = SelectList(list(ITEMS), theme)
        self.inputs = {
            "agent": TextInput(placeholder="hostname:3872", char_limit=256, theme=theme),
            "port": TextInput(placeholder="5500", char_limit=5, theme=theme),
        }
        self.phase = Phase.SELECT

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.phase = Phase.SELECT
        self.error = ""
        self.list.reset()
        self.list.move_to(config.em_configuration.value)
        self.inputs["port"].set_value(str(config.em_port))
        self.inputs["agent"].set_value(config.cloud_control_agent)
        self.set_focus("")
        return None

    def em_configuration(self) -> EMConfiguration:
        return EMConfiguration(self.list.selected_value or self.list.current_item.value)

    def focus_order(self) -> list[str]:
        if self.em_configuration() == EMConfiguration.CENTRAL:
            return ["agent", "port"]
        return ["port"]

    def on_escape(self) -> StepOutcome:
        if self.phase == Phase.DETAILS:
            self.phase = Phase.SELECT
            self.error = ""
            self.list.reset()
            self.set_focus("")
            return self.stay()
        return self.go(StepResult.BACK)

    def handle_event(self, event: Event) -> StepOutcome:
        if self.phase == Phase.DETAILS:
            return super().handle_event(event)

        if not isinstance(event, KeyEvent):
            return self.stay()
        if event.key == ESCAPE:
            return self.on_escape()

        self.list.handle(event)
        if event.key in (ENTER, SPACE) and self.list.is_selected:
            if self.em_configuration() == EMConfiguration.NONE:
                return self.go(StepResult.CONTINUE)
            self.phase = Phase.DETAILS
            return self.stay(self.set_focus(self.focus_order()[0]))
        return self.stay()

    def validate(self) -> bool:
        self.error = ""
        if not valid_port(self.value("port")):
            self.error = "Port must be between 1 and 65535"
            return False
        if self.em_configuration() == EMConfiguration.CENTRAL and not self.value("agent"):
            self.error = "Cloud Control agent URL is required"
            return False
        return True

    def render(self) -> Text:
        if self.phase == Phase.SELECT:
            text = render.subtitle("Configure database management options:", self.theme)
            text.append_text(self.list.render())
            return text

        item = self.list.selected_item
        text = render.subtitle(item.title if item else "", self.theme)
        if self.em_configuration() == EMConfiguration.DB_EXPRESS:
            text.append_text(render.field("HTTPS Port", self.inputs["port"], self.theme))
            text.append_text(render.hint("Access URL: https://hostname:PORT/em", self.theme))
        else:
            text.append_text(render.field("Cloud Control Agent URL", self.inputs["agent"], self.theme))
            text.append_text(render.field("Agent Port", self.inputs["port"], self.theme))

        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.em_configuration = self.em_configuration()
        if config.em_configuration != EMConfiguration.NONE:
            config.em_port = parse_int(self.value("port")) or config.em_port
        if config.em_configuration == EMConfiguration.CENTRAL:
            config.cloud_control_agent = self.value("agent")

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create() or not config.is_advanced()
