"""Step 8: listener configuration (advanced mode only)."""

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import FormStep, parse_int
from dbca_wizard.widgets import render
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction


def valid_port(value: str) -> bool:
    port = parse_int(value)
    return port is not None and 1 <= port <= 65535


class NetworkStep(FormStep):
    TITLE = "Network Configuration"
    TOGGLES = {"create": "c"}

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.inputs = {
            "listener": TextInput(placeholder="LISTENER", char_limit=30, theme=theme),
            "port": TextInput(placeholder="1521", char_limit=5, theme=theme),
        }
        self.create_listener = False

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.error = ""
        self.create_listener = config.create_new_listener
        self.inputs["listener"].set_value(config.listener_name)
        self.inputs["port"].set_value(str(config.listener_port))
        return self.set_focus("listener")

    def focus_order(self) -> list[str]:
        return ["listener", "port", "create"]

    def toggle(self, name: str) -> DeferredAction | None:
        self.create_listener = not self.create_listener
        return None

    def validate(self) -> bool:
        self.error = ""
        if not self.value("listener"):
            self.error = "Listener name is required"
            return False
        if not valid_port(self.value("port")):
            self.error = "Port must be between 1 and 65535"
            return False
        return True

    def render(self) -> Text:
        text = render.subtitle("Configure network listener:", self.theme)
        text.append_text(render.field("Listener Name", self.inputs["listener"], self.theme))
        text.append_text(render.field("Listener Port", self.inputs["port"], self.theme))
        text.append("\n")
        text.append_text(
            render.checkbox(
                "Create new listener (if not exists)", self.create_listener, self.focus == "create", self.theme
            )
        )
        text.append_text(render.hint("Press 'c' to toggle", self.theme))
        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.listener_name = self.value("listener")
        config.listener_port = parse_int(self.value("port")) or config.listener_port
        config.create_new_listener = self.create_listener

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create() or not config.is_advanced()
