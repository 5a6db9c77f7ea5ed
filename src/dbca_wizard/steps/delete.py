"""Step 13: the database to delete (delete operation only)."""

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import FormStep
from dbca_wizard.steps.credentials import password_input
from dbca_wizard.steps.identification import MAX_SID_LENGTH
from dbca_wizard.widgets import render
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.models import DBConfig, Operation
from dbca_wizard.wizard.protocol import DeferredAction


class DeleteStep(FormStep):
    TITLE = "Delete Database"
    TOGGLES = {"force": "f"}

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.inputs = {
            "sid": TextInput(placeholder="orcl", char_limit=MAX_SID_LENGTH, theme=theme),
            "sys_password": password_input("SYS password", theme),
        }
        self.force = False

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.error = ""
        self.force = config.delete_force
        self.inputs["sid"].set_value(config.delete_sid)
        self.inputs["sys_password"].set_value(config.sys_password)
        return self.set_focus("sid")

    def focus_order(self) -> list[str]:
        return ["sid", "sys_password", "force"]

    def toggle(self, name: str) -> DeferredAction | None:
        self.force = not self.force
        return None

    def validate(self) -> bool:
        self.error = ""
        sid = self.value("sid")
        if not sid:
            self.error = "Database SID is required"
            return False
        if len(sid) > MAX_SID_LENGTH:
            self.error = f"SID must be {MAX_SID_LENGTH} characters or less"
            return False
        if not self.inputs["sys_password"].value:
            self.error = "SYS password is required for deletion"
            return False
        return True

    def render(self) -> Text:
        text = render.subtitle("Configure database deletion:", self.theme)
        text.append(
            "WARNING: This will generate a command to permanently delete the database!\n\n",
            style=self.theme["warning"],
        )
        text.append_text(render.field("Database SID to delete", self.inputs["sid"], self.theme))
        text.append_text(render.field("SYS Password", self.inputs["sys_password"], self.theme))
        text.append("\n")
        text.append_text(
            render.checkbox("Force delete (abort running database)", self.force, self.focus == "force", self.theme)
        )
        text.append_text(render.hint("Press 'f' to toggle", self.theme))
        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.delete_sid = self.value("sid")
        config.sys_password = self.inputs["sys_password"].value
        config.delete_force = self.force

    def should_skip(self, config: DBConfig) -> bool:
        return config.operation != Operation.DELETE
