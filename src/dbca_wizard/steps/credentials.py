"""Step 12: administrative passwords."""

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import FormStep
from dbca_wizard.widgets import render
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction

MIN_PASSWORD_LENGTH = 8


def password_input(placeholder: str, theme: Theme) -> TextInput:
    return TextInput(placeholder=placeholder, char_limit=30, password=True, theme=theme)


class CredentialsStep(FormStep):
    """Either one password for every account or one per account.

    Passwords are taken exactly as typed, surrounding spaces included.
    """

    TITLE = "Database Credentials"
    TOGGLES = {"common_toggle": "c"}

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.inputs = {
            "common": password_input("Enter password for all accounts", theme),
            "sys": password_input("SYS password", theme),
            "system": password_input("SYSTEM password", theme),
            "pdb_admin": password_input("PDB Admin password", theme),
        }
        self.use_common_password = True

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.error = ""
        self.use_common_password = config.use_common_password
        self.inputs["common"].set_value(config.common_password)
        self.inputs["sys"].set_value(config.sys_password)
        self.inputs["system"].set_value(config.system_password)
        self.inputs["pdb_admin"].set_value(config.pdb_admin_password)
        return self.set_focus("common_toggle")

    def password(self, name: str) -> str:
        return self.inputs[name].value

    def focus_order(self) -> list[str]:
        if self.use_common_password:
            return ["common_toggle", "common"]
        order = ["common_toggle", "sys", "system"]
        if self.config.create_as_container_db:
            order.append("pdb_admin")
        return order

    def toggle(self, name: str) -> DeferredAction | None:
        self.use_common_password = not self.use_common_password
        self.error = ""
        return self.set_focus(self.focus_order()[1])

    def validate(self) -> bool:
        self.error = ""

        if self.use_common_password:
            password = self.password("common")
            if not password:
                self.error = "Password is required"
                return False
            if len(password) < MIN_PASSWORD_LENGTH:
                self.error = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                return False
            return True

        if not self.password("sys"):
            self.error = "SYS password is required"
            return False
        if not self.password("system"):
            self.error = "SYSTEM password is required"
            return False
        if self.config.create_as_container_db and not self.password("pdb_admin"):
            self.error = "PDB Admin password is required"
            return False
        if len(self.password("sys")) < MIN_PASSWORD_LENGTH:
            self.error = f"SYS password must be at least {MIN_PASSWORD_LENGTH} characters"
            return False
        return True

    def render(self) -> Text:
        text = render.subtitle("Configure database credentials:", self.theme)
        text.append_text(
            render.checkbox(
                "Use same password for all accounts",
                self.use_common_password,
                self.focus == "common_toggle",
                self.theme,
            )
        )
        text.append_text(render.hint("Press 'c' to toggle", self.theme))
        text.append("\n")

        if self.use_common_password:
            text.append_text(
                render.field("Password for all accounts (SYS, SYSTEM, PDBADMIN)", self.inputs["common"], self.theme)
            )
        else:
            text.append_text(render.field("SYS Password", self.inputs["sys"], self.theme))
            text.append_text(render.field("SYSTEM Password", self.inputs["system"], self.theme))
            if self.config.create_as_container_db:
                text.append_text(render.field("PDB Admin Password", self.inputs["pdb_admin"], self.theme))

        text.append(
            f"\nPassword requirements: minimum {MIN_PASSWORD_LENGTH} characters\n", style=self.theme["subtitle"]
        )
        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.use_common_password = self.use_common_password

        if self.use_common_password:
            config.common_password = self.password("common")
            config.sys_password = config.common_password
            config.system_password = config.common_password
            config.pdb_admin_password = config.common_password
        else:
            config.sys_password = self.password("sys")
            config.system_password = self.password("system")
            if config.create_as_container_db:
                config.pdb_admin_password = self.password("pdb_admin")

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create()
