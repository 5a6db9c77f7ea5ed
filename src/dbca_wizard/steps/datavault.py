"""Step 9: Oracle Data Vault (advanced mode only)."""

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import FormStep
from dbca_wizard.widgets import render
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction


class DataVaultStep(FormStep):
    TITLE = "Data Vault Configuration"
    TOGGLES = {"enable": "d"}

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.inputs = {
            "owner": TextInput(placeholder="C##DVOWNER", char_limit=30, theme=theme),
            "manager": TextInput(placeholder="C##DVACCTMGR", char_limit=30, theme=theme),
        }
        self.enable_data_vault = False

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.error = ""
        self.enable_data_vault = config.enable_data_vault
        self.inputs["owner"].set_value(config.data_vault_owner)
        self.inputs["manager"].set_value(config.data_vault_account_manager)
        return self.set_focus("enable")

    def focus_order(self) -> list[str]:
        if self.enable_data_vault:
            return ["enable", "owner", "manager"]
        return ["enable"]

    def toggle(self, name: str) -> DeferredAction | None:
        self.enable_data_vault = not self.enable_data_vault
        if self.enable_data_vault:
            return self.set_focus("owner")
        return None

    def validate(self) -> bool:
        self.error = ""
        if not self.enable_data_vault:
            return True
        if not self.value("owner"):
            self.error = "Data Vault Owner is required"
            return False
        if not self.value("manager"):
            self.error = "Data Vault Account Manager is required"
            return False
        return True

    def render(self) -> Text:
        text = render.subtitle("Configure Oracle Data Vault:", self.theme)
        text.append(
            "Oracle Data Vault provides controls to prevent unauthorized access\n"
            "to data by privileged database users.\n\n",
            style=self.theme["subtitle"],
        )
        text.append_text(
            render.checkbox("Enable Oracle Data Vault", self.enable_data_vault, self.focus == "enable", self.theme)
        )
        text.append_text(render.hint("Press 'd' to toggle", self.theme))
        text.append("\n")

        if self.enable_data_vault:
            text.append_text(render.field("Data Vault Owner", self.inputs["owner"], self.theme))
            text.append_text(render.field("Data Vault Account Manager", self.inputs["manager"], self.theme))

        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.enable_data_vault = self.enable_data_vault
        if self.enable_data_vault:
            config.data_vault_owner = self.value("owner")
            config.data_vault_account_manager = self.value("manager")

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create() or not config.is_advanced()
