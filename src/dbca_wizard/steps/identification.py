"""Step 5: database names and container database layout."""

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import FormStep, parse_int
from dbca_wizard.widgets import render
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction

MAX_SID_LENGTH = 12
MAX_PDBS = 252


class IdentificationStep(FormStep):
    TITLE = "Database Identification"
    TOGGLES = {"cdb": "c"}

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.inputs = {
            "global_name": TextInput(placeholder="orcl.example.com", char_limit=128, theme=theme),
            "sid": TextInput(placeholder="orcl", char_limit=MAX_SID_LENGTH, theme=theme),
            "pdbs": TextInput(placeholder="1", char_limit=3, theme=theme),
            "pdb_name": TextInput(placeholder="orclpdb", char_limit=30, theme=theme),
        }
        self.create_cdb = True

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.error = ""
        self.create_cdb = config.create_as_container_db
        self.inputs["global_name"].set_value(config.global_db_name)
        self.inputs["sid"].set_value(config.sid)
        self.inputs["pdbs"].set_value(str(config.number_of_pdbs))
        self.inputs["pdb_name"].set_value(config.pdb_name)
        return self.set_focus("global_name")

    def focus_order(self) -> list[str]:
        order = ["global_name", "sid", "cdb"]
        if self.create_cdb:
            order += ["pdbs", "pdb_name"]
        return order

    def toggle(self, name: str) -> DeferredAction | None:
        self.create_cdb = not self.create_cdb
        return None

    def validate(self) -> bool:
        self.error = ""

        if not self.value("global_name"):
            self.error = "Global Database Name is required"
            return False

        sid = self.value("sid")
        if not sid:
            self.error = "SID is required"
            return False
        if len(sid) > MAX_SID_LENGTH:
            self.error = f"SID must be {MAX_SID_LENGTH} characters or less"
            return False

        if self.create_cdb:
            pdbs = parse_int(self.value("pdbs"))
            if pdbs is None or not 0 <= pdbs <= MAX_PDBS:
                self.error = f"Number of PDBs must be between 0 and {MAX_PDBS}"
                return False
            if pdbs > 0 and not self.value("pdb_name"):
                self.error = "PDB Name/Prefix is required when creating PDBs"
                return False

        return True

    def render(self) -> Text:
        text = render.subtitle("Configure database identification:", self.theme)
        text.append_text(render.field("Global Database Name", self.inputs["global_name"], self.theme))
        text.append_text(render.field("Oracle SID", self.inputs["sid"], self.theme))
        text.append("\n")
        text.append_text(
            render.checkbox("Create as Container Database (CDB)", self.create_cdb, self.focus == "cdb", self.theme)
        )
        text.append_text(render.hint("Press 'c' to toggle", self.theme))
        text.append("\n")

        if self.create_cdb:
            text.append_text(render.field("Number of PDBs", self.inputs["pdbs"], self.theme))
            text.append_text(render.field("PDB Name/Prefix", self.inputs["pdb_name"], self.theme))

        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.global_db_name = self.value("global_name")
        config.sid = self.value("sid")
        config.create_as_container_db = self.create_cdb

        if self.create_cdb:
            config.number_of_pdbs = parse_int(self.value("pdbs")) or 0
            config.pdb_name = self.value("pdb_name")
            config.pdb_prefix = config.pdb_name
        else:
            config.number_of_pdbs = 0
            config.pdb_name = ""
            config.pdb_prefix = ""

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create()
