"""Step 7: Fast Recovery Area and archive log mode."""

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import FormStep, parse_int
from dbca_wizard.widgets import render
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction

MIN_FRA_SIZE = 1024  # MB


class RecoveryStep(FormStep):
    """Shown for every create operation, typical or advanced."""

    TITLE = "Recovery & Archive Log"
    TOGGLES = {"archive": "a", "fra": "f"}

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.inputs = {
            "fra_dest": TextInput(placeholder="/u01/app/oracle/fast_recovery_area", char_limit=256, theme=theme),
            "fra_size": TextInput(placeholder="10240", char_limit=10, theme=theme),
        }
        self.enable_fra = True
        self.enable_archive = False

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.error = ""
        self.enable_fra = config.enable_fra
        self.enable_archive = config.enable_archive_log
        self.inputs["fra_dest"].set_value(config.fra_destination)
        self.inputs["fra_size"].set_value(str(config.fra_size))
        return self.set_focus("archive")

    def focus_order(self) -> list[str]:
        if self.enable_fra:
            return ["archive", "fra", "fra_dest", "fra_size"]
        return ["archive", "fra"]

    def toggle(self, name: str) -> DeferredAction | None:
        if name == "archive":
            self.enable_archive = not self.enable_archive
            return None

        self.enable_fra = not self.enable_fra
        if self.enable_fra:
            return self.set_focus("fra_dest")
        return None

    def validate(self) -> bool:
        self.error = ""
        if not self.enable_fra:
            return True

        if not self.value("fra_dest"):
            self.error = "Fast Recovery Area location is required"
            return False

        size = parse_int(self.value("fra_size"))
        if size is None or size < MIN_FRA_SIZE:
            self.error = f"FRA size must be at least {MIN_FRA_SIZE} MB"
            return False

        return True

    def render(self) -> Text:
        text = render.subtitle("Configure Recovery and Archive Log Settings:", self.theme)

        mode = "ARCHIVELOG" if self.enable_archive else "NOARCHIVELOG"
        text.append_text(
            render.checkbox(
                f"Enable Archive Log Mode ({mode})", self.enable_archive, self.focus == "archive", self.theme
            )
        )
        text.append_text(
            render.hint("Press 'a' to toggle - Required for online backups and point-in-time recovery", self.theme)
        )
        text.append("\n")
        text.append_text(render.separator(self.theme))

        text.append_text(
            render.checkbox("Enable Fast Recovery Area (FRA)", self.enable_fra, self.focus == "fra", self.theme)
        )
        text.append_text(
            render.hint("Press 'f' to toggle - Stores backups, archive logs, and flashback logs", self.theme)
        )
        text.append("\n")

        if self.enable_fra:
            text.append_text(render.field("FRA Location", self.inputs["fra_dest"], self.theme))
            text.append_text(render.field("FRA Size (MB)", self.inputs["fra_size"], self.theme))

        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.enable_archive_log = self.enable_archive
        config.enable_fra = self.enable_fra

        if self.enable_fra:
            config.fra_destination = self.value("fra_dest")
            config.fra_size = parse_int(self.value("fra_size")) or MIN_FRA_SIZE

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create()
