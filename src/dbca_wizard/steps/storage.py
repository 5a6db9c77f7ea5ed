"""Step 6: storage type and file locations."""

from enum import IntEnum

from rich.text import Text

from dbca_wizard.config.theme import DEFAULT_THEME, Theme
from dbca_wizard.steps.base import FormStep, StepOutcome
from dbca_wizard.widgets import render
from dbca_wizard.widgets.select_list import SelectItem, SelectList
from dbca_wizard.widgets.text_input import TextInput
from dbca_wizard.wizard.events import ESCAPE, Event, KeyEvent
from dbca_wizard.wizard.models import DBConfig, StorageType
from dbca_wizard.wizard.protocol import DeferredAction, StepResult

ITEMS = [
    SelectItem("File System", StorageType.FS.value, "Store database files on a standard file system"),
    SelectItem(
        "Automatic Storage Management (ASM)",
        StorageType.ASM.value,
        "Store database files using Oracle ASM",
    ),
]


class Phase(IntEnum):
    SELECT = 0
    PATHS = 1


class StorageStep(FormStep):
    TITLE = "Storage Configuration"
    TOGGLES = {"omf": "o"}

    def __init__(self, theme: Theme = DEFAULT_THEME):
        super().__init__(theme)
        self.list = SelectList(list(ITEMS), theme)
        self.inputs = {
            "datafile": TextInput(placeholder="/u01/app/oracle/oradata", char_limit=256, theme=theme),
            "redo": TextInput(placeholder="/u01/app/oracle/oradata", char_limit=256, theme=theme),
            "disk_group": TextInput(placeholder="+DATA", char_limit=30, theme=theme),
        }
        self.phase = Phase.SELECT
        self.use_omf = True

    def initialize(self, config: DBConfig) -> DeferredAction | None:
        self.config = config
        self.phase = Phase.SELECT
        self.error = ""
        self.list.reset()
        self.list.move_to(config.storage_type.value)
        self.inputs["datafile"].set_value(config.datafile_destination)
        self.inputs["redo"].set_value(config.redo_log_destination)
        self.inputs["disk_group"].set_value(config.asm_disk_group)
        self.use_omf = config.use_omf
        self.set_focus("")
        return None

    def storage_type(self) -> StorageType:
        return StorageType(self.list.selected_value or self.list.current_item.value)

    def focus_order(self) -> list[str]:
        if self.storage_type() == StorageType.ASM:
            return ["disk_group", "omf"]
        return ["datafile", "redo", "omf"]

    def toggle(self, name: str) -> DeferredAction | None:
        self.use_omf = not self.use_omf
        return None

    def on_escape(self) -> StepOutcome:
        if self.phase == Phase.PATHS:
            self.phase = Phase.SELECT
            self.error = ""
            self.list.reset()
            self.set_focus("")
            return self.stay()
        return self.go(StepResult.BACK)

    def handle_event(self, event: Event) -> StepOutcome:
        if self.phase == Phase.PATHS:
            return super().handle_event(event)

        if not isinstance(event, KeyEvent):
            return self.stay()
        if event.key == ESCAPE:
            return self.on_escape()

        self.list.handle(event)
        if self.list.is_selected:
            self.phase = Phase.PATHS
            return self.stay(self.set_focus(self.focus_order()[0]))
        return self.stay()

    def validate(self) -> bool:
        self.error = ""
        if self.storage_type() == StorageType.ASM:
            if not self.value("disk_group"):
                self.error = "ASM Disk Group is required"
                return False
        elif not self.value("datafile"):
            self.error = "Datafile destination is required"
            return False
        return True

    def render(self) -> Text:
        if self.phase == Phase.SELECT:
            text = render.subtitle("Select storage type:", self.theme)
            text.append_text(self.list.render())
            return text

        if self.storage_type() == StorageType.ASM:
            text = render.subtitle("Configure ASM storage:", self.theme)
            text.append_text(render.field("ASM Disk Group", self.inputs["disk_group"], self.theme))
        else:
            text = render.subtitle("Configure file system storage:", self.theme)
            text.append_text(render.field("Database Files Location", self.inputs["datafile"], self.theme))
            text.append_text(render.field("Redo Log Files Location", self.inputs["redo"], self.theme))

        text.append("\n")
        text.append_text(
            render.checkbox("Use Oracle Managed Files (OMF)", self.use_omf, self.focus == "omf", self.theme)
        )
        text.append_text(render.hint("Press 'o' to toggle", self.theme))
        text.append_text(render.error(self.error, self.theme))
        text.append("\nPress Enter to continue, Esc to go back", style=self.theme["subtitle"])
        return text

    def apply(self, config: DBConfig) -> None:
        config.storage_type = self.storage_type()
        config.use_omf = self.use_omf

        if config.storage_type == StorageType.ASM:
            config.asm_disk_group = self.value("disk_group")
            config.datafile_destination = config.asm_disk_group
            config.redo_log_destination = config.asm_disk_group
        else:
            config.datafile_destination = self.value("datafile")
            config.redo_log_destination = self.value("redo") or config.datafile_destination

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create()
