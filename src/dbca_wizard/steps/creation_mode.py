"""Step 2: typical or advanced creation."""

from dbca_wizard.steps.base import ListStep
from dbca_wizard.widgets.select_list import SelectItem
from dbca_wizard.wizard.models import CreationMode, DBConfig


class CreationModeStep(ListStep):
    TITLE = "Database Creation Mode"
    PROMPT = "Select the database creation mode:"
    FIELD = "creation_mode"
    ITEMS = [
        SelectItem(
            "Typical Configuration",
            CreationMode.TYPICAL.value,
            "Create a database with minimal configuration using best practice defaults",
        ),
        SelectItem(
            "Advanced Configuration",
            CreationMode.ADVANCED.value,
            "Create a database with full control over all configuration options",
        ),
    ]

    def should_skip(self, config: DBConfig) -> bool:
        return not config.is_create()
