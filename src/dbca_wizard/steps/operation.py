"""Step 1: create or delete a database."""

from dbca_wizard.steps.base import ListStep, StepOutcome
from dbca_wizard.widgets.select_list import SelectItem
from dbca_wizard.wizard.events import Event, KeyEvent
from dbca_wizard.wizard.models import Operation
from dbca_wizard.wizard.protocol import StepResult


class OperationStep(ListStep):
    """Choose the DBCA operation. First step, so Escape and q quit."""

    TITLE = "Select Operation"
    PROMPT = "What would you like to do?"
    FIELD = "operation"
    ESCAPE_RESULT = StepResult.QUIT
    ITEMS = [
        SelectItem(
            "Create a Database",
            Operation.CREATE.value,
            "Create a new Oracle database with the DBCA wizard",
        ),
        SelectItem(
            "Delete a Database",
            Operation.DELETE.value,
            "Generate command to delete an existing Oracle database",
        ),
    ]

    def handle_event(self, event: Event) -> StepOutcome:
        if isinstance(event, KeyEvent) and event.is_char("q"):
            return self.go(StepResult.QUIT)
        return super().handle_event(event)
