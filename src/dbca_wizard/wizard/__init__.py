"""
DBCA wizard engine.

The step contract, the shared configuration record and the sequencer that
walks the steps.
"""

from dbca_wizard.wizard.core import Wizard
from dbca_wizard.wizard.events import CursorBlink, Event, KeyEvent
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction, Step, StepResult

__all__ = [
    "CursorBlink",
    "DBConfig",
    "DeferredAction",
    "Event",
    "KeyEvent",
    "Step",
    "StepResult",
    "Wizard",
]
