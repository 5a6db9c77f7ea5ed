"""
Core logic for the DBCA wizard.

This module defines the step sequencer: it owns the ordered step list and the
shared ``DBConfig``, routes events to the current step and walks the cursor
forward and backward over the steps that are hidden for the current
configuration. It is UI-agnostic.
"""

import logging
from collections.abc import Sequence

from dbca_wizard.wizard.events import Event
from dbca_wizard.wizard.models import DBConfig
from dbca_wizard.wizard.protocol import DeferredAction, Step, StepResult

logger = logging.getLogger(__name__)


class Wizard:
    """Drives a fixed, ordered list of steps over one shared configuration."""

    def __init__(self, steps: Sequence[Step], config: DBConfig | None = None):
        self._steps: list[Step] = list(steps)
        self._config = config if config is not None else DBConfig()
        self._cursor = 0
        self._completed = False
        self._quitting = False
        self._print_requested = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> list[DeferredAction]:
        """Land on the first visible step and initialize it."""
        self._cursor = 0
        self._skip_forward()

        if self._cursor >= len(self._steps):
            logger.debug("No visible steps, wizard completed on start")
            self._completed = True
            return []

        return self._initialize_current()

    def dispatch(self, event: Event) -> list[DeferredAction]:
        """Forward ``event`` to the current step and act on its result.

        Returns the deferred actions the host should schedule.
        """
        if self._quitting or self._cursor >= len(self._steps):
            return []

        step, result, action = self._steps[self._cursor].handle_event(event)
        self._steps[self._cursor] = step
        actions = [action] if action is not None else []

        if result == StepResult.CONTINUE:
            logger.debug(f"Applying step '{step.title()}'")
            step.apply(self._config)

            self._cursor += 1
            self._skip_forward()

            if self._cursor >= len(self._steps):
                logger.debug("Last step applied, wizard completed")
                self._completed = True
                return actions

            return actions + self._initialize_current()

        if result == StepResult.BACK:
            self._cursor -= 1
            self._skip_backward()
            return actions + self._initialize_current()

        if result == StepResult.QUIT:
            logger.debug(f"Quit requested from step '{step.title()}'")
            self._quitting = True
        elif result == StepResult.PRINT_AND_QUIT:
            logger.debug(f"Print and quit requested from step '{step.title()}'")
            self._quitting = True
            self._print_requested = True

        return actions

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _skip_forward(self) -> None:
        while self._cursor < len(self._steps) and self._steps[self._cursor].should_skip(self._config):
            logger.debug(f"Skipping step '{self._steps[self._cursor].title()}'")
            self._cursor += 1

    def _skip_backward(self) -> None:
        if self._cursor < 0:
            self._cursor = 0
        while self._cursor > 0 and self._steps[self._cursor].should_skip(self._config):
            logger.debug(f"Skipping step '{self._steps[self._cursor].title()}' going back")
            self._cursor -= 1
        # Index 0 is an absolute floor, even when it is hidden.

    def _initialize_current(self) -> list[DeferredAction]:
        step = self._steps[self._cursor]
        logger.debug(f"Entering step {self._cursor} '{step.title()}'")
        action = step.initialize(self._config)
        return [action] if action is not None else []

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def steps(self) -> list[Step]:
        return list(self._steps)

    @property
    def current_step(self) -> Step | None:
        """The step receiving events, or None once past the end."""
        if self._cursor < len(self._steps):
            return self._steps[self._cursor]
        return None

    @property
    def is_quitting(self) -> bool:
        return self._quitting

    def is_completed(self) -> bool:
        return self._completed

    def should_print(self) -> bool:
        return self._print_requested

    def current_config(self) -> DBConfig:
        return self._config

    def progress(self) -> tuple[int, int]:
        """Position of the current step among the visible steps.

        Returns:
            ``(position, total)`` with a 1-based position, counted over the
            steps that are not skipped for the current configuration.
        """
        total = 0
        position = 0
        for index, step in enumerate(self._steps):
            if step.should_skip(self._config):
                continue
            total += 1
            if index <= self._cursor:
                position += 1
        return position, total
