# -*- coding: utf-8 -*-
"""
Step Controller - Manages navigation between the steps of a multi-step form.

Handles:
- Step progression (next/previous/go to)
- Validation of the active step's fields before advancing
- Progress tracking
"""

from typing import Dict, List, Optional, Sequence, Set

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController
from controllers.form_controller import FormController
from utils.logger import get_logger

logger = get_logger(__name__)


class StepController(BaseController):
    """
    Partitions a form's fields into ordered steps.

    The steps must only name fields the schema declares, and every
    unconditionally required field must belong to some step; otherwise the
    constructor raises ``ValueError``.

    Signals:
        step_changed(old_index, new_index)
        validation_failed(errors): field -> message map of the blocking step
    """

    step_changed = pyqtSignal(int, int)
    validation_failed = pyqtSignal(object)

    def __init__(self, form: FormController, steps: Sequence[Sequence[str]], titles: Sequence[str] = (), parent=None):
        super().__init__(parent)
        if not steps:
            raise ValueError("A step controller needs at least one step")

        self._form = form
        self._steps: List[List[str]] = [list(step) for step in steps]
        self._titles = list(titles)
        self._current_index = 0
        self._completed: Set[int] = set()
        self._check_partition()

    def _check_partition(self):
        schema = self._form.schema
        covered = set()
        for index, step in enumerate(self._steps):
            unknown = [name for name in step if name not in schema]
            if unknown:
                raise ValueError(
                    f"Step {index} references fields not declared by schema '{schema.entity}': {unknown}"
                )
            covered.update(step)

        missing = [name for name in schema.required_fields() if name not in covered]
        if missing:
            raise ValueError(f"Required fields of schema '{schema.entity}' are not in any step: {missing}")

    # ==================== State ====================

    @property
    def form(self) -> FormController:
        return self._form

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_fields(self) -> List[str]:
        return list(self._steps[self._current_index])

    @property
    def completed_steps(self) -> Set[int]:
        return set(self._completed)

    def get_step_count(self) -> int:
        return len(self._steps)

    def get_step_fields(self, index: int) -> List[str]:
        return list(self._steps[index])

    def get_step_title(self, index: Optional[int] = None) -> str:
        index = self._current_index if index is None else index
        if index < len(self._titles):
            return self._titles[index]
        return f"Step {index + 1}"

    def is_first_step(self) -> bool:
        return self._current_index == 0

    def is_last_step(self) -> bool:
        return self._current_index == len(self._steps) - 1

    def can_go_next(self) -> bool:
        """Check if there is a step after the current one."""
        return self._current_index < len(self._steps) - 1

    def can_go_previous(self) -> bool:
        """Check if there is a step before the current one."""
        return self._current_index > 0

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self._steps) <= 1:
            return 100.0 if self._completed else 0.0
        return (self._current_index / (len(self._steps) - 1)) * 100.0

    def get_completed_steps_count(self) -> int:
        return len(self._completed)

    # ==================== Validation ====================

    def validate_step(self, index: Optional[int] = None) -> bool:
        """
        Validate one step's fields (the current step by default).

        The last step is validated against the whole schema.
        """
        index = self._current_index if index is None else index
        if index == len(self._steps) - 1:
            valid = self._form.validate_all()
            fields = None
        else:
            fields = self._steps[index]
            valid = self._form.validate_fields(fields)

        if valid:
            self._completed.add(index)
        else:
            self._completed.discard(index)
            errors = self._form.errors
            if fields is not None:
                errors = {k: v for k, v in errors.items() if k in fields}
            logger.warning(f"Step {index} validation failed: {list(errors)}")
            self._emit(self.validation_failed, errors)
        return valid

    # ==================== Navigation ====================

    def next_step(self) -> bool:
        """
        Validate the current step and move to the next one.

        On the last step this validates the whole form and stays put.

        Returns:
            True if the step validated (and navigation happened, if possible)
        """
        if self._disposed:
            return False
        if not self.validate_step():
            return False
        if not self.can_go_next():
            logger.debug(f"Last step ({self._current_index}) validated")
            return True
        return self._navigate_to(self._current_index + 1)

    def previous_step(self) -> bool:
        """Navigate to the previous step (no validation)."""
        if self._disposed or not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self._current_index})")
            return False
        return self._navigate_to(self._current_index - 1)

    def go_to_step(self, index: int) -> bool:
        """
        Navigate to a specific step.

        Every step strictly before ``index`` is re-validated first; the
        navigation stops on the first step that fails.
        """
        if self._disposed:
            return False
        if index < 0 or index >= len(self._steps):
            logger.error(f"Invalid step index: {index} (valid range: 0-{len(self._steps) - 1})")
            return False

        for previous in range(index):
            if not self.validate_step(previous):
                return False

        if index == self._current_index:
            return True
        return self._navigate_to(index)

    def reset(self):
        """Return to the first step and forget completed steps."""
        self._completed.clear()
        if self._current_index != 0:
            self._navigate_to(0)

    def _navigate_to(self, new_index: int) -> bool:
        old_index = self._current_index
        self._current_index = new_index
        logger.info(f"Navigating: Step {old_index} → {new_index}")
        self._emit(self.step_changed, old_index, new_index)
        return True

    def errors_by_step(self) -> Dict[int, Dict[str, str]]:
        """Current form errors grouped by the step that owns each field."""
        errors = self._form.errors
        grouped: Dict[int, Dict[str, str]] = {}
        for index, step in enumerate(self._steps):
            step_errors = {name: errors[name] for name in step if name in errors}
            if step_errors:
                grouped[index] = step_errors
        return grouped
