"""
Tip State Store (Controller)
============================
This module defines the central state of the running application.

Why is this file needed?
------------------------
1. State Management: It holds the subtotal text and the tip percentage in one
   place. The preset buttons and the slider both read and write the same
   `tip_percent`, so they can never disagree.
2. Notification: Widgets connect to the Qt signals below instead of talking
   to each other directly.
3. Validation: Every change to the subtotal goes through the sanitizer before
   it is stored.

Classes:
    TipStore: The state container with change signals.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from gottip.config import DEFAULT_TIP_PERCENT, TIP_PERCENT_MAX, TIP_PERCENT_MIN
from gottip.model.calculator import TipResult, compute
from gottip.model.sanitizer import Edit, apply_edit, sanitize

logger = logging.getLogger(__name__)


class TipStore(QObject):
    """Central state store with signals for widget sync."""
    subtotal_changed = Signal(str)
    tip_percent_changed = Signal(int)
    result_changed = Signal(object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._subtotal_text: str = ""
        self._tip_percent: int = DEFAULT_TIP_PERCENT

    # --- SUBTOTAL ---

    @property
    def subtotal_text(self) -> str:
        return self._subtotal_text

    def set_subtotal_text(self, text: str) -> None:
        """Replace the whole buffer. Invalid characters are dropped."""
        self._commit_subtotal(sanitize(text))

    def apply_edit(self, edit: Edit) -> bool:
        """
        Run a proposed edit through the sanitizer and commit it if accepted.

        Returns:
            True if the buffer now reflects the edit, False if it was rejected.
        """
        new_text = apply_edit(self._subtotal_text, edit)
        if new_text is None:
            logger.debug("Edit %s rejected; subtotal stays %r.", edit, self._subtotal_text)
            return False
        self._commit_subtotal(new_text)
        return True

    def _commit_subtotal(self, text: str) -> None:
        if text == self._subtotal_text:
            return
        self._subtotal_text = text
        self.subtotal_changed.emit(text)
        self.result_changed.emit(self.result())

    # --- TIP PERCENT ---

    @property
    def tip_percent(self) -> int:
        return self._tip_percent

    def set_tip_percent(self, value: int) -> None:
        if isinstance(value, bool) or not TIP_PERCENT_MIN <= value <= TIP_PERCENT_MAX or value != int(value):
            raise ValueError(
                f"Tip percentage must be a whole number between {TIP_PERCENT_MIN} and {TIP_PERCENT_MAX}, got {value!r}."
            )
        value = int(value)
        if value == self._tip_percent:
            return
        self._tip_percent = value
        logger.debug("Tip percentage set to %d%%.", value)
        self.tip_percent_changed.emit(value)
        self.result_changed.emit(self.result())

    # --- DERIVED ---

    def result(self) -> Optional[TipResult]:
        """Tip and total for the current state, or None while awaiting input."""
        return compute(self._subtotal_text, self._tip_percent)

    def reset(self) -> None:
        """Clear the subtotal and restore the default tip."""
        self._commit_subtotal("")
        self.set_tip_percent(DEFAULT_TIP_PERCENT)
        logger.info("Tip state has been reset.")
