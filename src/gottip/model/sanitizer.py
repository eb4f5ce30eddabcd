"""
Subtotal Input Sanitizer
========================
Filters proposed edits to the subtotal text buffer before they are committed.

Why is this file needed?
------------------------
The subtotal field accepts keystrokes, pastes and deletions. Every change is
expressed as an `Edit` (a span of the current buffer plus replacement text) and
passed through `apply_edit`, which either returns the new buffer or rejects the
edit. Every accepted buffer satisfies the subtotal invariant:

* only digits and at most one decimal point,
* at most two digits after the decimal point,
* at most 16 characters.

The module is free of Qt so it can be reused from any front end.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from gottip.config import ALLOWED_CHARACTERS, DECIMAL_POINT, MAX_BUFFER_LENGTH, MAX_FRACTION_DIGITS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edit:
    """
    A proposed change to the buffer: replace `length` characters starting at
    `start` with `text`.
    """
    start: int
    length: int = 0
    text: str = ""

    @classmethod
    def insert(cls, position: int, text: str) -> Edit:
        return cls(start=position, length=0, text=text)

    @classmethod
    def delete(cls, start: int, length: int = 1) -> Edit:
        return cls(start=start, length=length, text="")

    @property
    def end(self) -> int:
        return self.start + self.length


def filter_text(text: str) -> str:
    """Strip every character that is not a digit or the decimal point."""
    return "".join(ch for ch in text if ch in ALLOWED_CHARACTERS)


def fraction_digits(buffer: str) -> int:
    """Number of characters after the decimal point (0 if there is none)."""
    index = buffer.find(DECIMAL_POINT)
    if index < 0:
        return 0
    return len(buffer) - index - 1


def is_valid_buffer(buffer: str) -> bool:
    """Check the subtotal invariant. The empty buffer is valid."""
    return (
        all(ch in ALLOWED_CHARACTERS for ch in buffer)
        and buffer.count(DECIMAL_POINT) <= 1
        and fraction_digits(buffer) <= MAX_FRACTION_DIGITS
        and len(buffer) <= MAX_BUFFER_LENGTH
    )


def apply_edit(buffer: str, edit: Edit) -> Optional[str]:
    """
    Apply `edit` to `buffer` if it keeps the buffer valid.

    Rules, in order:
        1. Characters outside ``0-9.`` are stripped from the replacement text.
        2. A decimal point is rejected if the buffer would hold two of them.
        3. An insertion is rejected if it leaves more than two fractional
           digits. Deletions are always accepted.
        4. An edit is rejected if the buffer would exceed 16 characters.
        5. Otherwise the filtered text is spliced into the span.

    Args:
        buffer: The current text of the field.
        edit: The proposed change.

    Returns:
        The new buffer, or None if the edit is rejected.

    Raises:
        ValueError: If the edit span lies outside the buffer.
    """
    if edit.start < 0 or edit.length < 0 or edit.end > len(buffer):
        raise ValueError(
            f"Edit span [{edit.start}, {edit.end}) is outside a buffer of length {len(buffer)}."
        )

    text = filter_text(edit.text)
    if not text and edit.length == 0:
        return None

    candidate = buffer[:edit.start] + text + buffer[edit.end:]

    # Deletion (possibly of a selection replaced by stripped-out text)
    if not text:
        return candidate

    if DECIMAL_POINT in text and candidate.count(DECIMAL_POINT) > 1:
        logger.debug("Rejected %r: second decimal point.", edit.text)
        return None

    if fraction_digits(candidate) > MAX_FRACTION_DIGITS:
        logger.debug("Rejected %r: more than %d decimal places.", edit.text, MAX_FRACTION_DIGITS)
        return None

    if len(candidate) > MAX_BUFFER_LENGTH:
        logger.debug("Rejected %r: longer than %d characters.", edit.text, MAX_BUFFER_LENGTH)
        return None

    return candidate


def sanitize(text: str) -> str:
    """
    Normalise arbitrary text into a valid buffer.

    The text is typed into an empty buffer one character at a time and
    rejected characters are dropped, so the result is exactly what a user
    would see after typing `text`. Valid buffers come back unchanged.
    """
    buffer = ""
    for ch in text:
        accepted = apply_edit(buffer, Edit.insert(len(buffer), ch))
        if accepted is not None:
            buffer = accepted
    return buffer
