"""
Decimal Line Edit
=================
A QLineEdit that never changes its own text.

Every keystroke, paste or cut is turned into an `Edit` and handed to an edit
hook (normally `TipStore.apply_edit`). The hook decides whether the edit is
accepted; the widget then mirrors the store through `sync_text`.

QLineEdit can still change its text on its own (platform key bindings such
as Ctrl+K, middle-click paste of the X11 selection, direct calls to
`insert()` or `del_()`). Those changes are caught on `textChanged`: the
widget reverts to the last committed buffer and sends the difference
through the hook as an `Edit`.
"""
from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QGuiApplication, QInputMethodEvent, QKeyEvent, QKeySequence
from PySide6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QWidget

from gottip.config import CURRENCY_SYMBOL, SUBTOTAL_PLACEHOLDER
from gottip.model.sanitizer import Edit, apply_edit, filter_text

EditHook = Callable[[Edit], bool]


def diff_edit(old: str, new: str) -> Optional[Edit]:
    """The single span replacement that turns `old` into `new`, or None if equal."""
    if old == new:
        return None
    limit = min(len(old), len(new))
    prefix = 0
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1
    suffix = 0
    while suffix < limit - prefix and old[-1 - suffix] == new[-1 - suffix]:
        suffix += 1
    return Edit(start=prefix, length=len(old) - prefix - suffix, text=new[prefix:len(new) - suffix])


class DecimalLineEdit(QLineEdit):
    def __init__(self, edit_hook: Optional[EditHook] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._edit_hook: EditHook = edit_hook or self._apply_locally
        self._committed: str = ""
        self._syncing = False

        self.setPlaceholderText(SUBTOTAL_PLACEHOLDER)
        self.setInputMethodHints(Qt.InputMethodHint.ImhFormattedNumbersOnly)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.NoContextMenu)
        self.setAcceptDrops(False)
        self.setFrame(False)

        self.textChanged.connect(self._on_text_changed)

    # --- EDIT INTERCEPTION ---

    def propose(self, edit: Edit) -> bool:
        """Send an edit through the hook and move the cursor after it."""
        if not self._edit_hook(edit):
            return False
        self.setCursorPosition(edit.start + len(filter_text(edit.text)))
        return True

    def _selection_span(self) -> Optional[tuple[int, int]]:
        if not self.hasSelectedText():
            return None
        return self.selectionStart(), len(self.selectedText())

    def _replace_selection(self, text: str) -> bool:
        span = self._selection_span()
        if span is None:
            return self.propose(Edit.insert(self.cursorPosition(), text))
        start, length = span
        return self.propose(Edit(start=start, length=length, text=text))

    def _delete(self, forward: bool) -> bool:
        span = self._selection_span()
        if span is not None:
            return self.propose(Edit.delete(*span))
        cursor = self.cursorPosition()
        if forward and cursor < len(self.text()):
            return self.propose(Edit.delete(cursor))
        if not forward and cursor > 0:
            return self.propose(Edit.delete(cursor - 1))
        return False

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.matches(QKeySequence.StandardKey.Paste):
            self._replace_selection(QGuiApplication.clipboard().text())
            event.accept()
            return

        if event.matches(QKeySequence.StandardKey.Cut):
            if self.hasSelectedText():
                self.copy()
                self._delete(forward=True)
            event.accept()
            return

        if event.key() == Qt.Key.Key_Backspace:
            self._delete(forward=False)
            event.accept()
            return

        if event.key() == Qt.Key.Key_Delete:
            self._delete(forward=True)
            event.accept()
            return

        if event.matches(QKeySequence.StandardKey.Undo) or event.matches(QKeySequence.StandardKey.Redo):
            # QLineEdit undo history holds buffers the store has since replaced
            event.accept()
            return

        text = event.text()
        if text and text.isprintable():
            self._replace_selection(text)
            event.accept()
            return

        # Navigation, selection, copy, focus changes
        super().keyPressEvent(event)

    def inputMethodEvent(self, event: QInputMethodEvent) -> None:
        commit = event.commitString()
        if commit:
            self._replace_selection(commit)
        event.accept()

    # --- SYNC ---

    @Slot(str)
    def sync_text(self, text: str) -> None:
        """Show the committed buffer, keeping the cursor where it was."""
        self._committed = text
        if text == self.text():
            return
        cursor = min(self.cursorPosition(), len(text))
        self._set_text_silently(text)
        self.setCursorPosition(cursor)

    def _set_text_silently(self, text: str) -> None:
        self._syncing = True
        try:
            self.setText(text)
        finally:
            self._syncing = False

    @Slot(str)
    def _on_text_changed(self, text: str) -> None:
        if self._syncing:
            return
        edit = diff_edit(self._committed, text)
        if edit is None:
            return
        # QLineEdit edited itself; undo that and let the hook decide
        self._set_text_silently(self._committed)
        self.propose(edit)

    def _apply_locally(self, edit: Edit) -> bool:
        new_text = apply_edit(self._committed, edit)
        if new_text is None:
            return False
        self.sync_text(new_text)
        return True


class CurrencyField(QWidget):
    """The subtotal input: a currency symbol followed by a DecimalLineEdit."""

    def __init__(self, edit_hook: Optional[EditHook] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 0, 4, 0)

        self.lbl_symbol = QLabel(CURRENCY_SYMBOL, self)
        layout.addWidget(self.lbl_symbol)

        self.line_edit = DecimalLineEdit(edit_hook, self)
        self.line_edit.setObjectName("txtSubtotal")
        self.line_edit.setAccessibleName(SUBTOTAL_PLACEHOLDER)
        self.line_edit.setMinimumHeight(32)
        self.line_edit.setStyleSheet(
            "QLineEdit { border: 2px solid green; border-radius: 8px; padding: 4px; }"
        )
        layout.addWidget(self.line_edit, 1)
