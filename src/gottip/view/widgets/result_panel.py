from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFormLayout, QLabel, QStackedWidget, QVBoxLayout, QWidget

from gottip.config import PROMPT_MESSAGE
from gottip.model.calculator import TipResult, format_currency


class ResultPanel(QWidget):
    """Shows the tip and total, or a prompt while no subtotal has been entered."""
    PAGE_PROMPT = 0
    PAGE_AMOUNTS = 1

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.stack = QStackedWidget(self)
        layout.addWidget(self.stack)

        # Page 0: prompt
        self.lbl_prompt = QLabel(PROMPT_MESSAGE, self.stack)
        self.lbl_prompt.setWordWrap(True)
        self.stack.addWidget(self.lbl_prompt)

        # Page 1: amounts
        amounts = QWidget(self.stack)
        form = QFormLayout(amounts)
        form.setVerticalSpacing(20)

        bold = QFont()
        bold.setBold(True)

        self.lbl_tip = QLabel(amounts)
        self.lbl_tip.setObjectName("lblTipAmount")
        self.lbl_tip.setFont(bold)
        form.addRow("Tip Amount:", self.lbl_tip)

        self.lbl_total = QLabel(amounts)
        self.lbl_total.setObjectName("lblTotalAmount")
        self.lbl_total.setFont(bold)
        form.addRow("Total Amount:", self.lbl_total)

        self.stack.addWidget(amounts)

        self.show_result(None)

    @property
    def is_awaiting_input(self) -> bool:
        return self.stack.currentIndex() == self.PAGE_PROMPT

    @Slot(object)
    def show_result(self, result: Optional[TipResult]) -> None:
        if result is None:
            self.lbl_tip.clear()
            self.lbl_total.clear()
            self.stack.setCurrentIndex(self.PAGE_PROMPT)
            return

        self.lbl_tip.setText(format_currency(result.tip))
        self.lbl_total.setText(format_currency(result.total))
        self.stack.setCurrentIndex(self.PAGE_AMOUNTS)
