"""
Main Application Window
=======================
The single window of the app: header, subtotal field, tip selector and result.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the form.
2. Routing: It connects the widgets to the shared TipStore.
3. Startup: It moves the keyboard focus to the subtotal field shortly after
   the window first appears.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QFont, QGuiApplication, QShowEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget

from gottip.config import FOCUS_DELAY_MS, HEADLESS_PLATFORMS, VISIBLE_APP_NAME
from gottip.controller.store import TipStore
from gottip.view.widgets.decimal_line_edit import CurrencyField, DecimalLineEdit
from gottip.view.widgets.result_panel import ResultPanel
from gottip.view.widgets.tip_selector import TipSelector

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: TipStore, focus_on_launch: bool = True) -> None:
        super().__init__()
        self.store = store
        self.focus_on_launch = focus_on_launch
        self._focus_scheduled = False

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(420, 560)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)
        layout.setSpacing(24)

        # --- 1. HEADER ---
        header = QHBoxLayout()
        header.addStretch()
        lbl_icon = QLabel("$")
        lbl_icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        lbl_icon.setFixedSize(36, 36)
        lbl_icon.setStyleSheet(
            "background-color: green; color: white; border-radius: 18px; font-size: 20px; font-weight: bold;"
        )
        header.addWidget(lbl_icon)

        self.lbl_title = QLabel(VISIBLE_APP_NAME)
        title_font = QFont()
        title_font.setPointSize(24)
        title_font.setBold(True)
        self.lbl_title.setFont(title_font)
        header.addWidget(self.lbl_title)
        header.addStretch()
        layout.addLayout(header)

        # --- 2. SUBTOTAL ---
        self.subtotal_field = CurrencyField(self.store.apply_edit, main_widget)
        layout.addWidget(self.subtotal_field)

        # --- 3. TIP ---
        lbl_select = QLabel("Select Tip Amount:")
        select_font = QFont()
        select_font.setBold(True)
        lbl_select.setFont(select_font)
        layout.addWidget(lbl_select)

        self.tip_selector = TipSelector(self.store, main_widget)
        layout.addWidget(self.tip_selector)

        # --- 4. RESULT ---
        self.result_panel = ResultPanel(main_widget)
        layout.addWidget(self.result_panel)
        layout.addStretch()

        # --- SIGNAL CONNECTIONS ---
        self.store.subtotal_changed.connect(self.subtotal_field.line_edit.sync_text)
        self.store.result_changed.connect(self.result_panel.show_result)

        # Initial render
        self.subtotal_field.line_edit.sync_text(self.store.subtotal_text)
        self.result_panel.show_result(self.store.result())

    @property
    def subtotal_edit(self) -> DecimalLineEdit:
        return self.subtotal_field.line_edit

    # --- STARTUP FOCUS ---

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if not self._focus_scheduled:
            self.schedule_initial_focus()

    def schedule_initial_focus(self) -> bool:
        """
        Request focus for the subtotal field once, FOCUS_DELAY_MS after launch.

        Returns:
            True if the timer was started, False if it was skipped.
        """
        if self._focus_scheduled:
            return False
        if not self.focus_on_launch:
            return False
        if QGuiApplication.platformName() in HEADLESS_PLATFORMS:
            logger.debug("Headless platform, skipping initial focus.")
            return False

        self._focus_scheduled = True
        QTimer.singleShot(FOCUS_DELAY_MS, self.focus_subtotal)
        return True

    @Slot()
    def focus_subtotal(self) -> None:
        self.activateWindow()
        self.subtotal_edit.setFocus(Qt.FocusReason.OtherFocusReason)
