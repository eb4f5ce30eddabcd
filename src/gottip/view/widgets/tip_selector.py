"""
Tip Percentage Selector
=======================
Preset buttons plus a slider, both bound to `TipStore.tip_percent`.

Neither control stores a value of its own: clicking a preset or moving the
slider writes to the store, and both controls redraw from the store's
`tip_percent_changed` signal.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QSlider, QVBoxLayout, QWidget

from gottip.config import TIP_PERCENT_MAX, TIP_PERCENT_MIN, TIP_PERCENT_STEP, TIP_PRESETS
from gottip.controller.store import TipStore

# Stable names for UI automation
PRESET_OBJECT_NAMES: dict[int, str] = {
    0: "btnZeroPercentTip",
    10: "btnTenPercentTip",
    15: "btnFifteenPercentTip",
    20: "btnTwentyPercentTip",
}

BUTTON_STYLE = """
    QPushButton {
        background-color: #1e6fd9; color: white;
        border-radius: 10px; padding: 10px 14px; font-weight: normal;
    }
    QPushButton:checked {
        background-color: green; font-weight: bold;
        border: 2px solid black;
    }
"""


class TipSelector(QWidget):
    def __init__(self, store: TipStore, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.store = store

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # --- Presets ---
        row_buttons = QHBoxLayout()
        row_buttons.setSpacing(32)
        self.buttons: dict[int, QPushButton] = {}
        for value in TIP_PRESETS:
            btn = QPushButton(f"{value}%", self)
            btn.setCheckable(True)
            btn.setObjectName(PRESET_OBJECT_NAMES.get(value, f"btn{value}PercentTip"))
            btn.setAccessibleName(f"{value} percent tip")
            btn.setStyleSheet(BUTTON_STYLE)
            btn.clicked.connect(lambda _=False, v=value: self.on_preset_clicked(v))
            row_buttons.addWidget(btn)
            self.buttons[value] = btn
        layout.addLayout(row_buttons)

        # --- Slider ---
        row_slider = QHBoxLayout()
        self.slider = QSlider(Qt.Orientation.Horizontal, self)
        self.slider.setObjectName("sldTipPercent")
        self.slider.setRange(TIP_PERCENT_MIN, TIP_PERCENT_MAX)
        self.slider.setSingleStep(TIP_PERCENT_STEP)
        self.slider.setPageStep(5)
        self.slider.setTickPosition(QSlider.TickPosition.TicksBelow)
        self.slider.setTickInterval(5)
        self.slider.setStyleSheet("QSlider::sub-page:horizontal { background: green; }")
        row_slider.addWidget(self.slider, 1)

        self.lbl_percent = QLabel(self)
        self.lbl_percent.setMinimumWidth(40)
        row_slider.addWidget(self.lbl_percent)
        layout.addLayout(row_slider)

        # --- Wiring ---
        self.slider.valueChanged.connect(self.on_slider_changed)
        self.store.tip_percent_changed.connect(self.refresh)

        self.refresh(self.store.tip_percent)

    # --- SLOTS ---

    @Slot(int)
    def on_preset_clicked(self, value: int) -> None:
        self.store.set_tip_percent(value)
        # Clicking the selected preset toggles its check state without a store change
        self.refresh(self.store.tip_percent)

    @Slot(int)
    def on_slider_changed(self, value: int) -> None:
        self.store.set_tip_percent(value)

    @Slot(int)
    def refresh(self, percent: int) -> None:
        if self.slider.value() != percent:
            self.slider.setValue(percent)
        self.lbl_percent.setText(f"{percent}%")
        for value, btn in self.buttons.items():
            btn.setChecked(value == percent)
