from typing import Dict
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                            QComboBox, QLineEdit, QPushButton)
from PyQt6.QtCore import pyqtSignal, pyqtSlot

from engine.period import Period
from gui.models import UIConstants
from models.period import PeriodRange, PeriodType


class PeriodSelector(QWidget):
    """Period menu with From/To inputs that are editable for arbitrary dates only"""
    period_changed = pyqtSignal(PeriodRange)

    def __init__(self, period: Period, picker_format: str = "", parent=None):
        super().__init__(parent)
        self.period = period
        self.picker_format = picker_format
        self._setup_ui()
        self.select(period.period_type)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(UIConstants.SPACING)

        menu_layout = QHBoxLayout()
        menu_layout.addWidget(QLabel("Period:"))
        self.period_menu = QComboBox()
        for period_type in PeriodType.menu():
            self.period_menu.addItem(period_type.label, period_type.value)
        self.period_menu.currentIndexChanged.connect(self._on_period_changed)
        menu_layout.addWidget(self.period_menu)
        menu_layout.addStretch()

        dates_layout = QHBoxLayout()
        self.start_input = self._create_date_input()
        self.end_input = self._create_date_input()
        dates_layout.addWidget(QLabel("From:"))
        dates_layout.addWidget(self.start_input)
        dates_layout.addWidget(QLabel("To:"))
        dates_layout.addWidget(self.end_input)
        dates_layout.addStretch()

        self.apply_button = QPushButton("Apply")
        self.apply_button.setMinimumWidth(UIConstants.BUTTON_MIN_WIDTH)
        self.apply_button.clicked.connect(self.apply)
        dates_layout.addWidget(self.apply_button)

        layout.addLayout(menu_layout)
        layout.addLayout(dates_layout)

    def _create_date_input(self) -> QLineEdit:
        date_input = QLineEdit()
        date_input.setFixedWidth(UIConstants.DATE_INPUT_WIDTH)
        date_input.setPlaceholderText(self.picker_format)
        date_input.setEnabled(False)
        return date_input

    def selected_type(self) -> PeriodType:
        return PeriodType(self.period_menu.currentData())

    def select(self, period_type: PeriodType):
        index = self.period_menu.findData(period_type.value)
        if index == self.period_menu.currentIndex():
            self._on_period_changed()
        else:
            self.period_menu.setCurrentIndex(index)

    def values(self) -> Dict[str, str]:
        return {
            UIConstants.PERIOD_CONTROL: str(self.selected_type().value),
            UIConstants.START_FIELD: self.start_input.text().strip(),
            UIConstants.END_FIELD: self.end_input.text().strip(),
        }

    @pyqtSlot()
    def apply(self):
        self.period.set_period_from_selector(
            self.values(), UIConstants.PERIOD_CONTROL,
            UIConstants.START_FIELD, UIConstants.END_FIELD
        )
        self._show_dates()
        self.period_changed.emit(self.period.to_range())

    def _on_period_changed(self):
        arbitrary = self.selected_type() == PeriodType.ARBITRARY_DATES
        self.start_input.setEnabled(arbitrary)
        self.end_input.setEnabled(arbitrary)
        if not arbitrary:
            self.apply()

    def _show_dates(self):
        self.start_input.setText(self.period.get_start_formatted())
        self.end_input.setText(self.period.get_end_formatted())
