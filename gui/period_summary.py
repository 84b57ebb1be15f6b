from PyQt6.QtWidgets import QWidget, QHBoxLayout
from PyQt6.QtCore import pyqtSlot

from gui.models import UIConstants
from gui.widgets import ValueCard
from models.period import PeriodRange, PeriodType


class PeriodSummary(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setSpacing(UIConstants.SPACING)

        self.period_card = ValueCard("Period")
        self.start_card = ValueCard("Start")
        self.end_card = ValueCard("End")
        self.days_card = ValueCard("Elapsed Days")

        for card in (self.period_card, self.start_card, self.end_card, self.days_card):
            layout.addWidget(card)

    @pyqtSlot(PeriodRange)
    def update_range(self, period_range: PeriodRange):
        self.period_card.set_value(period_range.period_type.label)
        self.start_card.set_value(period_range.start_formatted)
        self.end_card.set_value(period_range.end_formatted)
        if period_range.period_type == PeriodType.NONE:
            self.days_card.set_value("")
        else:
            self.days_card.set_value(str(period_range.elapsed_days))
