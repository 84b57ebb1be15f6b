import pytest

from PyQt6 import QtWidgets

from gui.period_selector import PeriodSelector
from gui.period_summary import PeriodSummary
from models.period import PeriodType
from helpers import make_period, utc


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def make_selector():
    period = make_period()
    selector = PeriodSelector(period, "YYYY-MM-DD")
    emitted = []
    selector.period_changed.connect(emitted.append)
    return selector, period, emitted


def test_menu_lists_periods_in_order(qapp):
    selector, _, _ = make_selector()
    labels = [selector.period_menu.itemText(i) for i in range(selector.period_menu.count())]
    assert labels == [t.label for t in PeriodType.menu()]
    assert selector.selected_type() == PeriodType.NONE
    assert selector.start_input.text() == ""
    assert not selector.start_input.isEnabled()


def test_selecting_named_period_applies_it(qapp):
    selector, period, emitted = make_selector()
    selector.select(PeriodType.MONTH_PREVIOUS)

    assert period.period_type == PeriodType.MONTH_PREVIOUS
    assert period.start == utc(2024, 4, 1, 0, 0, 0)
    assert selector.start_input.text() == "2024-04-01"
    assert selector.end_input.text() == "2024-04-30"
    assert not selector.end_input.isEnabled()
    assert emitted[-1].period_type == PeriodType.MONTH_PREVIOUS


def test_arbitrary_dates_enable_inputs(qapp):
    selector, period, emitted = make_selector()
    selector.select(PeriodType.ARBITRARY_DATES)
    assert selector.start_input.isEnabled()
    assert selector.end_input.isEnabled()

    selector.start_input.setText("2024-05-02")
    selector.end_input.setText("2024-05-09")
    selector.apply()

    assert period.start == utc(2024, 5, 2, 0, 0, 0)
    assert period.end == utc(2024, 5, 9, 23, 59, 59)
    assert emitted[-1].elapsed_days == 7


def test_values_mapping(qapp):
    selector, _, _ = make_selector()
    selector.select(PeriodType.ARBITRARY_DATES)
    selector.start_input.setText(" 2024-05-02 ")
    assert selector.values() == {"period": "10", "start_date": "2024-05-02", "end_date": ""}


def test_summary_shows_range(qapp):
    selector, period, _ = make_selector()
    summary = PeriodSummary()
    selector.period_changed.connect(summary.update_range)

    selector.select(PeriodType.WEEK_PREVIOUS)
    assert summary.period_card.value() == "Last Week"
    assert summary.start_card.value() == "2024-05-06"
    assert summary.end_card.value() == "2024-05-12"
    assert summary.days_card.value() == "6"

    selector.select(PeriodType.NONE)
    assert summary.start_card.value() == "--"
    assert summary.days_card.value() == "--"
