from dataclasses import dataclass

@dataclass
class UIConstants:
    MIN_WIDTH = 640
    MIN_HEIGHT = 320
    MARGIN = 10
    SPACING = 15
    BUTTON_MIN_WIDTH = 120
    DATE_INPUT_WIDTH = 140
    PERIOD_CONTROL = "period"
    START_FIELD = "start_date"
    END_FIELD = "end_date"
