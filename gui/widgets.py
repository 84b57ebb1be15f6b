from PyQt6.QtWidgets import QFrame, QVBoxLayout, QLabel
from PyQt6.QtCore import Qt

class ValueCard(QFrame):
    """Titled card showing a single value"""

    def __init__(self, title: str, parent=None):
        super().__init__(parent)
        self.setFrameStyle(QFrame.Shape.Box | QFrame.Shadow.Raised)
        self.setLineWidth(1)
        self.setStyleSheet("""
            ValueCard {
                background-color: white;
                border-radius: 8px;
                border: 1px solid #ddd;
            }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 16)
        layout.setSpacing(8)

        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-size: 14px; font-weight: bold; color: #333;")

        self.value_label = QLabel("--")
        self.value_label.setStyleSheet("font-size: 18px; font-weight: bold;")

        layout.addWidget(self.title_label)
        layout.addWidget(self.value_label)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

    def set_value(self, value: str):
        self.value_label.setText(value or "--")

    def value(self) -> str:
        return self.value_label.text()
