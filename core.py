import logging
from PyQt6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout,
                            QFileDialog, QMessageBox)
from PyQt6.QtCore import pyqtSlot
from PyQt6.QtGui import QAction
from pathlib import Path
from typing import Optional
import sys
from config.settings_store import SettingsStore, SettingsError
from engine.period import Period
from gui.period_selector import PeriodSelector
from gui.period_summary import PeriodSummary
from gui.models import UIConstants
from xml_export.dtd import DtdResource, ResourceNotFoundError

class PeriodFlowGUI(QMainWindow):
    def __init__(self, settings_file: Optional[Path] = None):
        # Setup logging
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler('periodflow.log'),
                logging.StreamHandler()
            ]
        )

        super().__init__()
        self.settings_file = settings_file
        self.period = None
        self._init_core_components()
        self._setup_ui()
        self._setup_menu()

    def _init_core_components(self):
        self.setWindowTitle("PeriodFlow")
        self.setMinimumSize(UIConstants.MIN_WIDTH, UIConstants.MIN_HEIGHT)
        self.store = SettingsStore(self.settings_file)
        self.settings = self.store.get()
        self.period = Period(self.settings)
        self.dtd = DtdResource(self.settings.dtd_path)
        logging.info(f"Using timezone {self.settings.timezone}, date format '{self.settings.normal_date_format}'")

    def _setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(UIConstants.MARGIN, UIConstants.MARGIN, UIConstants.MARGIN, UIConstants.MARGIN)
        layout.setSpacing(UIConstants.SPACING)

        self.summary = PeriodSummary()
        self.selector = PeriodSelector(self.period, self.settings.datetime_picker_format)
        self.selector.period_changed.connect(self.summary.update_range)
        self.summary.update_range(self.period.to_range())

        layout.addWidget(self.selector)
        layout.addWidget(self.summary)
        layout.addStretch()

    def _setup_menu(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")

        export_dtd_action = QAction("Save Export DTD...", self)
        export_dtd_action.setEnabled(self.dtd.exists())
        export_dtd_action.triggered.connect(self.save_dtd)
        quit_action = QAction("Exit", self)
        quit_action.triggered.connect(self.quit_application)

        file_menu.addAction(export_dtd_action)
        file_menu.addSeparator()
        file_menu.addAction(quit_action)

    @pyqtSlot()
    def save_dtd(self):
        try:
            dtd_file = self.dtd.load()
        except ResourceNotFoundError as e:
            logging.error(f"Cannot export DTD: {e}")
            QMessageBox.warning(self, "PeriodFlow", str(e))
            return

        target, _ = QFileDialog.getSaveFileName(self, "Save DTD", dtd_file.filename, "DTD files (*.dtd)")
        if not target:
            return
        Path(target).write_bytes(dtd_file.content)
        logging.info(f"Saved {dtd_file.content_length} bytes of DTD to {target}")

    @pyqtSlot()
    def quit_application(self):
        QApplication.quit()

def main():
    app = QApplication(sys.argv)

    try:
        window = PeriodFlowGUI()
    except SettingsError as e:
        logging.error(f"Failed to initialize: {e}")
        QMessageBox.critical(None, "PeriodFlow Error", f"Failed to initialize: {e}")
        sys.exit(1)

    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
