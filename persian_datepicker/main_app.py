# persian_datepicker/main_app.py
import os
import sys
import logging
import logging.config
from datetime import date
from PyQt5.QtWidgets import QApplication, QMainWindow, QFormLayout, QLabel, QWidget
from PyQt5.QtCore import Qt, QLocale

# --- Configuration ---
from persian_datepicker.config import LOGGING_CONFIG, LOGS_DIR

# --- Presentation Layer ---
from persian_datepicker.presentation.custom_widgets import ShamsiDateEdit

logger = logging.getLogger(__name__)

class MainWindow(QMainWindow):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("انتخاب‌گر تاریخ شمسی")
        self.setGeometry(100, 100, 420, 160)

        logger.info("Setting up UI...")
        self._setup_ui()
        logger.info("MainWindow initialized and UI setup complete.")

    def _setup_ui(self):
        central = QWidget(self)
        central.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        form_layout = QFormLayout(central)

        self.date_edit = ShamsiDateEdit(central)
        self.gregorian_label = QLabel(central)
        self.persian_label = QLabel(central)

        form_layout.addRow("تاریخ:", self.date_edit)
        form_layout.addRow("میلادی:", self.gregorian_label)
        form_layout.addRow("شمسی:", self.persian_label)

        self.date_edit.dateChanged.connect(self._on_date_changed)
        self.date_edit.persianDateChanged.connect(self.persian_label.setText)
        self._on_date_changed(self.date_edit.date())
        self.persian_label.setText(self.date_edit.persianDate())

        self.setCentralWidget(central)

    def _on_date_changed(self, new_date: date):
        self.gregorian_label.setText(new_date.isoformat() if new_date else "-")

def setup_logging():
    # Create logs directory if it doesn't exist
    if not os.path.exists(LOGS_DIR):
        os.makedirs(LOGS_DIR)
    logging.config.dictConfig(LOGGING_CONFIG)

def main():
    setup_logging()
    logger.info("Application starting...")
    app = QApplication(sys.argv)
    english_locale = QLocale(QLocale.Language.English, QLocale.Country.UnitedStates)
    QLocale.setDefault(english_locale)
    logger.info(f"Application default locale set to: {QLocale.system().name()}")

    main_window = MainWindow()
    main_window.show()
    logger.info("Application started successfully. Main window shown.")
    sys.exit(app.exec_())

if __name__ == '__main__':
    main()
