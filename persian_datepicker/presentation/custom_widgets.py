# persian_datepicker/presentation/custom_widgets.py

from PyQt5.QtWidgets import QWidget, QLineEdit, QPushButton, QHBoxLayout, QDialog, QVBoxLayout, QGridLayout, QLabel
from PyQt5.QtCore import Qt, pyqtSignal
from datetime import date
from typing import List, Optional
import jdatetime
import logging

from persian_datepicker.business_logic.date_field_manager import DateFieldManager
from persian_datepicker.constants import (
    PERSIAN_MONTH_NAMES, PERSIAN_WEEKDAY_ABBREVIATIONS, INVALID_DATE_BORDER_STYLE
)
from persian_datepicker.utils import date_converter

logger = logging.getLogger(__name__)

class ShamsiCalendarDialog(QDialog):
    """یک دیالوگ که یک تقویم شمسی برای انتخاب تاریخ نمایش می‌دهد."""
    dateSelected = pyqtSignal(date)

    def __init__(self, initial_date: Optional[date] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("انتخاب تاریخ")
        self.setModal(True)
        self.setLayout(QVBoxLayout())
        self.setMinimumSize(350, 300)
        self.setLayoutDirection(Qt.LayoutDirection.RightToLeft)

        if initial_date:
            self._current_jdate = jdatetime.date.fromgregorian(date=initial_date)
        else:
            self._current_jdate = jdatetime.date.today()
        self._day_buttons: List[QPushButton] = []

        self._setup_ui()
        self._generate_calendar()

    @property
    def current_month(self) -> jdatetime.date:
        """اولین روز ماهی که در حال نمایش است."""
        return self._current_jdate.replace(day=1)

    @property
    def day_buttons(self) -> List[QPushButton]:
        return list(self._day_buttons)

    def _setup_ui(self):
        nav_layout = QHBoxLayout()
        self.prev_month_btn = QPushButton("<")
        self.next_month_btn = QPushButton(">")
        self.month_year_label = QLabel()
        self.month_year_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.month_year_label.setStyleSheet("font-weight: bold; font-size: 14px;")

        nav_layout.addWidget(self.prev_month_btn)
        nav_layout.addStretch()
        nav_layout.addWidget(self.month_year_label)
        nav_layout.addStretch()
        nav_layout.addWidget(self.next_month_btn)
        self.layout().addLayout(nav_layout)

        self.calendar_grid = QGridLayout()
        self.calendar_grid.setSpacing(5)

        for i, day in enumerate(PERSIAN_WEEKDAY_ABBREVIATIONS):
            label = QLabel(day)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setStyleSheet("font-weight: bold;")
            self.calendar_grid.addWidget(label, 0, i)

        self.layout().addLayout(self.calendar_grid)

        self.prev_month_btn.clicked.connect(self.go_to_prev_month)
        self.next_month_btn.clicked.connect(self.go_to_next_month)

    def _generate_calendar(self):
        # پاک کردن دکمه‌های روزهای ماه قبلی
        for day_btn in self._day_buttons:
            self.calendar_grid.removeWidget(day_btn)
            day_btn.setParent(None)
            day_btn.deleteLater()
        self._day_buttons = []

        year = self._current_jdate.year
        month = self._current_jdate.month
        self.month_year_label.setText(f"{PERSIAN_MONTH_NAMES[month - 1]} {year}")

        start_day_weekday = self.current_month.weekday() # jdatetime: شنبه = 0
        days_in_month = date_converter.persian_month_length(year, month)
        today = jdatetime.date.today()

        row = 1
        col = start_day_weekday
        for day_num in range(1, days_in_month + 1):
            day_btn = QPushButton(str(day_num))
            day_btn.setFixedSize(40, 40)
            day_btn.clicked.connect(lambda _checked=False, d=day_num: self.select_day(d))

            if year == today.year and month == today.month and day_num == today.day:
                day_btn.setStyleSheet("background-color: #3498db; color: white; border-radius: 20px;")

            self.calendar_grid.addWidget(day_btn, row, col)
            self._day_buttons.append(day_btn)

            col = (col + 1) % 7
            if col == 0:
                row += 1

    def go_to_prev_month(self):
        year, month = self._current_jdate.year, self._current_jdate.month
        month -= 1
        if month == 0:
            month = 12
            year -= 1
        self._current_jdate = self._current_jdate.replace(year=year, month=month, day=1)
        self._generate_calendar()

    def go_to_next_month(self):
        year, month = self._current_jdate.year, self._current_jdate.month
        month += 1
        if month > 12:
            month = 1
            year += 1
        self._current_jdate = self._current_jdate.replace(year=year, month=month, day=1)
        self._generate_calendar()

    def select_day(self, day: int):
        selected_jdate = self._current_jdate.replace(day=day)
        gregorian_date = selected_jdate.togregorian()
        logger.debug(f"Calendar day selected: {selected_jdate} -> {gregorian_date}")

        self.dateSelected.emit(gregorian_date)
        self.accept()

class ShamsiDateEdit(QWidget):
    """
    ویجت ورود تاریخ شمسی: متن تایپ شده (میلادی yyyy/MM/dd یا شمسی) در هر تغییر
    خوانده می‌شود و ورودی نامعتبر با حاشیه قرمز و راهنما مشخص می‌شود.
    """
    dateChanged = pyqtSignal(date)
    persianDateChanged = pyqtSignal(str)

    def __init__(self, parent=None, manager: Optional[DateFieldManager] = None):
        super().__init__(parent)
        self.manager = manager if manager is not None else DateFieldManager()
        self._last_date = self.manager.selected_date
        self._last_text = self.manager.persian_text
        self._user_editing = False

        self.main_layout = QHBoxLayout(self)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

        self.line_edit = QLineEdit(self)
        self.line_edit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.line_edit.setPlaceholderText("1402/01/01")

        self.calendar_button = QPushButton("📅", self)
        self.calendar_button.setFixedWidth(40)

        self.main_layout.addWidget(self.line_edit)
        self.main_layout.addWidget(self.calendar_button)

        self.calendar_button.clicked.connect(self.open_calendar)
        self.line_edit.textEdited.connect(self._on_text_edited)
        self.line_edit.editingFinished.connect(self._on_editing_finished)
        self.manager.add_listener(self._on_manager_changed)

        if self.manager.selected_date is None:
            self.setDate(date.today())
        else:
            self.line_edit.setText(self.manager.persian_text)

    def open_calendar(self):
        """دیالوگ تقویم شمسی را باز می‌کند."""
        dialog = ShamsiCalendarDialog(initial_date=self.date(), parent=self)
        dialog.dateSelected.connect(self.setDate)
        dialog.exec_()

    def _on_text_edited(self, text: str):
        self._user_editing = True
        try:
            self.manager.on_text_edited(text)
        finally:
            self._user_editing = False

    def _on_editing_finished(self):
        # نمایش شکل استاندارد پس از پایان ویرایش
        if self.manager.is_valid and self.line_edit.text() != self.manager.persian_text:
            self.line_edit.setText(self.manager.persian_text)

    def _on_manager_changed(self, manager: DateFieldManager):
        if manager.is_valid:
            self.line_edit.setStyleSheet("")
            self.line_edit.setToolTip("")
        else:
            self.line_edit.setStyleSheet(INVALID_DATE_BORDER_STYLE)
            self.line_edit.setToolTip(manager.error_message)

        if not self._user_editing and self.line_edit.text() != manager.persian_text:
            self.line_edit.setText(manager.persian_text)

        if manager.selected_date != self._last_date:
            self._last_date = manager.selected_date
            if manager.selected_date is not None:
                self.dateChanged.emit(manager.selected_date.date())
        if manager.persian_text != self._last_text:
            self._last_text = manager.persian_text
            self.persianDateChanged.emit(manager.persian_text)

    def setDate(self, gregorian_date: Optional[date]):
        """تاریخ ویجت را از یک آبجکت date استاندارد پایتون تنظیم می‌کند."""
        if gregorian_date is not None and not isinstance(gregorian_date, date):
            logger.warning(f"Ignoring non-date value passed to setDate: {gregorian_date!r}")
            return
        try:
            self.manager.set_selected_date(gregorian_date)
        except ValueError as e:
            logger.error(f"Error converting date to Shamsi: {e}")
            raise

    def date(self) -> Optional[date]:
        """تاریخ فعلی را به صورت آبجکت date استاندارد پایتون برمی‌گرداند."""
        selected = self.manager.selected_date
        return selected.date() if selected is not None else None

    def toPyDate(self) -> Optional[date]:
        """برای سازگاری با QDateEdit."""
        return self.date()

    def persianDate(self) -> str:
        return self.manager.persian_text

    def setPersianDate(self, text: str):
        self.manager.set_persian_text(text)

    def isValid(self) -> bool:
        return self.manager.is_valid
