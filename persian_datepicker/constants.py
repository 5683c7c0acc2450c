# persian_datepicker/constants.py

from enum import Enum

# General
PERSIAN_DATE_FORMAT = "{year:04d}/{month:02d}/{day:02d}"
GREGORIAN_INPUT_FORMAT = "yyyy/MM/dd"
DATE_SEPARATOR = "/"

class DateInputCalendar(Enum):
    GREGORIAN = "میلادی"
    PERSIAN = "شمسی"

# Persian month names, index 0 = فروردین
PERSIAN_MONTH_NAMES = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)

# Week header of the calendar popup, Saturday first
PERSIAN_WEEKDAY_ABBREVIATIONS = ("ش", "ی", "د", "س", "چ", "پ", "ج")

# --- UI messages ---
INVALID_DATE_MESSAGE = f"فرمت تاریخ نامعتبر است. لطفاً از {GREGORIAN_INPUT_FORMAT} استفاده کنید."
INVALID_DATE_BORDER_STYLE = "border: 1px solid red;"
