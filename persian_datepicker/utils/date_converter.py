# persian_datepicker/utils/date_converter.py

import logging
import re
from datetime import date, datetime
from typing import Optional, Tuple
import jdatetime

from persian_datepicker.config import GREGORIAN_PIVOT_YEAR
from persian_datepicker.constants import PERSIAN_DATE_FORMAT, DATE_SEPARATOR, DateInputCalendar
from persian_datepicker.business_logic.entities.parsed_date_entity import ParsedDateEntity

logger = logging.getLogger(__name__)

# yyyy/MM/dd با ارقام لاتین، بدون فاصله اضافه
_GREGORIAN_PATTERN = re.compile(r"(\d{4})/(\d{2})/(\d{2})", re.ASCII)
# عدد صحیح: فاصله اختیاری، علامت اختیاری، فقط ارقام لاتین
_INTEGER_PATTERN = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


def _parse_int(token: str) -> Optional[int]:
    if not _INTEGER_PATTERN.fullmatch(token):
        return None
    return int(token)


def _split_persian_text(persian_date_str: str) -> Optional[Tuple[int, int, int]]:
    """رشته YYYY/MM/DD را به سه عدد صحیح تبدیل می‌کند؛ ارقام بدون صفر پیشرو هم پذیرفته می‌شوند."""
    if not isinstance(persian_date_str, str) or not persian_date_str.strip():
        return None

    parts = persian_date_str.split(DATE_SEPARATOR)
    if len(parts) != 3:
        return None

    numbers = [_parse_int(part) for part in parts]
    if any(n is None for n in numbers):
        return None
    return numbers[0], numbers[1], numbers[2]


def _make_jdate(year: int, month: int, day: int) -> Optional[jdatetime.date]:
    try:
        return jdatetime.date(year, month, day)
    except (ValueError, OverflowError):
        logger.debug(f"Persian date out of range: {year}/{month}/{day}")
        return None


def _jdate_from_gregorian(g_date: date) -> Optional[jdatetime.date]:
    try:
        return jdatetime.date.fromgregorian(date=g_date)
    except (ValueError, OverflowError):
        return None


def _format_jdate(j_date: jdatetime.date) -> str:
    return PERSIAN_DATE_FORMAT.format(year=j_date.year, month=j_date.month, day=j_date.day)


def _at_midnight(g_date: date) -> datetime:
    return datetime(g_date.year, g_date.month, g_date.day)


def to_gregorian_date(persian_date_str: str) -> Optional[datetime]:
    """
    یک رشته تاریخ شمسی با فرمت YYYY/MM/DD را به datetime میلادی (ساعت 00:00) تبدیل می‌کند.
    برای ورودی خالی، ساختار نادرست یا تاریخ خارج از محدوده تقویم None برمی‌گرداند.
    """
    numbers = _split_persian_text(persian_date_str)
    if numbers is None:
        return None

    j_date = _make_jdate(*numbers)
    if j_date is None:
        return None
    return _at_midnight(j_date.togregorian())


def to_persian_date(gregorian_date: date) -> str:
    """
    یک آبجکت date یا datetime میلادی را به رشته تاریخ شمسی با فرمت YYYY/MM/DD تبدیل می‌کند.
    فقط بخش تاریخ استفاده می‌شود. تاریخ‌های خارج از محدوده تقویم شمسی
    (پیش از سال ۱ شمسی یا پس از سال ۹۳۷۷) ValueError می‌دهند.
    """
    if not isinstance(gregorian_date, date):
        raise TypeError(f"Expected date or datetime, got {type(gregorian_date).__name__}")

    if isinstance(gregorian_date, datetime):
        gregorian_date = gregorian_date.date()

    shamsi_date = _jdate_from_gregorian(gregorian_date)
    if shamsi_date is None:
        logger.error(f"Date {gregorian_date.isoformat()} is outside the Persian calendar range")
        raise ValueError(f"{gregorian_date.isoformat()} has no Persian calendar equivalent")
    return _format_jdate(shamsi_date)


def parse_gregorian_strict(text: str) -> Optional[datetime]:
    """
    ورودی را فقط با الگوی دقیق yyyy/MM/dd میلادی و سال‌های بزرگ‌تر یا مساوی سال مرزی می‌خواند.
    تاریخ‌هایی که معادل شمسی ندارند (پس از سال ۹۳۷۷ شمسی) نامعتبر حساب می‌شوند.
    """
    if not isinstance(text, str):
        return None
    match = _GREGORIAN_PATTERN.fullmatch(text)
    if not match:
        return None

    year, month, day = (int(g) for g in match.groups())
    if year < GREGORIAN_PIVOT_YEAR:
        return None
    try:
        value = datetime(year, month, day)
    except ValueError:
        return None
    if _jdate_from_gregorian(value.date()) is None:
        return None
    return value


def parse_persian_strict(text: str) -> Optional[datetime]:
    """مانند to_gregorian_date، ولی فقط سال‌های شمسی کوچک‌تر از سال مرزی را می‌پذیرد."""
    numbers = _split_persian_text(text)
    if numbers is None or numbers[0] >= GREGORIAN_PIVOT_YEAR:
        return None
    return to_gregorian_date(text)


def parse_date_input(text: str) -> Optional[ParsedDateEntity]:
    """
    ورودی کاربر را ابتدا به صورت میلادی (yyyy/MM/dd) و در صورت شکست به صورت شمسی می‌خواند.
    نتیجه شامل تاریخ میلادی، تقویم تشخیص داده شده و متن شمسی استاندارد است.
    """
    gregorian = parse_gregorian_strict(text)
    if gregorian is not None:
        logger.debug(f"Input '{text}' parsed as Gregorian date {gregorian.date().isoformat()}")
        return ParsedDateEntity(value=gregorian, calendar=DateInputCalendar.GREGORIAN,
                                persian_text=to_persian_date(gregorian))

    persian = parse_persian_strict(text)
    if persian is not None:
        logger.debug(f"Input '{text}' parsed as Persian date {persian.date().isoformat()}")
        return ParsedDateEntity(value=persian, calendar=DateInputCalendar.PERSIAN,
                                persian_text=to_persian_date(persian))

    logger.debug(f"Input '{text}' is neither a Gregorian nor a Persian date")
    return None


def parse_gregorian_or_persian(text: str) -> Optional[datetime]:
    """تاریخ میلادی معادل ورودی یا None در صورت نامعتبر بودن."""
    parsed = parse_date_input(text)
    return parsed.value if parsed else None


def normalize_persian_text(persian_date_str: str) -> Optional[str]:
    """شکل استاندارد (با صفر پیشرو) یک تاریخ شمسی معتبر؛ مثلاً 1402/1/1 -> 1402/01/01"""
    numbers = _split_persian_text(persian_date_str)
    if numbers is None:
        return None
    j_date = _make_jdate(*numbers)
    return _format_jdate(j_date) if j_date else None


def is_persian_leap_year(year: int) -> bool:
    return jdatetime.date(year, 1, 1).isleap()


def persian_month_length(year: int, month: int) -> int:
    """تعداد روزهای یک ماه شمسی."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month <= 6:
        return 31
    if month < 12:
        return 30
    # اسفند
    return 30 if is_persian_leap_year(year) else 29
