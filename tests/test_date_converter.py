# tests/test_date_converter.py
# pytest-style tests for the Gregorian <-> Persian conversion helpers.
# pip install pytest jdatetime

from datetime import date, datetime, timedelta

import pytest

from persian_datepicker.config import GREGORIAN_PIVOT_YEAR
from persian_datepicker.constants import DateInputCalendar
from persian_datepicker.utils.date_converter import (
    is_persian_leap_year,
    normalize_persian_text,
    parse_date_input,
    parse_gregorian_or_persian,
    parse_gregorian_strict,
    parse_persian_strict,
    persian_month_length,
    to_gregorian_date,
    to_persian_date,
)


# --------------------------- PERSIAN -> GREGORIAN ---------------------------

@pytest.mark.parametrize("text, expected", [
    ("1402/01/01", datetime(2023, 3, 21)),   # Nowruz 1402
    ("1392/02/15", datetime(2013, 5, 5)),
    ("1401/08/01", datetime(2022, 10, 23)),
    ("1402/12/29", datetime(2024, 3, 19)),   # last day of a common year
    ("1403/01/01", datetime(2024, 3, 20)),
    ("1403/12/30", datetime(2025, 3, 20)),   # leap year Esfand 30
    ("1399/12/30", datetime(2021, 3, 20)),
])
def test_to_gregorian_date_reference_table(text, expected):
    assert to_gregorian_date(text) == expected


def test_to_gregorian_date_is_midnight():
    result = to_gregorian_date("1402/05/10")
    assert (result.hour, result.minute, result.second, result.microsecond) == (0, 0, 0, 0)


def test_unpadded_fields_match_padded():
    assert to_gregorian_date("1402/1/1") == to_gregorian_date("1402/01/01")


def test_surrounding_whitespace_in_segments_is_tolerated():
    assert to_gregorian_date("1402/ 1/1 ") == datetime(2023, 3, 21)


@pytest.mark.parametrize("text", [
    None, "", "  ", "1402", "1402/1", "1402/01/01/01", "abc/de/fg",
    "1402//01", "1402-01-01", "1_402/01/01", "۱۴۰۲/۰۱/۰۱", "1402/1.5/01",
])
def test_malformed_input_returns_none(text):
    assert to_gregorian_date(text) is None


@pytest.mark.parametrize("text", [
    "1402/13/01",   # month 13
    "1402/00/10",
    "1402/12/40",   # day 40
    "1402/07/31",   # Mehr has 30 days
    "1402/12/30",   # 1402 is not leap
    "1402/01/00",
    "0/01/01",
    "-5/01/01",
    "99999/01/01",
    "1402/99999999999999999999/01",
])
def test_out_of_range_values_return_none(text):
    assert to_gregorian_date(text) is None


# --------------------------- GREGORIAN -> PERSIAN ---------------------------

def test_to_persian_date_new_year_boundary():
    assert to_persian_date(datetime(2023, 3, 20)) == "1401/12/29"
    assert to_persian_date(datetime(2023, 3, 21)) == "1402/01/01"


def test_to_persian_date_ignores_time_of_day():
    assert to_persian_date(datetime(2023, 3, 21, 23, 59, 59)) == "1402/01/01"


def test_to_persian_date_accepts_plain_date():
    assert to_persian_date(date(2025, 3, 20)) == "1403/12/30"


def test_to_persian_date_pads_small_years():
    assert to_persian_date(to_gregorian_date("979/1/1")) == "0979/01/01"


def test_to_persian_date_rejects_non_dates():
    with pytest.raises(TypeError):
        to_persian_date("2023/03/21")


def test_to_persian_date_before_calendar_epoch_raises():
    with pytest.raises(ValueError):
        to_persian_date(date(1, 1, 1))


def test_round_trip_over_a_leap_year():
    day = date(2024, 3, 20)          # 1403/01/01
    while day <= date(2025, 3, 20):  # 1403/12/30
        as_datetime = datetime(day.year, day.month, day.day)
        assert to_gregorian_date(to_persian_date(day)) == as_datetime
        day += timedelta(days=1)


def test_normalize_persian_text():
    assert normalize_persian_text("1402/1/1") == "1402/01/01"
    assert normalize_persian_text("1402/12/30") is None
    assert normalize_persian_text("abc") is None
    text = "1403/7/9"
    assert to_persian_date(to_gregorian_date(text)) == normalize_persian_text(text)


# --------------------------- DUAL PARSE ---------------------------

def test_gregorian_pattern_takes_precedence():
    assert parse_gregorian_or_persian("2023/03/21") == datetime(2023, 3, 21)
    parsed = parse_date_input("2023/03/21")
    assert parsed.calendar is DateInputCalendar.GREGORIAN
    assert parsed.persian_text == "1402/01/01"


def test_persian_input_falls_through():
    assert parse_gregorian_or_persian("1402/01/01") == datetime(2023, 3, 21)
    parsed = parse_date_input("1402/1/1")
    assert parsed.calendar is DateInputCalendar.PERSIAN
    assert parsed.value == datetime(2023, 3, 21)
    assert parsed.persian_text == "1402/01/01"


@pytest.mark.parametrize("text", [
    "", "abc", "2023/3/21", "2023/02/29", " 2023/03/21", "2023/03/21 ",
    "1402/13/01", "1402/12/40", "2023-03-21", "9999/12/31",
])
def test_dual_parse_invalid(text):
    assert parse_gregorian_or_persian(text) is None
    assert parse_date_input(text) is None


def test_pivot_year_boundary():
    below = f"{GREGORIAN_PIVOT_YEAR - 1}/01/01"
    at = f"{GREGORIAN_PIVOT_YEAR}/01/01"
    assert parse_date_input(below).calendar is DateInputCalendar.PERSIAN
    assert parse_date_input(at).calendar is DateInputCalendar.GREGORIAN
    assert parse_gregorian_strict(below) is None
    assert parse_persian_strict(at) is None


@pytest.mark.parametrize("text", [
    "1402/01/01", "1402/12/29", "1699/12/29", "1700/01/01", "2023/03/21",
    "1999/12/31", "0622/03/22", "9999/12/31", "1402/1/1", "2024/02/29",
])
def test_no_input_matches_both_calendars(text):
    assert parse_gregorian_strict(text) is None or parse_persian_strict(text) is None


# --------------------------- CALENDAR HELPERS ---------------------------

@pytest.mark.parametrize("year, expected", [(1399, True), (1402, False), (1403, True), (1404, False)])
def test_is_persian_leap_year(year, expected):
    assert is_persian_leap_year(year) is expected


def test_persian_month_length():
    assert persian_month_length(1402, 1) == 31
    assert persian_month_length(1402, 6) == 31
    assert persian_month_length(1402, 7) == 30
    assert persian_month_length(1402, 11) == 30
    assert persian_month_length(1402, 12) == 29
    assert persian_month_length(1403, 12) == 30
    with pytest.raises(ValueError):
        persian_month_length(1402, 13)
