# persian_datepicker/__init__.py
from .utils.date_converter import (
    parse_gregorian_or_persian,
    to_gregorian_date,
    to_persian_date,
)

__all__ = ["parse_gregorian_or_persian", "to_gregorian_date", "to_persian_date"]
