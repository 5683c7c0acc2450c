# persian_datepicker/business_logic/entities/__init__.py
from .parsed_date_entity import ParsedDateEntity

__all__ = ["ParsedDateEntity"]
