# persian_datepicker/business_logic/__init__.py
from .date_field_manager import DateFieldManager
