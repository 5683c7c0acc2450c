# persian_datepicker/business_logic/entities/parsed_date_entity.py
from dataclasses import dataclass
from datetime import datetime
from persian_datepicker.constants import DateInputCalendar

@dataclass(frozen=True)
class ParsedDateEntity:
    value: datetime # میلادی، ساعت 00:00
    calendar: DateInputCalendar # Enum: Gregorian, Persian
    persian_text: str # YYYY/MM/DD
