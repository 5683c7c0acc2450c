# persian_datepicker/business_logic/date_field_manager.py
from typing import Callable, List, Optional
from datetime import date, datetime

from persian_datepicker.utils import date_converter
from persian_datepicker.constants import INVALID_DATE_MESSAGE
import logging

logger = logging.getLogger(__name__)

class DateFieldManager:
    """
    State behind a Persian date input field: the selected Gregorian date and the
    mirrored Persian text. Toolkit independent, the Qt widget only forwards events here.
    """
    def __init__(self, initial_date: Optional[date] = None):
        self._selected_date: Optional[datetime] = None
        self._persian_text: str = ""
        self._error_message: Optional[str] = None
        self._listeners: List[Callable[['DateFieldManager'], None]] = []
        if initial_date is not None:
            self.set_selected_date(initial_date)
        logger.debug("DateFieldManager initialized.")

    @property
    def selected_date(self) -> Optional[datetime]:
        return self._selected_date

    @property
    def persian_text(self) -> str:
        return self._persian_text

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def is_valid(self) -> bool:
        return self._error_message is None

    def add_listener(self, callback: Callable[['DateFieldManager'], None]):
        if callback is None:
            raise ValueError("callback cannot be None")
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[['DateFieldManager'], None]):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    def on_text_edited(self, text: str) -> bool:
        """Handles text typed by the user. Returns False and flags the field when the text is not a date."""
        parsed = date_converter.parse_date_input(text)
        if parsed is None:
            logger.warning(f"Rejected date input: '{text}'")
            self._error_message = INVALID_DATE_MESSAGE
            self._notify()
            return False

        logger.info(f"Date input '{text}' accepted as {parsed.calendar.name} -> {parsed.persian_text}")
        self._selected_date = parsed.value
        self._persian_text = parsed.persian_text
        self._error_message = None
        self._notify()
        return True

    def set_selected_date(self, value: Optional[date]):
        """Sets the date from outside the text field (code or calendar popup)."""
        if value is None:
            self._selected_date = None
            self._persian_text = ""
        else:
            if not isinstance(value, date):
                raise ValueError(f"Expected date or datetime, got {type(value).__name__}")
            persian_text = date_converter.to_persian_date(value)
            self._selected_date = datetime(value.year, value.month, value.day)
            self._persian_text = persian_text
        self._error_message = None
        self._notify()

    def set_persian_text(self, text: str):
        """
        Assigns the bound Persian text directly. A parsable value moves the selected
        date and is normalized; anything else is kept as typed and the date is left alone.
        """
        parsed = date_converter.parse_date_input(text)
        if parsed is not None:
            self.set_selected_date(parsed.value)
            return

        logger.debug(f"Persian text '{text}' did not parse; selected date unchanged.")
        self._persian_text = text if text is not None else ""
        self._notify()

    def clear(self):
        self.set_selected_date(None)
