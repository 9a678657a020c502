"""Domain entities: Appointment, Contact and Task.

Identifiers are fixed at construction. Every other field is a validated
property: assignment checks the new value first and raises InvalidArgument,
leaving the previous value in place.
"""

import calendar
import datetime
import re

from organizer.domain.clock import Clock, SystemClock
from organizer.domain.errors import InvalidArgument
from organizer.domain.phone import is_formatted_phone, normalize_phone

# Max lengths for identifier and text fields.
ID_MAX_LENGTH = 10
NAME_MAX_LENGTH = 10
ADDRESS_MAX_LENGTH = 30
DESCRIPTION_MAX_LENGTH = 50

DATE_FORMAT = "dd-MMM-yy"

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_DATE_TEXT = re.compile(r"([0-9]{2})-([A-Z][a-z]{2})-([0-9]{2})")


def _checked_text(value: str | None, max_length: int, message: str) -> str:
    if not isinstance(value, str) or len(value) > max_length:
        raise InvalidArgument(message)
    return value


def parse_date(text: str) -> datetime.date | None:
    """Parse dd-MMM-yy text (e.g. "11-Oct-25") into a date, or None if malformed.

    Two-digit years map to 2000-2099. Days 29-31 past the end of the month are
    clamped to its last day (31-Feb-27 is 28-Feb-27); day 00 and days above 31 are malformed.
    """
    match = _DATE_TEXT.fullmatch(text)
    if not match:
        return None
    day, month, year = match.groups()
    if month not in _MONTHS:
        return None
    year_number = 2000 + int(year)
    month_number = _MONTHS.index(month) + 1
    day_number = int(day)
    if not 1 <= day_number <= 31:
        return None
    last_day = calendar.monthrange(year_number, month_number)[1]
    return datetime.date(year_number, month_number, min(day_number, last_day))


def format_date(day: datetime.date) -> str:
    """Inverse of parse_date for dates in 2000-2099."""
    return f"{day.day:02d}-{_MONTHS[day.month - 1]}-{day.year % 100:02d}"


class Appointment:
    """
    An appointment on a future date.
    The date must fall strictly after the clock's today whenever it is set.
    """

    def __init__(
        self,
        appointment_id: str,
        date: str | datetime.date,
        description: str,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._id = _checked_text(appointment_id, ID_MAX_LENGTH, "Invalid Appointment ID")
        self._clock = clock or SystemClock()
        self.date = date
        self.description = description

    @property
    def id(self) -> str:
        return self._id

    @property
    def date(self) -> datetime.date:
        return self._date

    @date.setter
    def date(self, value: str | datetime.date) -> None:
        if isinstance(value, str):
            parsed = parse_date(value)
        elif isinstance(value, datetime.date) and not isinstance(value, datetime.datetime):
            parsed = value
        else:
            parsed = None
        if parsed is None or parsed <= self._clock.today():
            raise InvalidArgument("Invalid date")
        self._date = parsed

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = _checked_text(
            value, DESCRIPTION_MAX_LENGTH, "Invalid Description"
        )

    def __repr__(self) -> str:
        return (
            f"Appointment(id={self._id!r}, date={format_date(self._date)!r}, "
            f"description={self._description!r})"
        )


class Contact:
    """
    A person's contact details.
    Phone numbers are stored as ###-###-#### whatever separators the input used.
    """

    def __init__(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ) -> None:
        self._contact_id = _checked_text(contact_id, ID_MAX_LENGTH, "Invalid Contact ID")
        self.first_name = first_name
        self.last_name = last_name
        self.phone = phone
        self.address = address

    @property
    def contact_id(self) -> str:
        return self._contact_id

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = _checked_text(value, NAME_MAX_LENGTH, "Invalid First Name")

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = _checked_text(value, NAME_MAX_LENGTH, "Invalid Last Name")

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str) -> None:
        if value is None:
            raise InvalidArgument("Phone Number cannot be null")
        if not isinstance(value, str):
            raise InvalidArgument("Invalid Phone Number")
        phone = normalize_phone(value)
        if phone is None or not is_formatted_phone(phone):
            raise InvalidArgument("Invalid Phone Number")
        self._phone = phone

    @property
    def address(self) -> str:
        return self._address

    @address.setter
    def address(self, value: str) -> None:
        self._address = _checked_text(value, ADDRESS_MAX_LENGTH, "Invalid Address")

    def __repr__(self) -> str:
        return (
            f"Contact(contact_id={self._contact_id!r}, first_name={self._first_name!r}, "
            f"last_name={self._last_name!r}, phone={self._phone!r}, "
            f"address={self._address!r})"
        )


class Task:
    """A named task with a short description."""

    def __init__(self, task_id: str, name: str, description: str) -> None:
        self._id = _checked_text(task_id, ID_MAX_LENGTH, "Invalid Task ID")
        self.name = name
        self.description = description

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _checked_text(value, NAME_MAX_LENGTH, "Invalid Name")

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = _checked_text(
            value, DESCRIPTION_MAX_LENGTH, "Invalid Description"
        )

    def __repr__(self) -> str:
        return f"Task(id={self._id!r}, name={self._name!r}, description={self._description!r})"
