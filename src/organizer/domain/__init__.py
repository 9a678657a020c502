"""Domain layer: records, field rules and errors. No dependencies on outer layers."""

from organizer.domain.clock import Clock, FixedClock, SystemClock
from organizer.domain.entities import Appointment, Contact, Task
from organizer.domain.errors import InvalidArgument, RecordNotFound

__all__ = [
    "Appointment",
    "Clock",
    "Contact",
    "FixedClock",
    "InvalidArgument",
    "RecordNotFound",
    "SystemClock",
    "Task",
]
