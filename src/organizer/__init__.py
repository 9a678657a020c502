"""
Organizer core: clean-architecture layout.

- domain: records (Appointment, Contact, Task), clock, phone rules, errors. No outer dependencies.
- application: services (AppointmentService, ContactService, TaskService), ports (RecordRepository).
- infrastructure: adapters (InMemoryRepository).
"""

from organizer.application import (
    AppointmentService,
    ContactService,
    RecordRepository,
    TaskService,
)
from organizer.config import Settings, configure_logging, load_settings
from organizer.domain import (
    Appointment,
    Clock,
    Contact,
    FixedClock,
    InvalidArgument,
    RecordNotFound,
    SystemClock,
    Task,
)
from organizer.infrastructure import InMemoryRepository

__all__ = [
    "Appointment",
    "AppointmentService",
    "Clock",
    "Contact",
    "ContactService",
    "FixedClock",
    "InMemoryRepository",
    "InvalidArgument",
    "RecordNotFound",
    "RecordRepository",
    "Settings",
    "SystemClock",
    "Task",
    "TaskService",
    "configure_logging",
    "load_settings",
]
