"""Application layer: services and ports. Depends only on domain (and default adapters)."""

from organizer.application.appointment_service import AppointmentService
from organizer.application.contact_service import ContactService
from organizer.application.ports import RecordRepository
from organizer.application.task_service import TaskService

__all__ = [
    "AppointmentService",
    "ContactService",
    "RecordRepository",
    "TaskService",
]
