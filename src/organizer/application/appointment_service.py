"""Appointment add, lookup, update and delete."""

import datetime

from organizer.application.ports import RecordRepository
from organizer.domain import Appointment
from organizer.infrastructure.memory_repository import appointment_repository


class AppointmentService:
    """CRUD over appointments keyed by appointment id.

    get_appointment returns None for an unknown id; require_appointment raises
    RecordNotFound. Mutations raise InvalidArgument on failure and return None.
    """

    def __init__(self, repository: RecordRepository[Appointment] | None = None) -> None:
        self._repo = repository if repository is not None else appointment_repository()

    def add_appointment(self, appointment: Appointment) -> None:
        """Store a new appointment. Raises InvalidArgument for None or a duplicate id."""
        self._repo.add(appointment)

    def get_appointment(self, appointment_id: str) -> Appointment | None:
        return self._repo.get(appointment_id)

    def require_appointment(self, appointment_id: str) -> Appointment:
        return self._repo.require(appointment_id)

    def list_appointments(self) -> list[Appointment]:
        return self._repo.list_all()

    get_all_appointments = list_appointments

    def update_appointment(
        self,
        appointment_id: str,
        date: str | datetime.date | None = None,
        description: str | None = None,
    ) -> None:
        """Set date and/or description. None or "" leaves that field unchanged."""
        self._repo.update(appointment_id, date=date, description=description)

    def delete_appointment(self, appointment_id: str) -> None:
        self._repo.delete(appointment_id)

    def appointment_exists(self, appointment_id: str) -> bool:
        return self._repo.exists(appointment_id)
