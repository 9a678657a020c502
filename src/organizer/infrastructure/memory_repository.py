"""In-memory implementation of RecordRepository (no DB)."""

import copy
import logging
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from organizer.domain import Appointment, Contact, Task
from organizer.domain.errors import InvalidArgument, RecordNotFound

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _is_blank(value: object) -> bool:
    return value is None or value == ""


class InMemoryRepository(Generic[R]):
    """Stores records of one kind in a dict keyed by identifier.
    Not synchronized; callers sharing one across threads must lock around it.
    """

    def __init__(
        self,
        kind: str,
        key: Callable[[R], str],
        fields: Iterable[str],
    ) -> None:
        self._kind = kind
        self._key = key
        self._fields = tuple(fields)
        self._by_id: dict[str, R] = {}

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def add(self, record: R) -> None:
        if record is None:
            raise InvalidArgument(f"{self._kind} cannot be null.")
        record_id = self._key(record)
        if record_id in self._by_id:
            raise InvalidArgument(f"{self._kind} ID already exists.")
        self._by_id[record_id] = record
        logger.debug("Stored %s %r", self._kind, record_id)

    def get(self, record_id: str) -> R | None:
        return self._by_id.get(record_id)

    def require(self, record_id: str) -> R:
        record = self._by_id.get(record_id)
        if record is None:
            raise RecordNotFound(self._kind, record_id)
        return record

    def list_all(self) -> list[R]:
        return list(self._by_id.values())

    def update(self, record_id: str, **fields: object) -> None:
        record = self._by_id.get(record_id)
        if record is None:
            raise InvalidArgument(f"{self._kind} ID does not exist.")
        unknown = sorted(set(fields) - set(self._fields))
        if unknown:
            raise InvalidArgument(
                f"{self._kind} has no updatable field(s): {', '.join(unknown)}"
            )
        changes = [
            (name, fields[name])
            for name in self._fields
            if name in fields and not _is_blank(fields[name])
        ]
        if not changes:
            return
        # Apply to a copy first so a failing field leaves the stored record untouched.
        trial = copy.copy(record)
        for name, value in changes:
            setattr(trial, name, value)
        vars(record).update(vars(trial))
        logger.debug(
            "Updated %s %r: %s", self._kind, record_id, ", ".join(n for n, _ in changes)
        )

    def delete(self, record_id: str) -> None:
        if record_id not in self._by_id:
            raise InvalidArgument(f"{self._kind} ID does not exist.")
        del self._by_id[record_id]
        logger.debug("Deleted %s %r", self._kind, record_id)

    def exists(self, record_id: str) -> bool:
        return record_id in self._by_id

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)


def appointment_repository() -> InMemoryRepository[Appointment]:
    return InMemoryRepository("Appointment", lambda a: a.id, ("date", "description"))


def contact_repository() -> InMemoryRepository[Contact]:
    return InMemoryRepository(
        "Contact",
        lambda c: c.contact_id,
        ("first_name", "last_name", "phone", "address"),
    )


def task_repository() -> InMemoryRepository[Task]:
    return InMemoryRepository("Task", lambda t: t.id, ("name", "description"))
