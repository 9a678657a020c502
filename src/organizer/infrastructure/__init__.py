"""Infrastructure layer: concrete implementations of application ports."""

from organizer.infrastructure.memory_repository import (
    InMemoryRepository,
    appointment_repository,
    contact_repository,
    task_repository,
)

__all__ = [
    "InMemoryRepository",
    "appointment_repository",
    "contact_repository",
    "task_repository",
]
