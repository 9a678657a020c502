"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol, TypeVar

R = TypeVar("R")


class RecordRepository(Protocol[R]):
    """Keyed store for one record kind (identifier -> record)."""

    def add(self, record: R) -> None:
        """Store a record. Raises InvalidArgument for None or a duplicate identifier."""
        ...

    def get(self, record_id: str) -> R | None:
        """Return the record with the given id, or None."""
        ...

    def require(self, record_id: str) -> R:
        """Return the record with the given id. Raises RecordNotFound."""
        ...

    def list_all(self) -> list[R]:
        """Return a snapshot of all stored records, in no guaranteed order."""
        ...

    def update(self, record_id: str, **fields: object) -> None:
        """Set the given fields; None or empty values are skipped. Raises InvalidArgument."""
        ...

    def delete(self, record_id: str) -> None:
        """Remove the record. Raises InvalidArgument if the id is unknown."""
        ...

    def exists(self, record_id: str) -> bool:
        """Return whether a record with the given id is stored."""
        ...
