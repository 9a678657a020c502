"""Domain errors raised by records and repositories."""


class InvalidArgument(ValueError):
    """A value, record or identifier was rejected. Raised before any mutation."""


class RecordNotFound(LookupError):
    """No record is stored under the requested identifier."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} ID does not exist: {record_id!r}")
