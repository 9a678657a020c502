"""Contact add, lookup, update and delete."""

from organizer.application.ports import RecordRepository
from organizer.domain import Contact
from organizer.infrastructure.memory_repository import contact_repository


class ContactService:
    """CRUD over contacts keyed by contact id."""

    def __init__(self, repository: RecordRepository[Contact] | None = None) -> None:
        self._repo = repository if repository is not None else contact_repository()

    def add_contact(self, contact: Contact) -> None:
        """Store a new contact. Raises InvalidArgument for None or a duplicate id."""
        self._repo.add(contact)

    def get_contact(self, contact_id: str) -> Contact | None:
        """Return a contact by id, or None if not found."""
        return self._repo.get(contact_id)

    def require_contact(self, contact_id: str) -> Contact:
        return self._repo.require(contact_id)

    def list_contacts(self) -> list[Contact]:
        return self._repo.list_all()

    def update_contact(
        self,
        contact_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        """Set any of the given fields. Only non-empty values are applied."""
        self._repo.update(
            contact_id,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            address=address,
        )

    def delete_contact(self, contact_id: str) -> None:
        self._repo.delete(contact_id)

    def contact_exists(self, contact_id: str) -> bool:
        return self._repo.exists(contact_id)
