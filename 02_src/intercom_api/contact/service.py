"""Contact operations over an injected repository."""

from typing import Protocol

from ..models import Contact, ContactList, ContactListParams, PageParams, User, UserIdentifiers


class IContactRepository(Protocol):
    """Request/response exchange for contact endpoints."""

    def find(self, identifiers: UserIdentifiers) -> Contact:
        """Fetch one contact by Intercom id or external user id."""
        ...

    def list(self, params: ContactListParams) -> ContactList:
        """List contacts matching the query."""
        ...

    def scroll(self, scroll_param: str) -> ContactList:
        """Fetch the next page from the scroll API."""
        ...

    def create(self, contact: Contact) -> Contact:
        ...

    def update(self, contact: Contact) -> Contact:
        ...

    def delete(self, id: str) -> Contact:
        ...

    def convert(self, contact: Contact, user: User) -> User:
        """Convert a lead contact into a user."""
        ...


class ContactService:
    """Thin wrapper turning contact calls into repository requests."""

    def __init__(self, repository: IContactRepository):
        self._repository = repository

    def find_by_id(self, id: str) -> Contact:
        """Look up a contact by Intercom id."""
        return self._repository.find(UserIdentifiers(id=id))

    def find_by_user_id(self, user_id: str) -> Contact:
        """Look up a contact by the user id generated server side."""
        return self._repository.find(UserIdentifiers(user_id=user_id))

    def list(self, page: PageParams | None = None) -> ContactList:
        return self._repository.list(ContactListParams(page=page or PageParams()))

    def scroll(self, scroll_param: str = "") -> ContactList:
        """List every contact via the scroll API; pass the previous page's scroll_param."""
        return self._repository.scroll(scroll_param)

    def list_by_email(self, email: str, page: PageParams | None = None) -> ContactList:
        return self._repository.list(ContactListParams(page=page or PageParams(), email=email))

    def list_by_segment(self, segment_id: str, page: PageParams | None = None) -> ContactList:
        return self._repository.list(
            ContactListParams(page=page or PageParams(), segment_id=segment_id)
        )

    def list_by_tag(self, tag_id: str, page: PageParams | None = None) -> ContactList:
        return self._repository.list(ContactListParams(page=page or PageParams(), tag_id=tag_id))

    def create(self, contact: Contact) -> Contact:
        return self._repository.create(contact)

    def update(self, contact: Contact) -> Contact:
        return self._repository.update(contact)

    def convert(self, contact: Contact, user: User) -> User:
        return self._repository.convert(contact, user)

    def delete(self, contact: Contact) -> Contact:
        return self._repository.delete(contact.id)
