"""Message addresses and the actors that resolve to them."""

from dataclasses import dataclass
from typing import Any, Literal, Protocol

from ..exceptions import InvalidActorError
from .base import Resource, StrID

AddressType = Literal["admin", "contact", "user"]


@dataclass(frozen=True)
class MessageAddress:
    """Canonical identity of a conversation participant."""

    type: AddressType
    id: str | None = None
    user_id: str | None = None
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.type == "admin"


class MessagePerson(Protocol):
    """Anything that can author a reply or own a conversation."""

    def message_address(self) -> MessageAddress:
        """Resolve to the address used in reply payloads."""
        ...


def resolve_address(actor: MessagePerson, role: str) -> MessageAddress:
    """
    Resolve an actor and require an id on the result.

    Raises:
        InvalidActorError: The address has no id.
    """
    address = actor.message_address()
    if not address.id:
        raise InvalidActorError(f"{role} has no id to address ({address.type})")
    return address


class Admin(Resource):
    """A teammate in the Intercom workspace."""

    type: str | None = None
    id: StrID | None = None
    name: str | None = None
    email: str | None = None
    job_title: str | None = None
    away_mode_enabled: bool | None = None
    away_mode_reassign: bool | None = None
    has_inbox_seat: bool | None = None
    team_ids: list[StrID] | None = None

    def message_address(self) -> MessageAddress:
        return MessageAddress(type="admin", id=self.id)


class User(Resource):
    """A user: a contact with an external user id."""

    type: str | None = None
    id: StrID | None = None
    user_id: str | None = None
    email: str | None = None
    phone: str | None = None
    name: str | None = None
    created_at: int | None = None
    updated_at: int | None = None
    signed_up_at: int | None = None
    custom_attributes: dict[str, Any] | None = None

    def message_address(self) -> MessageAddress:
        return MessageAddress(
            type="user",
            id=self.id,
            user_id=self.user_id,
            email=self.email,
        )
