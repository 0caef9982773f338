"""Contact resources and contact list queries."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import AliasChoices, Field

from .addressing import MessageAddress
from .base import Resource, StrID
from .paging import PageParams, Pages, query_value


class ContactLocation(Resource):
    type: str | None = None
    country: str | None = None
    region: str | None = None
    city: str | None = None


class Addressable(Resource):
    """Reference to a related object (tag, note, company)."""

    type: str | None = None
    id: StrID | None = None
    url: str | None = None


class AddressableList(Resource):
    type: str | None = None
    data: list[Addressable] | None = None
    url: str | None = None
    total_count: int | None = None
    has_more: bool | None = None


class SocialProfile(Resource):
    type: str | None = None
    name: str | None = None
    url: str | None = None


class SocialProfileList(Resource):
    type: str | None = None
    data: list[SocialProfile] | None = None


class Contact(Resource):
    """
    A contact (lead or user) within Intercom.

    Not every field is writeable; read-only fields are ignored by the API
    when a contact is created or updated.
    """

    type: str | None = None
    id: StrID | None = None
    workspace_id: str | None = None
    external_id: str | None = None
    role: str | None = None
    email: str | None = None
    phone: str | None = None
    name: str | None = None
    avatar: str | None = None
    owner_id: int | None = None
    social_profiles: SocialProfileList | None = None
    has_hard_bounced: bool | None = None
    marked_email_as_spam: bool | None = None
    unsubscribed_from_emails: bool | None = None
    created_at: int | None = None
    updated_at: int | None = None
    signed_up_at: int | None = None
    last_seen_at: int | None = None
    last_replied_at: int | None = None
    last_contacted_at: int | None = None
    last_email_opened_at: int | None = None
    last_email_clicked_at: int | None = None
    language_override: str | None = None
    browser: str | None = None
    browser_version: str | None = None
    browser_language: str | None = None
    os: str | None = None
    location: ContactLocation | None = None
    android_app_name: str | None = None
    android_app_version: str | None = None
    android_device: str | None = None
    android_os_version: str | None = None
    android_sdk_version: str | None = None
    android_last_seen_at: int | None = None
    ios_app_name: str | None = None
    ios_app_version: str | None = None
    ios_device: str | None = None
    ios_os_version: str | None = None
    ios_sdk_version: str | None = None
    ios_last_seen_at: int | None = None
    custom_attributes: dict[str, Any] | None = None
    tags: AddressableList | None = None
    notes: AddressableList | None = None
    companies: AddressableList | None = None

    def message_address(self) -> MessageAddress:
        return MessageAddress(type="contact", id=self.id, email=self.email)

    def __str__(self) -> str:
        return f"[intercom] contact {{ id: {self.id} name: {self.name}, email: {self.email} ... }}"


class ContactList(Resource):
    """A page of contacts plus the cursor for the scroll API."""

    pages: Pages | None = None
    contacts: list[Contact] = Field(
        default_factory=list, validation_alias=AliasChoices("data", "contacts")
    )
    scroll_param: str | None = None
    total_count: int | None = None


@dataclass
class UserIdentifiers:
    """Ways to look a contact up: Intercom id, external user id or email."""

    id: str | None = None
    user_id: str | None = None
    email: str | None = None


@dataclass
class ContactListParams:
    page: PageParams = field(default_factory=PageParams)
    segment_id: str | None = None
    tag_id: str | None = None
    email: str | None = None

    def to_query(self) -> dict[str, str]:
        query = self.page.to_query()
        for key in ("segment_id", "tag_id", "email"):
            value = getattr(self, key)
            if value is not None:
                query[key] = query_value(value)
        return query
