"""Conversation resources, replies and list queries."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .addressing import Admin
from .base import Resource, StrID
from .paging import PageParams, Pages, query_value


class SourceAuthor(Resource):
    type: str | None = None
    id: StrID | None = None
    name: str | None = None
    email: str | None = None


class Source(Resource):
    """The message that opened the conversation."""

    type: str | None = None
    id: StrID | None = None
    delivered_as: str | None = None
    subject: str | None = None
    body: str | None = None
    author: SourceAuthor | None = None
    url: str | None = None


class ConversationContact(Resource):
    type: str | None = None
    id: StrID | None = None
    external_id: str | None = None


class ConversationContactList(Resource):
    type: str | None = None
    contacts: list[ConversationContact] | None = None


class ConversationTag(Resource):
    type: str | None = None
    id: StrID | None = None
    name: str | None = None


class ConversationTagList(Resource):
    type: str | None = None
    tags: list[ConversationTag] | None = None


class FirstContactReply(Resource):
    type: str | None = None
    url: str | None = None
    created_at: int | None = None


class SLAApplied(Resource):
    sla_name: str | None = None
    sla_status: str | None = None


class ConversationStatistics(Resource):
    time_to_assignment: int | None = None
    time_to_admin_reply: int | None = None
    time_to_first_close: int | None = None
    time_to_last_close: int | None = None
    median_time_to_reply: int | None = None
    first_contact_reply_at: int | None = None
    first_assignment_at: int | None = None
    first_admin_reply_at: int | None = None
    first_close_at: int | None = None
    last_assignment_at: int | None = None
    last_assignment_admin_reply_at: int | None = None
    last_contact_reply_at: int | None = None
    last_admin_reply_at: int | None = None
    last_close_at: int | None = None
    last_closed_by: dict[str, Any] | None = None
    count_reopens: int | None = None
    count_assignments: int | None = None
    count_conversation_parts: int | None = None


class ConversationRating(Resource):
    rating: int | None = None
    remark: str | None = None
    created_at: int | None = None
    contact: dict[str, Any] | None = None
    teammate: dict[str, Any] | None = None


class ConversationTeammate(Resource):
    type: str | None = None
    id: StrID | None = None
    name: str | None = None
    email: str | None = None


class ConversationTeammateList(Resource):
    type: str | None = None
    teammates: list[ConversationTeammate] | None = None


class ConversationMessage(Resource):
    """The opening message rendered for presentation (legacy API versions)."""

    id: StrID | None = None
    subject: str | None = None
    body: str | None = None
    author: SourceAuthor | None = None
    url: str | None = None


class ConversationPart(Resource):
    """A reply, note or assignment within a conversation."""

    type: str | None = None
    id: StrID | None = None
    part_type: str | None = None
    body: str | None = None
    created_at: int | None = None
    updated_at: int | None = None
    notified_at: int | None = None
    assigned_to: Admin | None = None
    author: SourceAuthor | None = None


class ConversationPartList(Resource):
    type: str | None = None
    conversation_parts: list[ConversationPart] | None = None
    total_count: int | None = None


class Conversation(Resource):
    """A conversation between contacts and admins."""

    type: str | None = None
    id: StrID | None = None
    created_at: int | None = None
    updated_at: int | None = None
    waiting_since: int | None = None
    snoozed_until: int | None = None
    source: Source | None = None
    contacts: ConversationContactList | None = None
    first_contact_reply: FirstContactReply | None = None
    admin_assignee_id: int | None = None
    team_assignee_id: StrID | None = None
    open: bool | None = None
    read: bool | None = None
    state: str | None = None
    tags: ConversationTagList | None = None
    priority: str | None = None
    sla_applied: SLAApplied | None = None
    statistics: ConversationStatistics | None = None
    conversation_rating: ConversationRating | None = None
    teammates: ConversationTeammateList | None = None
    title: str | None = None
    custom_attributes: dict[str, Any] | None = None
    conversation_message: ConversationMessage | None = None
    conversation_parts: ConversationPartList | None = None


class ConversationList(Resource):
    pages: Pages | None = None
    conversations: list[Conversation] = []
    total_count: int | None = None


class ReplyType(str, Enum):
    """Kind of conversation part a reply creates."""

    COMMENT = "comment"
    NOTE = "note"
    OPEN = "open"
    CLOSE = "close"
    ASSIGN = "assignment"

    def __str__(self) -> str:
        return self.value


class ConversationListState(Enum):
    """
    Which conversations a list query returns.

    SHOW_OPEN and SHOW_CLOSED only apply to admin queries,
    SHOW_UNREAD only to user queries.
    """

    SHOW_ALL = "all"
    SHOW_OPEN = "open"
    SHOW_CLOSED = "closed"
    SHOW_UNREAD = "unread"


@dataclass
class Reply:
    """
    Payload for POST /conversations/{id}/reply.

    Carries either the admin identity (admin_id, assignee_id) or the user
    identity (intercom_user_id, user_id, email), never both.
    """

    type: str
    message_type: str
    body: str = ""
    attachment_urls: list[str] = field(default_factory=list)
    admin_id: str | None = None
    assignee_id: str | None = None
    intercom_user_id: str | None = None
    user_id: str | None = None
    email: str | None = None

    def to_json(self) -> dict[str, Any]:
        """JSON body with empty fields omitted."""
        data: dict[str, Any] = {"type": self.type, "message_type": self.message_type}
        if self.body:
            data["body"] = self.body
        for key in ("assignee_id", "admin_id", "intercom_user_id", "email", "user_id"):
            value = getattr(self, key)
            if value:
                data[key] = value
        if self.attachment_urls:
            data["attachment_urls"] = list(self.attachment_urls)
        return data


@dataclass
class ConversationListParams:
    """Query for GET /conversations; unset filters are left out of the URL."""

    page: PageParams = field(default_factory=PageParams)
    type: str | None = None
    admin_id: str | None = None
    intercom_user_id: str | None = None
    user_id: str | None = None
    email: str | None = None
    open: bool | None = None
    unread: bool | None = None
    display_as: str | None = None

    def to_query(self) -> dict[str, str]:
        query = self.page.to_query()
        for key in (
            "type",
            "admin_id",
            "intercom_user_id",
            "user_id",
            "email",
            "open",
            "unread",
            "display_as",
        ):
            value = getattr(self, key)
            if value is not None:
                query[key] = query_value(value)
        return query
