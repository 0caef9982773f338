"""Conversation operations over an injected repository."""

from typing import Protocol

from ..logging_config import get_logger
from ..models import (
    Admin,
    Conversation,
    ConversationList,
    ConversationListParams,
    ConversationListState,
    MessagePerson,
    PageParams,
    Reply,
    ReplyType,
    User,
)
from .query import params_for_admin, params_for_all, params_for_user
from .reply import build_assignment, build_reply

logger = get_logger(__name__)


class IConversationRepository(Protocol):
    """Request/response exchange for conversation endpoints."""

    def find(self, id: str) -> Conversation:
        """Fetch a conversation by id."""
        ...

    def list(self, params: ConversationListParams) -> ConversationList:
        """List conversations matching the query."""
        ...

    def read(self, id: str) -> Conversation:
        """Mark a conversation as read."""
        ...

    def reply(self, id: str, reply: Reply) -> Conversation:
        """Add a reply (comment, note, open, close, assignment) to a conversation."""
        ...


class ConversationService:
    """Builds conversation queries and replies and hands them to the repository."""

    def __init__(self, repository: IConversationRepository):
        self._repository = repository

    def find(self, id: str) -> Conversation:
        """Find a conversation by id."""
        return self._repository.find(id)

    def list_all(self, page: PageParams | None = None) -> ConversationList:
        """List all conversations."""
        return self._repository.list(params_for_all(page))

    def list_by_admin(
        self,
        admin: Admin,
        state: ConversationListState = ConversationListState.SHOW_ALL,
        page: PageParams | None = None,
    ) -> ConversationList:
        """List conversations for an admin (SHOW_OPEN / SHOW_CLOSED apply)."""
        return self._repository.list(params_for_admin(admin, state, page))

    def list_by_user(
        self,
        user: User,
        state: ConversationListState = ConversationListState.SHOW_ALL,
        page: PageParams | None = None,
    ) -> ConversationList:
        """List conversations for a user (SHOW_UNREAD applies)."""
        return self._repository.list(params_for_user(user, state, page))

    def mark_read(self, id: str) -> Conversation:
        """Mark a conversation as read by the user."""
        return self._repository.read(id)

    def reply(
        self,
        id: str,
        author: MessagePerson,
        reply_type: ReplyType,
        body: str,
        attachment_urls: list[str] | None = None,
    ) -> Conversation:
        """Reply to a conversation as an admin, user or contact."""
        reply = build_reply(author, reply_type, body, attachment_urls)
        logger.debug(
            "Replying to conversation",
            extra={
                "context": {
                    "conversation_id": id,
                    "type": reply.type,
                    "message_type": reply.message_type,
                }
            },
        )
        return self._repository.reply(id, reply)

    def reply_with_attachment_urls(
        self,
        id: str,
        author: MessagePerson,
        reply_type: ReplyType,
        body: str,
        attachment_urls: list[str],
    ) -> Conversation:
        """Reply to a conversation with attachments referenced by URL."""
        return self.reply(id, author, reply_type, body, attachment_urls)

    def assign(self, id: str, assigner: Admin, assignee: Admin) -> Conversation:
        """Assign a conversation to an admin."""
        reply = build_assignment(assigner, assignee)
        logger.debug(
            "Assigning conversation",
            extra={"context": {"conversation_id": id, "assignee_id": reply.assignee_id}},
        )
        return self._repository.reply(id, reply)

    def open(self, id: str, opener: Admin) -> Conversation:
        """Open a conversation (no body)."""
        return self._repository.reply(id, build_reply(opener, ReplyType.OPEN))

    def close(self, id: str, closer: Admin) -> Conversation:
        """Close a conversation (no body)."""
        return self._repository.reply(id, build_reply(closer, ReplyType.CLOSE))
