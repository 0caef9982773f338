"""Typed client for the Intercom REST API: contacts, conversations and segments."""

from .client import Client
from .config import Settings
from .contact import ContactService, IContactRepository
from .conversation import ConversationService, IConversationRepository
from .exceptions import (
    ConfigurationError,
    IntercomAPIError,
    IntercomError,
    IntercomTransportError,
    InvalidActorError,
)
from .models import (
    Admin,
    Contact,
    ContactList,
    Conversation,
    ConversationList,
    ConversationListParams,
    ConversationListState,
    MessageAddress,
    MessagePerson,
    PageParams,
    Reply,
    ReplyType,
    Segment,
    SegmentList,
    User,
)
from .segment import ISegmentRepository, SegmentService

__all__ = [
    # Client
    "Client",
    "Settings",
    # Services
    "ContactService",
    "IContactRepository",
    "ConversationService",
    "IConversationRepository",
    "SegmentService",
    "ISegmentRepository",
    # Models
    "Admin",
    "Contact",
    "ContactList",
    "Conversation",
    "ConversationList",
    "ConversationListParams",
    "ConversationListState",
    "MessageAddress",
    "MessagePerson",
    "PageParams",
    "Reply",
    "ReplyType",
    "Segment",
    "SegmentList",
    "User",
    # Errors
    "IntercomError",
    "IntercomAPIError",
    "IntercomTransportError",
    "InvalidActorError",
    "ConfigurationError",
]
