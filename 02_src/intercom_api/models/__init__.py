"""Data models for Intercom resources and request payloads."""

from .addressing import (
    Admin,
    AddressType,
    MessageAddress,
    MessagePerson,
    User,
    resolve_address,
)
from .contacts import (
    Addressable,
    AddressableList,
    Contact,
    ContactList,
    ContactListParams,
    ContactLocation,
    SocialProfile,
    SocialProfileList,
    UserIdentifiers,
)
from .conversations import (
    Conversation,
    ConversationContact,
    ConversationContactList,
    ConversationList,
    ConversationListParams,
    ConversationListState,
    ConversationMessage,
    ConversationPart,
    ConversationPartList,
    ConversationRating,
    ConversationStatistics,
    ConversationTag,
    ConversationTagList,
    ConversationTeammate,
    ConversationTeammateList,
    FirstContactReply,
    Reply,
    ReplyType,
    SLAApplied,
    Source,
    SourceAuthor,
)
from .paging import PageParams, Pages
from .segments import Segment, SegmentList

__all__ = [
    # Addressing
    "AddressType",
    "MessageAddress",
    "MessagePerson",
    "Admin",
    "User",
    "resolve_address",
    # Paging
    "PageParams",
    "Pages",
    # Contacts
    "Contact",
    "ContactList",
    "ContactListParams",
    "ContactLocation",
    "Addressable",
    "AddressableList",
    "SocialProfile",
    "SocialProfileList",
    "UserIdentifiers",
    # Conversations
    "Conversation",
    "ConversationContact",
    "ConversationContactList",
    "ConversationList",
    "ConversationListParams",
    "ConversationListState",
    "ConversationMessage",
    "ConversationPart",
    "ConversationPartList",
    "ConversationRating",
    "ConversationStatistics",
    "ConversationTag",
    "ConversationTagList",
    "ConversationTeammate",
    "ConversationTeammateList",
    "FirstContactReply",
    "Reply",
    "ReplyType",
    "SLAApplied",
    "Source",
    "SourceAuthor",
    # Segments
    "Segment",
    "SegmentList",
]
