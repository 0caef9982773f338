"""Conversation module."""

from .api import ConversationAPI
from .query import params_for_admin, params_for_all, params_for_user
from .reply import build_assignment, build_reply
from .service import ConversationService, IConversationRepository

__all__ = [
    "ConversationAPI",
    "ConversationService",
    "IConversationRepository",
    "build_assignment",
    "build_reply",
    "params_for_admin",
    "params_for_all",
    "params_for_user",
]
