"""Conversation list query construction."""

from ..logging_config import get_logger
from ..models import (
    Admin,
    ConversationListParams,
    ConversationListState,
    PageParams,
    User,
    resolve_address,
)

logger = get_logger(__name__)


def params_for_all(page: PageParams | None = None) -> ConversationListParams:
    """Query for every conversation in the workspace."""
    return ConversationListParams(page=page or PageParams())


def params_for_admin(
    admin: Admin,
    state: ConversationListState,
    page: PageParams | None = None,
) -> ConversationListParams:
    """
    Query for conversations assigned to an admin, optionally open or closed only.

    Raises:
        InvalidActorError: The admin has no id.
    """
    params = ConversationListParams(
        page=page or PageParams(),
        type="admin",
        admin_id=resolve_address(admin, "admin").id,
    )
    if state is ConversationListState.SHOW_OPEN:
        params.open = True
    elif state is ConversationListState.SHOW_CLOSED:
        params.open = False
    elif state is ConversationListState.SHOW_UNREAD:
        logger.debug("SHOW_UNREAD ignored for admin conversation queries")
    return params


def params_for_user(
    user: User,
    state: ConversationListState,
    page: PageParams | None = None,
) -> ConversationListParams:
    """Query for conversations involving a user, optionally unread only."""
    address = user.message_address()
    params = ConversationListParams(
        page=page or PageParams(),
        type="user",
        intercom_user_id=address.id,
        user_id=address.user_id,
        email=address.email,
    )
    if state is ConversationListState.SHOW_UNREAD:
        params.unread = True
    elif state in (ConversationListState.SHOW_OPEN, ConversationListState.SHOW_CLOSED):
        logger.debug("%s ignored for user conversation queries", state.name)
    return params
