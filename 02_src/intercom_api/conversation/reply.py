"""Construction of reply payloads from the author's message address."""

from ..exceptions import InvalidActorError
from ..models import MessagePerson, Reply, ReplyType, resolve_address


def build_reply(
    author: MessagePerson,
    reply_type: ReplyType,
    body: str = "",
    attachment_urls: list[str] | None = None,
) -> Reply:
    """
    Build a reply authored by an admin, user or contact.

    The resolved address type decides which identity fields are filled:
    admin_id for admins, intercom_user_id/user_id/email for everyone else.

    Raises:
        InvalidActorError: The author resolves to an address without an id.
        ValueError: reply_type is ASSIGN; assignments go through build_assignment.
    """
    if reply_type is ReplyType.ASSIGN:
        raise ValueError("Assignment replies are built with build_assignment()")

    address = resolve_address(author, "author")
    reply = Reply(
        type=address.type,
        message_type=reply_type.value,
        body=body,
        attachment_urls=list(attachment_urls or []),
    )
    if address.is_admin:
        reply.admin_id = address.id
    else:
        reply.intercom_user_id = address.id
        reply.user_id = address.user_id
        reply.email = address.email
    return reply


def build_assignment(assigner: MessagePerson, assignee: MessagePerson) -> Reply:
    """
    Build an assignment of a conversation from one admin to another.

    Assignments carry no body and no attachments.
    """
    assigner_address = resolve_address(assigner, "assigner")
    assignee_address = resolve_address(assignee, "assignee")
    for role, address in (("assigner", assigner_address), ("assignee", assignee_address)):
        if not address.is_admin:
            raise InvalidActorError(f"{role} must be an admin, got {address.type}")

    return Reply(
        type="admin",
        message_type=ReplyType.ASSIGN.value,
        admin_id=assigner_address.id,
        assignee_id=assignee_address.id,
    )
