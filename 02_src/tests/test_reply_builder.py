"""Tests for reply construction."""

import pytest

from intercom_api.conversation import build_assignment, build_reply
from intercom_api.exceptions import InvalidActorError
from intercom_api.models import Admin, ReplyType, User

USER_FIELDS = ("intercom_user_id", "user_id", "email")
ADMIN_FIELDS = ("admin_id", "assignee_id")
REPLY_TYPES = [ReplyType.COMMENT, ReplyType.NOTE, ReplyType.OPEN, ReplyType.CLOSE]


class TestAdminReplies:
    """Tests for replies authored by admins."""

    @pytest.mark.parametrize("reply_type", REPLY_TYPES)
    def test_admin_reply_sets_only_admin_id(self, admin, reply_type):
        """Admin replies carry admin_id and no user identity, for any reply type."""
        reply = build_reply(admin, reply_type, "hi")
        assert reply.type == "admin"
        assert reply.message_type == reply_type.value
        assert reply.admin_id == "100"
        for key in USER_FIELDS:
            assert getattr(reply, key) is None

    def test_admin_comment_json(self, admin):
        """An admin comment serializes to the expected body."""
        reply = build_reply(admin, ReplyType.COMMENT, "hello")
        assert reply.to_json() == {
            "type": "admin",
            "message_type": "comment",
            "body": "hello",
            "admin_id": "100",
        }


class TestUserReplies:
    """Tests for replies authored by users and contacts."""

    @pytest.mark.parametrize("reply_type", REPLY_TYPES)
    def test_user_reply_sets_only_user_identity(self, user, reply_type):
        """User replies carry intercom_user_id/user_id/email and no admin_id."""
        reply = build_reply(user, reply_type, "hi")
        assert reply.type == "user"
        assert reply.intercom_user_id == "5f1a"
        assert reply.user_id == "ext-7"
        assert reply.email == "user@example.com"
        for key in ADMIN_FIELDS:
            assert getattr(reply, key) is None

    def test_contact_reply(self, contact):
        """Contacts reply through the user branch with their address type."""
        reply = build_reply(contact, ReplyType.COMMENT, "question")
        assert reply.type == "contact"
        assert reply.intercom_user_id == "c-1"
        assert reply.email == "lead@example.com"
        assert reply.user_id is None
        assert reply.admin_id is None

    @pytest.mark.parametrize("author_fixture", ["admin", "user", "contact"])
    def test_json_never_mixes_identities(self, request, author_fixture):
        """Serialized replies never carry admin and user identity together."""
        author = request.getfixturevalue(author_fixture)
        data = build_reply(author, ReplyType.NOTE, "note").to_json()
        has_admin = any(key in data for key in ADMIN_FIELDS)
        has_user = any(key in data for key in USER_FIELDS)
        assert has_admin != has_user


class TestAttachments:
    """Tests for attachment URL handling."""

    def test_attachments_copied_in_order(self, user):
        """Attachment URLs are kept verbatim and in order."""
        urls = ["https://x/1.png", "https://x/2.png"]
        reply = build_reply(user, ReplyType.COMMENT, "see", urls)
        assert reply.attachment_urls == urls
        assert reply.attachment_urls is not urls
        assert reply.to_json()["attachment_urls"] == urls

    @pytest.mark.parametrize("urls", [None, []])
    def test_empty_attachments_omitted(self, admin, urls):
        """No attachment_urls key when there are no attachments."""
        data = build_reply(admin, ReplyType.COMMENT, "x", urls).to_json()
        assert "attachment_urls" not in data


class TestReplyValidation:
    """Tests for rejected inputs."""

    def test_author_without_id_rejected(self):
        """Authors resolving to an address without id are rejected."""
        with pytest.raises(InvalidActorError):
            build_reply(Admin(name="nobody"), ReplyType.COMMENT, "hi")

    def test_invalid_actor_is_value_error(self):
        """InvalidActorError is also a ValueError."""
        with pytest.raises(ValueError):
            build_reply(User(email="x@example.com"), ReplyType.COMMENT, "hi")

    def test_assign_type_rejected(self, admin):
        """ASSIGN goes through build_assignment only."""
        with pytest.raises(ValueError, match="build_assignment"):
            build_reply(admin, ReplyType.ASSIGN, "")


class TestAssignment:
    """Tests for build_assignment()."""

    def test_assignment_fields(self, admin, other_admin):
        """Assignments carry assigner as admin_id and assignee as assignee_id."""
        reply = build_assignment(admin, other_admin)
        assert reply.type == "admin"
        assert reply.message_type == "assignment"
        assert reply.admin_id == "100"
        assert reply.assignee_id == "200"
        assert reply.body == ""
        assert reply.attachment_urls == []

    def test_assignment_json(self, admin, other_admin):
        """Assignment JSON has no body and no attachments."""
        assert build_assignment(admin, other_admin).to_json() == {
            "type": "admin",
            "message_type": "assignment",
            "admin_id": "100",
            "assignee_id": "200",
        }

    def test_non_admin_assignee_rejected(self, admin, user):
        """Only admins can be assigned."""
        with pytest.raises(InvalidActorError, match="assignee"):
            build_assignment(admin, user)

    def test_assigner_without_id_rejected(self, other_admin):
        """The assigner needs an id."""
        with pytest.raises(InvalidActorError, match="assigner"):
            build_assignment(Admin(), other_admin)
