"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path
from unittest.mock import Mock

import httpx
import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def admin():
    """Admin authoring replies."""
    from intercom_api.models import Admin

    return Admin(id="100", name="Ada Admin", email="ada@example.com")


@pytest.fixture
def other_admin():
    """Second admin, used as assignee."""
    from intercom_api.models import Admin

    return Admin(id="200", name="Bob Admin", email="bob@example.com")


@pytest.fixture
def user():
    """User with Intercom id, external id and email."""
    from intercom_api.models import User

    return User(id="5f1a", user_id="ext-7", email="user@example.com", name="Uma")


@pytest.fixture
def contact():
    """Lead contact."""
    from intercom_api.models import Contact

    return Contact(id="c-1", email="lead@example.com", name="Lee", external_id="ext-9")


@pytest.fixture
def conversation_repository():
    """Mock conversation repository returning canned conversations."""
    from intercom_api.models import Conversation, ConversationList

    repo = Mock()
    repo.find.return_value = Conversation(id="42")
    repo.read.return_value = Conversation(id="42", read=True)
    repo.reply.return_value = Conversation(id="42")
    repo.list.return_value = ConversationList(conversations=[Conversation(id="42")])
    return repo


@pytest.fixture
def conversation_service(conversation_repository):
    """ConversationService over the mock repository."""
    from intercom_api.conversation import ConversationService

    return ConversationService(conversation_repository)


@pytest.fixture
def settings():
    """Settings pointing at a fake API host."""
    from intercom_api.config import Settings

    return Settings(access_token="test_token", base_url="https://api.test.local")


class RecordingTransport:
    """httpx.MockTransport wrapper that records requests and replays canned responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, dict]] = {}
        self.transport = httpx.MockTransport(self._handle)

    def add(self, method: str, path: str, status: int = 200, json_body=None, text=None):
        kwargs = {"json": json_body} if json_body is not None else {"text": text or ""}
        self.routes[(method, path)] = (status, kwargs)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404,
                json={
                    "type": "error.list",
                    "errors": [{"code": "not_found", "message": "no route"}],
                },
            )
        status, kwargs = route
        return httpx.Response(status, **kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    """Recording mock transport."""
    return RecordingTransport()


@pytest.fixture
def http_client(settings, recorder):
    """HTTPClient over the recording transport."""
    from intercom_api.http_client import HTTPClient

    client = HTTPClient(settings, transport=recorder.transport)
    yield client
    client.close()
