"""Client bootstrap: wires the HTTP transport, repositories and services."""

import httpx

from .config import Settings
from .contact import ContactAPI, ContactService
from .conversation import ConversationAPI, ConversationService
from .http_client import HTTPClient
from .logging_config import get_logger
from .segment import SegmentAPI, SegmentService

logger = get_logger(__name__)


class Client:
    """
    Entry point for the Intercom REST API.

    Usage:
        with Client() as client:
            for segment in client.segments.list().segments:
                print(segment)

    Args:
        settings: Connection settings. Defaults to Settings.from_env().
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings or Settings.from_env()
        self._http = HTTPClient(self._settings, transport=transport)

        self.contacts = ContactService(ContactAPI(self._http))
        self.conversations = ConversationService(ConversationAPI(self._http))
        self.segments = SegmentService(SegmentAPI(self._http))
        logger.debug(
            "Intercom client initialized",
            extra={"context": {"base_url": self._settings.base_url}},
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    def close(self) -> None:
        """Release the HTTP connection pool."""
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
