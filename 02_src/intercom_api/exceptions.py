"""Exceptions raised by the Intercom client."""


class IntercomError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(IntercomError):
    """Client settings are missing or invalid."""


class InvalidActorError(IntercomError, ValueError):
    """An actor cannot be used to author or receive a reply."""


class IntercomTransportError(IntercomError):
    """The request never produced an HTTP response (network error, timeout)."""


class IntercomAPIError(IntercomError):
    """The API answered with an error status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: str | None = None,
        request_id: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.request_id = request_id

    def __str__(self) -> str:
        code = self.code or "unknown"
        return f"[intercom] {self.status_code} {code}: {self.message}"
