"""HTTP transport for the Intercom REST API using httpx."""

from typing import Any, Protocol

import httpx

from .config import Settings
from .exceptions import IntercomAPIError, IntercomTransportError
from .logging_config import get_logger

logger = get_logger(__name__)

JSON = dict[str, Any]


class IHTTPClient(Protocol):
    """JSON request/response exchange with the API."""

    def get(self, path: str, params: dict[str, str] | None = None) -> JSON:
        """GET a resource."""
        ...

    def post(self, path: str, body: JSON | None = None) -> JSON:
        """POST a JSON body."""
        ...

    def put(self, path: str, body: JSON | None = None) -> JSON:
        """PUT a JSON body."""
        ...

    def delete(self, path: str) -> JSON:
        """DELETE a resource."""
        ...


class HTTPClient:
    """Synchronous httpx client bound to one access token."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._client = httpx.Client(
            base_url=settings.base_url,
            headers={
                "Authorization": f"Bearer {settings.access_token}",
                "Accept": "application/json",
                "Intercom-Version": settings.api_version,
            },
            timeout=settings.timeout,
            transport=transport,
        )

    def get(self, path: str, params: dict[str, str] | None = None) -> JSON:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: JSON | None = None) -> JSON:
        return self._request("POST", path, body=body)

    def put(self, path: str, body: JSON | None = None) -> JSON:
        return self._request("PUT", path, body=body)

    def delete(self, path: str) -> JSON:
        return self._request("DELETE", path)

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: JSON | None = None,
    ) -> JSON:
        logger.debug(
            "Intercom request",
            extra={"context": {"method": method, "path": path, "params": params}},
        )
        try:
            response = self._client.request(
                method,
                path,
                params=params or None,
                json=body,
            )
        except httpx.HTTPError as e:
            raise IntercomTransportError(f"{method} {path} failed: {e}") from e

        if response.status_code >= 400:
            error = _decode_error(response)
            logger.warning(
                "Intercom API error",
                extra={
                    "context": {
                        "method": method,
                        "path": path,
                        "status": error.status_code,
                        "code": error.code,
                        "request_id": error.request_id,
                    }
                },
            )
            raise error

        if not response.content:
            return {}
        return response.json()


def _decode_error(response: httpx.Response) -> IntercomAPIError:
    """Turn an error.list body into an IntercomAPIError."""
    try:
        data = response.json()
    except ValueError:
        return IntercomAPIError(
            status_code=response.status_code,
            message=response.text or response.reason_phrase,
        )

    errors = data.get("errors") if isinstance(data, dict) else None
    first = errors[0] if isinstance(errors, list) and errors else {}
    if not isinstance(first, dict):
        first = {}
    return IntercomAPIError(
        status_code=response.status_code,
        message=first.get("message") or response.reason_phrase,
        code=first.get("code"),
        request_id=data.get("request_id") if isinstance(data, dict) else None,
    )
