"""HTTP collaborator used by the route client."""

import json
from types import TracebackType
from typing import Any, Literal, Protocol

import httpx

from .common.exceptions import APIRequestError, AuthenticationError, TransportError
from .common.logging import get_logger
from .common.utils import sanitize_log_data
from .config import ClientConfig

logger = get_logger(__name__)

AUTH_FAILURE_STATUSES = (401, 403)


class HTTPExecutor(Protocol):
    """Executes one API request and returns the raw response body.

    Implementations attach credentials and raise ``TransportError`` (or a
    subclass) for network failures and non-2xx responses.
    """

    def execute(self, method: str, path: str, body: Any | None = None) -> bytes: ...


def _envelope_errors(content: bytes) -> list[dict[str, Any]]:
    """Pull the ``errors`` list out of an error response, if it has one."""
    try:
        payload = json.loads(content)
    except ValueError:
        return []
    if not isinstance(payload, dict):
        return []
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return []
    return [e for e in errors if isinstance(e, dict)]


class HTTPXExecutor:
    """``HTTPExecutor`` backed by a shared ``httpx.Client``."""

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the executor.

        Args:
            config: Base URL, credentials and timeout
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        self.config = config
        headers = {"User-Agent": config.user_agent, **config.auth_headers()}
        self._client = httpx.Client(
            base_url=config.base_url,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
        )

        log_data = sanitize_log_data(
            {
                "base_url": config.base_url,
                "api_token": config.api_token,
                "api_key": config.api_key,
                "timeout": config.timeout,
            }
        )
        logger.debug("HTTPXExecutor initialized", **log_data)

    def execute(self, method: str, path: str, body: Any | None = None) -> bytes:
        """Send a request and return the response body.

        Raises:
            AuthenticationError: If the API rejects the credentials
            APIRequestError: If the API answers with another non-2xx status
            TransportError: If the request cannot be completed
        """
        try:
            if body is None:
                response = self._client.request(method, path)
            else:
                response = self._client.request(method, path, json=body)
        except httpx.HTTPError as e:
            logger.warning("HTTP request failed", method=method, path=path, error=str(e))
            raise TransportError(f"{method} {path} failed: {e}") from e

        if response.is_success:
            return response.content

        errors = _envelope_errors(response.content)
        message = f"{method} {path} returned HTTP {response.status_code}"
        if errors:
            message += ": " + "; ".join(
                f"{e.get('code', '')} {e.get('message', '')}".strip() for e in errors
            )

        logger.warning(
            "API request rejected",
            method=method,
            path=path,
            status_code=response.status_code,
            errors=errors,
        )

        if response.status_code in AUTH_FAILURE_STATUSES:
            raise AuthenticationError(message, response.status_code, errors)
        raise APIRequestError(message, response.status_code, errors)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HTTPXExecutor":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False
