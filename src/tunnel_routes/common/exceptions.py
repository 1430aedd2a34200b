"""Custom exceptions for the tunnel routes SDK."""

from typing import Any

ERR_MISSING_ACCOUNT_ID = "required missing account ID"
ERR_UNMARSHAL = "error unmarshalling the JSON response"


class TunnelRoutesError(Exception):
    """Base exception for all tunnel routes SDK errors."""
    pass


class MissingAccountIDError(TunnelRoutesError, ValueError):
    """Raised before any request when the account ID is empty."""

    def __init__(self, message: str = ERR_MISSING_ACCOUNT_ID):
        super().__init__(message)


class ConfigurationError(TunnelRoutesError):
    """Raised when client configuration is invalid."""
    pass


class TransportError(TunnelRoutesError):
    """Raised when the HTTP exchange with the API fails."""
    pass


class APIRequestError(TransportError):
    """Raised when the API answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []

    def error_codes(self) -> list[int]:
        """Return the provider error codes carried by the response."""
        return [e["code"] for e in self.errors if "code" in e]


class AuthenticationError(APIRequestError):
    """Raised when the API rejects the supplied credentials."""
    pass


class DecodeError(TunnelRoutesError):
    """Raised when a response body does not match the expected envelope."""

    def __init__(self, cause: Exception, message: str = ERR_UNMARSHAL):
        super().__init__(f"{message}: {cause}")
        self.cause = cause
