"""Common utilities and shared functionality."""

from .exceptions import (
    APIRequestError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    MissingAccountIDError,
    TransportError,
    TunnelRoutesError,
)
from .logging import get_logger, setup_logging
from .utils import (
    mask_sensitive_data,
    sanitize_log_data,
)

__all__ = [
    # Exceptions
    "TunnelRoutesError",
    "MissingAccountIDError",
    "ConfigurationError",
    "TransportError",
    "APIRequestError",
    "AuthenticationError",
    "DecodeError",
    # Logging
    "get_logger",
    "setup_logging",
    # Utils
    "mask_sensitive_data",
    "sanitize_log_data",
]
