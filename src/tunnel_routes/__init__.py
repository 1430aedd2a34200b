"""Python SDK for managing tunnel network routes."""

from .client import TunnelRouteClient
from .common.exceptions import (
    APIRequestError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    MissingAccountIDError,
    TransportError,
    TunnelRoutesError,
)
from .common.logging import get_logger, setup_logging
from .config import ClientConfig
from .http import HTTPExecutor, HTTPXExecutor
from .models import (
    PaginationOptions,
    TunnelRoute,
    TunnelRoutesCreateParams,
    TunnelRoutesDeleteParams,
    TunnelRoutesForIPParams,
    TunnelRoutesListParams,
    TunnelRoutesUpdateParams,
)

__version__ = "0.1.0"


__all__ = [
    # Client
    "TunnelRouteClient",
    "ClientConfig",
    "HTTPExecutor",
    "HTTPXExecutor",
    # Models
    "TunnelRoute",
    "PaginationOptions",
    "TunnelRoutesListParams",
    "TunnelRoutesCreateParams",
    "TunnelRoutesUpdateParams",
    "TunnelRoutesForIPParams",
    "TunnelRoutesDeleteParams",
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
]
