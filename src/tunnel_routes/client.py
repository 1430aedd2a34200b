"""Client for the account tunnel routing table ("teamnet routes") API."""

from types import TracebackType
from typing import Any, Literal, TypeVar

from pydantic import ValidationError

from .common.exceptions import DecodeError, MissingAccountIDError
from .common.logging import get_logger
from .config import ClientConfig
from .encoding import encode_query, escape_path_segment, with_query
from .http import HTTPExecutor, HTTPXExecutor
from .models import (
    Response,
    TunnelRoute,
    TunnelRouteDeleteResponse,
    TunnelRouteListResponse,
    TunnelRouteResponse,
    TunnelRoutesCreateParams,
    TunnelRoutesDeleteParams,
    TunnelRoutesForIPParams,
    TunnelRoutesListParams,
    TunnelRoutesUpdateParams,
)

logger = get_logger(__name__)

ACCOUNT_ROUTE_ROOT = "accounts"

EnvelopeT = TypeVar("EnvelopeT", bound=Response)


class TunnelRouteClient:
    """List, look up, create, update and delete tunnel routes.

    The client keeps no state between calls beyond its HTTP executor, so one
    instance can be shared across threads.

    Example:
        >>> with TunnelRouteClient(config=ClientConfig.from_env()) as client:
        ...     routes = client.list_tunnel_routes(
        ...         TunnelRoutesListParams(account_id="abc", is_deleted=False)
        ...     )
    """

    def __init__(
        self,
        executor: HTTPExecutor | None = None,
        config: ClientConfig | None = None,
    ):
        """Initialize the client.

        Args:
            executor: HTTP collaborator to send requests through
            config: Used to build an ``HTTPXExecutor`` when no executor is given

        Raises:
            ValueError: If neither an executor nor a config is provided
        """
        if executor is None:
            if config is None:
                raise ValueError("Either an executor or a config is required")
            executor = HTTPXExecutor(config)
            self._owns_executor = True
        else:
            self._owns_executor = False

        self.executor = executor

    @staticmethod
    def _require_account_id(account_id: str) -> None:
        if not account_id:
            raise MissingAccountIDError()

    @staticmethod
    def _routes_path(account_id: str) -> str:
        return f"/{ACCOUNT_ROUTE_ROOT}/{account_id}/teamnet/routes"

    def _network_path(self, account_id: str, network: str) -> str:
        return f"{self._routes_path(account_id)}/network/{escape_path_segment(network)}"

    def _request(
        self,
        method: str,
        path: str,
        envelope: type[EnvelopeT],
        body: dict[str, Any] | None = None,
    ) -> EnvelopeT:
        """Send a request and decode its envelope.

        Transport errors from the executor propagate unchanged.

        Raises:
            DecodeError: If the body is not a valid envelope of the given type
        """
        logger.debug("Sending tunnel route request", method=method, path=path)
        content = self.executor.execute(method, path, body)

        try:
            return envelope.model_validate_json(content)
        except ValidationError as e:
            logger.error(
                "Failed to decode tunnel route response",
                method=method,
                path=path,
                error_count=e.error_count(),
            )
            raise DecodeError(e) from e

    def list_tunnel_routes(self, params: TunnelRoutesListParams) -> list[TunnelRoute]:
        """List the routes in the account routing table.

        Only filters that are set are sent. Routes come back in server order.

        Raises:
            MissingAccountIDError: If ``params.account_id`` is empty
            TransportError: If the request fails
            DecodeError: If the response cannot be decoded
        """
        self._require_account_id(params.account_id)

        path = with_query(
            self._routes_path(params.account_id), encode_query(params.query_values())
        )
        response = self._request("GET", path, TunnelRouteListResponse)
        return list(response.result)

    def get_tunnel_route_for_ip(self, params: TunnelRoutesForIPParams) -> TunnelRoute:
        """Find the route whose network encompasses the given IP.

        Raises:
            MissingAccountIDError: If ``params.account_id`` is empty
            TransportError: If the request fails
            DecodeError: If the response cannot be decoded
        """
        self._require_account_id(params.account_id)

        ip = escape_path_segment(params.network)
        path = f"{self._routes_path(params.account_id)}/ip/{ip}"
        return self._request("GET", path, TunnelRouteResponse).result

    def create_tunnel_route(self, params: TunnelRoutesCreateParams) -> TunnelRoute:
        """Add a route for the given tunnel to the account routing table."""
        self._require_account_id(params.account_id)

        path = self._network_path(params.account_id, params.network)
        route = self._request("POST", path, TunnelRouteResponse, params.body()).result
        logger.info(
            "Tunnel route created", network=route.network, tunnel_id=route.tunnel_id
        )
        return route

    def update_tunnel_route(self, params: TunnelRoutesUpdateParams) -> TunnelRoute:
        """Replace an existing route in the account routing table."""
        self._require_account_id(params.account_id)

        path = self._network_path(params.account_id, params.network)
        route = self._request("PATCH", path, TunnelRouteResponse, params.body()).result
        logger.info(
            "Tunnel route updated", network=route.network, tunnel_id=route.tunnel_id
        )
        return route

    def delete_tunnel_route(self, params: TunnelRoutesDeleteParams) -> None:
        """Remove a route from the account routing table.

        The response envelope is still decoded so malformed replies surface as
        ``DecodeError``.
        """
        self._require_account_id(params.account_id)

        path = self._network_path(params.account_id, params.network)
        self._request("DELETE", path, TunnelRouteDeleteResponse)
        logger.info("Tunnel route deleted", network=params.network)

    def close(self) -> None:
        """Close the executor if this client created it."""
        if self._owns_executor and isinstance(self.executor, HTTPXExecutor):
            self.executor.close()

    def __enter__(self) -> "TunnelRouteClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False
