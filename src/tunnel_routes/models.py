"""Route records, request parameters and response envelopes using Pydantic."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TunnelRoute(BaseModel):
    """One entry in an account's tunnel routing table."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    network: str = Field(default="", description="CIDR block routed by the tunnel")
    tunnel_id: str = Field(default="", description="Identifier of the owning tunnel")
    tunnel_name: str = Field(default="", description="Display name of the tunnel")
    comment: str = Field(default="", description="Free-text annotation")
    created_at: datetime | None = Field(default=None, description="Creation time")
    deleted_at: datetime | None = Field(
        default=None, description="Soft-deletion time, None while the route is live"
    )

    @field_validator("network", "tunnel_id", "tunnel_name", "comment", mode="before")
    @classmethod
    def validate_nullable_string(cls, v: Any) -> Any:
        """Decode a null string as empty."""
        return "" if v is None else v

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class PaginationOptions(BaseModel):
    """Page controls understood by list endpoints."""

    model_config = ConfigDict(extra="forbid")

    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1)


class TunnelRoutesListParams(BaseModel):
    """Filters for listing tunnel routes.

    Every filter defaults to None, meaning "not provided". ``is_deleted=False``
    is an explicit filter and is sent to the API.
    """

    model_config = ConfigDict(extra="forbid")

    account_id: str = ""
    tunnel_id: str | None = None
    comment: str | None = None
    is_deleted: bool | None = None
    network_subset: str | None = None
    network_superset: str | None = None
    existed_at: datetime | None = None
    pagination: PaginationOptions | None = None

    def query_values(self) -> dict[str, Any]:
        """Return the query parameters this filter contributes."""
        values: dict[str, Any] = {
            "tunnel_id": self.tunnel_id,
            "comment": self.comment,
            "is_deleted": self.is_deleted,
            "network_subset": self.network_subset,
            "network_superset": self.network_superset,
            "existed_at": self.existed_at,
        }
        if self.pagination is not None:
            values["page"] = self.pagination.page
            values["per_page"] = self.pagination.per_page
        return values


class TunnelRoutesCreateParams(BaseModel):
    """Parameters for adding a route. Account and network travel in the path."""

    model_config = ConfigDict(extra="forbid")

    account_id: str = Field(default="", exclude=True)
    network: str = Field(default="", exclude=True)
    tunnel_id: str
    comment: str | None = None

    def body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class TunnelRoutesUpdateParams(BaseModel):
    """Parameters for replacing a route. The network is repeated in the body."""

    model_config = ConfigDict(extra="forbid")

    account_id: str = Field(default="", exclude=True)
    network: str
    tunnel_id: str
    comment: str | None = None

    def body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class TunnelRoutesForIPParams(BaseModel):
    """Parameters for finding the route that covers an IP address."""

    model_config = ConfigDict(extra="forbid")

    account_id: str = ""
    network: str


class TunnelRoutesDeleteParams(BaseModel):
    """Parameters for removing a route."""

    model_config = ConfigDict(extra="forbid")

    account_id: str = ""
    network: str


class ResponseInfo(BaseModel):
    """A single error or message entry in a response envelope."""

    model_config = ConfigDict(extra="ignore")

    code: int = 0
    message: str = ""


class ResultInfo(BaseModel):
    """Paging metadata returned alongside list results."""

    model_config = ConfigDict(extra="ignore")

    page: int | None = None
    per_page: int | None = None
    count: int | None = None
    total_count: int | None = None


class Response(BaseModel):
    """Fields shared by every API response envelope."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    errors: list[ResponseInfo] = Field(default_factory=list)
    messages: list[ResponseInfo] = Field(default_factory=list)
    result_info: ResultInfo | None = None


class TunnelRouteResponse(Response):
    """Envelope carrying a single route."""

    result: TunnelRoute


class TunnelRouteListResponse(Response):
    """Envelope carrying a list of routes."""

    result: list[TunnelRoute]

    @field_validator("result", mode="before")
    @classmethod
    def validate_result(cls, v: Any) -> Any:
        """Treat a null result as an empty table."""
        return [] if v is None else v


class TunnelRouteDeleteResponse(Response):
    """Envelope returned by a delete. The removed route is informational."""

    result: TunnelRoute | None = None
