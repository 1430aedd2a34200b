"""Tests for route and envelope models."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from tunnel_routes.models import (
    PaginationOptions,
    TunnelRoute,
    TunnelRouteDeleteResponse,
    TunnelRouteListResponse,
    TunnelRouteResponse,
    TunnelRoutesCreateParams,
    TunnelRoutesListParams,
    TunnelRoutesUpdateParams,
)


class TestTunnelRoute:
    """Test the route record."""

    def test_decode_full_payload(self, route_payload):
        """Every field of a full payload should survive decoding"""
        payload = dict(route_payload, deleted_at="2021-01-26T10:00:00Z")

        route = TunnelRoute.model_validate(payload)

        assert route.network == "10.0.0.0/8"
        assert route.tunnel_id == "f70ff985-a4ef-4643-bbbc-4a0ed4fc8415"
        assert route.tunnel_name == "blog"
        assert route.comment == "office network"
        assert route.created_at == datetime(
            2021, 1, 25, 18, 22, 34, 317854, tzinfo=timezone.utc
        )
        assert route.deleted_at == datetime(2021, 1, 26, 10, tzinfo=timezone.utc)
        assert route.is_deleted is True

    def test_null_deleted_at_means_live(self, route_payload):
        """A null deleted_at should map to a route that is not deleted"""
        route = TunnelRoute.model_validate(route_payload)

        assert route.deleted_at is None
        assert route.is_deleted is False

    def test_missing_fields_default(self):
        """Missing keys should decode to empty strings and None timestamps"""
        route = TunnelRoute.model_validate({"network": "10.0.0.0/8"})

        assert route.tunnel_id == ""
        assert route.tunnel_name == ""
        assert route.comment == ""
        assert route.created_at is None

    def test_null_strings_decode_empty(self, route_payload):
        """Null string fields should decode as empty strings"""
        payload = dict(
            route_payload, comment=None, tunnel_name=None, tunnel_id=None, network=None
        )

        route = TunnelRoute.model_validate(payload)

        assert route.comment == ""
        assert route.tunnel_name == ""
        assert route.tunnel_id == ""
        assert route.network == ""
        assert route.created_at is not None

    def test_route_is_immutable(self, route_payload):
        """Routes should be frozen"""
        route = TunnelRoute.model_validate(route_payload)

        with pytest.raises(ValidationError):
            route.comment = "changed"

    def test_unknown_keys_ignored(self, route_payload):
        """Extra keys from the API should not break decoding"""
        route = TunnelRoute.model_validate(dict(route_payload, virtual_network_id="v1"))

        assert route.network == "10.0.0.0/8"


class TestEnvelopes:
    """Test response envelopes."""

    def test_single_route_envelope(self, route_payload):
        """Envelope metadata and result should both decode"""
        response = TunnelRouteResponse.model_validate(
            {
                "success": True,
                "errors": [],
                "messages": [{"code": 1000, "message": "ok"}],
                "result": route_payload,
            }
        )

        assert response.success is True
        assert response.messages[0].code == 1000
        assert response.result.tunnel_name == "blog"

    def test_list_envelope_with_result_info(self, route_payload):
        """List envelopes should carry paging metadata"""
        response = TunnelRouteListResponse.model_validate(
            {
                "success": True,
                "result": [route_payload],
                "result_info": {"page": 1, "per_page": 20, "count": 1, "total_count": 1},
            }
        )

        assert len(response.result) == 1
        assert response.result_info.total_count == 1

    def test_single_route_envelope_requires_result(self):
        """A single-route envelope without a result should not validate"""
        with pytest.raises(ValidationError):
            TunnelRouteResponse.model_validate({"success": True})

    def test_delete_envelope_allows_null_result(self):
        """Delete envelopes should tolerate a null result"""
        response = TunnelRouteDeleteResponse.model_validate(
            {"success": True, "result": None}
        )

        assert response.result is None


class TestParams:
    """Test request parameter models."""

    def test_list_params_defaults_are_unset(self):
        """All list filters should start unset"""
        values = TunnelRoutesListParams(account_id="acc").query_values()

        assert set(values.values()) == {None}

    def test_list_params_keep_explicit_false(self):
        """is_deleted=False should be kept as an explicit filter"""
        values = TunnelRoutesListParams(account_id="acc", is_deleted=False).query_values()

        assert values["is_deleted"] is False

    def test_list_params_pagination(self):
        """Pagination should contribute page keys"""
        params = TunnelRoutesListParams(
            account_id="acc", pagination=PaginationOptions(page=3)
        )

        values = params.query_values()
        assert values["page"] == 3
        assert values["per_page"] is None

    def test_pagination_validation(self):
        """Page numbers should be positive"""
        with pytest.raises(ValidationError):
            PaginationOptions(page=0)

    def test_list_params_reject_unknown_filters(self):
        """Unknown filters should be rejected"""
        with pytest.raises(ValidationError):
            TunnelRoutesListParams(account_id="acc", colour="blue")

    def test_create_body_excludes_path_fields(self):
        """Account and network travel in the path, not the body"""
        params = TunnelRoutesCreateParams(
            account_id="acc", network="10.0.0.0/8", tunnel_id="t1", comment="c"
        )

        assert params.body() == {"tunnel_id": "t1", "comment": "c"}

    def test_update_body_includes_network(self):
        """Update repeats the network in the body"""
        params = TunnelRoutesUpdateParams(
            account_id="acc", network="10.0.0.0/8", tunnel_id="t1"
        )

        assert params.body() == {"network": "10.0.0.0/8", "tunnel_id": "t1"}

    def test_existed_at_keeps_timezone(self):
        """existed_at should keep the caller's offset"""
        moment = datetime(2023, 1, 1, 9, tzinfo=timezone(timedelta(hours=9)))

        params = TunnelRoutesListParams(account_id="acc", existed_at=moment)

        assert params.existed_at.utcoffset() == timedelta(hours=9)
