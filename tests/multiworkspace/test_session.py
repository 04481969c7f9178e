################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Tests for powervs.utils.multiworkspace._session.
"""
from unittest.mock import create_autospec

import pytest

from powervs.utils import exceptions
from powervs.utils._base._driver import _exceptions as _driver_exc
from powervs.utils._base._driver import _models
from powervs.utils._base._driver._resource_client import (
    Paginated,
    ResourceControllerClient,
)
from powervs.utils._base._iam import IAMAuth, IAMAuthenticator
from powervs.utils.multiworkspace import _session

ACCOUNT_ID = "acc-123"


def _resource(guid: str, zone: str) -> _models.ResourceInstance:
    return _models.ResourceInstance(guid=guid, name="ws", region_id=zone)


class TestFindWorkspaces:
    @staticmethod
    def test_filters_by_zone_across_pages():
        # Given
        client = create_autospec(ResourceControllerClient, instance=True)
        client.list_resource_instances.side_effect = [
            Paginated(
                contents=[_resource("g-1", "dal10"), _resource("g-2", "dal12")],
                next_page_token="tok",
            ),
            Paginated(contents=[_resource("g-3", "dal10")]),
        ]

        # When
        found = _session.find_workspaces(client, "ws", "dal10", timeout=4)

        # Then
        assert [r.guid for r in found] == ["g-1", "g-3"]
        calls = client.list_resource_instances.call_args_list
        assert [c.kwargs["page_token"] for c in calls] == [None, "tok"]
        assert all(c.kwargs["name"] == "ws" for c in calls)
        assert all(c.kwargs["timeout"] == 4 for c in calls)
        assert calls[0].args == (
            _session.POWERVS_RESOURCE_ID,
            _session.POWERVS_RESOURCE_PLAN_ID,
        )

    @staticmethod
    def test_no_matches():
        client = create_autospec(ResourceControllerClient, instance=True)
        client.list_resource_instances.return_value = Paginated(contents=[])

        assert _session.find_workspaces(client, "ws", "dal10") == []


class TestNewPowerSession:
    @staticmethod
    @pytest.fixture
    def authenticator(access_token):
        authenticator = create_autospec(IAMAuthenticator, instance=True)
        authenticator.token.return_value = access_token
        return authenticator

    @staticmethod
    def test_derives_endpoint_from_zone(monkeypatch, authenticator):
        monkeypatch.delenv("IBMCLOUD_POWER_API_ENDPOINT", raising=False)

        session = _session.new_power_session("dal12", authenticator, timeout=3)

        assert session.base_uri == "https://dal.power-iaas.cloud.ibm.com"
        assert session.zone == "dal12"
        assert session.account_id == ACCOUNT_ID
        assert session.timeout == 3
        assert isinstance(session.http.auth, IAMAuth)

    @staticmethod
    def test_endpoint_override(monkeypatch, authenticator):
        monkeypatch.setenv("IBMCLOUD_POWER_API_ENDPOINT", "https://power.example.com")

        session = _session.new_power_session("blr01", authenticator)

        assert session.base_uri == "https://power.example.com"

    @staticmethod
    def test_unknown_zone(monkeypatch, authenticator):
        monkeypatch.delenv("IBMCLOUD_POWER_API_ENDPOINT", raising=False)

        with pytest.raises(exceptions.NotFoundError):
            _session.new_power_session("blr01", authenticator)

    @staticmethod
    def test_token_without_account(monkeypatch):
        monkeypatch.delenv("IBMCLOUD_POWER_API_ENDPOINT", raising=False)
        authenticator = create_autospec(IAMAuthenticator, instance=True)
        authenticator.token.return_value = "not-a-jwt"

        with pytest.raises(_driver_exc.InvalidTokenError):
            _session.new_power_session("dal12", authenticator)
