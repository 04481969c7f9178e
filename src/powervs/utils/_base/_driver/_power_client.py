################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""Code for accessing the PowerVS (Power Cloud) API of a single workspace.

API spec: https://cloud.ibm.com/apidocs/power-cloud
"""
import typing as t
from dataclasses import dataclass
from urllib.parse import urljoin

import pydantic
import requests
from requests import codes

from . import _exceptions, _models

POWER_URI_TEMPLATE = "https://{region}.power-iaas.cloud.ibm.com"

CRN_TEMPLATE = (
    "crn:v1:bluemix:public:power-iaas:{zone}:a/{account_id}:{workspace_id}::"
)


class UriProvider:
    API_ACTIONS = {
        # Instances
        "list_instances": "/pcloud/v1/cloud-instances/{}/pvm-instances",
        "get_instance": "/pcloud/v1/cloud-instances/{}/pvm-instances/{}",
        # DHCP
        "list_dhcp_servers": "/pcloud/v1/cloud-instances/{}/services/dhcp",
        "get_dhcp_server": "/pcloud/v1/cloud-instances/{}/services/dhcp/{}",
    }

    def __init__(self, base_uri: str):
        self._base_uri = base_uri

    def uri_for(
        self, action_id: str, parameters: t.Optional[t.Tuple[str, ...]] = None
    ) -> str:
        endpoint = UriProvider.API_ACTIONS[action_id]
        if parameters:
            endpoint = endpoint.format(*parameters)
        return urljoin(self._base_uri, endpoint)


@dataclass(frozen=True)
class PowerSession:
    """Authenticated connection to the PowerVS API of one zone."""

    http: requests.Session
    base_uri: str
    zone: str
    account_id: str
    timeout: t.Optional[float] = None


def _handle_common_errors(response: requests.Response):
    if response.status_code == codes.UNAUTHORIZED:
        raise _exceptions.InvalidTokenError()
    elif response.status_code == codes.FORBIDDEN:
        raise _exceptions.ForbiddenError()
    elif not response.ok:
        raise _exceptions.UnknownHTTPError(response)


class PowerClient:
    """
    Client for interacting with the instances and DHCP servers of one PowerVS
    workspace via HTTP.
    """  # noqa: D205, D212

    def __init__(self, session: PowerSession, workspace_id: _models.WorkspaceID):
        self._session = session
        self._workspace_id = workspace_id
        self._uri_provider = UriProvider(session.base_uri)
        self._crn = CRN_TEMPLATE.format(
            zone=session.zone,
            account_id=session.account_id,
            workspace_id=workspace_id,
        )

    def __repr__(self):
        return f"PowerClient(workspace_id={self._workspace_id!r})"

    # --- helpers ---

    def _get(self, uri: str, timeout: t.Optional[float] = None) -> requests.Response:
        """Helper method for GET requests"""
        response = self._session.http.get(
            uri,
            headers={"CRN": self._crn},
            timeout=timeout if timeout is not None else self._session.timeout,
        )

        return response

    # --- instances ---

    def get_all(self, *, timeout: t.Optional[float] = None) -> _models.PVMInstances:
        """
        Lists all the server instances (VMs) in the workspace.

        Raises:
            InvalidTokenError: see the exception's docstring
            ForbiddenError: see the exception's docstring
            UnknownHTTPError: see the exception's docstring
        """
        resp = self._get(
            self._uri_provider.uri_for(
                "list_instances", parameters=(self._workspace_id,)
            ),
            timeout=timeout,
        )

        _handle_common_errors(resp)

        return _models.PVMInstances.model_validate(resp.json())

    def get(
        self, instance_id: _models.PVMInstanceID, *, timeout: t.Optional[float] = None
    ) -> _models.PVMInstance:
        """
        Gets the details of the server instance (VM) with the given ID.

        Raises:
            InstanceNotFound: see the exception's docstring
            InvalidTokenError: see the exception's docstring
            ForbiddenError: see the exception's docstring
            UnknownHTTPError: see the exception's docstring
        """
        resp = self._get(
            self._uri_provider.uri_for(
                "get_instance", parameters=(self._workspace_id, instance_id)
            ),
            timeout=timeout,
        )

        if resp.status_code == codes.NOT_FOUND:
            raise _exceptions.InstanceNotFound(instance_id)

        _handle_common_errors(resp)

        return _models.PVMInstance.model_validate(resp.json())

    # --- DHCP ---

    def get_dhcp_servers(
        self, *, timeout: t.Optional[float] = None
    ) -> _models.ListDHCPServersResponse:
        """
        Lists all the DHCP servers of the workspace.

        Raises:
            InvalidTokenError: see the exception's docstring
            ForbiddenError: see the exception's docstring
            UnknownHTTPError: see the exception's docstring
        """
        resp = self._get(
            self._uri_provider.uri_for(
                "list_dhcp_servers", parameters=(self._workspace_id,)
            ),
            timeout=timeout,
        )

        _handle_common_errors(resp)

        return pydantic.TypeAdapter(_models.ListDHCPServersResponse).validate_python(
            resp.json()
        )

    def get_dhcp_server(
        self, dhcp_server_id: _models.DHCPServerID, *, timeout: t.Optional[float] = None
    ) -> _models.DHCPServerDetail:
        """
        Gets the details, including the leases, of the DHCP server with the given ID.

        Raises:
            DHCPServerNotFound: see the exception's docstring
            InvalidTokenError: see the exception's docstring
            ForbiddenError: see the exception's docstring
            UnknownHTTPError: see the exception's docstring
        """
        resp = self._get(
            self._uri_provider.uri_for(
                "get_dhcp_server", parameters=(self._workspace_id, dhcp_server_id)
            ),
            timeout=timeout,
        )

        if resp.status_code == codes.NOT_FOUND:
            raise _exceptions.DHCPServerNotFound(dhcp_server_id)

        _handle_common_errors(resp)

        return _models.DHCPServerDetail.model_validate(resp.json())
