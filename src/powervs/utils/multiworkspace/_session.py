################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Builds authenticated PowerVS sessions and looks workspaces up by name.
"""
import os
import typing as t

import requests

from .. import regions
from .._base import _jwt
from .._base._driver._models import ResourceInstance
from .._base._driver._power_client import (
    POWER_URI_TEMPLATE,
    PowerClient,
    PowerSession,
)
from .._base._driver._resource_client import ResourceControllerClient
from .._base._env import POWER_ENDPOINT_ENV
from .._base._iam import IAMAuth, IAMAuthenticator

# PowerVS "power-iaas" service and plan IDs. Can be retrieved with:
#   ibmcloud catalog service power-iaas
POWERVS_RESOURCE_ID = "abd259f0-9990-11e8-acc8-b9f54a8f1661"
POWERVS_RESOURCE_PLAN_ID = "f165dd34-3a40-423b-9d95-e90a23f724dd"


def new_resource_client(
    authenticator: IAMAuthenticator, timeout: t.Optional[float] = None
) -> ResourceControllerClient:
    return ResourceControllerClient.from_authenticator(authenticator, timeout=timeout)


def find_workspaces(
    resource_client: ResourceControllerClient,
    name: str,
    zone: str,
    *,
    timeout: t.Optional[float] = None,
) -> t.List[ResourceInstance]:
    """Lists the PowerVS workspaces called ``name`` that live in ``zone``.

    Walks through every page of the Resource Controller listing.

    Raises:
        DriverError: when the Resource Controller rejects the request.
        requests.RequestException: when the Resource Controller can't be reached.
    """
    matches: t.List[ResourceInstance] = []
    page_token: t.Optional[str] = None

    while True:
        page = resource_client.list_resource_instances(
            POWERVS_RESOURCE_ID,
            POWERVS_RESOURCE_PLAN_ID,
            name=name,
            page_token=page_token,
            timeout=timeout,
        )
        matches.extend(
            resource for resource in page.contents if resource.region_id == zone
        )

        page_token = page.next_page_token
        if page_token is None:
            return matches


def new_power_session(
    zone: str,
    authenticator: IAMAuthenticator,
    timeout: t.Optional[float] = None,
) -> PowerSession:
    """Creates a PowerVS session scoped to ``zone``.

    The endpoint is derived from the zone's region unless
    ``IBMCLOUD_POWER_API_ENDPOINT`` overrides it.

    Raises:
        powervs.utils.exceptions.NotFoundError: when the zone isn't in a known region.
        IAMError: when IAM refuses the API key.
        InvalidTokenError: when the access token doesn't carry an account ID.
    """
    base_uri = os.getenv(POWER_ENDPOINT_ENV) or POWER_URI_TEMPLATE.format(
        region=regions.get_region(zone)
    )
    account_id = _jwt.get_account_id(authenticator.token())

    http = requests.Session()
    http.headers["Accept"] = "application/json"
    http.auth = IAMAuth(authenticator)

    return PowerSession(
        http=http,
        base_uri=base_uri,
        zone=zone,
        account_id=account_id,
        timeout=timeout,
    )


def new_clients(session: PowerSession, workspace_id: str) -> PowerClient:
    return PowerClient(session, workspace_id)
