################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""Code for accessing the IBM Cloud Resource Controller API.

API spec: https://cloud.ibm.com/apidocs/resource-controller/resource-controller
"""
import os
import typing as t
from urllib.parse import parse_qs, urljoin, urlparse

import requests
from requests import codes

from .._env import RESOURCE_CONTROLLER_ENDPOINT_ENV
from .._iam import IAMAuth, IAMAuthenticator
from . import _exceptions, _models

DEFAULT_BASE_URI = "https://resource-controller.cloud.ibm.com"

API_ACTIONS = {
    "list_resource_instances": "/v2/resource_instances",
}

T = t.TypeVar("T")


def _handle_common_errors(response: requests.Response):
    if response.status_code == codes.UNAUTHORIZED:
        raise _exceptions.InvalidTokenError()
    elif response.status_code == codes.FORBIDDEN:
        raise _exceptions.ForbiddenError()
    elif not response.ok:
        raise _exceptions.UnknownHTTPError(response)


def _start_token(next_url: t.Optional[str]) -> t.Optional[str]:
    """Extracts the ``start`` query parameter from the ``next_url`` of a page."""
    if not next_url:
        return None
    starts = parse_qs(urlparse(next_url).query).get("start")
    return starts[0] if starts else None


class Paginated(t.Generic[T]):
    """
    Represents a paginated response.

    The contents of the current page can be accessed via ``contents``.

    ``next_page_token`` can be used with the original method to return the next page.
    """

    def __init__(
        self,
        contents: t.List[T],
        next_page_token: t.Optional[str] = None,
    ):
        self._contents = contents
        self._next_token = next_page_token

    def __repr__(self):
        return f"Paginated(contents={self._contents}, next_token={self._next_token})"

    @property
    def contents(self) -> t.List[T]:
        """The contents property."""
        return self._contents

    @property
    def next_page_token(self) -> t.Optional[str]:
        """The next_token property."""
        return self._next_token


class ResourceControllerClient:
    """Client for interacting with the Resource Controller API via HTTP."""

    def __init__(
        self,
        session: requests.Session,
        base_uri: t.Optional[str] = None,
        timeout: t.Optional[float] = None,
    ):
        self._session = session
        self._base_uri = (
            base_uri or os.getenv(RESOURCE_CONTROLLER_ENDPOINT_ENV) or DEFAULT_BASE_URI
        )
        self._timeout = timeout

    @classmethod
    def from_authenticator(
        cls,
        authenticator: IAMAuthenticator,
        base_uri: t.Optional[str] = None,
        timeout: t.Optional[float] = None,
    ) -> "ResourceControllerClient":
        """
        Args:
            authenticator: IAM authenticator that provides bearer tokens.
            base_uri: Resource Controller URI. Defaults to the public endpoint.
            timeout: default timeout of every request, in seconds.
        """
        session = requests.Session()
        session.headers["Accept"] = "application/json"
        session.auth = IAMAuth(authenticator)
        return cls(session=session, base_uri=base_uri, timeout=timeout)

    # --- helpers ---

    def _get(
        self,
        endpoint: str,
        query_params: t.Optional[t.Mapping] = None,
        timeout: t.Optional[float] = None,
    ) -> requests.Response:
        """Helper method for GET requests"""
        response = self._session.get(
            urljoin(self._base_uri, endpoint),
            params=query_params,
            timeout=timeout if timeout is not None else self._timeout,
        )

        return response

    # --- queries ---

    def list_resource_instances(
        self,
        resource_id: str,
        resource_plan_id: str,
        *,
        name: t.Optional[str] = None,
        page_token: t.Optional[str] = None,
        timeout: t.Optional[float] = None,
    ) -> Paginated[_models.ResourceInstance]:
        """
        Lists one page of the service instances of a given resource plan.

        Raises:
            InvalidTokenError: see the exception's docstring
            ForbiddenError: see the exception's docstring
            UnknownHTTPError: see the exception's docstring
        """
        resp = self._get(
            API_ACTIONS["list_resource_instances"],
            query_params=_models.ListResourceInstancesRequest(
                resource_id=resource_id,
                resource_plan_id=resource_plan_id,
                name=name or None,
                start=page_token,
            ).model_dump(exclude_none=True),
            timeout=timeout,
        )

        _handle_common_errors(resp)

        parsed = _models.ResourceInstancesList.model_validate(resp.json())

        return Paginated(
            contents=parsed.resources,
            next_page_token=_start_token(parsed.next_url),
        )
