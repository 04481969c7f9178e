################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
IBM Cloud IAM authentication.

API spec: https://cloud.ibm.com/apidocs/iam-identity-token-api
"""
import os
import threading
import time
import typing as t
from urllib.parse import urljoin

import requests
from requests.auth import AuthBase

from ._driver import _exceptions, _models
from ._env import IAM_ENDPOINT_ENV
from ._log import get_logger

DEFAULT_IAM_URL = "https://iam.cloud.ibm.com"
APIKEY_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"

# Tokens are refreshed this many seconds before they expire.
REFRESH_WINDOW = 60

_logger = get_logger(__name__)


class IAMAuthenticator:
    """Exchanges an IBM Cloud API key for IAM access tokens.

    The token is kept until it's about to expire, then a new one is requested.
    """

    def __init__(
        self,
        api_key: str,
        url: t.Optional[str] = None,
        *,
        timeout: t.Optional[float] = None,
        session: t.Optional[requests.Session] = None,
    ):
        if not api_key:
            raise ValueError("api_key is required")

        self._api_key = api_key
        self._url = url or os.getenv(IAM_ENDPOINT_ENV) or DEFAULT_IAM_URL
        self._timeout = timeout
        self._session = session or requests.Session()
        self._token: t.Optional[str] = None
        self._expires_at: t.Optional[float] = None
        self._lock = threading.Lock()

    def __repr__(self):
        # The API key is a secret.
        return f"IAMAuthenticator(url={self._url!r})"

    def token(self) -> str:
        """Returns a valid access token, requesting a new one if needed.

        Raises:
            IAMError: when IAM refuses the API key.
            requests.RequestException: when IAM can't be reached.
        """
        # Sessions of every workspace share one authenticator.
        with self._lock:
            if self._token is None or self._expired():
                self._request_token()
            assert self._token is not None
            return self._token

    def _expired(self) -> bool:
        if self._expires_at is None:
            return False
        return time.time() >= self._expires_at - REFRESH_WINDOW

    def _request_token(self):
        _logger.debug("Requesting IAM access token from %s", self._url)
        resp = self._session.post(
            urljoin(self._url, "/identity/token"),
            data={"grant_type": APIKEY_GRANT_TYPE, "apikey": self._api_key},
            headers={"Accept": "application/json"},
            timeout=self._timeout,
        )
        if not resp.ok:
            raise _exceptions.IAMError(resp)

        parsed = _models.IAMTokenResponse.model_validate(resp.json())
        self._token = parsed.access_token
        if parsed.expiration is not None:
            self._expires_at = float(parsed.expiration)
        elif parsed.expires_in is not None:
            self._expires_at = time.time() + parsed.expires_in
        else:
            self._expires_at = None


class IAMAuth(AuthBase):
    """Stamps a fresh IAM bearer token on every request of a ``requests`` session."""

    def __init__(self, authenticator: IAMAuthenticator):
        self._authenticator = authenticator

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Authorization"] = f"Bearer {self._authenticator.token()}"
        return r
