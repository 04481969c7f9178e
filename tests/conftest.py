################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""Pytest's requirement to share fixtures across test files.
"""
import jwt
import pytest
import responses

from powervs.utils._base import _config

ACCOUNT_ID = "acc-123"


@pytest.fixture
def access_token() -> str:
    """A token shaped like the ones IAM hands out. The signature doesn't matter."""
    return jwt.encode(
        {"iam_id": "IBMid-000", "account": {"bss": ACCOUNT_ID}},
        "shouldn't matter",
        algorithm="HS256",
    )


@pytest.fixture
def mocked_responses():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def endpoint_mocker_base(mocked_responses):
    """
    Returns a helper for mocking requests.
    Does some boilerplate required for all request mocks
    """

    def _inner(method: str, url: str, *, default_status_code: int = 200):
        def _mocker(**responses_kwargs):
            try:
                status = responses_kwargs.pop("status")
            except KeyError:
                status = default_status_code
            mocked_responses.add(
                method,
                url,
                status=status,
                **responses_kwargs,
            )

        return _mocker

    return _inner


@pytest.fixture
def patch_config_location(tmp_path, monkeypatch):
    """
    Makes the functions in powervs.utils._base._config read/write file from a
    temporary directory.
    """
    config_file_path = tmp_path / "config.json"
    monkeypatch.setattr(_config, "get_config_file_path", lambda: config_file_path)
    return tmp_path
