################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""Exception types related to the IBM Cloud HTTP APIs."""
import requests

from ._models import DHCPServerID, PVMInstanceID


class DriverError(Exception):
    """Base class for the errors raised by the HTTP clients."""


class InvalidTokenError(DriverError):
    """
    Raised when the communication with IBM Cloud couldn't be made because of an
    invalid token.
    """  # noqa: D205, D212

    pass


class ForbiddenError(DriverError):
    """Raised when the user did not have permission to access a specific resource."""


class IAMError(DriverError):
    """Raised when IAM refuses to exchange the API key for an access token."""

    def __init__(self, response: requests.Response):
        self.response = response
        super().__init__(response.status_code, response.text)


class UnknownHTTPError(DriverError):
    """Raised when there's an error we don't handle otherwise."""

    def __init__(self, response: requests.Response):
        self.response = response
        super().__init__(response)

    def __str__(self):
        return (
            f"unexpected HTTP {self.response.status_code} "
            f"from {self.response.url}: {self.response.text}"
        )


class InstanceNotFound(DriverError):
    """Raised when a PowerVS instance cannot be found."""

    def __init__(self, instance_id: PVMInstanceID):
        self.instance_id = instance_id
        super().__init__(instance_id)


class DHCPServerNotFound(DriverError):
    """Raised when a DHCP server cannot be found."""

    def __init__(self, dhcp_server_id: DHCPServerID):
        self.dhcp_server_id = dhcp_server_id
        super().__init__(dhcp_server_id)
