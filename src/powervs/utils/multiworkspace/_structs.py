################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
import os
import typing as t
from dataclasses import dataclass, field

from .. import exceptions
from .._base import _config
from .._base._driver import _models
from .._base._env import API_KEY_ENV
from .._base._iam import IAMAuthenticator


@dataclass(frozen=True)
class Workspace:
    """A PowerVS workspace the resolver searches.

    Either ``name`` or ``id`` is mandatory. ``zone`` is always required.
    """

    name: str = ""
    "Display name. Resolved to an ID when the resolver is created."
    id: str = ""
    zone: str = ""

    def validate(self):
        """
        Raises:
            powervs.utils.exceptions.ValidationError: when the zone is missing, or
                when both the name and the ID are missing.
        """
        if not self.zone:
            raise exceptions.ValidationError(f"zone not set for workspace: {self.name}")
        if not self.name and not self.id:
            raise exceptions.ValidationError("both workspace name and id are not set")


@dataclass(frozen=True)
class InstanceDetails:
    instance: _models.PVMInstance
    workspace: Workspace
    "The workspace the instance was found in."


class Clients(t.Protocol):
    """Operations on a single PowerVS workspace.

    Implemented by ``PowerClient``.
    """

    def get_all(self, *, timeout: t.Optional[float] = None) -> _models.PVMInstances:
        ...

    def get(
        self, instance_id: _models.PVMInstanceID, *, timeout: t.Optional[float] = None
    ) -> _models.PVMInstance:
        ...

    def get_dhcp_servers(
        self, *, timeout: t.Optional[float] = None
    ) -> _models.ListDHCPServersResponse:
        ...

    def get_dhcp_server(
        self, dhcp_server_id: _models.DHCPServerID, *, timeout: t.Optional[float] = None
    ) -> _models.DHCPServerDetail:
        ...


@dataclass(frozen=True)
class WorkspaceClient:
    workspace: Workspace
    "Has the ``id`` set, even if only the name was configured."
    clients: Clients


@dataclass(frozen=True)
class Options:
    """Configures the multi-workspace client."""

    workspaces: t.Sequence[Workspace] = field(default_factory=tuple)
    "Workspaces in search order."
    authenticator: t.Optional[IAMAuthenticator] = None
    timeout: t.Optional[float] = None
    "Default timeout of every network call, in seconds. None waits forever."

    @classmethod
    def from_config(
        cls, config_name: _config.ConfigName, api_key: t.Optional[str] = None
    ) -> "Options":
        """Build options from a workspace set saved in the config file.

        Args:
            config_name: name of the saved workspace set.
            api_key: IBM Cloud API key. Read from ``IBMCLOUD_API_KEY`` if omitted.

        Raises:
            powervs.utils.exceptions.ConfigError: when there's no config file, or
                no API key.
            powervs.utils.exceptions.NotFoundError: when the config file doesn't
                have ``config_name``.
        """
        config = _config.read_config(config_name)

        resolved_api_key = api_key or os.getenv(API_KEY_ENV)
        if not resolved_api_key:
            raise exceptions.ConfigError(
                f"IBM Cloud API key not set. Pass it explicitly or set {API_KEY_ENV}."
            )

        return cls(
            workspaces=tuple(
                Workspace(name=w.name, id=w.id, zone=w.zone) for w in config.workspaces
            ),
            authenticator=IAMAuthenticator(resolved_api_key, timeout=config.timeout),
            timeout=config.timeout,
        )
