################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Finds PowerVS instances and their DHCP leases across several workspaces.
"""
import dataclasses
import typing as t

import pydantic
import requests

from .. import exceptions
from .._base._driver import _exceptions as _driver_exc
from .._base._driver import _models
from .._base._log import get_logger
from . import _session
from ._structs import InstanceDetails, Options, Workspace, WorkspaceClient

# Failures of a single workspace. Anything else is a bug and propagates.
_TRANSPORT_ERRORS = (
    _driver_exc.DriverError,
    requests.RequestException,
    pydantic.ValidationError,
)

_logger = get_logger(__name__)


class MultiWorkspace:
    """Searches a fixed, ordered set of PowerVS workspaces.

    Build it with ``MultiWorkspace.from_options()``. The set of workspaces can't be
    changed afterwards, so one object can be shared between threads.
    """

    def __init__(
        self,
        workspace_clients: t.Sequence[WorkspaceClient],
        timeout: t.Optional[float] = None,
    ):
        self._workspace_clients: t.Tuple[WorkspaceClient, ...] = tuple(
            workspace_clients
        )
        self._timeout = timeout

    def __repr__(self):
        return f"MultiWorkspace(workspaces={list(self.workspaces)})"

    @property
    def workspaces(self) -> t.Sequence[Workspace]:
        """Configured workspaces, in search order, with their IDs resolved."""
        return [client.workspace for client in self._workspace_clients]

    @classmethod
    def from_options(cls, options: Options) -> "MultiWorkspace":
        """Create a multi-workspace client.

        Resolves the IDs of the workspaces configured by name and opens a session
        for each workspace. Either every workspace client is created or none is.

        Raises:
            powervs.utils.exceptions.ConfigError: when the authenticator or the
                workspaces are missing.
            powervs.utils.exceptions.ValidationError: when a workspace is malformed.
            powervs.utils.exceptions.NotFoundError: when no workspace has the
                configured name in the configured zone.
            powervs.utils.exceptions.AmbiguousError: when several workspaces have
                the configured name in the configured zone.
            powervs.utils.exceptions.ClientCreationError: when IBM Cloud can't be
                reached or refuses the credentials.
        """
        if options.authenticator is None:
            raise exceptions.ConfigError("IBM Cloud authenticator not set")

        if len(options.workspaces) == 0:
            raise exceptions.ConfigError("PowerVS workspace not set")

        for workspace in options.workspaces:
            workspace.validate()

        try:
            clients = _construct_workspace_clients(options)
        except _TRANSPORT_ERRORS as e:
            raise exceptions.ClientCreationError(
                f"failed to create workspace client: {e}"
            ) from e

        return cls(workspace_clients=clients, timeout=options.timeout)

    @classmethod
    def from_config(
        cls, config_name: str, api_key: t.Optional[str] = None
    ) -> "MultiWorkspace":
        """Shorthand for ``from_options(Options.from_config(...))``."""
        return cls.from_options(Options.from_config(config_name, api_key=api_key))

    def _resolve_timeout(self, timeout: t.Optional[float]) -> t.Optional[float]:
        return timeout if timeout is not None else self._timeout

    def get_instance_details(
        self, instance_name: str, *, timeout: t.Optional[float] = None
    ) -> InstanceDetails:
        """Find the instance called ``instance_name`` in the configured workspaces.

        Workspaces are searched one after another, in the configured order. The first
        workspace with a matching instance wins; later workspaces aren't checked for
        duplicates. A workspace that can't be searched doesn't stop the search.

        Args:
            instance_name: exact, case-sensitive server name of the instance.
            timeout: timeout of each network call, in seconds. Defaults to the
                resolver's timeout.

        Raises:
            powervs.utils.exceptions.NotFoundError: when every workspace was searched
                and none has the instance.
            powervs.utils.exceptions.AggregateError: when no workspace has the
                instance and at least one of them couldn't be searched.
        """
        _logger.info(
            "Searching instance in all workspaces, instanceName: %s", instance_name
        )
        timeout = self._resolve_timeout(timeout)

        # Workspaces are visited in configured order; the first match returns.
        errors: t.List[Exception] = []
        for client in self._workspace_clients:
            try:
                instance = _find_instance(client, instance_name, timeout)
            except exceptions.WorkspaceRequestError as e:
                # Deferred. The instance might still be found in a later workspace.
                errors.append(e)
                continue

            if instance is not None:
                return InstanceDetails(instance=instance, workspace=client.workspace)

        if errors:
            raise exceptions.AggregateError(
                f"failed to search instance {instance_name} in "
                f"{len(errors)} workspace(s)",
                errors=errors,
            )
        raise exceptions.NotFoundError(
            f"instance {instance_name} not found in any workspace",
            entity="instance",
            key=instance_name,
        )

    def get_instance_dhcp_ip(
        self,
        network_name: str,
        instance_mac: str,
        workspace: Workspace,
        *,
        timeout: t.Optional[float] = None,
    ) -> str:
        """Get the IP the DHCP server of ``network_name`` leased to ``instance_mac``.

        Args:
            network_name: name of the DHCP network.
            instance_mac: MAC address of the instance network interface.
            workspace: one of the configured workspaces. Matched by ID when it has
                one, by name otherwise.
            timeout: timeout of each network call, in seconds. Defaults to the
                resolver's timeout.

        Raises:
            powervs.utils.exceptions.ValidationError: when ``workspace`` is malformed.
            powervs.utils.exceptions.NotFoundError: when the workspace isn't
                configured, the network has no DHCP server, or nothing is leased to
                the MAC address.
            DriverError: when PowerVS rejects a request.
            requests.RequestException: when PowerVS can't be reached.
        """
        _logger.info(
            "Fetching DHCP IP for instance MAC: %s, network: %s, workspace: %s",
            instance_mac,
            network_name,
            workspace,
        )
        workspace.validate()
        timeout = self._resolve_timeout(timeout)

        client = self._find_workspace_client(workspace)

        dhcp_server_id = _get_dhcp_server_id(client, network_name, timeout)
        dhcp_server = client.clients.get_dhcp_server(dhcp_server_id, timeout=timeout)

        instance_ip = ""
        # Duplicate MACs aren't expected. If they happen, the last lease wins.
        for lease in dhcp_server.leases:
            if lease.instanceMacAddress == instance_mac:
                instance_ip = lease.instanceIP or ""

        if not instance_ip:
            raise exceptions.NotFoundError(
                f"failed to find instance IP for instance MAC: {instance_mac}",
                entity="IP",
                key=instance_mac,
            )

        return instance_ip

    def _find_workspace_client(self, workspace: Workspace) -> WorkspaceClient:
        for client in self._workspace_clients:
            if workspace.id:
                if workspace.id == client.workspace.id:
                    return client
            elif workspace.name == client.workspace.name:
                return client

        raise exceptions.NotFoundError(
            f"failed to find workspace client for workspace: "
            f"{_display_name(workspace)}",
            entity="workspace",
            key=workspace.id or workspace.name,
        )


def _display_name(workspace: Workspace) -> str:
    return workspace.name or workspace.id


def _construct_workspace_clients(options: Options) -> t.List[WorkspaceClient]:
    assert options.authenticator is not None
    resource_client = _session.new_resource_client(
        options.authenticator, timeout=options.timeout
    )

    workspace_clients = []
    for workspace in options.workspaces:
        if workspace.name:
            workspace = dataclasses.replace(
                workspace, id=_resolve_workspace_id(resource_client, workspace, options)
            )

        session = _session.new_power_session(
            workspace.zone, options.authenticator, timeout=options.timeout
        )
        workspace_clients.append(
            WorkspaceClient(
                workspace=workspace,
                clients=_session.new_clients(session, workspace.id),
            )
        )

    return workspace_clients


def _resolve_workspace_id(
    resource_client, workspace: Workspace, options: Options
) -> str:
    candidates = _session.find_workspaces(
        resource_client, workspace.name, workspace.zone, timeout=options.timeout
    )

    if len(candidates) > 1:
        raise exceptions.AmbiguousError(
            f"there exist more than one workspace with same name {workspace.name} "
            f"in zone {workspace.zone}, try setting workspace id"
        )
    if len(candidates) == 0 or not candidates[0].guid:
        raise exceptions.NotFoundError(
            f"failed to get workspace ID for workspace: {workspace.name}",
            entity="workspace",
            key=workspace.name,
        )

    return candidates[0].guid


def _find_instance(
    client: WorkspaceClient, instance_name: str, timeout: t.Optional[float]
) -> t.Optional[_models.PVMInstance]:
    """
    Raises:
        powervs.utils.exceptions.WorkspaceRequestError: when the workspace can't be
            searched. The underlying error is chained.
    """
    _logger.debug(
        "Searching instance in workspace: %s", _display_name(client.workspace)
    )
    try:
        instances = client.clients.get_all(timeout=timeout)

        for pvm_instance in instances.pvmInstances:
            if pvm_instance is not None and pvm_instance.serverName == instance_name:
                _logger.info(
                    "Found instance in workspace: %s", _display_name(client.workspace)
                )
                return client.clients.get(pvm_instance.pvmInstanceID, timeout=timeout)
    except _TRANSPORT_ERRORS as e:
        raise exceptions.WorkspaceRequestError(
            f"failed to search instance in workspace "
            f"{_display_name(client.workspace)}: {e}",
            workspace=client.workspace,
        ) from e

    return None


def _get_dhcp_server_id(
    client: WorkspaceClient, network_name: str, timeout: t.Optional[float]
) -> _models.DHCPServerID:
    """Returns the ID of the DHCP server serving the network called ``network_name``.

    Raises:
        powervs.utils.exceptions.NotFoundError: when no DHCP server serves the network.
    """
    for server in client.clients.get_dhcp_servers(timeout=timeout):
        if server.network is not None and server.network.name == network_name:
            return server.id

    raise exceptions.NotFoundError(
        f"not able to get DHCP server ID for network {network_name}",
        entity="DHCP server",
        key=network_name,
    )
