################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Multi-workspace PowerVS client.

Looks PowerVS instances up by name across several workspaces, and resolves the IPs
the workspace DHCP servers leased to them.
"""

from ._multiworkspace import MultiWorkspace
from ._structs import Clients, InstanceDetails, Options, Workspace, WorkspaceClient

__all__ = [
    "Clients",
    "InstanceDetails",
    "MultiWorkspace",
    "Options",
    "Workspace",
    "WorkspaceClient",
]
