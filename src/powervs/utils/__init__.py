################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""Utilities for IBM Power Virtual Server (PowerVS).

* multiworkspace finds instances and their DHCP leases across workspaces.
* regions maps PowerVS regions and zones to VPC and COS regions.
* config saves named sets of workspaces.
"""

from . import config, exceptions, regions
from ._base._iam import IAMAuthenticator
from .multiworkspace import InstanceDetails, MultiWorkspace, Options, Workspace

__all__ = [
    "config",
    "exceptions",
    "IAMAuthenticator",
    "InstanceDetails",
    "MultiWorkspace",
    "Options",
    "regions",
    "Workspace",
]
