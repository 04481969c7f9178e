################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""Saved sets of PowerVS workspaces.

Load one with ``MultiWorkspace.from_config(config_name)``.
"""

from ._base._config import (
    WorkspaceEntry,
    WorkspaceSetConfiguration,
    get_config_file_path,
    read_config,
    read_config_names,
    write_config,
)

__all__ = [
    "get_config_file_path",
    "read_config",
    "read_config_names",
    "WorkspaceEntry",
    "WorkspaceSetConfiguration",
    "write_config",
]
