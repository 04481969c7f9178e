################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""This is the internal module for saving and loading workspace configurations.

A config file holds several named sets of PowerVS workspaces. The API key is never
stored in it; it's read from ``IBMCLOUD_API_KEY`` or passed explicitly.
"""
import os
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import filelock
import pydantic

from .. import exceptions
from ._env import CONFIG_PATH_ENV

# Why JSON?
#  Pydantic reads and writes it natively and the file is small.
CONFIG_FILE_NAME = "config.json"
LOCK_FILE_NAME = "config.json.lock"
CONFIG_FILE_CURRENT_VERSION = "0.0.1"

ConfigName = str


class WorkspaceEntry(pydantic.BaseModel):
    name: str = ""
    id: str = ""
    zone: str


class WorkspaceSetConfiguration(pydantic.BaseModel):
    config_name: ConfigName
    workspaces: List[WorkspaceEntry]
    timeout: Optional[float] = None


class WorkspaceConfigFile(pydantic.BaseModel):
    version: str
    configs: Dict[ConfigName, WorkspaceSetConfiguration]


EMPTY_CONFIG_FILE = WorkspaceConfigFile(
    version=CONFIG_FILE_CURRENT_VERSION,
    configs={},
)


def get_config_file_path() -> Path:
    """Get the absolute path to the config file.

    Returns:
        Path: Path to the configuration file. The default is `~/.powervs/config.json`
            but can be configured using the `POWERVS_CONFIG_PATH` environment variable.
    """
    config_file_path = os.getenv(CONFIG_PATH_ENV)
    if config_file_path is not None:
        _config_file_path = Path(config_file_path).resolve()
    else:
        _config_file_path = Path.home() / ".powervs" / CONFIG_FILE_NAME
    _ensure_directory(_config_file_path.parent)
    return _config_file_path


def _get_config_directory() -> Path:
    return get_config_file_path().parent


def _ensure_directory(path: Path):
    path.mkdir(parents=True, exist_ok=True)


def _open_config_file() -> WorkspaceConfigFile:
    config_file = get_config_file_path()
    if not config_file.exists():
        raise exceptions.ConfigError(f"Config file {config_file} not found.")
    data: str = config_file.read_text()
    try:
        return WorkspaceConfigFile.model_validate_json(data)
    except pydantic.ValidationError as e:
        raise exceptions.ConfigError(f"Config file {config_file} is invalid.") from e


def _save_config_file(config_file_contents: WorkspaceConfigFile):
    config_file: Path = get_config_file_path()
    config_file.write_text(data=config_file_contents.model_dump_json(indent=2))


def _resolve_config_file() -> Optional[WorkspaceConfigFile]:
    try:
        return _open_config_file()
    except exceptions.ConfigError:
        if get_config_file_path().exists():
            raise
        return None


def write_config(
    config_name: ConfigName,
    workspaces: Sequence[WorkspaceEntry],
    timeout: Optional[float] = None,
):
    """Write a workspace set to the file, replacing any entry with the same name.

    Args:
        config_name: The name under which to save the configuration.
        workspaces: The workspaces the resolver should search, in search order.
        timeout: Default timeout of the network calls, in seconds.
    """
    new_entry = WorkspaceSetConfiguration(
        config_name=config_name,
        workspaces=list(workspaces),
        timeout=timeout,
    )

    with filelock.FileLock(_get_config_directory() / LOCK_FILE_NAME):
        prev_config_file = _resolve_config_file()

        new_config_file = (prev_config_file or EMPTY_CONFIG_FILE).model_copy(deep=True)
        new_config_file.configs[config_name] = new_entry

        _save_config_file(new_config_file)


def read_config(config_name: ConfigName) -> WorkspaceSetConfiguration:
    """Reads a workspace configuration from the configuration file.

    Raises:
        powervs.utils.exceptions.ConfigError: when no config file exists, or it
            can't be parsed.
        powervs.utils.exceptions.NotFoundError: when no config matching
            `config_name` exists.
    """
    with filelock.FileLock(_get_config_directory() / LOCK_FILE_NAME):
        config_file = _resolve_config_file()

    if config_file is None:
        raise exceptions.ConfigError("Could not locate config file.")
    if config_name not in config_file.configs:
        raise exceptions.NotFoundError(
            f"No config '{config_name}' found in file",
            entity="config",
            key=config_name,
        )

    return config_file.configs[config_name]


def read_config_names() -> List[str]:
    """Reads the names of all configurations stored in the configuration file.

    Returns:
        list: a list of strings, each containing the name of a saved configuration.
            If the file does not exist, returns an empty list.
    """
    try:
        with filelock.FileLock(_get_config_directory() / LOCK_FILE_NAME, timeout=3):
            config_file = _open_config_file()
            return [name for name in config_file.configs]
    except exceptions.ConfigError:
        return []
