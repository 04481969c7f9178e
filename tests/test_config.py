################################################################################
# © Copyright 2026 Zapata Computing Inc.
################################################################################
"""
Tests for powervs.utils._base._config.
"""
import json
from pathlib import Path

import pytest

from powervs.utils import exceptions
from powervs.utils._base import _config

WORKSPACES = [
    _config.WorkspaceEntry(name="ws-a", zone="dal10"),
    _config.WorkspaceEntry(id="id-b", zone="wdc06"),
]


class TestConfigFilePath:
    @staticmethod
    def test_env_override(tmp_path, monkeypatch):
        path = tmp_path / "nested" / "cfg.json"
        monkeypatch.setenv("POWERVS_CONFIG_PATH", str(path))

        assert _config.get_config_file_path() == path.resolve()
        assert path.parent.is_dir()

    @staticmethod
    def test_default(tmp_path, monkeypatch):
        monkeypatch.delenv("POWERVS_CONFIG_PATH", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        assert _config.get_config_file_path() == tmp_path / ".powervs" / "config.json"


@pytest.mark.usefixtures("patch_config_location")
class TestWriteRead:
    @staticmethod
    def test_round_trip():
        _config.write_config("prod", WORKSPACES, timeout=30)

        config = _config.read_config("prod")

        assert config.config_name == "prod"
        assert config.workspaces == WORKSPACES
        assert config.timeout == 30

    @staticmethod
    def test_file_contents(patch_config_location):
        _config.write_config("prod", WORKSPACES)

        contents = json.loads((patch_config_location / "config.json").read_text())

        assert contents["version"] == _config.CONFIG_FILE_CURRENT_VERSION
        assert contents["configs"]["prod"]["workspaces"][0] == {
            "name": "ws-a",
            "id": "",
            "zone": "dal10",
        }

    @staticmethod
    def test_overwrites_same_name():
        _config.write_config("prod", WORKSPACES)
        _config.write_config("prod", WORKSPACES[:1], timeout=5)

        config = _config.read_config("prod")

        assert config.workspaces == WORKSPACES[:1]
        assert config.timeout == 5

    @staticmethod
    def test_keeps_other_configs():
        _config.write_config("prod", WORKSPACES)
        _config.write_config("staging", WORKSPACES[1:])

        assert set(_config.read_config_names()) == {"prod", "staging"}
        assert _config.read_config("prod").workspaces == WORKSPACES

    @staticmethod
    def test_no_file():
        with pytest.raises(exceptions.ConfigError):
            _config.read_config("prod")

    @staticmethod
    def test_unknown_name():
        _config.write_config("prod", WORKSPACES)

        with pytest.raises(exceptions.NotFoundError) as exc_info:
            _config.read_config("staging")

        assert exc_info.value.entity == "config"
        assert exc_info.value.key == "staging"

    @staticmethod
    def test_invalid_file(patch_config_location):
        (patch_config_location / "config.json").write_text("{not json")

        with pytest.raises(exceptions.ConfigError):
            _config.read_config("prod")

    @staticmethod
    def test_write_refuses_invalid_file(patch_config_location):
        (patch_config_location / "config.json").write_text("{not json")

        with pytest.raises(exceptions.ConfigError):
            _config.write_config("prod", WORKSPACES)


@pytest.mark.usefixtures("patch_config_location")
class TestReadConfigNames:
    @staticmethod
    def test_no_file():
        assert _config.read_config_names() == []

    @staticmethod
    def test_names():
        _config.write_config("prod", WORKSPACES)

        assert _config.read_config_names() == ["prod"]
