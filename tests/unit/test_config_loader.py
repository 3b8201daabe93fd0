import json
from pathlib import Path

import pytest

from assetlink import config_loader
from assetlink.config_loader import ConfigDirectory
from assetlink.exceptions import ConfigurationError


def _write(directory: Path, name: str, payload) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(payload if isinstance(payload, str) else json.dumps(payload))


def test_read(tmp_path):
    _write(tmp_path, "application.json", {"aas": {"name": "Drive"}})

    assert ConfigDirectory(tmp_path).read("application.json") == {"aas": {"name": "Drive"}}


def test_read_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigDirectory(tmp_path).read("absent.json")


def test_read_missing_ok(tmp_path):
    assert ConfigDirectory(tmp_path).read("absent.json", missing_ok=True) == {}


def test_read_invalid_json(tmp_path):
    _write(tmp_path, "broken.json", "{not json")

    with pytest.raises(ConfigurationError, match="Invalid JSON") as err:
        ConfigDirectory(tmp_path).read("broken.json")

    assert err.value.path == tmp_path / "broken.json"


def test_read_requires_object(tmp_path):
    _write(tmp_path, "list.json", [1, 2])

    with pytest.raises(ConfigurationError, match="JSON object"):
        ConfigDirectory(tmp_path).read("list.json")


def test_section_missing(tmp_path):
    _write(tmp_path, "application.json", {})

    with pytest.raises(ConfigurationError, match="section not found: aas"):
        ConfigDirectory(tmp_path).section("application.json", "aas")


def test_section_not_an_object(tmp_path):
    _write(tmp_path, "application.json", {"aas": [1]})

    with pytest.raises(ConfigurationError, match="must be an object, got list"):
        ConfigDirectory(tmp_path).section("application.json", "aas")


def test_section_missing_file_ok(tmp_path):
    assert ConfigDirectory(tmp_path).section("application.json", "aas", missing_file_ok=True) == {}


def test_section_missing_file_ok_still_requires_section(tmp_path):
    _write(tmp_path, "application.json", {"other": {}})

    with pytest.raises(ConfigurationError):
        ConfigDirectory(tmp_path).section("application.json", "aas", missing_file_ok=True)


def test_parameter(tmp_path):
    _write(tmp_path, "application.json", {"aas": {"listening_port": 4001}})
    config = ConfigDirectory(tmp_path)

    assert config.parameter("application.json", "aas", "listening_port") == 4001
    with pytest.raises(ConfigurationError, match="'hostname' not found"):
        config.parameter("application.json", "aas", "hostname")


def test_defaults_to_working_directory(tmp_path):
    _write(tmp_path / "config", "application.json", {"aas": {}})

    assert ConfigDirectory().path.resolve() == (tmp_path / "config").resolve()
    assert config_loader.load_config("application.json") == {"aas": {}}
