"""Tests for config.json handling."""

import json

import pytest

from labelbridge.core.config_manager import (
    default_config,
    get_printer_config,
    load_config,
    validate_config,
)


def test_default_config_is_valid():
    assert validate_config(default_config()) is True


def test_default_config_is_a_copy():
    config = default_config()
    config["printer"]["lp50"]["com_port"] = "COM9"
    assert default_config()["printer"]["lp50"]["com_port"] == "COM5"


@pytest.mark.parametrize(
    "config, message",
    [
        ({}, "Missing required config key: printer"),
        ({"printer": {}}, "Missing printer.active"),
        ({"printer": {"active": "lp50"}}, "Active printer 'lp50' not found"),
        ({"printer": {"active": "lp50", "lp50": {"read_timeout_ms": 0}}}, "read_timeout_ms must be a positive integer"),
        ({"printer": {"active": "lp50", "lp50": {"baud_rate": "fast"}}}, "baud_rate must be a positive integer"),
    ],
)
def test_invalid_config(config, message):
    with pytest.raises(ValueError) as exc_info:
        validate_config(config)
    assert message in str(exc_info.value)


def test_get_printer_config():
    config = default_config()
    assert get_printer_config(config)["com_port"] == "COM5"
    with pytest.raises(KeyError):
        get_printer_config(config, "zebra")


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    config = default_config()
    config["printer"]["lp50"]["com_port"] = "/dev/ttyUSB0"
    path.write_text(json.dumps(config), encoding="utf-8")

    assert load_config(str(path))["printer"]["lp50"]["com_port"] == "/dev/ttyUSB0"


def test_load_config_defaults_to_base_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("LABELBRIDGE_BASE", str(tmp_path))
    (tmp_path / "config.json").write_text(json.dumps(default_config()), encoding="utf-8")

    assert load_config()["printer"]["active"] == "lp50"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


def test_load_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{printer:", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))
