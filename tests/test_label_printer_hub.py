"""Tests for the command line entry point."""

import json
from unittest.mock import patch

import pytest

from labelbridge.core.config_manager import default_config
from labelbridge.label_printer_hub import main


@pytest.fixture
def record_file(tmp_path):
    path = tmp_path / "label.csv"
    path.write_text("L5,2,42,Jane Doe\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def demo_config():
    config = default_config()
    config["system"]["demo_mode"] = True
    config["printer"]["lp50"]["read_timeout_ms"] = 20
    config["input"]["has_declared_count"] = True
    return config


def run_with_config(config, args):
    with patch("labelbridge.core.config_manager.load_config", return_value=config):
        return main(args)


def test_usage_error_without_file():
    assert main([]) == 1


def test_prints_in_demo_mode(record_file, demo_config):
    assert run_with_config(demo_config, [record_file]) == 0


def test_passes_record_to_printer(record_file, demo_config):
    with patch("labelbridge.printers.lp50.lp50_driver.LP50Driver.print_label",
               return_value={"success": True, "form_found": True}) as print_label:
        assert run_with_config(demo_config, [record_file]) == 0
    print_label.assert_called_once_with("L5", ["42", "Jane Doe"], expected_prompts=None)


def test_prompt_count_validation(record_file, demo_config):
    demo_config["input"]["validate_prompt_count"] = True
    with patch("labelbridge.printers.lp50.lp50_driver.LP50Driver.print_label",
               return_value={"success": True, "form_found": True}) as print_label:
        assert run_with_config(demo_config, [record_file]) == 0
    print_label.assert_called_once_with("L5", ["42", "Jane Doe"], expected_prompts=2)


def test_print_failure_exit_code(record_file, demo_config):
    with patch("labelbridge.printers.lp50.lp50_driver.LP50Driver.print_label",
               return_value={"success": False, "error": "boom", "stage": "print"}):
        assert run_with_config(demo_config, [record_file]) == 1


def test_missing_record_file(tmp_path, demo_config):
    assert run_with_config(demo_config, [str(tmp_path / "missing.csv")]) == 1


def test_port_not_found(record_file, demo_config, bridge_log):
    demo_config["system"]["demo_mode"] = False
    demo_config["printer"]["lp50"]["com_port"] = "COM5"
    with patch("serial.tools.list_ports.comports", return_value=[]):
        assert run_with_config(demo_config, [record_file]) == 1
    assert "Printer not found on port COM5" in bridge_log.text


def test_invalid_config(record_file):
    assert run_with_config({"printer": {}}, [record_file]) == 1


def test_broken_config_file(record_file):
    error = json.JSONDecodeError("Expecting value", "{", 1)
    with patch("labelbridge.core.config_manager.load_config", side_effect=error):
        assert main([record_file]) == 1


def test_missing_config_uses_defaults(record_file):
    with patch("labelbridge.core.config_manager.load_config", side_effect=FileNotFoundError("nope")), \
            patch("serial.tools.list_ports.comports", return_value=[]):
        # Defaults point at COM5, which is not available here
        assert main([record_file]) == 1


def test_log_level_from_config(record_file, demo_config):
    demo_config["system"]["log_level"] = "DEBUG"
    with patch("labelbridge.label_printer_hub.configure_file_logging") as configure:
        assert run_with_config(demo_config, [record_file]) == 0
    configure.assert_called_once_with("DEBUG")


def test_unknown_port_scheme(record_file, demo_config, bridge_log):
    demo_config["system"]["demo_mode"] = False
    demo_config["printer"]["lp50"]["com_port"] = "foo://printer"
    with patch("serial.tools.list_ports.comports", return_value=[]):
        assert run_with_config(demo_config, [record_file]) == 1
    assert "Invalid printer port foo://printer" in bridge_log.text
