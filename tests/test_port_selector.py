"""Tests for serial port enumeration and selection."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from labelbridge.core.port_selector import is_url, list_port_names, select_port
from labelbridge.exceptions import ConfigurationError, PortNotFoundError


def test_select_port_is_case_insensitive():
    assert select_port("com5", ["COM3", "COM5"]) == "COM5"


def test_select_port_by_short_name():
    assert select_port("ttyusb0", ["/dev/ttyS0", "/dev/ttyUSB0"]) == "/dev/ttyUSB0"


def test_select_port_full_device_name():
    assert select_port("/dev/ttyUSB0", ["/dev/ttyUSB0"]) == "/dev/ttyUSB0"


def test_port_not_found():
    with pytest.raises(PortNotFoundError) as exc_info:
        select_port("COM5", ["COM3"])
    assert "Printer not found on port COM5" in str(exc_info.value)
    assert exc_info.value.context["available"] == "COM3"


def test_port_not_found_is_configuration_error():
    with pytest.raises(ConfigurationError):
        select_port("COM5", [])


def test_missing_port_setting():
    with pytest.raises(PortNotFoundError):
        select_port("", ["COM5"])


def test_urls_are_used_as_is():
    assert is_url("loop://")
    assert not is_url("COM5")
    assert select_port("socket://10.0.0.5:9100", []) == "socket://10.0.0.5:9100"


def test_enumerates_ports_when_not_given():
    ports = [SimpleNamespace(device="COM3", name="COM3"), SimpleNamespace(device="COM5", name="COM5")]
    with patch("serial.tools.list_ports.comports", return_value=ports):
        assert list_port_names() == ["COM3", "COM5"]
        assert select_port("Com5") == "COM5"
