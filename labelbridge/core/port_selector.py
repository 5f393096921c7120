"""
Serial port enumeration and selection.
"""

from typing import List, Optional, Sequence

import serial.tools.list_ports

from ..exceptions import PortNotFoundError
from ..logger_module import logger


def list_port_names() -> List[str]:
    """Fetch available COM ports.

    Returns:
        list: Device names of the available serial ports
    """
    ports = [port.device for port in serial.tools.list_ports.comports()]
    logger.info(f"Available ports = {','.join(ports)}")
    return ports


def is_url(port_name: str) -> bool:
    """True for pyserial URL handlers such as ``loop://`` or ``socket://host:port``."""
    return "://" in port_name


def select_port(configured_port: str, available: Optional[Sequence[str]] = None) -> str:
    """Select the configured port among the available ones.

    Port names are compared case-insensitively, either as full device name
    (``/dev/ttyUSB0``) or short name (``ttyUSB0``). pyserial URLs are used as-is.

    Args:
        configured_port: Port identifier from config (e.g. "COM5")
        available: Available port names (default: enumerate with pyserial)

    Returns:
        str: The matching port, spelled as the system reports it

    Raises:
        PortNotFoundError: If the configured port is not available
    """
    if not configured_port:
        raise PortNotFoundError("No printer port configured.")

    if is_url(configured_port):
        return configured_port

    logger.info(f"Configured port is {configured_port}")
    if available is None:
        logger.info("Enumerating available ports...")
        available = list_port_names()

    target = configured_port.lower()
    for port in available:
        short_name = port.replace("\\", "/").rsplit("/", 1)[-1]
        if port.lower() == target or short_name.lower() == target:
            return port

    raise PortNotFoundError(
        f"Printer not found on port {configured_port}. Please connect printer on correct USB port.",
        context={"available": ",".join(available) or "none"},
    )
