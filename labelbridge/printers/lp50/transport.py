"""
Serial transport for the LP-50 printer.

Wraps a pyserial port object and exposes the small set of operations the
printer session needs, with timeouts in milliseconds.
"""

from typing import Optional

import serial

from ...exceptions import ConfigurationError, PortBusyError, ReadTimeoutError
from ...logger_module import logger
from .protocol import (
    DEFAULT_BAUD_RATE,
    DEFAULT_NEWLINE,
    DEFAULT_READ_TIMEOUT_MS,
    DEFAULT_WRITE_TIMEOUT_MS,
)


class SerialTransport:
    """Line-oriented view of an open serial port."""

    def __init__(self, port, newline: str = DEFAULT_NEWLINE, encoding: str = "latin-1"):
        """
        Args:
            port: An open pyserial ``Serial`` (or compatible) object
            newline: Terminator appended by ``write_line``
            encoding: Text encoding used for writes
        """
        self.port = port
        self.newline = newline
        self.encoding = encoding

    @classmethod
    def open(
        cls,
        port_name: str,
        baud_rate: int = DEFAULT_BAUD_RATE,
        read_timeout_ms: int = DEFAULT_READ_TIMEOUT_MS,
        write_timeout_ms: int = DEFAULT_WRITE_TIMEOUT_MS,
        newline: str = DEFAULT_NEWLINE,
    ) -> "SerialTransport":
        """Open ``port_name`` (a device name or pyserial URL).

        Raises:
            PortBusyError: If the port cannot be opened
            ConfigurationError: If pyserial does not know the URL scheme
        """
        try:
            port = serial.serial_for_url(
                port_name,
                baudrate=baud_rate,
                timeout=read_timeout_ms / 1000.0,
                write_timeout=write_timeout_ms / 1000.0,
            )
        except (serial.SerialException, OSError) as e:
            raise PortBusyError(
                f"Serial port {port_name} is already in use by another program or cannot be opened.",
                context={"port": port_name},
                original_exception=e,
            ) from e
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid printer port {port_name}: {e}",
                context={"port": port_name},
                original_exception=e,
            ) from e
        logger.info(f"Communicating through {port_name}")
        return cls(port, newline=newline)

    @property
    def name(self) -> Optional[str]:
        return getattr(self.port, "name", None) or getattr(self.port, "port", None)

    @property
    def read_timeout_ms(self) -> Optional[int]:
        timeout = self.port.timeout
        return None if timeout is None else int(timeout * 1000)

    @read_timeout_ms.setter
    def read_timeout_ms(self, value: int) -> None:
        self.port.timeout = value / 1000.0

    @property
    def write_timeout_ms(self) -> Optional[int]:
        timeout = self.port.write_timeout
        return None if timeout is None else int(timeout * 1000)

    @write_timeout_ms.setter
    def write_timeout_ms(self, value: int) -> None:
        self.port.write_timeout = value / 1000.0

    @property
    def bytes_to_read(self) -> int:
        return self.port.in_waiting

    def read_byte(self) -> int:
        """Read a single byte.

        Raises:
            ReadTimeoutError: If no byte arrives within the read timeout
        """
        data = self.port.read(1)
        if not data:
            raise ReadTimeoutError(
                "The operation has timed out.",
                context={"port": self.name, "read_timeout_ms": self.read_timeout_ms},
            )
        return data[0]

    def write_line(self, text: str) -> None:
        logger.debug(f"> {text}")
        self.port.write((text + self.newline).encode(self.encoding))

    def flush(self) -> None:
        self.port.flush()

    def discard_buffers(self) -> None:
        self.port.reset_input_buffer()
        self.port.reset_output_buffer()

    def close(self) -> None:
        self.port.close()
