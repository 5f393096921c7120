"""
DATECS LP-50 Label Printer Driver Package

Example usage:
    >>> from labelbridge.printers.lp50 import LP50Driver
    >>> config = {
    ...     'com_port': 'COM5',
    ...     'baud_rate': 9600,
    ...     'read_timeout_ms': 10000,
    ...     'write_timeout_ms': 10000,
    ... }
    >>> driver = LP50Driver(config)
    >>> driver.connect()
    True
    >>> driver.print_label("L5", ["42", "Jane Doe"])
"""

from .lp50_driver import LP50Driver
from .line_reader import LineReader
from .serial_timer import SerialTimer
from .session import PrinterSession, SessionResult, SessionStage
from .transport import SerialTransport

__all__ = [
    'LP50Driver',
    'LineReader',
    'SerialTimer',
    'PrinterSession',
    'SessionResult',
    'SessionStage',
    'SerialTransport',
]
