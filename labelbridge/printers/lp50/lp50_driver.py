"""
DATECS LP-50 Label Printer Driver

This module implements the BasePrinter interface for the DATECS LP-50
thermal label printer. Labels are printed from forms preloaded in printer
memory (the DATECS label editor is best for this task); the driver only
activates a form, answers its variable prompts and prints.

Based on the LP-50 programming manual: http://www.datecs.bg/en/products/53
"""

from typing import Dict, Any, List, Optional

from ..base_printer import BasePrinter
from ...core.port_selector import select_port
from ...exceptions import (
    ConfigurationError,
    LabelBridgeError,
    PortBusyError,
    PortNotFoundError,
    SessionError,
)
from ...logger_module import logger
from .line_reader import LineReader
from .protocol import (
    DEFAULT_BAUD_RATE,
    DEFAULT_NEWLINE,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_READ_TIMEOUT_MS,
    DEFAULT_WRITE_TIMEOUT_MS,
    DEMO_PORT,
)
from .session import PrinterSession, close_transport
from .transport import SerialTransport

# The loopback port never answers, keep demo runs short
DEMO_READ_TIMEOUT_MS = 500


class LP50Driver(BasePrinter):
    """
    DATECS LP-50 Label Printer Driver.

    Every print opens the port, runs one printer session and closes the port
    again. A failed print is never retried automatically.
    """

    def __init__(self, config: Dict[str, Any]):
        """Initialize the LP-50 driver.

        Args:
            config: Printer-specific config dict containing:
                - com_port: Serial port name (e.g. "COM5", "/dev/ttyUSB0")
                - baud_rate: Serial baud rate (default: 9600)
                - read_timeout_ms: Read timeout in milliseconds (default: 10000)
                - write_timeout_ms: Write timeout in milliseconds (default: 10000)
                - newline: Line terminator for commands (default: "\\n")
                - poll_interval_ms: Input buffer polling interval (default: 5)
                - system: Global system section (demo_mode)
        """
        super().__init__(config)

        self.configured_port = config.get('com_port')
        self.baud_rate = config.get('baud_rate', DEFAULT_BAUD_RATE)
        self.read_timeout_ms = config.get('read_timeout_ms', DEFAULT_READ_TIMEOUT_MS)
        self.write_timeout_ms = config.get('write_timeout_ms', DEFAULT_WRITE_TIMEOUT_MS)
        self.newline = config.get('newline', DEFAULT_NEWLINE)
        self.poll_interval_ms = config.get('poll_interval_ms', DEFAULT_POLL_INTERVAL_MS)

        if self.is_demo_mode():
            self.read_timeout_ms = min(self.read_timeout_ms, DEMO_READ_TIMEOUT_MS)

        self.last_stage = None
        self.last_error = None

        logger.info(f"LP-50 driver initialized (demo={self.is_demo_mode()})")

    def get_name(self) -> str:
        """Get printer driver name."""
        return "lp50"

    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================

    def connect(self) -> bool:
        """Select the configured port among the available serial ports.

        Returns:
            bool: True if the port is available
        """
        if self.is_demo_mode():
            logger.debug("Demo mode enabled - using loopback port")
            self.com_port = DEMO_PORT
            self.connected = True
            return True

        try:
            self.com_port = select_port(self.configured_port)
        except PortNotFoundError as e:
            logger.error(str(e))
            self.last_error = str(e)
            self.com_port = None
            self.connected = False
            return False

        logger.info(f"Found printer port {self.com_port}")
        self.connected = True
        return True

    def disconnect(self) -> bool:
        """Forget the selected port.

        Returns:
            bool: True if disconnected successfully
        """
        self.connected = False
        self.com_port = None
        logger.info("Disconnected from printer")
        return True

    def open_transport(self) -> SerialTransport:
        """Open the selected port.

        Raises:
            PortBusyError: If the port is in use or cannot be opened
            ConfigurationError: If the port name is not a valid device or pyserial URL
        """
        return SerialTransport.open(
            self.com_port,
            baud_rate=self.baud_rate,
            read_timeout_ms=self.read_timeout_ms,
            write_timeout_ms=self.write_timeout_ms,
            newline=self.newline,
        )

    def _new_session(self) -> PrinterSession:
        reader = LineReader(line_timeout_ms=self.read_timeout_ms, poll_interval_ms=self.poll_interval_ms)
        return PrinterSession(read_timeout_ms=self.read_timeout_ms, reader=reader)

    # =========================================================================
    # PRINTING
    # =========================================================================

    def print_label(
        self,
        form_name: str,
        substitutions: List[str],
        expected_prompts: Optional[int] = None
    ) -> Dict[str, Any]:
        """Print one label from a stored form.

        Args:
            form_name: Form to activate. It must exist in the printer or nothing prints.
            substitutions: Values for the form variables, in the order they are
                declared in the form (V00, V01, ... Vnn)
            expected_prompts: Optional prompt count to check the values against

        Returns:
            dict: {"success": bool, "error": str, "form_found": bool, "stage": str}
        """
        self.last_stage = None
        self.last_error = None

        if not self.connected and not self.connect():
            return {"success": False, "error": self.last_error, "form_found": False, "stage": None}

        try:
            transport = self.open_transport()
        except (PortBusyError, ConfigurationError) as e:
            logger.error(f"{e}")
            self.last_error = str(e)
            return {"success": False, "error": str(e), "form_found": False, "stage": None}

        session = self._new_session()
        logger.info(f"Printing form {form_name} with {len(substitutions)} value(s)")
        try:
            result = session.run(transport, form_name, list(substitutions), expected_prompts=expected_prompts)
        except SessionError as e:
            self.last_stage = e.stage
            self.last_error = str(e)
            return {"success": False, "error": str(e), "form_found": False, "stage": e.stage}
        except LabelBridgeError as e:
            logger.error(f"{e}")
            self.last_stage = session.stage.value if session.stage else None
            self.last_error = str(e)
            return {"success": False, "error": str(e), "form_found": False, "stage": self.last_stage}

        self.last_stage = session.stage.value
        return {
            "success": True,
            "error": None,
            "form_found": result.form_found,
            "forms": result.forms,
            "stage": self.last_stage,
        }

    def list_forms(self) -> Dict[str, Any]:
        """List the forms stored in printer memory.

        Returns:
            dict: {"success": bool, "error": str, "forms": list}
        """
        if not self.connected and not self.connect():
            return {"success": False, "error": self.last_error, "forms": []}

        try:
            transport = self.open_transport()
        except (PortBusyError, ConfigurationError) as e:
            logger.error(f"{e}")
            return {"success": False, "error": str(e), "forms": []}

        try:
            forms = self._new_session().list_forms(transport)
        except Exception as e:
            logger.error(f"Error listing forms: {e}")
            return {"success": False, "error": str(e), "forms": []}
        finally:
            cleanup_error = close_transport(transport)

        if cleanup_error is not None:
            return {"success": False, "error": f"Could not close printer port: {cleanup_error}", "forms": forms}

        logger.info(f"Available forms: {','.join(forms)}")
        return {"success": True, "error": None, "forms": forms}

    # =========================================================================
    # STATUS
    # =========================================================================

    def get_status(self) -> Dict[str, Any]:
        """Get printer status.

        The LP-50 has no status query in this protocol, so this reports what
        the driver knows from the last exchange.

        Returns:
            dict: Status information including connection, port, last stage and error
        """
        return {
            "connected": self.connected,
            "com_port": self.com_port,
            "stage": self.last_stage,
            "error": self.last_error,
        }
