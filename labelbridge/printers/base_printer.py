"""
Base abstract class for label printer drivers.

This module defines the interface that all printer drivers (currently the
DATECS LP-50) must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional


class BasePrinter(ABC):
    """
    Abstract base class for label printer drivers.

    Each printer driver must implement this interface.
    This ensures consistent behavior across all printer drivers.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the printer driver.

        Args:
            config: Printer-specific config dict from config.json
        """
        self.config = config
        self.com_port = None
        self.connected = False

    @abstractmethod
    def connect(self) -> bool:
        """
        Select the configured port and check that it is available.

        Returns:
            bool: True if the port was found
        """
        pass

    @abstractmethod
    def disconnect(self) -> bool:
        """
        Forget the selected port.

        Returns:
            bool: True if disconnected successfully
        """
        pass

    @abstractmethod
    def print_label(
        self,
        form_name: str,
        substitutions: List[str],
        expected_prompts: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Print one label from a form stored in printer memory.

        Args:
            form_name: Name of the stored form (case insensitive on the printer)
            substitutions: Values for the form variables, in declaration order
            expected_prompts: Optional number of prompts the form declares

        Returns:
            dict: {"success": bool, "error": str, "form_found": bool, "stage": str}
        """
        pass

    @abstractmethod
    def list_forms(self) -> Dict[str, Any]:
        """
        List the forms stored in printer memory.

        Returns:
            dict: {"success": bool, "error": str, "forms": list}
        """
        pass

    @abstractmethod
    def get_status(self) -> Dict[str, Any]:
        """
        Get printer status.

        Returns:
            dict: Status information including:
                - connected: bool
                - com_port: str
                - stage: str (last session stage reached)
                - error: str (if any)
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Get printer driver name.

        Returns:
            str: Printer name (e.g., "lp50")
        """
        pass

    def __repr__(self) -> str:
        """String representation of the printer."""
        status = "connected" if self.connected else "disconnected"
        return f"<{self.__class__.__name__} ({self.get_name()}) {status} on {self.com_port or 'None'}>"

    def is_demo_mode(self) -> bool:
        """Return True when demo mode is enabled in config."""
        system_cfg = self.config.get("system", {})
        return bool(system_cfg.get("demo_mode", False) or self.config.get("demo_mode", False))
