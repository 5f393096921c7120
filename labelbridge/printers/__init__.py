"""
Label printer driver modules.

This package contains drivers for label printers:
- lp50: DATECS LP-50 thermal label printer (stored forms over serial)
"""

from ..core.config_manager import get_printer_config
from .base_printer import BasePrinter


def create_printer(config):
    """
    Factory function to create printer driver instance.

    Args:
        config: Full config dict from config.json

    Returns:
        BasePrinter: Instance of the active printer driver

    Raises:
        ValueError: If printer not found or not supported
    """
    printer_name = config['printer']['active']

    # Merge printer-specific config with global config sections
    printer_config = get_printer_config(config, printer_name).copy()
    printer_config['system'] = config.get('system', {})

    if printer_name == 'lp50':
        from .lp50.lp50_driver import LP50Driver
        return LP50Driver(printer_config)
    else:
        raise ValueError(f"Unknown printer: {printer_name}")


__all__ = ['BasePrinter', 'create_printer']
