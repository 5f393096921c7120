"""
LP-50 Label Bridge - Main Application Entry Point

Sends commands to a DATECS LP-50 thermal printer to print out a label from a
form saved in the printer's memory.

Usage:
    python -m labelbridge <record.csv>

The record file holds the form name followed by the values of the form
variables, see labelbridge.core.record_reader. Graphics and forms are
supposed to be preloaded in the printer.
"""

import json
import sys
from typing import List, Optional

from .logger_module import configure_file_logging, logger
from .version import VERSION


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.

    Workflow:
    1. Load configuration
    2. Read the label record
    3. Initialize printer (factory pattern) and select its port
    4. Print the label

    Returns:
        int: Process exit code (0 on success)
    """
    args = sys.argv[1:] if argv is None else argv

    logger.info("=" * 60)
    logger.info(f"LP-50 Label Bridge v{VERSION} Starting...")
    logger.info("=" * 60)

    if not args:
        logger.error("Usage: Please include file name as an argument to this program.")
        return 1

    # =========================================================================
    # Step 1: Load Configuration
    # =========================================================================
    logger.info("[1/4] Loading configuration...")
    from .core.config_manager import default_config, load_config, validate_config

    try:
        config = load_config()
    except FileNotFoundError as e:
        logger.warning(f"  {e} - using built-in defaults")
        config = default_config()
    except json.JSONDecodeError as e:
        logger.error(f"✗ Configuration error: {e}")
        return 1

    try:
        validate_config(config)
    except ValueError as e:
        logger.error(f"✗ Configuration error: {e}")
        return 1

    configure_file_logging(config.get('system', {}).get('log_level', 'INFO'))
    logger.info("✓ Configuration loaded and validated")
    logger.info(f"  Active printer: {config['printer']['active']}")

    # =========================================================================
    # Step 2: Read Label Record
    # =========================================================================
    logger.info(f"[2/4] Reading file {args[0]}...")
    from .core.record_reader import read_record
    from .exceptions import RecordError

    input_config = config.get('input', {})
    try:
        record = read_record(args[0], has_declared_count=input_config.get('has_declared_count', False))
    except RecordError as e:
        logger.error(f"✗ {e}")
        return 1
    logger.info(f"✓ Form {record.form_name}, {len(record.values)} value(s)")

    expected_prompts = None
    if input_config.get('validate_prompt_count', False):
        if record.declared_count is None:
            logger.warning("  Prompt count validation enabled but the record declares no count")
        else:
            expected_prompts = record.declared_count

    # =========================================================================
    # Step 3: Initialize Printer (Factory Pattern)
    # =========================================================================
    logger.info("[3/4] Initializing printer...")
    from .printers import create_printer

    try:
        printer = create_printer(config)
    except (KeyError, ValueError) as e:
        logger.error(f"✗ Printer initialization failed: {e}")
        return 1
    logger.info(f"✓ Printer driver loaded: {printer.get_name()}")

    if not printer.connect():
        logger.error(f"✗ {printer.get_status().get('error')}")
        return 1
    logger.info(f"  ✓ Using {printer.com_port}")

    # =========================================================================
    # Step 4: Print
    # =========================================================================
    logger.info("[4/4] Printing label...")
    result = printer.print_label(record.form_name, record.values, expected_prompts=expected_prompts)
    printer.disconnect()

    if not result.get('success'):
        logger.error(f"✗ Print failed: {result.get('error')}")
        return 1

    if not result.get('form_found'):
        logger.warning(f"  Form {record.form_name} was not listed by the printer - check the label")
    logger.info("✓ Label sent")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
