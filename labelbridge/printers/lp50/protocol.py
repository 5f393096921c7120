"""
DATECS LP-50 Label Printer Protocol Constants

Based on the DATECS LP-50 programming manual:
http://www.datecs.bg/en/products/53

This module contains the command strings and timing defaults used for
communication with the LP-50 over a serial link.
"""

# Commands (written as text lines)
CMD_LIST_FORMS = "UF"             # List forms stored in printer memory
CMD_FORM_RETRIEVE = 'FR"{name}"'  # Load & activate a stored form
CMD_PROMPT = "?"                  # Start variable & counter prompts
CMD_PRINT = "P{sets},{copies}"    # Print <sets> label sets, <copies> copies each

# Response framing bytes
CR = 0x0D  # Terminates a response line
LF = 0x0A  # Framing artifact, discarded

# Serial communication settings
DEFAULT_BAUD_RATE = 9600
DEFAULT_READ_TIMEOUT_MS = 10000
DEFAULT_WRITE_TIMEOUT_MS = 10000
DEFAULT_NEWLINE = "\n"
DEFAULT_POLL_INTERVAL_MS = 5

# Listing forms can take a while on a full memory
LIST_FORMS_TIMEOUT_FACTOR = 2

# pyserial URL used in demo mode (echoes writes back, no printer needed)
DEMO_PORT = "loop://"


def form_retrieve(name: str) -> str:
    """Build the form activation command. The name is embedded verbatim.

    Examples:
        >>> form_retrieve("L5")
        'FR"L5"'
    """
    return CMD_FORM_RETRIEVE.format(name=name)


def print_labels(sets: int = 1, copies: int = 1) -> str:
    """Build the print command.

    Examples:
        >>> print_labels()
        'P1,1'
    """
    return CMD_PRINT.format(sets=sets, copies=copies)
