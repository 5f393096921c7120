"""
LP-50 printer session.

Runs one complete label exchange over an open transport:

    UF              list forms stored in printer memory
    FR"<form>"      load & activate the target form
    ?               start variable & counter prompts
    <value> ...     answer each prompt, in declaration order
    P1,1            print one label

The transport is flushed and closed when the exchange ends, whether it
succeeded or not.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from ...exceptions import LabelBridgeError, SessionError, SubstitutionCountError
from ...logger_module import logger
from .line_reader import LineReader
from .protocol import (
    CMD_LIST_FORMS,
    CMD_PROMPT,
    DEFAULT_READ_TIMEOUT_MS,
    LIST_FORMS_TIMEOUT_FACTOR,
    form_retrieve,
    print_labels,
)


class SessionStage(Enum):
    """Stages of a printer exchange, in the order they run."""
    LIST_FORMS = "list_forms"
    VERIFY_FORM = "verify_form"
    ACTIVATE_FORM = "activate_form"
    PROMPT_EXCHANGE = "prompt_exchange"
    PRINT = "print"
    CLOSED = "closed"


@dataclass
class SessionResult:
    form_found: bool = False
    forms: List[str] = field(default_factory=list)
    commands: List[str] = field(default_factory=list)


def form_is_listed(form_name: str, forms: Sequence[str]) -> bool:
    """Case-insensitive lookup of a form name. Form names are case insensitive on the printer."""
    target = form_name.lower()
    return any(form.lower() == target for form in forms)


def close_transport(transport) -> Optional[Exception]:
    """Flush and close the transport. Returns the first error instead of raising it."""
    error = None
    try:
        transport.flush()
    except Exception as e:
        logger.error(f"Error flushing port: {e}")
        error = e
    finally:
        try:
            logger.info("Closing port..")
            transport.close()
        except Exception as e:
            logger.error(f"Error closing port: {e}")
            error = error or e
    return error


class PrinterSession:
    """Talks to the LP-50 for a single label print."""

    def __init__(self, read_timeout_ms: int = DEFAULT_READ_TIMEOUT_MS, reader: Optional[LineReader] = None):
        """
        Args:
            read_timeout_ms: Standard read timeout; listing forms waits twice as long
            reader: Line reader to use (default: one with ``read_timeout_ms`` per line)
        """
        self.read_timeout_ms = read_timeout_ms
        self.reader = reader or LineReader(line_timeout_ms=read_timeout_ms)
        self.stage: Optional[SessionStage] = None

    def _write(self, transport, result: SessionResult, line: str) -> None:
        transport.write_line(line)
        result.commands.append(line)

    def list_forms(self, transport) -> List[str]:
        """Send ``UF`` and return the installed form names.

        The printer answers with the form count first, e.g.::

            002
            L0
            L1

        The count is informational only and is not checked.
        """
        transport.write_line(CMD_LIST_FORMS)
        lines = self.reader.read(
            transport,
            self.read_timeout_ms * LIST_FORMS_TIMEOUT_FACTOR,
            True,
        )
        if not lines:
            return []
        logger.debug(f"Printer reports {lines[0]} form(s)")
        return lines[1:]

    def run(
        self,
        transport,
        form_name: str,
        substitutions: Sequence[str],
        expected_prompts: Optional[int] = None,
    ) -> SessionResult:
        """Activate ``form_name``, answer its prompts and print one label.

        Args:
            transport: Open transport. It is closed when this returns or raises.
            form_name: Form to activate, sent exactly as given
            substitutions: Values for the form variables, in declaration order.
                They should match the number of prompts, otherwise the printer
                stays in prompt mode or takes later values for earlier prompts.
            expected_prompts: If given, refuse to run unless it equals
                ``len(substitutions)``

        Returns:
            SessionResult: Forms found, whether the target was listed, commands sent

        Raises:
            SessionError: If the transport fails; carries the failing stage
            SubstitutionCountError: If ``expected_prompts`` does not match
        """
        result = SessionResult()
        self.stage = None
        try:
            if expected_prompts is not None and expected_prompts != len(substitutions):
                raise SubstitutionCountError(
                    f"Form {form_name} expects {expected_prompts} value(s), got {len(substitutions)}",
                    context={"form": form_name},
                )

            self.stage = SessionStage.LIST_FORMS
            logger.info("Reading available forms...")
            result.commands.append(CMD_LIST_FORMS)
            result.forms = self.list_forms(transport)
            logger.info(f"Available forms: {','.join(result.forms)}")

            self.stage = SessionStage.VERIFY_FORM
            result.form_found = form_is_listed(form_name, result.forms)
            if not result.form_found:
                logger.warning(
                    f"Form {form_name} not found in printer memory, "
                    f"printer may not be properly configured."
                )

            self.stage = SessionStage.ACTIVATE_FORM
            self._write(transport, result, form_retrieve(form_name))

            # The number of values must equal the number of prompts, otherwise
            # the printer remains in prompt mode
            self.stage = SessionStage.PROMPT_EXCHANGE
            self._write(transport, result, CMD_PROMPT)
            for value in substitutions:
                self._write(transport, result, value)
            transport.flush()

            self.stage = SessionStage.PRINT
            self._write(transport, result, print_labels(1, 1))
            logger.info("Completed")
        except LabelBridgeError:
            raise
        except Exception as e:
            stage = self.stage.value if self.stage else "start"
            logger.error(f"Printer exchange failed during {stage}: {e}")
            raise SessionError(stage, f"Printer exchange failed during {stage}: {e}", e) from e
        finally:
            cleanup_error = self._close(transport)

        if cleanup_error is not None:
            raise SessionError(
                SessionStage.CLOSED.value,
                f"Could not close printer port: {cleanup_error}",
                cleanup_error,
            ) from cleanup_error
        return result

    def _close(self, transport) -> Optional[Exception]:
        self.stage = SessionStage.CLOSED
        return close_transport(transport)
