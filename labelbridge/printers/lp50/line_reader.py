"""
Response line reader for the LP-50 printer.

The printer answers commands with CR LF terminated lines and gives no
indication of how many lines it will send, so reading is governed by
timeouts: wait for the first byte, then drain lines, optionally waiting a
while after each line for the next one to arrive.
"""

import time
from typing import List

from ...exceptions import ReadTimeoutError
from ...logger_module import logger
from .protocol import CR, DEFAULT_POLL_INTERVAL_MS, DEFAULT_READ_TIMEOUT_MS, LF
from .serial_timer import SerialTimer


class LineReader:
    """Reads printer output as individual lines with the terminator stripped."""

    def __init__(
        self,
        line_timeout_ms: int = DEFAULT_READ_TIMEOUT_MS,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    ):
        """
        Args:
            line_timeout_ms: How long to wait for the next line in multi-line mode
            poll_interval_ms: Sleep between checks of the input buffer
        """
        self.line_timeout_ms = line_timeout_ms
        self.poll_interval = poll_interval_ms / 1000.0

    def _wait_for_bytes(self, transport, timer: SerialTimer) -> bool:
        """Block until bytes are buffered or the timer runs down.

        Returns:
            bool: True if bytes are available
        """
        while transport.bytes_to_read == 0 and not timer.timedout:
            time.sleep(min(self.poll_interval, timer.remaining()))
        return transport.bytes_to_read > 0

    def read(self, transport, timeout_ms: int, expect_multiple: bool) -> List[str]:
        """Read printer output as unique lines.

        Args:
            transport: Open transport to read from
            timeout_ms: Time to wait for the first byte before giving up
            expect_multiple: Whether more than one line is expected. Multi-line
                reads wait up to ``line_timeout_ms`` after each line, since the
                number of lines is not known up front.

        Returns:
            list: Lines read, in order. Empty if the printer did not answer.
        """
        logger.debug("Reading printer response...")
        transport.discard_buffers()

        timer = SerialTimer()
        timer.start(timeout_ms)

        response: List[str] = []
        if not self._wait_for_bytes(transport, timer):
            logger.info("Read timed out")
            return response

        line: List[str] = []
        try:
            while True:
                c = transport.read_byte()
                # Keep draining after LF while more bytes are buffered
                if c == LF and transport.bytes_to_read == 0:
                    break
                if c == CR:
                    response.append("".join(line))
                    line.clear()
                    if expect_multiple:
                        timer.start(self.line_timeout_ms)
                        self._wait_for_bytes(transport, timer)
                elif c == LF:
                    continue
                else:
                    line.append(chr(c))
        except ReadTimeoutError as e:
            logger.warning(f"Read timed out. {e}")

        if line:
            logger.debug(f"Dropping unterminated response tail: {''.join(line)!r}")
        logger.debug(f"Response lines: {response}")
        return response
