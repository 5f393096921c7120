import os
import tempfile

# Keep log.log and config.json lookups out of the source tree
os.environ.setdefault("LABELBRIDGE_BASE", tempfile.mkdtemp(prefix="labelbridge-test-"))

import pytest
import serial

from labelbridge.exceptions import ReadTimeoutError
from labelbridge.logger_module import logger


class FakeTransport:
    """Scripted stand-in for a serial transport.

    Replies to a written line are held back until the input buffer is next
    polled, so they survive the reader's initial buffer discard the way a
    real printer's delayed answer does.
    """

    def __init__(self, replies=None, incoming=b"", fail_on=None, flush_error=None, read_timeout_ms=10000, write_timeout_ms=10000):
        self.replies = replies or {}
        self.fail_on = fail_on
        self.flush_error = flush_error
        self.read_timeout_ms = read_timeout_ms
        self.write_timeout_ms = write_timeout_ms
        self.buffer = bytearray()
        self.pending = bytearray(incoming)
        self.writes = []
        self.events = []
        self.flush_count = 0
        self.discard_count = 0
        self.close_count = 0

    @property
    def bytes_to_read(self):
        if self.pending:
            self.buffer += self.pending
            self.pending.clear()
        return len(self.buffer)

    def read_byte(self):
        if not self.bytes_to_read:
            raise ReadTimeoutError("The operation has timed out.")
        value = self.buffer[0]
        del self.buffer[0]
        self.events.append(("read", value))
        return value

    def write_line(self, text):
        if self.fail_on is not None and text == self.fail_on:
            raise serial.SerialTimeoutException("Write timeout")
        self.writes.append(text)
        self.events.append(("write", text))
        if text in self.replies:
            self.pending += self.replies[text]

    def flush(self):
        self.flush_count += 1
        self.events.append(("flush", None))
        if self.flush_error is not None:
            raise self.flush_error

    def discard_buffers(self):
        self.discard_count += 1
        self.buffer.clear()

    def close(self):
        self.close_count += 1
        self.events.append(("close", None))


@pytest.fixture
def fake_transport():
    return FakeTransport


@pytest.fixture
def printer_with_forms():
    """Transport whose printer holds forms L0 and L5."""
    return FakeTransport(replies={"UF": b"002\r\nL0\r\nL5\r\n"})


@pytest.fixture
def bridge_log(caplog):
    """caplog for the LabelBridge logger, which does not propagate."""
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
