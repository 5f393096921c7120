"""Exceptions for LP-50 Label Bridge with contextual information."""

from typing import Any, Dict, Optional


class LabelBridgeError(Exception):
    """Base error for the label bridge with contextual information."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[BaseException] = None,
    ):
        """
        Initialize a label bridge error.

        Args:
            message: Error message
            context: Optional context information (port, stage, path, etc.)
            original_exception: Original exception that caused this error
        """
        super().__init__(message)
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.context:
            context_str = ", ".join(f"{key}={value}" for key, value in self.context.items())
            return f"{base_msg} (Context: {context_str})"
        return base_msg


class ConfigurationError(LabelBridgeError):
    """Invalid configuration or input, detected before the printer is contacted."""


class PortNotFoundError(ConfigurationError):
    """The configured serial port is not among the available ports."""


class RecordError(ConfigurationError):
    """The label record file is missing or malformed."""


class PortBusyError(LabelBridgeError):
    """The serial port could not be opened, usually because another program holds it."""


class ReadTimeoutError(LabelBridgeError):
    """A byte-level read exceeded the transport read timeout."""


class SubstitutionCountError(LabelBridgeError):
    """The number of substitution values does not match the expected prompt count."""


class SessionError(LabelBridgeError):
    """Fatal failure during a printer exchange.

    Carries the stage that failed and the underlying transport error text.
    """

    def __init__(
        self,
        stage: str,
        message: str,
        original_exception: Optional[BaseException] = None,
    ):
        context = {"stage": stage}
        if original_exception is not None:
            context["cause"] = f"{type(original_exception).__name__}: {original_exception}"
        super().__init__(message, context=context, original_exception=original_exception)
        self.stage = stage
