"""Error types raised by the agent service."""


class FridayError(Exception):
    """Base class for agent service errors."""


class ConfigurationError(FridayError):
    """A required provider credential or setting is missing."""


class ToolInvocationError(FridayError):
    """A tool's external call failed or returned malformed data.

    Raised by tool handlers and folded into the conversation as an error
    tool result; it never aborts a turn on its own.
    """


class InvalidReply(FridayError):
    """The model layer returned no usable final assistant message."""


class TurnTimeoutError(FridayError):
    """A turn did not complete within its time budget."""
