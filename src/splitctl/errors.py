"""Application-level exception types for splitctl."""

from __future__ import annotations


class HelpRequested(Exception):  # noqa: N818
    """Raised by the argument parser when `-h`/`--help` is seen.

    This is a control signal rather than a failure: callers print usage and
    exit successfully.
    """


class SplitctlError(Exception):
    """Base exception for splitctl."""


class ArgParseError(SplitctlError):
    """Raised when the command line is malformed."""


class ValidationError(SplitctlError):
    """Base exception for parsed but semantically invalid input."""

    field = ""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        if field is not None:
            self.field = field


class InvalidDirectionError(ValidationError):
    """Raised when `--direction` is not one of the known split directions."""

    field = "direction"

    def __init__(self, value: str, valid: tuple[str, ...]) -> None:
        self.value = value
        super().__init__(f"Invalid direction '{value}'. Valid options: {', '.join(valid)}")


class EmptyCommandError(ValidationError):
    """Raised when `-e` is given without any command tokens after it."""

    field = "arguments"

    def __init__(self) -> None:
        super().__init__("The -e flag was specified but no command arguments were provided.")


class NoTextError(ValidationError):
    """Raised when send-to-split has no text to send."""

    field = "text"

    def __init__(self) -> None:
        super().__init__("No text provided to send to split.")


class EmptyTargetError(ValidationError):
    """Raised when `--target` is given an empty value."""

    field = "target"

    def __init__(self) -> None:
        super().__init__("The --target flag requires a split index, id, or 'focused'.")


class DeliveryReportedError(SplitctlError):
    """Raised by a transport that has already told the user why delivery failed."""
