"""Custom exceptions for colortasks."""


class ColorTasksError(Exception):
    """Base exception for all colortasks errors."""

    pass


class ValidationError(ColorTasksError):
    """Raised when user input cannot become a task.

    These are expected and user-correctable; the presentation layer shows
    ``notice`` and lets the user fix the input.
    """

    notice = "Invalid input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.notice)


class EmptyTextError(ValidationError):
    """Raised when the task label is empty after trimming."""

    notice = "Please enter a task"


class MissingTimeError(ValidationError):
    """Raised when the hour or the minute has not been filled in."""

    notice = "Please select a time"


class InvalidColorError(ColorTasksError, ValueError):
    """Raised when a color is not a well-formed ``#RRGGBB`` string."""

    pass
