"""colortasks - a color-tagged task list."""

from .colors import contrast_text_color, hsl_to_hex, hue_to_hex
from .exceptions import (
    ColorTasksError,
    EmptyTextError,
    InvalidColorError,
    MissingTimeError,
    ValidationError,
)
from .models import ClearOutcome, Task
from .state import AppState
from .store import TaskStore

__version__ = "0.1.0"

__all__ = [
    "AppState",
    "ClearOutcome",
    "ColorTasksError",
    "EmptyTextError",
    "InvalidColorError",
    "MissingTimeError",
    "Task",
    "TaskStore",
    "ValidationError",
    "contrast_text_color",
    "hsl_to_hex",
    "hue_to_hex",
]
