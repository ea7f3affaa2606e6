"""Data models for colortasks."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


@dataclass(frozen=True)
class Task:
    """A single entry in the task list.

    Everything except ``completed`` is fixed when the task is added.
    ``text_color`` is derived from ``color`` at that moment and is never
    recomputed.
    """

    id: str
    text: str
    time: str  # "HH:MM", 24-hour, zero-padded
    color: str  # "#RRGGBB"
    text_color: str  # "#000000" or "#FFFFFF"
    completed: bool = False

    def toggled(self) -> Task:
        """Return a copy with ``completed`` flipped."""
        return replace(self, completed=not self.completed)

    def __str__(self) -> str:
        mark = "x" if self.completed else " "
        return f"[{mark}] {self.time} {self.text}"


class ClearOutcome(str, Enum):
    """Result of clearing the task list."""

    CLEARED = "cleared"
    NOTHING_TO_CLEAR = "nothing_to_clear"

    @property
    def notice(self) -> str:
        """User-facing message for this outcome."""
        if self is ClearOutcome.NOTHING_TO_CLEAR:
            return "There are no tasks to clear"
        return "All tasks cleared"
