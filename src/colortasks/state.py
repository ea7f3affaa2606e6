"""Application state: the task list plus the add-task form being filled in."""

from __future__ import annotations

from dataclasses import dataclass, field

from .colors import SLIDER_LIGHTNESS, SLIDER_SATURATION, hsl_to_hex, hue_to_hex, normalize_hex
from .config import TaskListConfig
from .exceptions import MissingTimeError
from .models import ClearOutcome, Task
from .store import TaskStore
from .timefields import clamp_hour_input, clamp_minute_input, time_is_complete, time_label


@dataclass
class Draft:
    """Raw form fields for the next task."""

    text: str = ""
    hours: str = ""
    minutes: str = ""
    color: str = ""

    @property
    def time_label(self) -> str:
        return time_label(self.hours, self.minutes)


@dataclass
class AppState:
    """Everything the screen needs, changed only through the methods below.

    The presentation layer holds one instance, calls these operations in
    response to user actions and re-renders from ``visible_tasks()`` and
    ``draft`` afterwards.
    """

    config: TaskListConfig = field(default_factory=TaskListConfig)
    store: TaskStore = field(default_factory=TaskStore)
    draft: Draft = field(default_factory=Draft)
    form_open: bool = False

    def __post_init__(self) -> None:
        if not self.draft.color:
            self.draft.color = self.config.default_color

    # ---- form fields ----

    def type_text(self, value: str) -> None:
        self.draft.text = value

    def type_hours(self, raw: str) -> str:
        """Update the hour field from its new raw content; returns the clamped value."""
        self.draft.hours = clamp_hour_input(raw)
        return self.draft.hours

    def type_minutes(self, raw: str) -> str:
        """Update the minute field from its new raw content; returns the clamped value."""
        self.draft.minutes = clamp_minute_input(raw)
        return self.draft.minutes

    def confirm_time(self) -> str:
        """Close the time dialog; both fields must be filled in."""
        if not time_is_complete(self.draft.hours, self.draft.minutes):
            raise MissingTimeError("Please fill in hours and minutes")
        return self.draft.time_label

    def pick_color(self, color: str) -> str:
        """Select a palette (or any other precomputed) color."""
        self.draft.color = normalize_hex(color)
        return self.draft.color

    def slide_hue(self, position: float) -> str:
        """Select the color under a hue slider position.

        The position is clamped to the slider track here, at the point of
        entry.
        """
        position = min(max(position, 0), self.config.slider_max)
        self.draft.color = hue_to_hex(position, self.config.slider_max)
        return self.draft.color

    def pick_hue(self, hue: float) -> str:
        """Select a color from a hue in degrees kept as its own value."""
        self.draft.color = hsl_to_hex(hue, SLIDER_SATURATION, SLIDER_LIGHTNESS)
        return self.draft.color

    def open_form(self) -> None:
        self.form_open = True

    def cancel(self) -> None:
        """Hide the form; what was typed and picked is still there when it reopens."""
        self.form_open = False

    def submit(self) -> Task:
        """Add the drafted task.

        On success the text and time fields are reset, the form closes and
        the selected color is kept for the next task. On a validation error the form is
        left as it is so the user can correct it.
        """
        task = self.store.add(
            self.draft.text, self.draft.hours, self.draft.minutes, self.draft.color
        )
        self.draft.text = ""
        self.draft.hours = ""
        self.draft.minutes = ""
        self.form_open = False
        return task

    # ---- list operations ----

    def toggle(self, task_id: str) -> None:
        self.store.toggle(task_id)

    def remove(self, task_id: str) -> None:
        self.store.remove(task_id)

    def request_clear(self) -> ClearOutcome | None:
        """First step of clearing the list.

        Returns NOTHING_TO_CLEAR when the list is already empty, or None when
        the caller has to ask the user to confirm and then call
        ``confirm_clear``.
        """
        if not len(self.store):
            return ClearOutcome.NOTHING_TO_CLEAR
        return None

    def confirm_clear(self) -> ClearOutcome:
        return self.store.clear()

    def visible_tasks(self) -> list[Task]:
        return self.store.visible_tasks(self.config.sort_by_time)
