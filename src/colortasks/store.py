"""In-memory task collection and its mutation operations."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterator

from .colors import contrast_text_color
from .exceptions import EmptyTextError, MissingTimeError
from .logger import get_logger
from .models import ClearOutcome, Task
from .timefields import format_time, is_unset

logger = get_logger()


def _new_task_id() -> str:
    return uuid.uuid4().hex


class TaskStore:
    """Owns the canonical, insertion-ordered list of tasks.

    Tasks live in a dict keyed by id, so lookups by id are O(1) while
    iteration still follows insertion order. ``add``, ``toggle``, ``remove``
    and ``clear`` are the only ways the collection changes.

    ``toggle`` and ``remove`` ignore unknown ids: a deferred UI action can
    arrive after the task it refers to has been deleted.

    Every id ever issued is remembered, even across ``clear()``, so none is
    handed out twice for the lifetime of the store.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None) -> None:
        self._tasks: dict[str, Task] = {}
        self._id_factory = id_factory or _new_task_id
        self._issued_ids: set[str] = set()

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks.values()))

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    @property
    def tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        return list(self._tasks.values())

    def get(self, task_id: str) -> Task | None:
        """Get task by id, or None if not found."""
        return self._tasks.get(task_id)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self._tasks.values() if t.completed)

    @property
    def pending_count(self) -> int:
        return len(self._tasks) - self.completed_count

    def sorted_by_time(self) -> list[Task]:
        """Tasks ordered by time of day, earliest first.

        Zero-padded ``HH:MM`` strings sort the same way as the times they
        represent. Ties keep insertion order (sorted() is stable). Storage
        order is not touched.
        """
        return sorted(self._tasks.values(), key=lambda t: t.time)

    def visible_tasks(self, sort_by_time: bool = False) -> list[Task]:
        """Tasks in the order the list should be shown."""
        return self.sorted_by_time() if sort_by_time else self.tasks

    # ---- mutations ----

    def add(
        self,
        text: str,
        hour: int | str | None,
        minute: int | str | None,
        color: str,
    ) -> Task:
        """Create a task and append it to the list.

        Args:
            text: Task label; surrounding whitespace is trimmed
            hour: Hour 0-23 as int or digit string, already clamped by the entry field
            minute: Minute 0-59 as int or digit string, already clamped by the entry field
            color: Background color '#RRGGBB'

        Returns:
            The new task

        Raises:
            EmptyTextError: If ``text`` is blank
            MissingTimeError: If ``hour`` or ``minute`` is unset
            InvalidColorError: If ``color`` is not '#RRGGBB'
            ValueError: If hour or minute is out of range
        """
        label = (text or "").strip()
        if not label:
            logger.checks("Rejected task: empty text")
            raise EmptyTextError()
        if is_unset(hour) or is_unset(minute):
            logger.checks(f"Rejected task {label!r}: missing time")
            raise MissingTimeError()

        assert hour is not None and minute is not None
        time = format_time(hour, minute)
        text_color = contrast_text_color(color)

        task = Task(
            id=self._allocate_id(),
            text=label,
            time=time,
            color=color,
            text_color=text_color,
        )
        self._tasks[task.id] = task
        logger.changes(f"Added task {task.id} at {task.time}: {task.text!r} ({task.color})")
        return task

    def toggle(self, task_id: str) -> None:
        """Flip the completed flag of a task; unknown ids are ignored."""
        task = self._tasks.get(task_id)
        if task is None:
            logger.checks(f"Toggle ignored: no task {task_id}")
            return
        self._tasks[task_id] = task.toggled()
        logger.changes(f"Task {task_id} completed={not task.completed}")

    def remove(self, task_id: str) -> None:
        """Delete a task; unknown ids are ignored."""
        if self._tasks.pop(task_id, None) is None:
            logger.checks(f"Remove ignored: no task {task_id}")
            return
        logger.changes(f"Removed task {task_id}")

    def clear(self) -> ClearOutcome:
        """Delete every task.

        The caller is expected to have asked the user for confirmation;
        nothing can be restored afterwards.
        """
        if not self._tasks:
            logger.checks("Clear ignored: no tasks")
            return ClearOutcome.NOTHING_TO_CLEAR
        count = len(self._tasks)
        self._tasks.clear()
        logger.changes(f"Cleared {count} tasks")
        return ClearOutcome.CLEARED

    # ---- id management ----

    def _allocate_id(self) -> str:
        task_id = self._id_factory()
        if task_id in self._issued_ids:
            raise RuntimeError(f"Task id factory returned a duplicate id: {task_id}")
        self._issued_ids.add(task_id)
        return task_id
