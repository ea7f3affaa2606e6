"""Tests for the task store."""

from __future__ import annotations

import pytest

from colortasks.exceptions import EmptyTextError, InvalidColorError, MissingTimeError
from colortasks.models import ClearOutcome
from colortasks.store import TaskStore


class TestAdd:
    """Test adding tasks."""

    def test_add_builds_task(self, store: TaskStore) -> None:
        """Test that add fills every field."""
        task = store.add("Buy milk", 9, 5, "#FFFFFF")

        assert task.id == "task-1"
        assert task.text == "Buy milk"
        assert task.time == "09:05"
        assert task.color == "#FFFFFF"
        assert task.text_color == "#000000"
        assert task.completed is False
        assert store.tasks == [task]

    def test_add_accepts_digit_strings(self, store: TaskStore) -> None:
        """Test the raw field values the form hands over."""
        task = store.add("Call mom", "7", "30", "#2681ff")
        assert task.time == "07:30"
        assert task.text_color == "#FFFFFF"

    def test_add_trims_text(self, store: TaskStore) -> None:
        """Test that surrounding whitespace is removed."""
        task = store.add("  Walk the dog \n", 23, 59, "#67ff26")
        assert task.text == "Walk the dog"
        assert task.time == "23:59"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_add_rejects_empty_text(self, store: TaskStore, text: str) -> None:
        """Test that blank labels are rejected and nothing is stored."""
        with pytest.raises(EmptyTextError, match="Please enter a task"):
            store.add(text, 10, 30, "#FFFFFF")
        assert len(store) == 0

    @pytest.mark.parametrize(("hour", "minute"), [("", "30"), ("10", ""), (None, 5), (5, None)])
    def test_add_rejects_missing_time(
        self, store: TaskStore, hour: str | None, minute: str | None
    ) -> None:
        """Test that both time fields are required."""
        with pytest.raises(MissingTimeError, match="Please select a time"):
            store.add("Buy milk", hour, minute, "#FFFFFF")
        assert len(store) == 0

    def test_empty_text_checked_before_time(self, store: TaskStore) -> None:
        """Test that an empty label is reported first."""
        with pytest.raises(EmptyTextError):
            store.add("", "", "", "#FFFFFF")

    def test_add_rejects_out_of_range_time(self, store: TaskStore) -> None:
        """Test that unclamped values are a caller error."""
        with pytest.raises(ValueError, match="hour"):
            store.add("Late", 24, 0, "#FFFFFF")
        with pytest.raises(ValueError, match="minute"):
            store.add("Late", 0, 60, "#FFFFFF")
        assert len(store) == 0

    def test_add_rejects_malformed_color(self, store: TaskStore) -> None:
        """Test that a bad color fails loudly and stores nothing."""
        with pytest.raises(InvalidColorError):
            store.add("Paint", 12, 0, "red")
        assert len(store) == 0

    def test_add_keeps_insertion_order(self, store: TaskStore) -> None:
        """Test that tasks stay in the order they were added."""
        store.add("b", 23, 0, "#FFFFFF")
        store.add("a", 1, 0, "#FFFFFF")
        assert [t.text for t in store] == ["b", "a"]

    def test_default_ids_are_unique(self) -> None:
        """Test the default id factory."""
        store = TaskStore()
        ids = {store.add(f"task {i}", 8, 0, "#FFFFFF").id for i in range(50)}
        assert len(ids) == 50

    def test_duplicate_id_from_factory_is_refused(self) -> None:
        """Test that an id is never handed out twice."""
        store = TaskStore(id_factory=lambda: "same")
        store.add("first", 8, 0, "#FFFFFF")
        with pytest.raises(RuntimeError, match="duplicate"):
            store.add("second", 9, 0, "#FFFFFF")
        assert len(store) == 1

    def test_id_not_reused_after_remove(self) -> None:
        """Test that a removed task's id cannot come back."""
        ids = iter(["x", "x"])
        store = TaskStore(id_factory=lambda: next(ids))
        task = store.add("first", 8, 0, "#FFFFFF")
        store.remove(task.id)
        with pytest.raises(RuntimeError):
            store.add("second", 8, 0, "#FFFFFF")

    def test_id_not_reused_after_clear(self) -> None:
        """Test that issued ids are still remembered once the list is cleared."""
        ids = iter(["x", "x"])
        store = TaskStore(id_factory=lambda: next(ids))
        store.add("first", 8, 0, "#FFFFFF")
        store.clear()
        with pytest.raises(RuntimeError, match="duplicate"):
            store.add("second", 8, 0, "#FFFFFF")
        assert len(store) == 0


class TestToggleRemove:
    """Test toggling and removing tasks."""

    def test_toggle_flips_completed(self, store: TaskStore) -> None:
        """Test a toggle pair returns the task to where it started."""
        task = store.add("Buy milk", 9, 5, "#FFFFFF")

        store.toggle(task.id)
        toggled = store.get(task.id)
        assert toggled is not None
        assert toggled.completed is True
        assert toggled.text == task.text
        assert toggled.time == task.time
        assert toggled.color == task.color
        assert toggled.text_color == task.text_color

        store.toggle(task.id)
        assert store.get(task.id) == task

    def test_toggle_keeps_position(self, store: TaskStore) -> None:
        """Test that toggling does not move the task."""
        first = store.add("first", 8, 0, "#FFFFFF")
        store.add("second", 9, 0, "#FFFFFF")
        store.toggle(first.id)
        assert [t.text for t in store.tasks] == ["first", "second"]
        assert store.completed_count == 1
        assert store.pending_count == 1

    def test_toggle_unknown_id_is_noop(self, store: TaskStore) -> None:
        """Test toggling a task that is gone."""
        task = store.add("Buy milk", 9, 5, "#FFFFFF")
        store.toggle("missing")
        assert store.tasks == [task]

    def test_remove(self, store: TaskStore) -> None:
        """Test removing twice only removes once."""
        keep = store.add("keep", 8, 0, "#FFFFFF")
        drop = store.add("drop", 9, 0, "#FFFFFF")

        store.remove(drop.id)
        assert store.tasks == [keep]
        assert drop.id not in store

        store.remove(drop.id)
        assert len(store) == 1


class TestClear:
    """Test clearing the list."""

    def test_clear_empty(self, store: TaskStore) -> None:
        """Test clearing an empty list."""
        assert store.clear() is ClearOutcome.NOTHING_TO_CLEAR
        assert len(store) == 0

    def test_clear_non_empty(self, store: TaskStore) -> None:
        """Test clearing a populated list."""
        store.add("a", 8, 0, "#FFFFFF")
        store.add("b", 9, 0, "#FFFFFF")
        assert store.clear() is ClearOutcome.CLEARED
        assert len(store) == 0
        assert store.clear() is ClearOutcome.NOTHING_TO_CLEAR


class TestOrdering:
    """Test the sorted projection."""

    def test_sorted_by_time(self, store: TaskStore) -> None:
        """Test sorting by time leaves storage order alone."""
        for hour in (23, 1, 9):
            store.add(f"at {hour}", hour, 30 if hour == 9 else 0, "#FFFFFF")

        assert [t.time for t in store.sorted_by_time()] == ["01:00", "09:30", "23:00"]
        assert [t.time for t in store.tasks] == ["23:00", "01:00", "09:30"]

    def test_sorted_by_time_is_stable(self, store: TaskStore) -> None:
        """Test that equal times keep insertion order."""
        store.add("second slot", 10, 0, "#FFFFFF")
        store.add("early", 6, 0, "#FFFFFF")
        store.add("third slot", 10, 0, "#FFFFFF")

        assert [t.text for t in store.sorted_by_time()] == ["early", "second slot", "third slot"]

    def test_visible_tasks(self, store: TaskStore) -> None:
        """Test choosing between the two orders."""
        store.add("late", 22, 0, "#FFFFFF")
        store.add("early", 6, 0, "#FFFFFF")

        assert [t.text for t in store.visible_tasks()] == ["late", "early"]
        assert [t.text for t in store.visible_tasks(sort_by_time=True)] == ["early", "late"]

    def test_tasks_returns_copy(self, store: TaskStore) -> None:
        """Test that callers cannot mutate storage through the list."""
        store.add("a", 8, 0, "#FFFFFF")
        store.tasks.clear()
        store.sorted_by_time().clear()
        assert len(store) == 1
