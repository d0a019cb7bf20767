"""Unit tests for the planner task list."""

import pytest

from dailyedge.tasks import TaskListEngine


@pytest.fixture
def changes():
    return []


@pytest.fixture
def planner(state, store, changes):
    return TaskListEngine(state, store, on_change=lambda: changes.append(1))


class TestAdd:
    def test_add_prepends_trimmed_task(self, planner, state):
        first = planner.add("Read chapter 3")
        second = planner.add("  Problem set  ")
        assert [t.text for t in state.tasks] == ["Problem set", "Read chapter 3"]
        assert state.tasks[0] is second
        assert first.done is False

    def test_ids_are_unique(self, planner):
        ids = {planner.add(f"task {i}").id for i in range(20)}
        assert len(ids) == 20

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
    def test_blank_text_is_rejected(self, planner, state, store, changes, text):
        assert planner.add(text) is None
        assert state.tasks == []
        assert changes == []
        assert not store.path.exists()

    def test_add_saves_and_notifies(self, planner, store, changes):
        task = planner.add("Lab report")
        assert changes == [1]
        assert [t.id for t in store.load().tasks] == [task.id]


class TestToggleDelete:
    def test_toggle_flips_done_and_updates_completed(self, planner, state):
        task = planner.add("Flashcards")
        planner.toggle(task.id)
        assert task.done is True
        assert state.completed == 1
        planner.toggle(task.id)
        assert task.done is False
        assert state.completed == 0

    def test_toggle_unknown_id_is_noop(self, planner, state, changes):
        planner.add("Flashcards")
        changes.clear()
        assert planner.toggle("missing") is None
        assert changes == []
        assert state.completed == 0

    def test_delete_removes_task(self, planner, state):
        keep = planner.add("Keep")
        drop = planner.add("Drop")
        planner.toggle(drop.id)
        assert state.completed == 1
        assert planner.delete(drop.id) is drop
        assert state.tasks == [keep]
        assert state.completed == 0

    def test_delete_unknown_id_is_noop(self, planner, state):
        planner.add("Keep")
        assert planner.delete("missing") is None
        assert len(state.tasks) == 1

    def test_round_trip_leaves_empty_list(self, planner, state, store):
        task = planner.add("x")
        planner.toggle(task.id)
        planner.delete(task.id)
        assert state.tasks == []
        assert state.completed == 0
        assert store.load().tasks == []


class TestCounts:
    def test_active_and_completed_counts(self, planner):
        tasks = [planner.add(t) for t in ("a", "b", "c")]
        planner.toggle(tasks[1].id)
        assert planner.active_count == 2
        assert planner.completed_count == 1

    def test_stale_completed_counter_is_overwritten(self, planner, state):
        planner.add("a")
        state.completed = 7
        planner.add("b")
        assert state.completed == 0

    def test_find(self, planner):
        task = planner.add("a")
        assert planner.find(task.id) is task
        assert planner.find("nope") is None
