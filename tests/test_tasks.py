"""Tests for the task store."""

import pytest

from fitdash.core.tasks import Task, TaskStore


def make_clock(*values):
    """Id source that replays the given millisecond readings, then repeats the last."""
    readings = list(values)

    def _clock():
        if len(readings) > 1:
            return readings.pop(0)
        return readings[0]

    return _clock


@pytest.fixture
def store():
    return TaskStore(id_source=make_clock(1_000))


@pytest.fixture
def populated(store):
    store.add("Stretch for 10 minutes")
    store.add("Run 5k")
    store.add("Drink 2L of water")
    return store


class TestTask:
    def test_defaults_to_not_completed(self):
        task = Task(id=1, text="Plank")
        assert task.completed is False

    def test_toggle_flips(self):
        task = Task(id=1, text="Plank")
        task.toggle()
        assert task.completed is True
        task.toggle()
        assert task.completed is False


class TestAdd:
    @pytest.mark.parametrize("text", ["Run", "  Squats  ", "x", "Log meals\n"])
    def test_non_blank_text_appends_one_task(self, store, text):
        before = len(store)
        task = store.add(text)
        assert len(store) == before + 1
        assert task is not None
        assert task.completed is False
        assert store.list()[-1] is task

    def test_text_is_stored_verbatim(self, store):
        task = store.add("  Squats  ")
        assert task.text == "  Squats  "

    @pytest.mark.parametrize("text", ["", " ", "\t\n  "])
    def test_blank_text_is_ignored(self, store, text):
        assert store.add(text) is None
        assert len(store) == 0

    def test_preserves_insertion_order(self, populated):
        assert [t.text for t in populated.list()] == [
            "Stretch for 10 minutes",
            "Run 5k",
            "Drink 2L of water",
        ]


class TestIds:
    def test_ids_use_creation_time(self):
        store = TaskStore(id_source=make_clock(1_700_000_000_000, 1_700_000_000_250))
        first = store.add("a")
        second = store.add("b")
        assert first.id == 1_700_000_000_000
        assert second.id == 1_700_000_000_250

    def test_same_millisecond_gets_next_id(self, populated):
        assert [t.id for t in populated.list()] == [1_000, 1_001, 1_002]

    def test_clock_going_backwards_stays_unique(self):
        store = TaskStore(id_source=make_clock(5_000, 4_000))
        store.add("a")
        store.add("b")
        assert [t.id for t in store.list()] == [5_000, 5_001]

    def test_ids_not_reused_after_removal(self, populated):
        last = populated.list()[-1]
        populated.remove(last.id)
        new = populated.add("Foam roll")
        assert new.id > last.id

    def test_default_clock_produces_unique_ids(self):
        store = TaskStore()
        for i in range(50):
            store.add(f"task {i}")
        ids = [t.id for t in store.list()]
        assert len(set(ids)) == 50
        assert ids == sorted(ids)


class TestToggle:
    def test_flips_completed(self, populated):
        target = populated.list()[1]
        populated.toggle(target.id)
        assert populated.get(target.id).completed is True

    def test_twice_restores_original(self, populated):
        populated.toggle(populated.list()[0].id)
        before = [t.completed for t in populated.list()]
        target = populated.list()[2].id
        populated.toggle(target)
        populated.toggle(target)
        assert [t.completed for t in populated.list()] == before

    def test_only_touches_matching_task(self, populated):
        populated.toggle(populated.list()[0].id)
        assert [t.completed for t in populated.list()] == [True, False, False]

    def test_unknown_id_is_noop(self, populated):
        before = [(t.id, t.completed) for t in populated.list()]
        assert populated.toggle(999_999) is None
        assert [(t.id, t.completed) for t in populated.list()] == before


class TestRemove:
    def test_removes_and_compacts(self, populated):
        middle = populated.list()[1]
        assert populated.remove(middle.id) is True
        assert [t.text for t in populated.list()] == ["Stretch for 10 minutes", "Drink 2L of water"]

    def test_second_remove_is_noop(self, populated):
        target = populated.list()[0].id
        populated.remove(target)
        snapshot = populated.list()
        assert populated.remove(target) is False
        assert populated.list() == snapshot

    def test_unknown_id_is_noop(self, populated):
        assert populated.remove(42) is False
        assert len(populated) == 3


class TestListing:
    def test_list_returns_copy(self, populated):
        tasks = populated.list()
        tasks.clear()
        assert len(populated) == 3

    def test_pending_and_completed(self, populated):
        done = populated.list()[0]
        populated.toggle(done.id)
        assert populated.completed() == [done]
        assert [t.text for t in populated.pending()] == ["Run 5k", "Drink 2L of water"]
