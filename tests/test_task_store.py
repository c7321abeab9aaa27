"""
Tests for the task store: mutations, derived views and persistence.
"""

import json
import random

import pytest

from tasktracker.domain.clock import DAY_MS, HOUR_MS
from tasktracker.domain.exceptions import ValidationRejected
from tasktracker.domain.models import Category, NotificationKind
from tasktracker.infra.gateway import InMemoryPersistenceGateway
from tasktracker.services.task_store import TaskStore, category_label, due_date_presets

from conftest import T0
from fakes import ExplodingSink, FailingGateway


class TestCreate:
    def test_create_sets_defaults(self, task_store):
        task = task_store.create("  Write report  ")

        assert task.text == "Write report"
        assert task.completed is False
        assert task.created_at == T0
        assert task.due_date == task.created_at + 86_400_000
        assert task.category == Category.WORK

    def test_create_with_category(self, task_store):
        assert task_store.create("Run", Category.EXERCISE).category == Category.EXERCISE
        assert task_store.create("Call mom", "personal").category == Category.PERSONAL

    def test_newest_first(self, task_store, clock):
        first = task_store.create("first")
        clock.advance(1000)
        second = task_store.create("second")
        assert [t.id for t in task_store.tasks] == [second.id, first.id]

    def test_create_notifies_and_persists(self, task_store, sink, gateway):
        task_store.create("Buy milk")
        assert sink.kinds == [NotificationKind.ADD]
        stored = json.loads(gateway.get("todos"))
        assert stored[0]["text"] == "Buy milk"

    @pytest.mark.parametrize("text", ["", " ", "   ", "\t\n"])
    def test_blank_text_is_rejected(self, task_store, sink, gateway, text):
        with pytest.raises(ValidationRejected):
            task_store.create(text)
        assert len(task_store) == 0
        assert sink.kinds == []
        assert gateway.get("todos") is None

    def test_unknown_category_is_rejected(self, task_store):
        with pytest.raises(ValidationRejected):
            task_store.create("Something", "urgent")
        assert len(task_store) == 0

    def test_ids_are_unique(self, task_store):
        ids = {task_store.create(f"task {i}").id for i in range(50)}
        assert len(ids) == 50


class TestToggleComplete:
    def test_toggle_is_an_involution(self, task_store):
        task = task_store.create("Stretch")
        assert task_store.toggle_complete(task.id).completed is True
        assert task_store.toggle_complete(task.id).completed is False
        assert task_store.get(task.id) == task

    def test_every_toggle_sends_complete(self, task_store, sink):
        task = task_store.create("Stretch")
        task_store.toggle_complete(task.id)
        task_store.toggle_complete(task.id)
        assert sink.kinds == [NotificationKind.ADD, NotificationKind.COMPLETE, NotificationKind.COMPLETE]

    def test_unknown_id_is_a_no_op_but_still_notifies(self, task_store, sink):
        task = task_store.create("Stretch")
        before = task_store.tasks

        assert task_store.toggle_complete("missing") is None

        assert task_store.tasks == before
        assert task_store.get(task.id).completed is False
        assert sink.kinds[-1] == NotificationKind.COMPLETE

    def test_toggle_keeps_due_date_and_category(self, task_store):
        task = task_store.create("Gym", Category.EXERCISE)
        toggled = task_store.toggle_complete(task.id)
        assert toggled.due_date == task.due_date
        assert toggled.category == Category.EXERCISE
        assert toggled.created_at == task.created_at


class TestDelete:
    def test_delete_removes_task(self, task_store, sink, gateway):
        keep = task_store.create("keep")
        drop = task_store.create("drop")

        assert task_store.delete(drop.id) is True

        assert [t.id for t in task_store.tasks] == [keep.id]
        assert sink.kinds[-1] == NotificationKind.DELETE
        assert [t["id"] for t in json.loads(gateway.get("todos"))] == [keep.id]

    def test_delete_completed_task(self, task_store):
        task = task_store.create("done already")
        task_store.toggle_complete(task.id)
        assert task_store.delete(task.id) is True
        assert task_store.get(task.id) is None

    def test_delete_unknown_id(self, task_store, sink):
        task_store.create("keep")
        assert task_store.delete("missing") is False
        assert len(task_store) == 1
        assert sink.kinds[-1] == NotificationKind.DELETE


class TestRescheduleAndRecategorize:
    def test_reschedule_counts_from_now(self, task_store, clock):
        task = task_store.create("Pay rent")
        clock.advance(5 * HOUR_MS)

        moved = task_store.reschedule(task.id, 3)

        assert moved.due_date == clock.now + 3 * DAY_MS
        assert moved.created_at == T0

    def test_reschedule_can_backdate(self, task_store):
        task = task_store.create("Pay rent")
        moved = task_store.reschedule(task.id, -2)
        assert moved.due_date == T0 - 2 * DAY_MS

    def test_reschedule_keeps_completion(self, task_store):
        task = task_store.create("Pay rent")
        task_store.toggle_complete(task.id)
        assert task_store.reschedule(task.id, 7).completed is True

    def test_recategorize(self, task_store, gateway):
        task = task_store.create("Yoga")
        updated = task_store.recategorize(task.id, Category.EXERCISE)
        assert updated.category == Category.EXERCISE
        assert json.loads(gateway.get("todos"))[0]["category"] == "exercise"

    def test_unknown_ids_are_ignored(self, task_store):
        task_store.create("Yoga")
        before = task_store.tasks
        assert task_store.reschedule("missing", 1) is None
        assert task_store.recategorize("missing", Category.OTHER) is None
        assert task_store.tasks == before

    def test_recategorize_rejects_unknown_category(self, task_store):
        task = task_store.create("Yoga")
        with pytest.raises(ValidationRejected):
            task_store.recategorize(task.id, "hobby")


class TestFilters:
    @pytest.fixture
    def three_tasks(self, task_store, clock):
        tasks = []
        for text, category in [
            ("Write work report", Category.WORK),
            ("Homework with kids", Category.PERSONAL),
            ("Plan sprint", Category.WORK),
        ]:
            tasks.append(task_store.create(text, category))
            clock.advance(1000)
        return tasks

    def test_empty_query_returns_all_in_order(self, task_store, three_tasks):
        result = task_store.filter_by_text("")
        assert result == list(task_store.tasks)
        assert [t.text for t in result] == ["Plan sprint", "Homework with kids", "Write work report"]

    def test_text_search_is_case_insensitive_and_ignores_category(self, task_store, three_tasks):
        result = task_store.filter_by_text("WORK")
        assert [t.text for t in result] == ["Homework with kids", "Write work report"]

    def test_no_match(self, task_store, three_tasks):
        assert task_store.filter_by_text("groceries") == []

    def test_filter_by_category(self, task_store, three_tasks):
        assert [t.text for t in task_store.filter_by_category("work")] == ["Plan sprint", "Write work report"]


class TestStats:
    def test_empty_store(self, task_store):
        stats = task_store.compute_stats()
        assert (stats.total, stats.completed, stats.overdue, stats.due_today) == (0, 0, 0, 0)

    def test_counts(self, task_store):
        late = task_store.create("late")
        due_now = task_store.create("due now")
        done = task_store.create("done")
        task_store.reschedule(late.id, -1)
        task_store.reschedule(due_now.id, 0)
        task_store.toggle_complete(done.id)

        stats = task_store.compute_stats(T0)
        assert stats.total == 3
        assert stats.completed == 1
        assert stats.overdue == 1
        assert stats.due_today == 1

    def test_due_exactly_now_is_not_overdue(self, task_store):
        task = task_store.create("boundary")
        task_store.reschedule(task.id, 0)

        assert task_store.compute_stats(T0).overdue == 0
        assert task_store.find_overdue_candidates(T0) == []
        assert task_store.compute_stats(T0 + 1).overdue == 1

    def test_completed_tasks_count_as_due_today(self, task_store):
        task = task_store.create("finished today")
        task_store.reschedule(task.id, 0)
        task_store.toggle_complete(task.id)

        stats = task_store.compute_stats(T0 + HOUR_MS)
        assert stats.due_today == 1
        assert stats.overdue == 0

    def test_due_today_uses_calendar_day(self, task_store):
        """A task due tomorrow at noon only counts once that calendar day has started."""
        task_store.create("tomorrow noon")
        assert task_store.compute_stats(T0 - HOUR_MS).due_today == 0
        assert task_store.compute_stats(T0 + DAY_MS - HOUR_MS).due_today == 1

    @pytest.mark.parametrize("now", [10 ** 18, -(10 ** 18)])
    def test_timestamps_outside_calendar_range(self, task_store, now):
        task = task_store.create("far away")
        stats = task_store.compute_stats(now)

        assert stats.total == 1
        assert stats.due_today == 0
        assert stats.overdue == (1 if now > task.due_date else 0)

    def test_uses_store_clock_by_default(self, task_store, clock):
        task = task_store.create("soon late")
        clock.advance(DAY_MS + 1)
        assert task_store.compute_stats().overdue == 1
        assert [t.id for t in task_store.find_overdue_candidates()] == [task.id]

    def test_invariants_hold_for_random_histories(self, gateway, sink, clock):
        rng = random.Random(1234)
        store = TaskStore(gateway, sink=sink, clock=clock)
        for step in range(300):
            op = rng.choice(["create", "toggle", "delete", "reschedule", "tick"])
            ids = [t.id for t in store.tasks]
            if op == "create" or not ids:
                store.create(f"task {step}", rng.choice(list(Category)))
            elif op == "toggle":
                store.toggle_complete(rng.choice(ids))
            elif op == "delete":
                store.delete(rng.choice(ids))
            elif op == "reschedule":
                store.reschedule(rng.choice(ids), rng.randint(-5, 5))
            else:
                clock.advance(rng.randint(0, DAY_MS))

            stats = store.compute_stats()
            assert stats.completed <= stats.total
            assert stats.overdue <= stats.total - stats.completed
            assert stats.due_today <= stats.total
            assert len({t.id for t in store.tasks}) == len(store.tasks)


class TestPersistence:
    def test_round_trip(self, task_store, gateway, clock):
        a = task_store.create("a", Category.PERSONAL)
        task_store.create("b")
        task_store.toggle_complete(a.id)

        reloaded = TaskStore(gateway, clock=clock)

        assert reloaded.tasks == task_store.tasks

    def test_stored_field_names(self, task_store, gateway):
        task_store.create("named")
        stored = json.loads(gateway.get("todos"))[0]
        assert set(stored) == {"id", "text", "completed", "createdAt", "dueDate", "category"}
        assert stored["category"] == "work"

    def test_loads_snapshot_from_previous_version(self, clock):
        blob = json.dumps([{
            "id": "1749550000000",
            "text": "Old task",
            "completed": False,
            "createdAt": 1749550000000,
            "dueDate": 1749636400000,
            "category": "exercise",
        }])
        store = TaskStore(InMemoryPersistenceGateway({"todos": blob}), clock=clock)
        assert store.tasks[0].text == "Old task"
        assert store.tasks[0].category == Category.EXERCISE

    @pytest.mark.parametrize("blob", [
        "not json at all",
        "{\"text\": \"an object, not a list\"}",
        "[{\"id\": \"1\", \"text\": \"missing fields\"}]",
        "[{\"id\": \"1\", \"text\": \"x\", \"completed\": false, \"createdAt\": 1, \"dueDate\": 2, \"category\": \"fun\"}]",
    ])
    def test_corrupt_snapshot_falls_back_to_empty(self, blob, clock):
        gateway = InMemoryPersistenceGateway({"todos": blob})
        store = TaskStore(gateway, clock=clock)
        assert store.tasks == ()

        store.create("fresh start")
        assert json.loads(gateway.get("todos"))[0]["text"] == "fresh start"

    def test_duplicate_ids_in_snapshot_are_dropped(self, clock):
        entry = {"id": "same", "text": "x", "completed": False, "createdAt": 1, "dueDate": 2, "category": "work"}
        gateway = InMemoryPersistenceGateway({"todos": json.dumps([entry, dict(entry, text="y")])})
        store = TaskStore(gateway, clock=clock)
        assert [t.text for t in store.tasks] == ["x"]

    def test_failed_write_keeps_memory_state(self, clock):
        gateway = FailingGateway(fail_set=True)
        store = TaskStore(gateway, clock=clock)

        task = store.create("survives")
        store.toggle_complete(task.id)

        assert store.get(task.id).completed is True
        assert gateway.set_attempts == 2

    def test_failed_read_starts_empty(self, clock):
        store = TaskStore(FailingGateway(fail_get=True, fail_set=False), clock=clock)
        assert store.tasks == ()

    def test_sqlite_round_trip(self, sqlite_gateway, clock):
        store = TaskStore(sqlite_gateway, clock=clock)
        store.create("persisted in sqlite", Category.OTHER)

        reloaded = TaskStore(sqlite_gateway, clock=clock)
        assert reloaded.tasks == store.tasks


class TestNotificationSink:
    def test_failing_sink_does_not_break_mutations(self, gateway, clock):
        store = TaskStore(gateway, sink=ExplodingSink(), clock=clock)
        task = store.create("loud")
        store.toggle_complete(task.id)
        store.delete(task.id)
        assert len(store) == 0

    def test_default_sink_is_silent(self, gateway, clock):
        store = TaskStore(gateway, clock=clock)
        store.create("quiet")
        assert len(store) == 1


class TestLabels:
    def test_due_date_presets(self):
        assert due_date_presets() == [("Tomorrow", 1), ("3 Days", 3), ("1 Week", 7), ("2 Weeks", 14)]

    def test_category_labels(self):
        assert [category_label(c) for c in Category] == ["Work", "Personal", "Exercise", "Other"]
