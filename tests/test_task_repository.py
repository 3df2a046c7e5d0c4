# tests/test_task_repository.py

from __future__ import annotations

import json

from tasker.database.kv_store import MemoryKeyValueStore
from tasker.database.repositories.tasks import TaskRepository
from tasker.database.task_storage import TaskStorage
from tasker.utils.ids import new_id


def _repo_with(records) -> tuple[TaskRepository, MemoryKeyValueStore]:
    store = MemoryKeyValueStore({"tasks": json.dumps(records)})
    return TaskRepository(TaskStorage(store)), store


def test_add_appends_trimmed_incomplete_task(repo: TaskRepository) -> None:
    task = repo.add("  buy milk  ")

    assert task is not None
    assert task.text == "buy milk"
    assert task.completed is False
    assert [(t.text, t.completed) for t in repo.list()] == [("buy milk", False)]


def test_add_rejects_blank_text(repo: TaskRepository) -> None:
    repo.add("keep")
    before = repo.list()

    assert repo.add("") is None
    assert repo.add("   ") is None
    assert repo.list() == before


def test_insertion_order_is_display_order(repo: TaskRepository) -> None:
    for text in ["c", "a", "b"]:
        repo.add(text)
    assert [t.text for t in repo.list()] == ["c", "a", "b"]


def test_ids_are_stable_across_toggle_and_edit(repo: TaskRepository) -> None:
    a = repo.add("a")
    b = repo.add("b")

    repo.set_completed(a.id, True)
    repo.edit(b.id, "bee")
    repo.set_completed(a.id, False)

    tasks = repo.list()
    assert [t.id for t in tasks] == [a.id, b.id]
    assert [t.text for t in tasks] == ["a", "bee"]


def test_set_completed_only_touches_target(repo: TaskRepository) -> None:
    a = repo.add("a")
    b = repo.add("b")

    updated = repo.set_completed(a.id, True)

    assert updated is not None and updated.completed is True
    assert repo.get(a.id).completed is True
    assert repo.get(b.id).completed is False


def test_unknown_ids_are_noops(repo: TaskRepository, store: MemoryKeyValueStore) -> None:
    repo.add("a")
    snapshot = store.get_item("tasks")

    assert repo.set_completed("missing", True) is None
    assert repo.remove("missing") is False
    assert repo.edit("missing", "text") is None
    assert repo.get("missing") is None
    assert store.get_item("tasks") == snapshot


def test_remove_deletes_only_target(repo: TaskRepository) -> None:
    a = repo.add("a")
    b = repo.add("b")

    assert repo.remove(a.id) is True
    assert [t.id for t in repo.list()] == [b.id]


def test_edit_trims_and_rejects_empty(repo: TaskRepository) -> None:
    task = repo.add("old")
    repo.set_completed(task.id, True)

    edited = repo.edit(task.id, "  new ")
    assert edited is not None
    assert (edited.id, edited.text, edited.completed) == (task.id, "new", True)

    assert repo.edit(task.id, "") is None
    assert repo.edit(task.id, "   ") is None
    assert repo.get(task.id).text == "new"


def test_clear_completed_keeps_order_of_rest(repo: TaskRepository) -> None:
    ids = [repo.add(t).id for t in ["a", "b", "c", "d"]]
    repo.set_completed(ids[1], True)
    repo.set_completed(ids[3], True)

    assert repo.clear_completed() == 2
    assert [t.text for t in repo.list()] == ["a", "c"]
    assert repo.clear_completed() == 0


def test_migration_assigns_ids_to_legacy_records() -> None:
    repo, store = _repo_with([{"text": "x", "completed": True}])

    assert repo.migrate_if_needed() == 1

    stored = json.loads(store.get_item("tasks"))
    assert len(stored) == 1
    assert stored[0]["id"]
    assert stored[0]["text"] == "x"
    assert stored[0]["completed"] is True


def test_migration_is_idempotent() -> None:
    repo, store = _repo_with(
        [
            {"id": "keep-1", "text": "kept", "completed": False},
            {"text": "legacy"},
            "bare string",
        ]
    )

    assert repo.migrate_if_needed() == 2
    once = store.get_item("tasks")

    assert repo.migrate_if_needed() == 0
    assert store.get_item("tasks") == once

    tasks = repo.list()
    assert [t.text for t in tasks] == ["kept", "legacy", "bare string"]
    assert tasks[0].id == "keep-1"
    assert tasks[1].completed is False
    assert len({t.id for t in tasks}) == 3


def test_migration_drops_unrecognized_entries() -> None:
    repo, store = _repo_with([None, 7, {"id": "1", "text": "ok", "completed": False}])

    assert repo.migrate_if_needed() == 0
    assert json.loads(store.get_item("tasks")) == [
        {"id": "1", "text": "ok", "completed": False}
    ]


def test_migrated_data_is_not_written_when_nothing_changes() -> None:
    records = [{"id": "1", "text": "ok", "completed": False, "extra": "kept"}]
    repo, store = _repo_with(records)
    raw = store.get_item("tasks")

    repo.migrate_if_needed()

    assert store.get_item("tasks") == raw


def test_new_ids_are_unique() -> None:
    ids = {new_id() for _ in range(2000)}
    assert len(ids) == 2000
