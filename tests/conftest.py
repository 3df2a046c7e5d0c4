# tests/conftest.py

from __future__ import annotations

import pytest

from tasker.database.kv_store import MemoryKeyValueStore
from tasker.database.repositories.tasks import TaskRepository
from tasker.database.task_storage import TaskStorage
from tasker.services.filter_service import FilterState
from tasker.ui.controller import TaskController

from .fakes import FakeView


@pytest.fixture()
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def storage(store: MemoryKeyValueStore) -> TaskStorage:
    return TaskStorage(store)


@pytest.fixture()
def repo(storage: TaskStorage) -> TaskRepository:
    return TaskRepository(storage)


@pytest.fixture()
def filter_state(storage: TaskStorage) -> FilterState:
    return FilterState(storage)


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def controller(repo: TaskRepository, filter_state: FilterState, view: FakeView) -> TaskController:
    """Controller wired to the in-memory store and the recording view, already started."""
    ctl = TaskController(repo, filter_state, view)
    ctl.start()
    return ctl
