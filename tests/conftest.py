# tests/conftest.py

from pathlib import Path

import pytest

from study_planner.task_store import TaskStore


@pytest.fixture()
def tasks_file(tmp_path: Path) -> str:
    return str(tmp_path / "tasks.json")


@pytest.fixture()
def store(tasks_file: str) -> TaskStore:
    return TaskStore(tasks_file)
