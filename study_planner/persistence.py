# study_planner/persistence.py

import os
import json
import logging
from typing import List, Sequence

from .data_model import Task, task_from_dict

TASKS_FILE = "tasks.json"

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when the task file cannot be written, read or decoded."""


def load_tasks(path: str = TASKS_FILE) -> List[Task]:
    """Load tasks from JSON file. A missing file means no tasks yet."""
    if not os.path.exists(path):
        logger.debug(f"No task file at {path}, starting empty")
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"expected a list of tasks, got {type(data).__name__}")
        return [task_from_dict(item) for item in data]
    except (OSError, ValueError, KeyError, TypeError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError; deeply nested arrays hit the recursion limit
        raise PersistenceError(f"Could not load tasks from {path}: {e}") from e


def save_tasks(tasks: Sequence[Task], path: str = TASKS_FILE):
    """Persist the whole task sequence to JSON file, replacing its content."""
    try:
        data = [t.to_dict() for t in tasks]
        # Encode before opening so a bad task leaves the old file intact
        text = json.dumps(data, indent=2)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except (OSError, TypeError, ValueError) as e:
        raise PersistenceError(f"Could not save tasks to {path}: {e}") from e
    logger.debug(f"Saved {len(data)} tasks to {path}")
