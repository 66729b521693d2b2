# study_planner/task_store.py

import copy
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .data_model import Task
from .persistence import (
    TASKS_FILE,
    PersistenceError,
    load_tasks,
    save_tasks
)

NO_TASKS_REPORT = "PRODUCTIVITY SCORE: 0% (No tasks)"


@dataclass
class PersistenceResult:
    """Outcome of a save or load. Callers are free to ignore it."""
    ok: bool
    error: Optional[str] = None


@dataclass
class ProductivityReport:
    """Completion statistics the report line is rendered from."""
    percentage: int
    completed: int
    total: int
    comment: str

    def __str__(self):
        if self.total == 0:
            return NO_TASKS_REPORT
        return f"PRODUCTIVITY SCORE: {self.percentage}% | {self.comment}"


def comment_for(percentage: int) -> str:
    if percentage == 100:
        return "Excellent! You crushed it."
    if percentage >= 50:
        return "Good job, keep going!"
    return "You are falling behind!"


class TaskStore:
    """
    Ordered task collection, written through to a JSON file.

    Every successful mutation rewrites the whole file. Persistence failures
    are logged and reported through PersistenceResult; with strict=True they
    are raised as PersistenceError instead.
    """

    def __init__(self, path: str = TASKS_FILE, strict: bool = False):
        self.path = path
        self.strict = strict
        self.logger = logging.getLogger(__name__)
        self._tasks: List[Task] = []
        self.load()

    def __len__(self):
        return len(self._tasks)

    def add_task(self, task: Task) -> None:
        """Append a task to the end of the list and save."""
        self._tasks.append(task)
        self.logger.debug(f"Added task #{len(self._tasks)}: {task!r}")
        self.save()

    def mark_task_done(self, index: int) -> bool:
        """
        Mark the task at zero-based index complete and save.

        Returns False, without touching memory or storage, when index is out
        of range.
        """
        if not 0 <= index < len(self._tasks):
            self.logger.debug(f"Ignoring mark done for index {index}, have {len(self._tasks)} tasks")
            return False
        self._tasks[index].mark_done()
        self.save()
        return True

    def get_all_tasks(self) -> Tuple[Task, ...]:
        """Snapshot of the tasks in display order. Changing it does not affect the store."""
        return tuple(copy.copy(task) for task in self._tasks)

    def productivity_score(self) -> ProductivityReport:
        total = len(self._tasks)
        if total == 0:
            return ProductivityReport(percentage=0, completed=0, total=0, comment="No tasks")
        completed = sum(1 for task in self._tasks if task.is_complete)
        percentage = (completed * 100) // total
        return ProductivityReport(
            percentage=percentage,
            completed=completed,
            total=total,
            comment=comment_for(percentage)
        )

    def get_productivity_report(self) -> str:
        return str(self.productivity_score())

    def save(self) -> PersistenceResult:
        """Write all tasks to storage. In-memory state is kept even if this fails."""
        try:
            save_tasks(self._tasks, self.path)
        except PersistenceError as e:
            self.logger.exception("Error saving tasks")
            if self.strict:
                raise
            return PersistenceResult(ok=False, error=str(e))
        return PersistenceResult(ok=True)

    def load(self) -> PersistenceResult:
        """Replace in-memory tasks with the stored ones, or with nothing if that fails."""
        try:
            self._tasks = load_tasks(self.path)
        except PersistenceError as e:
            self.logger.exception("Error loading tasks, starting with an empty list")
            self._tasks = []
            if self.strict:
                raise
            return PersistenceResult(ok=False, error=str(e))
        self.logger.debug(f"Loaded {len(self._tasks)} tasks from {self.path}")
        return PersistenceResult(ok=True)
