# study_planner/data_model.py

from typing import Union
from dataclasses import dataclass

STUDY_KIND = "study"
DEADLINE_KIND = "deadline"


class _FixedFields:
    """Fields listed in FIXED can be set by __init__ and never reassigned."""
    FIXED = ()

    def __setattr__(self, name, value):
        if name in self.FIXED and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is fixed at creation")
        super().__setattr__(name, value)


@dataclass
class StudyTask(_FixedFields):
    """A timed study session, estimated in minutes."""
    title: str
    minutes: int
    is_complete: bool = False

    kind = STUDY_KIND
    FIXED = ("title", "minutes")

    def mark_done(self) -> None:
        self.is_complete = True

    def to_dict(self):
        """Convert StudyTask to a dictionary for JSON serialization."""
        return {
            "kind": self.kind,
            "title": self.title,
            "is_complete": self.is_complete,
            "minutes": self.minutes,
        }

    def __repr__(self):
        return f"StudyTask(title={self.title}, minutes={self.minutes}, done={self.is_complete})"


@dataclass
class DeadlineTask(_FixedFields):
    """Something due on a date. The date is free text and never parsed."""
    title: str
    due_date: str
    is_complete: bool = False

    kind = DEADLINE_KIND
    FIXED = ("title", "due_date")

    def mark_done(self) -> None:
        self.is_complete = True

    def to_dict(self):
        """Convert DeadlineTask to a dictionary for JSON serialization."""
        return {
            "kind": self.kind,
            "title": self.title,
            "is_complete": self.is_complete,
            "due_date": self.due_date,
        }

    def __repr__(self):
        return f"DeadlineTask(title={self.title}, due={self.due_date}, done={self.is_complete})"


Task = Union[StudyTask, DeadlineTask]


def describe(task: Task) -> str:
    """Human readable label for a task, as shown on the dashboard."""
    if isinstance(task, StudyTask):
        return f"Study: {task.title} ({task.minutes} mins)"
    if isinstance(task, DeadlineTask):
        return f"Deadline: {task.title} (Due: {task.due_date})"
    raise TypeError(f"Not a task: {task!r}")


def _field(data: dict, name: str, expected: type):
    value = data[name]
    # bool is an int subclass, but never a valid minute count
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ValueError(f"{name} must be {expected.__name__}, got {value!r}")
    return value


def task_from_dict(data: dict) -> Task:
    """Create a task from a tagged dictionary (JSON deserialization)."""
    if not isinstance(data, dict):
        raise ValueError(f"task record must be an object, got {data!r}")
    kind = data["kind"]
    if kind == STUDY_KIND:
        return StudyTask(
            title=_field(data, "title", str),
            minutes=_field(data, "minutes", int),
            is_complete=_field(data, "is_complete", bool)
        )
    if kind == DEADLINE_KIND:
        return DeadlineTask(
            title=_field(data, "title", str),
            due_date=_field(data, "due_date", str),
            is_complete=_field(data, "is_complete", bool)
        )
    raise ValueError(f"Unknown task kind: {kind!r}")
