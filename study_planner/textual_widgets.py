# study_planner/textual_widgets.py

from textual.widgets import ListItem, Label

from .data_model import Task, describe

DONE_MARKER = "[DONE]   "
PENDING_MARKER = "[PENDING]"


def render_task_line(task: Task, index: int) -> str:
    """Dashboard row for the task at zero-based index, numbered from 1."""
    status = DONE_MARKER if task.is_complete else PENDING_MARKER
    return f"{index + 1}. {status} {describe(task)}"


class TaskItem(ListItem):
    """A ListItem representing a single task row in the ListView."""

    DEFAULT_CSS = """
    TaskItem {
        color: #00dd00;
        text-style: bold;
    }

    TaskItem > Label {
        color: #00dd00;
        text-style: bold;
    }

    TaskItem.-done,
    TaskItem.-done > Label {
        color: #666666;
    }
    """

    def __init__(self, task: Task, index: int):
        self._task_item = task  # MessagePump owns _task
        self._index = index
        # Markers look like markup tags, so render them verbatim
        self._label = Label(self.render_text(), markup=False)
        super().__init__(self._label)
        if task.is_complete:
            self.add_class("-done")

    def render_text(self) -> str:
        return render_task_line(self._task_item, self._index)

    @property
    def task(self) -> Task:
        return self._task_item

    @property
    def index(self) -> int:
        return self._index
