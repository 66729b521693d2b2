# study_planner/planner_app.py

import logging
import datetime
from typing import Optional

from textual.app import App, ComposeResult
from textual.widgets import Button, Input, Label, ListView
from textual.containers import Container, Horizontal

from .data_model import StudyTask, DeadlineTask
from .task_store import TaskStore
from .textual_widgets import TaskItem


class PlannerApp(App):
    """Productivity dashboard: add study or deadline tasks and tick them off."""
    CSS = """
    Screen {
        color: #00dd00;
        text-style: bold;
    }

    #header {
        dock: top;
        background: black;
        color: #00dd00;
        text-style: bold;
        padding: 0 1 1 1;
        width: 100%;
        height: 2;
    }

    #task-form, #finish-form {
        height: auto;
    }

    #task-form Input {
        width: 1fr;
    }

    #task-number {
        width: 20;
    }

    ListView {
        width: 100%;
        height: 100%;
    }

    #report {
        dock: bottom;
        padding: 0 1;
        width: 100%;
    }
    """

    BINDINGS = [
        ("escape", "quit", "Quit"),
    ]

    list_view: Optional[ListView] = None

    def __init__(self, store: Optional[TaskStore] = None):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.store = store if store is not None else TaskStore()
        self.report_text = ""
        self.logger.debug(f"PlannerApp initialized with {len(self.store)} tasks")

    def compose(self) -> ComposeResult:
        current_date = datetime.datetime.now().strftime("%d.%m.%Y")
        yield Label(f"MY PRODUCTIVITY DASHBOARD ({current_date})", id="header")
        with Horizontal(id="task-form"):
            yield Input(placeholder="Title", id="title")
            yield Input(placeholder="Due date (for deadlines)", id="due-date")
            yield Input(placeholder="Mins", id="minutes")
            yield Button("Add Study", id="add-study", name="add_study")
            yield Button("Add Deadline", id="add-deadline", name="add_deadline")
        with Horizontal(id="finish-form"):
            yield Input(placeholder="Task # to finish", id="task-number")
            yield Button("Mark Done", id="mark-done", name="mark_done", variant="success")
        with Container():
            yield ListView()
        yield Label("", id="report", markup=False)

    async def on_mount(self) -> None:
        """Called once the app is fully loaded."""
        self.list_view = self.query_one(ListView)
        await self.refresh_view()
        self.query_one("#title", Input).focus()

    async def refresh_view(self) -> None:
        """Redraw the task list and report line from the store, then clear the form."""
        if self.list_view is None:
            return

        await self.list_view.clear()
        for index, task in enumerate(self.store.get_all_tasks()):
            self.list_view.append(TaskItem(task, index))

        self.report_text = self.store.get_productivity_report()
        self.query_one("#report", Label).update(self.report_text)

        for field in self.query(Input):
            field.value = ""

    def input_value(self, selector: str) -> str:
        return self.query_one(selector, Input).value.strip()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.name == "add_study":
            await self.add_study_task()
        elif event.button.name == "add_deadline":
            await self.add_deadline_task()
        elif event.button.name == "mark_done":
            await self.finish_task()

    async def add_study_task(self):
        title = self.input_value("#title")
        try:
            minutes = int(self.input_value("#minutes"))
        except ValueError:
            self.notify("Enter valid minutes!", severity="error")
            return
        if minutes <= 0:
            self.notify("Enter valid minutes!", severity="error")
            return

        self.store.add_task(StudyTask(title=title, minutes=minutes))
        await self.refresh_view()

    async def add_deadline_task(self):
        title = self.input_value("#title")
        due_date = self.input_value("#due-date")
        self.store.add_task(DeadlineTask(title=title, due_date=due_date))
        await self.refresh_view()

    async def finish_task(self):
        """Mark the task whose 1-based number was typed in as done."""
        try:
            number = int(self.input_value("#task-number"))
        except ValueError:
            self.notify("Enter a valid ID!", severity="error")
            return

        if not self.store.mark_task_done(number - 1):
            self.notify(f"No task #{number}", severity="warning")
        await self.refresh_view()

    async def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Selecting a row finishes that task."""
        if isinstance(event.item, TaskItem):
            self.store.mark_task_done(event.item.index)
            await self.refresh_view()
