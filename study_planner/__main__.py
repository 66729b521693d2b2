# study_planner/__main__.py

import sys

from .config import PlannerConfig, configure_logging
from .planner_app import PlannerApp
from .task_store import TaskStore


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    config = PlannerConfig.from_argv(argv)
    configure_logging(config)

    store = TaskStore(config.tasks_file, strict=config.strict_persistence)
    app = PlannerApp(store)
    app.run()


if __name__ == "__main__":
    main()
