# study_planner/config.py

import logging
from dataclasses import dataclass
from typing import Sequence

from .persistence import TASKS_FILE

DEBUG_LOG = "debug.log"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


@dataclass
class PlannerConfig:
    """Start-up settings for the planner."""
    tasks_file: str = TASKS_FILE
    debug_log: str = DEBUG_LOG
    release: bool = False
    strict_persistence: bool = False

    @classmethod
    def from_argv(cls, argv: Sequence[str]):
        return cls(release='--release' in argv, strict_persistence='--strict' in argv)

    @property
    def log_mode(self) -> str:
        # Keep earlier runs' logs only in release mode
        return 'a' if self.release else 'w'


def configure_logging(config: PlannerConfig):
    """Send all log output to the debug file; the terminal belongs to the UI."""
    logging.basicConfig(
        filename=config.debug_log,
        filemode=config.log_mode,
        level=logging.DEBUG,
        format=LOG_FORMAT
    )
