"""High-level scheduling service."""

from pathlib import Path
from typing import TextIO

from construction.logger import get_logger
from construction.models import TaskGraph
from construction.parser import parse_file, parse_stream

from .config import SchedulingConfig
from .core import ScheduleResult
from .engines import create_engine

logger = get_logger()


class SchedulingService:
    """Parses task input and runs the configured critical-path engine.

    Every failure surfaces as a ``ConstructionError`` subclass; turning that
    into an exit status is left to the caller.
    """

    def __init__(self, config: SchedulingConfig | None = None):
        self.config = config or SchedulingConfig()

    def schedule_graph(self, graph: TaskGraph) -> ScheduleResult:
        """Schedule an already finalized graph."""
        logger.changes(
            f"Scheduling {len(graph)} tasks with the {self.config.strategy.value} strategy"
        )
        return create_engine(graph, self.config).schedule()

    def schedule_stream(self, stream: TextIO) -> ScheduleResult:
        """Parse a task file from an open stream and schedule it."""
        return self.schedule_graph(parse_stream(stream))

    def schedule_file(self, file_path: Path | str) -> ScheduleResult:
        """Parse a task file from disk and schedule it."""
        return self.schedule_graph(parse_file(file_path))
