"""Critical-path scheduling for interdependent construction tasks."""

from .exceptions import (
    CircularDependencyError,
    ConstructionError,
    DuplicateTaskError,
    EmptyInputError,
    InvalidRecordError,
    MissingDependencyError,
    NoLeafTaskError,
    NoRootTaskError,
)
from .models import Task, TaskGraph
from .parser import GraphBuilder, build_graph, parse_file, parse_stream
from .report import ReportConfig, render_report
from .scheduler import (
    CriticalPathEngine,
    ScheduleResult,
    SchedulingConfig,
    SchedulingService,
    TopologicalEngine,
)

__version__ = "0.1.0"

__all__ = [
    "CircularDependencyError",
    "ConstructionError",
    "CriticalPathEngine",
    "DuplicateTaskError",
    "EmptyInputError",
    "GraphBuilder",
    "InvalidRecordError",
    "MissingDependencyError",
    "NoLeafTaskError",
    "NoRootTaskError",
    "ReportConfig",
    "ScheduleResult",
    "SchedulingConfig",
    "SchedulingService",
    "Task",
    "TaskGraph",
    "TopologicalEngine",
    "build_graph",
    "parse_file",
    "parse_stream",
    "render_report",
]
