"""Scheduler package - critical-path scheduling of a task graph.

Main entry points:
- SchedulingService: parse task input and schedule it
- create_engine: select an engine from a SchedulingConfig
- CriticalPathEngine: worklist propagation
- TopologicalEngine: single pass over a Kahn order
"""

from .config import PropagationStrategy, SchedulingConfig
from .core import ScheduleResult, critical_task_ids, sort_key
from .engine import CriticalPathEngine
from .engines import create_engine
from .protocols import CriticalPathAlgorithm
from .service import SchedulingService
from .topological import TopologicalEngine

__all__ = [
    "CriticalPathAlgorithm",
    "CriticalPathEngine",
    "PropagationStrategy",
    "ScheduleResult",
    "SchedulingConfig",
    "SchedulingService",
    "TopologicalEngine",
    "create_engine",
    "critical_task_ids",
    "sort_key",
]
