"""Core dataclasses for the scheduling system."""

from dataclasses import dataclass, field
from typing import Any

from construction.models import Task, TaskGraph


def _default_dict() -> dict[str, Any]:
    return {}


def sort_key(task: Task) -> tuple[int, int, str]:
    """Display order: earliest start, then duration, then id."""
    if task.earliest_start is None:
        raise ValueError(f"Earliest start of {task.id} has not been computed")
    return (task.earliest_start, task.duration, task.id)


@dataclass
class ScheduleResult:
    """Outcome of a complete forward and backward pass."""

    graph: TaskGraph
    project_end: int
    critical_path: list[str]  # Zero-slack task ids in display order
    metadata: dict[str, Any] = field(default_factory=_default_dict)

    def ordered_tasks(self) -> list[Task]:
        """Tasks in display order."""
        return sorted(self.graph.tasks(), key=sort_key)


def critical_task_ids(graph: TaskGraph) -> list[str]:
    """Ids of zero-slack tasks in display order."""
    return [task.id for task in sorted(graph.tasks(), key=sort_key) if task.is_critical]


def build_result(graph: TaskGraph, strategy: str) -> ScheduleResult:
    """Package a fully scheduled graph into a ScheduleResult."""
    if graph.project_end is None:
        raise ValueError("Graph has not been scheduled")
    return ScheduleResult(
        graph=graph,
        project_end=graph.project_end,
        critical_path=critical_task_ids(graph),
        metadata={"strategy": strategy, "task_count": len(graph)},
    )
