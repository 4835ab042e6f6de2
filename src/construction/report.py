"""Rendering of a finished schedule."""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel

from .models import Task, TaskGraph
from .scheduler.core import ScheduleResult, sort_key


class ReportConfig(BaseModel):
    """Configuration for the text report."""

    time_unit: str = "weeks"
    bar_char: str = "="

    def model_post_init(self, __context: Any) -> None:
        """Validate configuration after initialization."""
        if len(self.bar_char) != 1:
            raise ValueError(
                f"report.bar_char must be a single character, got {self.bar_char!r}"
            )


def sort_tasks(graph: TaskGraph) -> list[Task]:
    """Tasks ordered by earliest start, then duration, then id."""
    return sorted(graph.tasks(), key=sort_key)


def _start_window(task: Task) -> tuple[int, int]:
    if task.earliest_start is None or task.latest_start is None:
        raise ValueError(f"Task {task.id} has not been scheduled")
    return task.earliest_start, task.latest_start


def format_start_window(task: Task) -> str:
    """Describe when a task has to start."""
    earliest, latest = _start_window(task)
    if earliest == latest:
        return f"{task.id} must begin at t={earliest}"
    return f"{task.id} must begin between t={earliest} and t={latest}"


def format_timeline_bar(task: Task, bar_char: str = "=") -> str:
    """Id, slack in parentheses, and the task's active window as a bar."""
    earliest, latest = _start_window(task)
    offset = " " * earliest
    return f"{task.id}\t({latest - earliest})\t{offset}{bar_char * task.duration}"


def render_report(graph: TaskGraph, config: ReportConfig | None = None) -> str:
    """Render the text report for a scheduled graph.

    Raises:
        ValueError: If the graph has not been scheduled
    """
    if not graph.is_scheduled:
        raise ValueError("Cannot render a report for an unscheduled graph")
    config = config or ReportConfig()

    tasks = sort_tasks(graph)
    lines = [f"Total duration of construction: {graph.project_end} {config.time_unit}", ""]
    lines.extend(format_start_window(task) for task in tasks)
    lines.append("")
    lines.extend(format_timeline_bar(task, config.bar_char) for task in tasks)
    return "\n".join(lines) + "\n"


def schedule_to_dict(result: ScheduleResult, config: ReportConfig | None = None) -> dict[str, Any]:
    """Structured form of a schedule, in display order."""
    config = config or ReportConfig()
    return {
        "project_end": result.project_end,
        "time_unit": config.time_unit,
        "critical_path": list(result.critical_path),
        "tasks": [
            {
                "id": task.id,
                "description": task.description,
                "duration": task.duration,
                "earliest_start": task.earliest_start,
                "latest_start": task.latest_start,
                "slack": task.slack,
                "critical": task.is_critical,
                "dependencies": sorted(task.dependencies),
            }
            for task in result.ordered_tasks()
        ],
    }


def render_yaml(result: ScheduleResult, config: ReportConfig | None = None) -> str:
    """Dump the schedule as YAML."""
    return yaml.dump(
        schedule_to_dict(result, config),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
