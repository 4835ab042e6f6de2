"""Graph generation for construction schedules."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .models import Task, TaskGraph

CRITICAL_FILL = "salmon"
DEFAULT_FILL = "lightblue"
UNSCHEDULED_FILL = "white"


class GraphView(Enum):
    """Types of graph views available."""

    ALL = "all"
    CRITICAL_PATH = "critical-path"


class GraphGenerator:
    """Generate task dependency graphs in DOT format."""

    def __init__(self, graph: TaskGraph):
        self.graph = graph

    def generate(self, view: GraphView = GraphView.ALL) -> str:
        """Generate a DOT graph based on the specified view."""
        if view == GraphView.ALL:
            return self._generate_all()
        if view == GraphView.CRITICAL_PATH:
            if not self.graph.is_scheduled:
                raise ValueError("Critical path view requires a scheduled graph")
            return self._generate_critical_path()
        raise ValueError(f"Unknown view: {view}")

    def _generate_all(self) -> str:
        """Every task and every dependency edge."""
        tasks = self.graph.tasks()
        lines = self._header("TaskGraph")

        for task in tasks:
            lines.append(f"  {self._format_node(task)}")
        lines.append("")

        # Edges point from a dependency to the task waiting on it
        lines.append("  // Dependencies")
        for task in tasks:
            for dep_id in sorted(task.dependencies):
                lines.append(f"  {self._format_edge(dep_id, task.id)}")

        lines.append("}")
        return "\n".join(lines)

    def _generate_critical_path(self) -> str:
        """Only zero-slack tasks and the edges between them."""
        critical = [task for task in self.graph.tasks() if task.is_critical]
        critical_ids = {task.id for task in critical}
        lines = self._header("CriticalPath")

        for task in critical:
            lines.append(f"  {self._format_node(task)}")
        lines.append("")

        for task in critical:
            for dep_id in sorted(task.dependencies):
                # A critical task can also wait on a task that has slack
                if dep_id in critical_ids:
                    lines.append(f"  {self._format_edge(dep_id, task.id)}")

        lines.append("}")
        return "\n".join(lines)

    def _header(self, name: str) -> list[str]:
        return [f"digraph {name} {{", "  rankdir=LR;", "  node [shape=box];", ""]

    def _escape_label(self, label: str) -> str:
        """Escape special characters in DOT labels."""
        return label.replace('"', '\\"').replace("\n", "\\n")

    def _quote_id(self, task_id: str) -> str:
        return f'"{self._escape_label(task_id)}"'

    def _format_node(self, task: Task) -> str:
        """Format a node, highlighting critical tasks once scheduled."""
        style = self._node_style(task)
        label = f"{self._escape_label(task.id)}\\nduration {task.duration}"
        if self.graph.is_scheduled:
            label += f"\\nslack {task.slack}"

        attrs = [f'label="{label}"']
        attrs.append("style=filled")
        attrs.append(f'fillcolor="{style["fill_color"]}"')
        if "border_width" in style:
            attrs.append(f"penwidth={style['border_width']}")
        return f"{self._quote_id(task.id)} [{', '.join(attrs)}];"

    def _format_edge(self, from_id: str, to_id: str) -> str:
        attrs: list[str] = []
        if self._is_critical_edge(from_id, to_id):
            attrs.append('color="red"')
            attrs.append("penwidth=2")

        edge = f"{self._quote_id(from_id)} -> {self._quote_id(to_id)}"
        if attrs:
            return f"{edge} [{', '.join(attrs)}];"
        return f"{edge};"

    def _is_critical_edge(self, from_id: str, to_id: str) -> bool:
        """Both ends critical and no gap between them."""
        if not self.graph.is_scheduled:
            return False
        source = self.graph[from_id]
        target = self.graph[to_id]
        return (
            source.is_critical
            and target.is_critical
            and source.earliest_finish == target.earliest_start
        )

    def _node_style(self, task: Task) -> dict[str, Any]:
        if not self.graph.is_scheduled:
            return {"fill_color": UNSCHEDULED_FILL}
        if task.is_critical:
            return {"fill_color": CRITICAL_FILL, "border_width": 2}
        return {"fill_color": DEFAULT_FILL}
