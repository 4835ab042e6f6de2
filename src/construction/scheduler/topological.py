"""Critical-path engine driven by a precomputed topological order."""

from construction.exceptions import (
    CircularDependencyError,
    EmptyInputError,
    NoLeafTaskError,
    NoRootTaskError,
)
from construction.logger import get_logger
from construction.models import TaskGraph

from .config import PropagationStrategy
from .core import ScheduleResult, build_result

logger = get_logger()


class TopologicalEngine:
    """Computes earliest/latest starts with one linear pass in each direction.

    The order is computed with Kahn's algorithm; ties are broken by task id
    so the order is deterministic.
    """

    strategy = PropagationStrategy.TOPOLOGICAL

    def __init__(self, graph: TaskGraph):
        self.graph = graph
        self._order: list[str] | None = None

    def schedule(self) -> ScheduleResult:
        """Run both passes over the graph.

        Raises:
            EmptyInputError: If the graph has no tasks
            NoRootTaskError: If every task has a dependency
            CircularDependencyError: If the graph contains a cycle
            NoLeafTaskError: If every task has a dependent
        """
        if self.graph.project_end is not None:
            self.graph.reset()
        self.forward_pass()
        self.backward_pass()
        return build_result(self.graph, self.strategy.value)

    def topological_order(self) -> list[str]:
        """Compute (once) the dependency-respecting order of all tasks.

        Raises:
            EmptyInputError: If the graph has no tasks
            NoRootTaskError: If there is no task to start from
            CircularDependencyError: If some tasks never become ready
        """
        if self._order is not None:
            return self._order

        if not self.graph:
            raise EmptyInputError()

        roots = self.graph.roots()
        if not roots:
            raise NoRootTaskError(min(self.graph))

        in_degree = {task_id: len(self.graph[task_id].dependencies) for task_id in self.graph}
        ready = roots
        order: list[str] = []
        while ready:
            task_id = ready.pop(0)
            order.append(task_id)
            released: list[str] = []
            for dependent in self.graph[task_id].dependents:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    released.append(dependent)
            if released:
                ready = sorted(ready + released)

        if len(order) != len(self.graph):
            unresolved = sorted(task_id for task_id, degree in in_degree.items() if degree > 0)
            raise CircularDependencyError(unresolved[0])

        logger.debug(f"Topological order: {', '.join(order)}")
        self._order = order
        return order

    def forward_pass(self) -> int:
        """Resolve every earliest start and the project end."""
        project_end = 0
        for task_id in self.topological_order():
            task = self.graph[task_id]
            task.earliest_start = max(
                (self.graph[dep].earliest_finish for dep in task.dependencies),
                default=0,
            )
            logger.changes(f"  {task_id}: earliest start {task.earliest_start}")
            project_end = max(project_end, task.earliest_finish)

        self.graph.project_end = project_end
        logger.changes(f"Project end: {project_end}")
        return project_end

    def backward_pass(self) -> None:
        """Resolve every latest start. Requires the forward pass."""
        project_end = self.graph.project_end
        if project_end is None:
            raise RuntimeError("Forward pass must complete before the backward pass")
        if not self.graph:
            raise EmptyInputError()
        if not self.graph.leaves():
            raise NoLeafTaskError(min(self.graph))

        for task_id in reversed(self.topological_order()):
            task = self.graph[task_id]
            dependent_starts = [self.graph[dep].latest_start for dep in task.dependents]
            finish_by = min(
                (start for start in dependent_starts if start is not None),
                default=project_end,
            )
            task.latest_start = finish_by - task.duration
            logger.changes(f"  {task_id}: latest start {task.latest_start}")
