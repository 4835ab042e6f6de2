"""Worklist-based critical-path engine.

Forward pass: starting from the root tasks, a task's earliest start is
resolved once all of its dependencies are resolved, then its dependents are
queued. Backward pass: the mirror image, starting from the leaf tasks and
resolving latest starts against the project end.

A task popped while one of its prerequisites is still unresolved is dropped;
it is queued again when that prerequisite resolves.
"""

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


class _Worklist:
    """LIFO stack that never holds the same task twice."""

    def __init__(self, initial: list[str]) -> None:
        self._stack: list[str] = []
        self._members: set[str] = set()
        # Reversed so the first id in ``initial`` is popped first
        for task_id in reversed(initial):
            self.push(task_id)

    def push(self, task_id: str) -> None:
        if task_id in self._members:
            return
        self._stack.append(task_id)
        self._members.add(task_id)
        logger.debug(f"    queued {task_id}")

    def pop(self) -> str:
        task_id = self._stack.pop()
        self._members.discard(task_id)
        return task_id

    def __bool__(self) -> bool:
        return bool(self._stack)


class CriticalPathEngine:
    """Computes earliest/latest starts by worklist propagation."""

    strategy = PropagationStrategy.WORKLIST

    def __init__(self, graph: TaskGraph):
        self.graph = graph

    def schedule(self) -> ScheduleResult:
        """Run both passes over the graph.

        A graph that already carries a schedule is reset first, so repeated
        runs give identical results.

        Raises:
            EmptyInputError: If the graph has no tasks
            NoRootTaskError: If every task has a dependency
            CircularDependencyError: If some task can never be resolved
            NoLeafTaskError: If every task has a dependent
        """
        if self.graph.project_end is not None:
            self.graph.reset()
        self.forward_pass()
        self.backward_pass()
        return build_result(self.graph, self.strategy.value)

    def forward_pass(self) -> int:
        """Resolve every earliest start and the project end."""
        if not self.graph:
            raise EmptyInputError()

        roots = self.graph.roots()
        if not roots:
            raise NoRootTaskError(min(self.graph))

        logger.changes(f"Forward pass from roots: {', '.join(roots)}")
        worklist = _Worklist(roots)
        while worklist:
            self._visit_early(worklist.pop(), worklist)

        project_end = 0
        for task_id in sorted(self.graph):
            task = self.graph[task_id]
            if task.earliest_start is None:
                raise CircularDependencyError(task_id)
            project_end = max(project_end, task.earliest_start + task.duration)

        self.graph.project_end = project_end
        logger.changes(f"Project end: {project_end}")
        return project_end

    def backward_pass(self) -> None:
        """Resolve every latest start. Requires the forward pass."""
        if self.graph.project_end is None:
            raise RuntimeError("Forward pass must complete before the backward pass")

        if not self.graph:
            raise EmptyInputError()
        leaves = self.graph.leaves()
        if not leaves:
            raise NoLeafTaskError(min(self.graph))

        logger.changes(f"Backward pass from leaves: {', '.join(leaves)}")
        worklist = _Worklist(leaves)
        while worklist:
            self._visit_late(worklist.pop(), worklist)

    def _visit_early(self, task_id: str, worklist: _Worklist) -> None:
        task = self.graph[task_id]
        if task.earliest_start is not None:
            return

        pending = [dep for dep in task.dependencies if self.graph[dep].earliest_start is None]
        if pending:
            logger.checks(f"  {task_id}: waiting on {', '.join(sorted(pending))}")
            return

        task.earliest_start = max(
            (self.graph[dep].earliest_finish for dep in task.dependencies),
            default=0,
        )
        logger.changes(f"  {task_id}: earliest start {task.earliest_start}")

        for dependent in sorted(task.dependents):
            worklist.push(dependent)

    def _visit_late(self, task_id: str, worklist: _Worklist) -> None:
        task = self.graph[task_id]
        if task.latest_start is not None:
            return

        pending: list[str] = []
        dependent_starts: list[int] = []
        for dep in task.dependents:
            dep_start = self.graph[dep].latest_start
            if dep_start is None:
                pending.append(dep)
            else:
                dependent_starts.append(dep_start)
        if pending:
            logger.checks(f"  {task_id}: waiting on dependents {', '.join(sorted(pending))}")
            return

        finish_by = min(dependent_starts) if dependent_starts else self.graph.project_end
        assert finish_by is not None
        task.latest_start = finish_by - task.duration
        logger.changes(f"  {task_id}: latest start {task.latest_start}")

        for dep in sorted(task.dependencies):
            worklist.push(dep)
