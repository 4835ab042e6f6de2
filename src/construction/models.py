"""Data models for construction scheduling."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Task:
    """A schedulable unit of work.

    ``dependents`` is the inverse of ``dependencies`` and is only ever assigned
    by ``GraphBuilder.finalize()``. ``earliest_start`` and ``latest_start`` stay
    ``None`` until the forward and backward passes resolve them.
    """

    id: str
    duration: int
    dependencies: frozenset[str] = field(default_factory=frozenset)
    description: str = ""
    dependents: frozenset[str] = field(default_factory=frozenset)
    earliest_start: int | None = None
    latest_start: int | None = None

    @property
    def is_root(self) -> bool:
        """True if nothing has to finish before this task starts."""
        return not self.dependencies

    @property
    def is_leaf(self) -> bool:
        """True if no other task waits for this one."""
        return not self.dependents

    @property
    def earliest_finish(self) -> int:
        if self.earliest_start is None:
            raise ValueError(f"Earliest start of {self.id} has not been computed")
        return self.earliest_start + self.duration

    @property
    def latest_finish(self) -> int:
        if self.latest_start is None:
            raise ValueError(f"Latest start of {self.id} has not been computed")
        return self.latest_start + self.duration

    @property
    def slack(self) -> int:
        """Time the task can slip without delaying the project."""
        if self.earliest_start is None or self.latest_start is None:
            raise ValueError(f"Task {self.id} has not been scheduled")
        return self.latest_start - self.earliest_start

    @property
    def is_critical(self) -> bool:
        return self.slack == 0


class TaskGraph:
    """Finalized tasks keyed by id, plus the computed project end.

    Built by ``GraphBuilder``; after that only the engine touches it, and only
    to fill in start times and ``project_end``.
    """

    def __init__(self, tasks: dict[str, Task]) -> None:
        self._tasks = tasks
        self.project_end: int | None = None

    def __getitem__(self, task_id: str) -> Task:
        return self._tasks[task_id]

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        """All tasks in insertion order."""
        return list(self._tasks.values())

    def roots(self) -> list[str]:
        """Ids of tasks without dependencies, sorted."""
        return sorted(task_id for task_id, task in self._tasks.items() if task.is_root)

    def leaves(self) -> list[str]:
        """Ids of tasks without dependents, sorted."""
        return sorted(task_id for task_id, task in self._tasks.items() if task.is_leaf)

    @property
    def is_scheduled(self) -> bool:
        return self.project_end is not None and all(
            task.latest_start is not None for task in self._tasks.values()
        )

    def reset(self) -> None:
        """Clear every computed start time and the project end."""
        for task in self._tasks.values():
            task.earliest_start = None
            task.latest_start = None
        self.project_end = None
