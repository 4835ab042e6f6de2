"""Task file parser and graph builder.

A task file has one record per line::

    identifier;description;duration;dep1;dep2;...;depN

The description is carried along but never interpreted. Every dependency must
name another record's identifier.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .exceptions import (
    DuplicateTaskError,
    EmptyInputError,
    InvalidRecordError,
    MissingDependencyError,
    ParseError,
)
from .logger import get_logger
from .models import Task, TaskGraph

logger = get_logger()

FIELD_SEPARATOR = ";"
MIN_FIELDS = 3  # identifier, description, duration

_DURATION_RE = re.compile(r"^[0-9]+$")


@dataclass(frozen=True)
class TaskRecord:
    """One parsed line of a task file."""

    task_id: str
    description: str
    duration: int
    dependencies: tuple[str, ...]
    line_number: int


def parse_record(line: str, line_number: int) -> TaskRecord:
    """Parse a single record line.

    Raises:
        InvalidRecordError: If the line has too few fields, an empty identifier,
            or a duration that is not a non-negative integer
    """
    fields = [part.strip() for part in line.split(FIELD_SEPARATOR)]
    if len(fields) < MIN_FIELDS:
        raise InvalidRecordError(line_number, line, f"expected at least {MIN_FIELDS} fields")

    task_id, description, duration_str, *dep_fields = fields
    if not task_id:
        raise InvalidRecordError(line_number, line, "empty identifier")
    if not _DURATION_RE.match(duration_str):
        raise InvalidRecordError(line_number, line, f"invalid duration {duration_str!r}")

    # Trailing separators produce empty fields; they are not dependencies
    dependencies = tuple(dict.fromkeys(dep for dep in dep_fields if dep))

    return TaskRecord(
        task_id=task_id,
        description=description,
        duration=int(duration_str),
        dependencies=dependencies,
        line_number=line_number,
    )


def parse_records(lines: Iterable[str]) -> list[TaskRecord]:
    """Parse every non-blank line into a record.

    The whole input is validated before anything is returned, so a single
    malformed line rejects the entire input.
    """
    records: list[TaskRecord] = []
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            continue
        records.append(parse_record(line, line_number))
    return records


class GraphBuilder:
    """Accumulates tasks and produces a finalized ``TaskGraph``."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._finalized = False

    def add(
        self,
        task_id: str,
        duration: int,
        dependencies: Iterable[str] = (),
        description: str = "",
    ) -> GraphBuilder:
        """Insert a new task.

        Raises:
            DuplicateTaskError: If a task with this id was already added
        """
        if self._finalized:
            raise RuntimeError("Cannot add tasks to a finalized graph")
        if duration < 0:
            raise ValueError(f"Duration of {task_id} must be non-negative, got {duration}")
        if task_id in self._tasks:
            raise DuplicateTaskError(task_id)

        self._tasks[task_id] = Task(
            id=task_id,
            duration=duration,
            dependencies=frozenset(dependencies),
            description=description,
        )
        return self

    def finalize(self) -> TaskGraph:
        """Derive dependents from dependencies and check every reference.

        Raises:
            EmptyInputError: If no task was added
            MissingDependencyError: If a dependency names no known task
        """
        if self._finalized:
            raise RuntimeError("Graph has already been finalized")
        if not self._tasks:
            raise EmptyInputError()

        dependents: dict[str, set[str]] = {task_id: set() for task_id in self._tasks}
        for task_id, task in self._tasks.items():
            for dep_id in sorted(task.dependencies):
                if dep_id not in dependents:
                    raise MissingDependencyError(dep_id, task_id)
                dependents[dep_id].add(task_id)

        for task_id, task in self._tasks.items():
            task.dependents = frozenset(dependents[task_id])

        self._finalized = True
        logger.debug(f"Finalized graph with {len(self._tasks)} tasks")
        return TaskGraph(self._tasks)


def build_graph(lines: Iterable[str]) -> TaskGraph:
    """Parse task records and build a validated graph.

    Raises:
        EmptyInputError: If there are no records
        InvalidRecordError: If any line is malformed
        DuplicateTaskError: If an identifier repeats
        MissingDependencyError: If a dependency is undeclared
    """
    records = parse_records(lines)
    if not records:
        raise EmptyInputError()

    builder = GraphBuilder()
    for record in records:
        builder.add(
            record.task_id,
            record.duration,
            record.dependencies,
            description=record.description,
        )
    return builder.finalize()


def parse_stream(stream: TextIO) -> TaskGraph:
    """Read a whole task file from an open text stream."""
    return build_graph(stream.read().splitlines())


def parse_file(file_path: Path | str) -> TaskGraph:
    """Parse a task file from disk."""
    path = Path(file_path)
    if not path.exists():
        raise ParseError(f"File not found: {file_path}")

    with path.open(encoding="utf-8") as f:
        return parse_stream(f)
