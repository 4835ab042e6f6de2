"""Custom exceptions for construction scheduling."""


class ConstructionError(Exception):
    """Base exception for all construction errors."""

    pass


class ParseError(ConstructionError):
    """Raised when the task file cannot be parsed."""

    pass


class EmptyInputError(ParseError):
    """Raised when the input contains no task records."""

    def __init__(self, message: str = "Input contains no task records.") -> None:
        super().__init__(message)


class InvalidRecordError(ParseError):
    """Raised when a line is not a valid task record."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid record on line {line_number} ({reason}): {line!r}")


class ValidationError(ConstructionError):
    """Raised when the task graph fails validation."""

    pass


class DuplicateTaskError(ValidationError):
    """Raised when a task identifier appears more than once."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} found multiple times.")


class MissingDependencyError(ValidationError):
    """Raised when a dependency does not resolve to an existing task."""

    def __init__(self, dependency_id: str, task_id: str) -> None:
        self.dependency_id = dependency_id
        self.task_id = task_id
        super().__init__(f"Dependency {dependency_id} of task {task_id} does not exist.")


class SchedulingError(ConstructionError):
    """Raised when the critical-path computation cannot complete."""

    pass


class CircularDependencyError(SchedulingError):
    """Raised when a circular dependency is detected."""

    def __init__(self, task_id: str, message: str | None = None) -> None:
        self.task_id = task_id
        super().__init__(message or f"Circular dependency detected around {task_id}.")


class NoRootTaskError(CircularDependencyError):
    """Raised when every task has at least one dependency.

    Such a graph always contains a cycle; ``task_id`` is the lowest task id.
    """

    def __init__(self, task_id: str) -> None:
        super().__init__(
            task_id,
            "No task without dependencies: the forward pass cannot start "
            f"(circular dependency around {task_id}).",
        )


class NoLeafTaskError(CircularDependencyError):
    """Raised when every task has at least one dependent.

    Such a graph always contains a cycle; ``task_id`` is the lowest task id.
    """

    def __init__(self, task_id: str) -> None:
        super().__init__(
            task_id,
            "No task without dependents: the backward pass cannot start "
            f"(circular dependency around {task_id}).",
        )
