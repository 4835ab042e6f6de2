"""Protocol definitions for the scheduling engines."""

from typing import Protocol

from .core import ScheduleResult


class CriticalPathAlgorithm(Protocol):
    """Protocol shared by the worklist and topological engines."""

    def forward_pass(self) -> int:
        """Compute every earliest start.

        Returns:
            The project end (total duration)
        """
        ...

    def backward_pass(self) -> None:
        """Compute every latest start. Requires a completed forward pass."""
        ...

    def schedule(self) -> ScheduleResult:
        """Run both passes and return the finished schedule."""
        ...
