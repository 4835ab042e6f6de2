"""Pytest configuration and fixtures for construction tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from construction.logger import reset_logger
from construction.models import TaskGraph
from construction.parser import build_graph
from construction.scheduler import CriticalPathEngine, PropagationStrategy, TopologicalEngine

# Four tasks; A -> C -> D is the critical path, B has two units of slack
DIAMOND_LINES = [
    "A;Foundations;3;",
    "B;Plumbing;2;A",
    "C;Walls;4;A",
    "D;Roof;1;B;C",
]

ENGINE_VARIANTS = [PropagationStrategy.WORKLIST, PropagationStrategy.TOPOLOGICAL]
ENGINE_IDS = ["worklist", "topological"]


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Reset logger state between tests."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def diamond_graph() -> TaskGraph:
    """Unscheduled graph for DIAMOND_LINES."""
    return build_graph(DIAMOND_LINES)


@pytest.fixture(params=ENGINE_VARIANTS, ids=ENGINE_IDS)
def make_engine(
    request: pytest.FixtureRequest,
) -> Callable[[TaskGraph], CriticalPathEngine | TopologicalEngine]:
    """Factory for the engine currently under test."""
    strategy: PropagationStrategy = request.param

    def _make(graph: TaskGraph) -> CriticalPathEngine | TopologicalEngine:
        if strategy == PropagationStrategy.WORKLIST:
            return CriticalPathEngine(graph)
        return TopologicalEngine(graph)

    return _make


def snapshot(graph: TaskGraph) -> dict[str, tuple[int | None, int | None]]:
    """Computed start times of every task, for comparisons."""
    return {
        task_id: (graph[task_id].earliest_start, graph[task_id].latest_start)
        for task_id in graph
    }
