"""Tests for Task and TaskGraph."""

import pytest

from construction.models import Task, TaskGraph
from construction.parser import build_graph
from tests.conftest import DIAMOND_LINES


def test_unscheduled_task_properties():
    """Computed properties need the passes to have run."""
    task = Task(id="A", duration=3)
    assert task.is_root
    assert task.is_leaf
    with pytest.raises(ValueError, match="Earliest start of A"):
        _ = task.earliest_finish
    with pytest.raises(ValueError, match="not been scheduled"):
        _ = task.slack


def test_scheduled_task_properties():
    """Finish times and slack derive from the start times."""
    task = Task(id="B", duration=2, dependencies=frozenset({"A"}), earliest_start=3, latest_start=5)
    assert not task.is_root
    assert task.earliest_finish == 5
    assert task.latest_finish == 7
    assert task.slack == 2
    assert not task.is_critical


def test_graph_mapping_behaviour():
    """TaskGraph looks up, iterates and counts tasks."""
    graph = build_graph(DIAMOND_LINES)
    assert len(graph) == 4
    assert "A" in graph
    assert "Z" not in graph
    assert list(graph) == ["A", "B", "C", "D"]
    assert graph["B"].duration == 2
    with pytest.raises(KeyError):
        _ = graph["Z"]


def test_roots_and_leaves_are_sorted():
    """Roots and leaves come back in id order."""
    graph = build_graph(["Z;z;1", "M;m;1", "A;a;1;Z;M"])
    assert graph.roots() == ["M", "Z"]
    assert graph.leaves() == ["A"]


def test_reset_clears_computed_fields():
    """reset() returns a graph to its unscheduled state."""
    graph = TaskGraph({"A": Task(id="A", duration=1, earliest_start=0, latest_start=0)})
    graph.project_end = 1
    assert graph.is_scheduled

    graph.reset()
    assert graph.project_end is None
    assert graph["A"].earliest_start is None
    assert graph["A"].latest_start is None
    assert not graph.is_scheduled
