"""Tests for DOT graph generation."""

import pytest

from construction.graph import GraphGenerator, GraphView
from construction.models import TaskGraph
from construction.parser import build_graph
from construction.scheduler import CriticalPathEngine


class TestGraphGenerator:
    """Test the GraphGenerator."""

    def test_all_view_unscheduled(self, diamond_graph: TaskGraph) -> None:
        dot = GraphGenerator(diamond_graph).generate(GraphView.ALL)

        assert dot.startswith("digraph TaskGraph {")
        assert dot.endswith("}")
        assert '"A" [label="A\\nduration 3", style=filled, fillcolor="white"];' in dot
        assert '"A" -> "B";' in dot
        assert '"C" -> "D";' in dot
        assert "slack" not in dot

    def test_all_view_highlights_critical_tasks(self, diamond_graph: TaskGraph) -> None:
        CriticalPathEngine(diamond_graph).schedule()
        dot = GraphGenerator(diamond_graph).generate()

        assert '"C" [label="C\\nduration 4\\nslack 0", style=filled, fillcolor="salmon", penwidth=2];' in dot
        assert '"B" [label="B\\nduration 2\\nslack 2", style=filled, fillcolor="lightblue"];' in dot
        assert '"A" -> "C" [color="red", penwidth=2];' in dot
        assert '"A" -> "B";' in dot

    def test_critical_path_view(self, diamond_graph: TaskGraph) -> None:
        CriticalPathEngine(diamond_graph).schedule()
        dot = GraphGenerator(diamond_graph).generate(GraphView.CRITICAL_PATH)

        assert dot.startswith("digraph CriticalPath {")
        assert '"B"' not in dot
        assert '"A" -> "C" [color="red", penwidth=2];' in dot
        assert '"C" -> "D" [color="red", penwidth=2];' in dot

    def test_critical_edge_needs_no_gap(self) -> None:
        # A and C are both critical, but C does not wait directly on A's finish
        graph = build_graph(["A;a;1", "B;b;2;A", "C;c;1;A;B"])
        CriticalPathEngine(graph).schedule()
        dot = GraphGenerator(graph).generate(GraphView.CRITICAL_PATH)

        assert '"A" -> "C";' in dot
        assert '"B" -> "C" [color="red", penwidth=2];' in dot

    def test_critical_path_requires_schedule(self, diamond_graph: TaskGraph) -> None:
        with pytest.raises(ValueError, match="scheduled graph"):
            GraphGenerator(diamond_graph).generate(GraphView.CRITICAL_PATH)

    def test_labels_are_escaped(self) -> None:
        graph = build_graph(['say"hi;quoted;1'])
        dot = GraphGenerator(graph).generate()
        assert '"say\\"hi" [label="say\\"hi\\nduration 1"' in dot
