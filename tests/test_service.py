"""Tests for the scheduling service and engine factory."""

import io
from pathlib import Path

import pytest

from construction.exceptions import (
    CircularDependencyError,
    ConstructionError,
    EmptyInputError,
    InvalidRecordError,
    MissingDependencyError,
)
from construction.parser import build_graph
from construction.scheduler import (
    CriticalPathEngine,
    PropagationStrategy,
    SchedulingConfig,
    SchedulingService,
    TopologicalEngine,
    create_engine,
)
from tests.conftest import DIAMOND_LINES


class TestCreateEngine:
    """Test engine selection."""

    def test_default_is_worklist(self) -> None:
        engine = create_engine(build_graph(DIAMOND_LINES))
        assert isinstance(engine, CriticalPathEngine)

    def test_topological(self) -> None:
        config = SchedulingConfig(strategy=PropagationStrategy.TOPOLOGICAL)
        engine = create_engine(build_graph(DIAMOND_LINES), config)
        assert isinstance(engine, TopologicalEngine)

    def test_strategy_from_string(self) -> None:
        config = SchedulingConfig.model_validate({"strategy": "topological"})
        assert config.strategy == PropagationStrategy.TOPOLOGICAL


class TestSchedulingService:
    """Test the parse-and-schedule entry points."""

    @pytest.mark.parametrize("strategy", list(PropagationStrategy))
    def test_schedule_stream(self, strategy: PropagationStrategy) -> None:
        service = SchedulingService(SchedulingConfig(strategy=strategy))
        result = service.schedule_stream(io.StringIO("\n".join(DIAMOND_LINES)))

        assert result.project_end == 8
        assert result.critical_path == ["A", "C", "D"]
        assert result.metadata["strategy"] == strategy.value

    def test_schedule_file(self, tmp_path: Path) -> None:
        task_file = tmp_path / "tasks.csv"
        task_file.write_text("\n".join(DIAMOND_LINES) + "\n", encoding="utf-8")
        result = SchedulingService().schedule_file(task_file)
        assert result.graph["B"].slack == 2

    @pytest.mark.parametrize(
        ("text", "error"),
        [
            ("", EmptyInputError),
            ("X;desc;notanumber;\n", InvalidRecordError),
            ("A;a;1;Nowhere\n", MissingDependencyError),
            ("A;a;1;B\nB;b;1;A\n", CircularDependencyError),
        ],
    )
    def test_failures_raise_construction_errors(
        self, text: str, error: type[ConstructionError]
    ) -> None:
        with pytest.raises(error):
            SchedulingService().schedule_stream(io.StringIO(text))
