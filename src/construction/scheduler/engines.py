"""Engine factory."""

from construction.models import TaskGraph

from .config import PropagationStrategy, SchedulingConfig
from .engine import CriticalPathEngine
from .protocols import CriticalPathAlgorithm
from .topological import TopologicalEngine


def create_engine(
    graph: TaskGraph,
    config: SchedulingConfig | None = None,
) -> CriticalPathAlgorithm:
    """Create the engine selected by the configuration.

    Args:
        graph: Finalized task graph to schedule
        config: Optional scheduling configuration (defaults to worklist)

    Returns:
        Engine instance ready to schedule
    """
    strategy = (config or SchedulingConfig()).strategy

    if strategy == PropagationStrategy.WORKLIST:
        return CriticalPathEngine(graph)
    if strategy == PropagationStrategy.TOPOLOGICAL:
        return TopologicalEngine(graph)

    msg = f"Unknown propagation strategy: {strategy}"
    raise ValueError(msg)
