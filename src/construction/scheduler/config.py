"""Configuration classes for the scheduling engines."""

from enum import Enum

from pydantic import BaseModel


class PropagationStrategy(str, Enum):
    """How start times are propagated through the graph."""

    WORKLIST = "worklist"  # Retry tasks as their prerequisites resolve
    TOPOLOGICAL = "topological"  # Single pass over a precomputed Kahn order


class SchedulingConfig(BaseModel):
    """Configuration for engine selection."""

    strategy: PropagationStrategy = PropagationStrategy.WORKLIST
