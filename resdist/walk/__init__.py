"""Monte Carlo estimator: landmark-absorbed random walks and visit counts."""

from resdist.walk.absorbing import (
    DEFAULT_MAX_WALK_STEPS,
    WalkDidNotAbsorbError,
    count_visits,
    simulate_absorbing_walks,
)
from resdist.walk.types import VisitCounts

__all__ = [
    "DEFAULT_MAX_WALK_STEPS",
    "VisitCounts",
    "WalkDidNotAbsorbError",
    "count_visits",
    "simulate_absorbing_walks",
]
