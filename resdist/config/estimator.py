"""Estimator configuration dataclasses, all frozen and slotted."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PushConfig:
    """Push propagation parameters."""

    rmax: float = 1e-6  # residual threshold per unit of out-degree

    def __post_init__(self) -> None:
        if not (math.isfinite(self.rmax) and self.rmax > 0):
            raise ValueError(f"rmax must be finite and > 0, got {self.rmax}")


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Absorbing random walk parameters."""

    times: int = 10_000  # walks per anchor
    seed: int = 42
    max_steps: int | None = 1_000_000  # per-walk step cap, None disables

    def __post_init__(self) -> None:
        if self.times < 1:
            raise ValueError(f"times must be >= 1, got {self.times}")
        if self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {self.max_steps}")


@dataclass(frozen=True, slots=True)
class EstimatorConfig:
    """Top-level configuration composing both estimators' parameters."""

    push: PushConfig = field(default_factory=PushConfig)
    walk: WalkConfig = field(default_factory=WalkConfig)
    validate: bool = True  # check input before estimating
