"""Default configuration, the single source of truth for estimator parameters."""

from resdist.config.estimator import EstimatorConfig

# rmax=1e-6, times=10_000, seed=42, max_steps=1_000_000, validate=True.
DEFAULT_CONFIG = EstimatorConfig()
