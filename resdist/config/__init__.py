"""Estimator configuration system with frozen, hashable, serializable dataclasses."""

from resdist.config.estimator import EstimatorConfig, PushConfig, WalkConfig
from resdist.config.defaults import DEFAULT_CONFIG
from resdist.config.hashing import (
    config_hash,
    estimate_config_hash,
    push_config_hash,
    walk_config_hash,
)
from resdist.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "EstimatorConfig",
    "PushConfig",
    "WalkConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "estimate_config_hash",
    "push_config_hash",
    "walk_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
