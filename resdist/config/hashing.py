"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from resdist.config.estimator import EstimatorConfig


def config_hash(config: Any, exclude_fields: tuple[str, ...] = ()) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Top-level field names left out of the hash.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = {k: v for k, v in asdict(config).items() if k not in exclude_fields}
    serialized = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def push_config_hash(config: EstimatorConfig) -> str:
    """Hash of the push parameters only; walk settings do not affect it."""
    return config_hash(config.push)


def walk_config_hash(config: EstimatorConfig) -> str:
    """Hash of the walk parameters only, seed included."""
    return config_hash(config.walk)


def estimate_config_hash(config: EstimatorConfig) -> str:
    """Hash of the parameters that can change an estimate.

    `validate` is left out: on well-formed input it never changes the result.
    """
    return config_hash(config, exclude_fields=("validate",))
