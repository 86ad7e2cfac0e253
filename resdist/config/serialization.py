"""JSON serialization and deserialization for estimator configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from resdist.config.estimator import EstimatorConfig

_DACITE_CONFIG = DaciteConfig(
    check_types=True,
    strict=True,
)


def config_to_json(config: EstimatorConfig) -> str:
    """Serialize an EstimatorConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> EstimatorConfig:
    """Deserialize a JSON string to an EstimatorConfig.

    Uses dacite with strict=True to reject unknown keys (catches schema drift).
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: EstimatorConfig) -> dict[str, Any]:
    """Convert an EstimatorConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> EstimatorConfig:
    """Reconstruct an EstimatorConfig from a plain dictionary."""
    return from_dict(data_class=EstimatorConfig, data=d, config=_DACITE_CONFIG)
