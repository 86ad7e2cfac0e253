"""Timed estimate records for reporting estimator runs.

A record captures which estimator ran, on which query, with which
parameters, what it returned and how long it took. When a reference value
is supplied the record also carries its ErrorMetrics.
"""

import logging
import math
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Literal

from resdist.config.estimator import EstimatorConfig
from resdist.config.hashing import push_config_hash, walk_config_hash
from resdist.estimator.api import estimate_push, estimate_walk
from resdist.graph.types import GraphModel
from resdist.results.metrics import ErrorMetrics, calculate_error_metrics

log = logging.getLogger(__name__)

Algorithm = Literal["push", "walk"]


@dataclass(frozen=True)
class EstimateRecord:
    """One estimator run and, optionally, its error against a reference."""

    algorithm: Algorithm
    s: int
    t: int
    v: int
    params: dict[str, Any]
    resistance_distance: float
    execution_time_ms: float
    timestamp: str  # ISO 8601, UTC
    config_hash: str  # hash of the parameter section that was used
    metrics: ErrorMetrics | None = None


def run_and_record(
    algorithm: Algorithm,
    graph: GraphModel,
    s: int,
    t: int,
    v: int,
    config: EstimatorConfig,
    ground_truth: float | None = None,
) -> EstimateRecord:
    """Run one estimator, time it, and wrap the outcome in an EstimateRecord.

    Args:
        algorithm: "push" or "walk".
        graph: Prebuilt graph model.
        s: First query node.
        t: Second query node.
        v: Absorbing landmark.
        config: Estimator configuration.
        ground_truth: Optional reference value for error metrics.

    Raises:
        ValueError: If algorithm is not "push" or "walk".
    """
    if algorithm == "push":
        estimate = estimate_push
        params = asdict(config.push)
        section_hash = push_config_hash(config)
    elif algorithm == "walk":
        estimate = estimate_walk
        params = asdict(config.walk)
        section_hash = walk_config_hash(config)
    else:
        raise ValueError(f"algorithm must be 'push' or 'walk', got {algorithm!r}")

    t0 = time.perf_counter()
    result = estimate(graph, s, t, v, config)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    metrics = None
    if ground_truth is not None:
        metrics = calculate_error_metrics(result, ground_truth)

    log.info("%s estimate %.10g in %.1f ms", algorithm, result, elapsed_ms)

    return EstimateRecord(
        algorithm=algorithm,
        s=s,
        t=t,
        v=v,
        params=params,
        resistance_distance=result,
        execution_time_ms=elapsed_ms,
        timestamp=datetime.now(timezone.utc).isoformat(),
        config_hash=section_hash,
        metrics=metrics,
    )


def record_to_dict(record: EstimateRecord) -> dict[str, Any]:
    """Plain dict for json.dumps; an infinite relative error becomes None."""
    d = asdict(record)
    if d["metrics"] is not None and math.isinf(d["metrics"]["relative"]):
        d["metrics"]["relative"] = None
    return d
