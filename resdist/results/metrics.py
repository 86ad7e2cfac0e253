"""Absolute and relative error of an estimate against a reference value."""

import logging
import math
from dataclasses import dataclass

log = logging.getLogger(__name__)

NEAR_ZERO = 1e-10


@dataclass(frozen=True, slots=True)
class ErrorMetrics:
    """Error of one estimate against a reference (ground truth) value."""

    absolute: float
    relative: float  # fraction, not percentage; inf for a near-zero reference


def calculate_absolute_error(result: float, ground_truth: float) -> float:
    return abs(result - ground_truth)


def calculate_relative_error(result: float, ground_truth: float) -> float:
    """|result - ground_truth| / |ground_truth|, or inf if the reference is ~0."""
    if abs(ground_truth) < NEAR_ZERO:
        log.warning(
            "Ground truth %.3g is near zero, relative error is unreliable",
            ground_truth,
        )
        return math.inf
    return abs(result - ground_truth) / abs(ground_truth)


def calculate_error_metrics(result: float, ground_truth: float) -> ErrorMetrics:
    metrics = ErrorMetrics(
        absolute=calculate_absolute_error(result, ground_truth),
        relative=calculate_relative_error(result, ground_truth),
    )
    log.debug("Error metrics: absolute=%.6g, relative=%.6g",
              metrics.absolute, metrics.relative)
    return metrics


def format_error_metrics(metrics: ErrorMetrics) -> str:
    """Format as 'Absolute: 1.234e-05, Relative: 0.12%'."""
    return (
        f"Absolute: {metrics.absolute:.3e}, "
        f"Relative: {metrics.relative * 100:.2f}%"
    )
