"""Estimate records and error metrics against a reference value."""

from resdist.results.metrics import (
    ErrorMetrics,
    calculate_absolute_error,
    calculate_error_metrics,
    calculate_relative_error,
    format_error_metrics,
)
from resdist.results.record import EstimateRecord, record_to_dict, run_and_record

__all__ = [
    "ErrorMetrics",
    "EstimateRecord",
    "calculate_absolute_error",
    "calculate_error_metrics",
    "calculate_relative_error",
    "format_error_metrics",
    "record_to_dict",
    "run_and_record",
]
