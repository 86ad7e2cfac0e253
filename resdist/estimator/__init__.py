"""Estimator entry points and the result-combining formulas."""

from resdist.estimator.api import (
    abwalk_v_sp,
    estimate_push,
    estimate_walk,
    push_v_sp,
)
from resdist.estimator.combine import combine_push, combine_walk

__all__ = [
    "abwalk_v_sp",
    "combine_push",
    "combine_walk",
    "estimate_push",
    "estimate_walk",
    "push_v_sp",
]
