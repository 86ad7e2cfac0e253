"""Landmark-absorbed resistance distance estimation on directed graphs."""

from resdist.estimator.api import abwalk_v_sp, push_v_sp

__version__ = "0.1.0"

__all__ = ["push_v_sp", "abwalk_v_sp"]
