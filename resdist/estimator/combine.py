"""Four-term formulas folding directional outputs into a resistance estimate.

The push formula scales both terms of each anchor by that anchor's degree.
The walk formula scales the tau_st and tau_tt terms by degree[t] and the
tau_ss and tau_ts terms by degree[s]. Both are kept exactly as published
with the algorithms; do not reconcile them.
"""

import numpy as np

from resdist.walk.types import VisitCounts


def combine_push(
    reserve_s: np.ndarray,
    reserve_t: np.ndarray,
    degree: np.ndarray,
    s: int,
    t: int,
) -> float:
    """reserve_s[s]/d[s] + reserve_t[t]/d[t] - reserve_s[t]/d[s] - reserve_t[s]/d[t]."""
    deg_s = float(degree[s])
    deg_t = float(degree[t])
    return (
        float(reserve_s[s]) / deg_s
        + float(reserve_t[t]) / deg_t
        - float(reserve_s[t]) / deg_s
        - float(reserve_t[s]) / deg_t
    )


def combine_walk(
    counts: VisitCounts,
    degree: np.ndarray,
    s: int,
    t: int,
    times: int,
) -> float:
    """tau_ss/(d[s]T) - tau_st/(d[t]T) - tau_ts/(d[s]T) + tau_tt/(d[t]T)."""
    deg_s = float(degree[s])
    deg_t = float(degree[t])
    return (
        counts.tau_ss / (deg_s * times)
        - counts.tau_st / (deg_t * times)
        - counts.tau_ts / (deg_s * times)
        + counts.tau_tt / (deg_t * times)
    )
