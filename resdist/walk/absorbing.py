"""Landmark-absorbed random walks with visit counting.

Walks from one anchor are advanced together as a NumPy batch: at every
step each still-active walk records whether it sits on s or t, then moves
to a uniformly random out-neighbor drawn from the CSR row. Walks that land
on the landmark are dropped from the batch. Counting per walk is the same
as running them one by one.
"""

import logging

import numpy as np

from resdist.graph.types import GraphModel
from resdist.graph.validation import InvalidGraphError
from resdist.walk.types import VisitCounts

log = logging.getLogger(__name__)

DEFAULT_MAX_WALK_STEPS = 1_000_000


class WalkDidNotAbsorbError(RuntimeError):
    """Raised when a walk is still unabsorbed after the step cap."""


def simulate_absorbing_walks(
    graph: GraphModel,
    anchor: int,
    s: int,
    t: int,
    landmark: int,
    times: int,
    rng: np.random.Generator,
    max_steps: int | None = DEFAULT_MAX_WALK_STEPS,
) -> tuple[int, int]:
    """Run `times` walks from anchor and count visits to s and t.

    Args:
        graph: Graph model with CSR adjacency and out-degrees.
        anchor: Start node of every walk.
        s: First query node.
        t: Second query node (may equal s, in which case both counts grow).
        landmark: Absorbing node.
        times: Number of walks.
        rng: Random Generator, advanced in place.
        max_steps: Maximum number of steps any walk may take, or None for
            no cap.

    Returns:
        Tuple (visits to s, visits to t) summed over all walks.

    Raises:
        WalkDidNotAbsorbError: If a walk exceeds max_steps.
        InvalidGraphError: If a walk reaches a node with no out-edges.
    """
    if anchor == landmark:
        return 0, 0

    indptr = graph.indptr
    indices = graph.indices
    current = np.full(times, anchor, dtype=np.int64)
    visits_s = 0
    visits_t = 0
    step = 0

    while current.size:
        if max_steps is not None and step >= max_steps:
            raise WalkDidNotAbsorbError(
                f"{current.size} of {times} walks from anchor {anchor} not "
                f"absorbed at landmark {landmark} after {max_steps} steps"
            )

        visits_s += int(np.count_nonzero(current == s))
        visits_t += int(np.count_nonzero(current == t))

        starts = indptr[current]
        degrees = indptr[current + 1] - starts
        if not degrees.all():
            stuck = int(current[degrees == 0][0])
            raise InvalidGraphError(
                f"walk from anchor {anchor} reached node {stuck} with no out-edges"
            )

        offsets = (rng.random(current.size) * degrees).astype(np.int64)
        offsets = np.minimum(offsets, degrees - 1)
        current = indices[starts + offsets]
        current = current[current != landmark]
        step += 1

    log.debug(
        "Walks from anchor %d: %d walks absorbed within %d steps "
        "(visits s=%d, t=%d)",
        anchor, times, step, visits_s, visits_t,
    )
    return visits_s, visits_t


def count_visits(
    graph: GraphModel,
    s: int,
    t: int,
    landmark: int,
    times: int,
    seed: int,
    max_steps: int | None = DEFAULT_MAX_WALK_STEPS,
) -> VisitCounts:
    """Run the s-anchored and then the t-anchored walk batches.

    A single local Generator seeded from `seed` drives both batches, so the
    counts are a deterministic function of the arguments.
    """
    rng = np.random.default_rng(seed)
    tau_ss, tau_st = simulate_absorbing_walks(
        graph, s, s, t, landmark, times, rng, max_steps
    )
    tau_ts, tau_tt = simulate_absorbing_walks(
        graph, t, s, t, landmark, times, rng, max_steps
    )
    return VisitCounts(tau_ss=tau_ss, tau_st=tau_st, tau_ts=tau_ts, tau_tt=tau_tt)
