"""Forward push propagation absorbed at a landmark node.

A unit of mass starts as residual at the anchor. Processing a node moves
its whole residual into its reserve and hands residual/degree to every
out-neighbor except the landmark; the landmark's share is absorbed. A node
is (re)queued whenever its residual exceeds degree * rmax, so the run ends
once every residual sits at or below its node's threshold.

At termination reserve[x] approximates the expected number of visits to x
made by a random walk from the anchor before it is absorbed.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from resdist.graph.types import GraphModel
from resdist.push.queue import WorkQueue

log = logging.getLogger(__name__)


@dataclass
class PushState:
    """Transient per-anchor propagation state.

    Invariant between pushes: residual.sum() + absorbed == 1.
    """

    residual: np.ndarray  # float64 array of length n, un-pushed mass
    reserve: np.ndarray  # float64 array of length n, settled mass
    absorbed: float = 0.0  # mass handed to the landmark
    n_pushes: int = 0


def push_from_anchor(
    graph: GraphModel,
    anchor: int,
    landmark: int,
    rmax: float,
    on_progress: Callable[[PushState], None] | None = None,
) -> PushState:
    """Run push propagation from a single anchor until residuals settle.

    Args:
        graph: Graph model with CSR adjacency and out-degrees.
        anchor: Node holding the initial unit of residual mass.
        landmark: Absorbing node; its out-edges are never followed.
        rmax: Residual threshold per unit of out-degree (> 0).
        on_progress: Optional callback invoked with the live state after
            every push.

    Returns:
        Final PushState. If anchor == landmark nothing is pushed and the
        reserve stays all-zero.
    """
    n = graph.n
    state = PushState(
        residual=np.zeros(n, dtype=np.float64),
        reserve=np.zeros(n, dtype=np.float64),
    )
    state.residual[anchor] = 1.0

    residual = state.residual
    reserve = state.reserve
    indptr = graph.indptr
    indices = graph.indices
    degree = graph.degree

    queue = WorkQueue(n)
    if anchor != landmark:
        queue.push(anchor)

    while queue:
        u = queue.pop()
        mass = float(residual[u])
        reserve[u] += mass
        share = mass / float(degree[u])

        for w in indices[indptr[u]:indptr[u + 1]].tolist():
            if w == landmark:
                state.absorbed += share
                continue
            residual[w] += share
            if residual[w] > degree[w] * rmax:
                queue.push(w)

        residual[u] = 0.0
        state.n_pushes += 1

        if on_progress is not None:
            on_progress(state)

    log.debug(
        "Push from anchor %d settled after %d pushes (absorbed %.6g)",
        anchor, state.n_pushes, state.absorbed,
    )
    return state
