"""Input validation for estimator queries.

Both estimators assume well-formed input: every index in range, no
self-loops, and every node an anchor can reach (without passing through
the landmark) has out-edges and a path to the landmark. These checks turn
violations into exceptions instead of division by zero, out-of-range
indexing or loops that never terminate.
"""

import logging
import math

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import breadth_first_order

from resdist.graph.types import GraphModel

log = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when a query or algorithm parameter is out of its domain."""


class InvalidGraphError(ValueError):
    """Raised when the graph cannot support an absorbed propagation or walk."""


def check_edge_arrays(n: int, m: int, edge_sources, edge_targets) -> None:
    """Check edge array lengths, endpoint ranges and self-loops.

    Raises:
        InvalidParameterError: If n is negative or array lengths differ from m.
        InvalidGraphError: If an endpoint is outside [0, n) or an edge is a
            self-loop.
    """
    if n < 0:
        raise InvalidParameterError(f"n must be non-negative, got {n}")

    sources = np.asarray(edge_sources, dtype=np.int64).reshape(-1)
    targets = np.asarray(edge_targets, dtype=np.int64).reshape(-1)
    if sources.shape[0] != m or targets.shape[0] != m:
        raise InvalidParameterError(
            f"edge arrays must both have length m={m}, got "
            f"{sources.shape[0]} sources and {targets.shape[0]} targets"
        )

    for name, arr in (("source", sources), ("target", targets)):
        bad = np.flatnonzero((arr < 0) | (arr >= n))
        if bad.size:
            i = int(bad[0])
            raise InvalidGraphError(
                f"edge {i} {name} {int(arr[i])} outside [0, {n})"
            )

    loops = np.flatnonzero(sources == targets)
    if loops.size:
        i = int(loops[0])
        raise InvalidGraphError(f"edge {i} is a self-loop on node {int(sources[i])}")


def check_nodes(n: int, s: int, t: int, v: int) -> None:
    """Check that s, t and v are valid node indices."""
    for name, node in (("s", s), ("t", t), ("v", v)):
        if not 0 <= node < n:
            raise InvalidParameterError(f"{name}={node} outside [0, {n})")
    if v == s or v == t:
        log.warning(
            "Landmark v=%d coincides with s=%d or t=%d; result is degenerate",
            v, s, t,
        )


def check_rmax(rmax: float) -> None:
    if not (math.isfinite(rmax) and rmax > 0):
        raise InvalidParameterError(f"rmax must be finite and > 0, got {rmax}")


def check_walk_params(times: int, seed: int, max_steps: int | None) -> None:
    if times < 1:
        raise InvalidParameterError(f"times must be >= 1, got {times}")
    if seed < 0:
        raise InvalidParameterError(f"seed must be >= 0, got {seed}")
    if max_steps is not None and max_steps < 1:
        raise InvalidParameterError(f"max_steps must be >= 1, got {max_steps}")


def _without_landmark_rows(graph: GraphModel, landmark: int) -> scipy.sparse.csr_matrix:
    """Adjacency matrix with the landmark's out-edges removed."""
    keep = np.ones(graph.n, dtype=np.float64)
    keep[landmark] = 0.0
    adj = scipy.sparse.csr_matrix(scipy.sparse.diags(keep) @ graph.adjacency_matrix())
    adj.eliminate_zeros()
    return adj


def check_absorbing(graph: GraphModel, anchors, landmark: int) -> None:
    """Check that every walk from the anchors is absorbed at the landmark.

    For each anchor, every node reachable before absorption (other than the
    landmark) must have out-degree > 0 and a path to the landmark. The
    anchors themselves need out-edges even when one is the landmark, since
    the result divides by their degrees.

    Raises:
        InvalidGraphError: On the first offending node found.
    """
    adj = _without_landmark_rows(graph, landmark)
    reaches_landmark = np.zeros(graph.n, dtype=bool)
    reaches_landmark[
        breadth_first_order(
            adj.T.tocsr(), landmark, directed=True, return_predecessors=False
        )
    ] = True

    for anchor in anchors:
        if graph.degree[anchor] == 0:
            raise InvalidGraphError(f"anchor {anchor} has no out-edges")
        if anchor == landmark:
            continue
        reached = breadth_first_order(
            adj, anchor, directed=True, return_predecessors=False
        )
        reached = reached[reached != landmark]

        dangling = reached[graph.degree[reached] == 0]
        if dangling.size:
            raise InvalidGraphError(
                f"node {int(dangling.min())} is reachable from anchor {anchor} "
                f"but has no out-edges"
            )

        trapped = reached[~reaches_landmark[reached]]
        if trapped.size:
            raise InvalidGraphError(
                f"node {int(trapped.min())} is reachable from anchor {anchor} "
                f"but cannot reach landmark {landmark}"
            )

        log.debug(
            "Anchor %d: %d nodes reachable before absorption at %d",
            anchor, reached.size, landmark,
        )
