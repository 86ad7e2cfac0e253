"""Shared test fixtures."""

import numpy as np
import pytest

from resdist.graph.types import GraphModel


def _exact_visits(graph: GraphModel, landmark: int) -> np.ndarray:
    """Expected visits G[a, x] to x by a walk from a before absorption.

    G = (I - P)^-1 over the non-landmark nodes, P the row-normalized
    adjacency with the landmark's rows and columns removed. Landmark
    rows and columns of the result are zero.
    """
    n = graph.n
    P = np.zeros((n, n), dtype=np.float64)
    for u in range(n):
        if u == landmark:
            continue
        for w in graph.neighbors(u).tolist():
            if w != landmark:
                P[u, w] += 1.0 / graph.degree[u]
    keep = [x for x in range(n) if x != landmark]
    G = np.zeros((n, n), dtype=np.float64)
    G[np.ix_(keep, keep)] = np.linalg.inv(
        np.eye(len(keep)) - P[np.ix_(keep, keep)]
    )
    return G


@pytest.fixture
def exact_visits():
    """Dense reference for landmark-absorbed visit counts."""
    return _exact_visits
