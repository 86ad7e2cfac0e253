"""Adjacency and out-degree construction from parallel edge arrays."""

import logging

import numpy as np

from resdist.graph.types import EdgeList, GraphModel

log = logging.getLogger(__name__)


def build_graph_model(n: int, edge_sources, edge_targets) -> GraphModel:
    """Build the CSR adjacency and out-degree vector for a directed graph.

    Edges are grouped by source with a stable sort, so each row lists its
    targets in the same relative order as the input arrays. Indices are
    trusted to lie in [0, n); see resdist.graph.validation for checks.

    Args:
        n: Number of nodes.
        edge_sources: Integer sequence of edge sources (length m).
        edge_targets: Integer sequence of edge targets (length m).

    Returns:
        GraphModel with indptr, indices and degree arrays.
    """
    sources = np.asarray(edge_sources, dtype=np.int64).reshape(-1)
    targets = np.asarray(edge_targets, dtype=np.int64).reshape(-1)

    degree = np.bincount(sources, minlength=n).astype(np.int64)
    indptr = np.zeros(n + 1, dtype=np.int64)
    np.cumsum(degree, out=indptr[1:])

    order = np.argsort(sources, kind="stable")
    indices = targets[order]

    log.debug("Built graph model: n=%d, m=%d", n, indices.shape[0])

    return GraphModel(n=int(n), indptr=indptr, indices=indices, degree=degree)


def graph_from_edge_list(edges: EdgeList) -> GraphModel:
    """Build a GraphModel from an EdgeList container."""
    return build_graph_model(edges.n, edges.sources, edges.targets)
