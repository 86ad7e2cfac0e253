"""Graph data structures shared by the push and random-walk estimators."""

from dataclasses import dataclass

import numpy as np
import scipy.sparse


@dataclass(frozen=True)
class GraphModel:
    """Immutable CSR view of a directed multigraph built from an edge list.

    Row u of the CSR arrays holds the out-neighbors of u in the order the
    edges appeared in the input arrays. Parallel edges are kept, so
    degree[u] always equals the number of input edges sourced at u.
    Uses frozen=True but omits slots=True since numpy arrays don't
    interact well with __slots__.
    """

    n: int  # number of nodes
    indptr: np.ndarray  # int64 array of length n + 1
    indices: np.ndarray  # int64 array of length m, edge-array order per row
    degree: np.ndarray  # int64 array of length n, out-degree per node

    @property
    def m(self) -> int:
        return int(self.indices.shape[0])

    def neighbors(self, u: int) -> np.ndarray:
        """Ordered out-neighbors of node u."""
        return self.indices[self.indptr[u]:self.indptr[u + 1]]

    def adjacency_matrix(self) -> scipy.sparse.csr_matrix:
        """Sparse adjacency matrix over the same CSR arrays.

        Parallel edges appear as separate stored entries; only the sparsity
        pattern is meaningful to callers.
        """
        data = np.ones(self.m, dtype=np.float64)
        return scipy.sparse.csr_matrix(
            (data, self.indices, self.indptr), shape=(self.n, self.n)
        )


@dataclass(frozen=True)
class EdgeList:
    """Flat parallel-array edge list, the input format of both estimators."""

    n: int
    sources: np.ndarray  # int64 array of length m
    targets: np.ndarray  # int64 array of length m

    @property
    def m(self) -> int:
        return int(self.sources.shape[0])
