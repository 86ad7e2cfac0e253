"""Tests for GraphModel construction from flat edge arrays."""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from resdist.graph.build import build_graph_model, graph_from_edge_list
from resdist.graph.generators import directed_cycle


class TestDegrees:
    """Out-degree counts every edge sourced at a node."""

    def test_degree_counts(self) -> None:
        graph = build_graph_model(4, [0, 0, 1, 2, 3], [1, 2, 2, 3, 0])
        assert graph.degree.tolist() == [2, 1, 1, 1]

    def test_parallel_edges_counted(self) -> None:
        graph = build_graph_model(2, [0, 0, 0, 1], [1, 1, 1, 0])
        assert graph.degree[0] == 3
        assert graph.neighbors(0).tolist() == [1, 1, 1]

    def test_node_without_edges_has_zero_degree(self) -> None:
        graph = build_graph_model(3, [0], [1])
        assert graph.degree.tolist() == [1, 0, 0]
        assert graph.neighbors(2).size == 0

    def test_m_matches_edge_count(self) -> None:
        graph = build_graph_model(3, [0, 1, 2], [1, 2, 0])
        assert graph.m == 3


class TestAdjacencyOrder:
    """Neighbors keep the relative order of the input edge arrays."""

    def test_edge_array_order_preserved(self) -> None:
        sources = [2, 0, 2, 1, 0, 2]
        targets = [5, 3, 1, 4, 2, 0]
        graph = build_graph_model(6, sources, targets)
        assert graph.neighbors(0).tolist() == [3, 2]
        assert graph.neighbors(1).tolist() == [4]
        assert graph.neighbors(2).tolist() == [5, 1, 0]

    def test_indptr_is_cumulative_degree(self) -> None:
        graph = build_graph_model(3, [2, 0, 2], [0, 1, 1])
        assert graph.indptr.tolist() == [0, 1, 1, 3]

    def test_accepts_numpy_arrays(self) -> None:
        graph = build_graph_model(
            3, np.array([0, 1, 2], dtype=np.int32), np.array([1, 2, 0], dtype=np.int32)
        )
        assert graph.indices.dtype == np.int64
        assert graph.neighbors(1).tolist() == [2]

    def test_build_is_deterministic(self) -> None:
        sources = [3, 1, 3, 0, 1]
        targets = [0, 2, 1, 3, 0]
        g1 = build_graph_model(4, sources, targets)
        g2 = build_graph_model(4, sources, targets)
        np.testing.assert_array_equal(g1.indices, g2.indices)
        np.testing.assert_array_equal(g1.indptr, g2.indptr)


class TestEdgeCases:
    def test_empty_graph(self) -> None:
        graph = build_graph_model(3, [], [])
        assert graph.m == 0
        assert graph.degree.tolist() == [0, 0, 0]

    def test_from_edge_list(self) -> None:
        graph = graph_from_edge_list(directed_cycle(4))
        assert graph.n == 4
        assert [graph.neighbors(u).tolist() for u in range(4)] == [[1], [2], [3], [0]]

    def test_graph_model_is_frozen(self) -> None:
        graph = build_graph_model(2, [0], [1])
        with pytest.raises(FrozenInstanceError):
            graph.n = 5


class TestAdjacencyMatrix:
    def test_matrix_pattern(self) -> None:
        graph = build_graph_model(3, [0, 0, 1], [1, 2, 2])
        dense = graph.adjacency_matrix().toarray()
        assert dense.shape == (3, 3)
        assert dense[0, 1] > 0 and dense[0, 2] > 0 and dense[1, 2] > 0
        assert dense[2].sum() == 0
