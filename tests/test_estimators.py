"""End-to-end tests for push_v_sp and abwalk_v_sp.

Exact references are built from G = (I - P)^-1 over the non-landmark
nodes, where G[a, x] is the expected number of visits to x by a walk from
a before absorption. The push formula is evaluated on G with both terms of
an anchor scaled by that anchor's degree; the walk formula keeps its own
degree pattern.
"""

import logging

import numpy as np
import pytest

from resdist.config import EstimatorConfig, PushConfig, WalkConfig
from resdist.estimator.api import abwalk_v_sp, estimate_push, estimate_walk, push_v_sp
from resdist.graph.build import build_graph_model, graph_from_edge_list
from resdist.graph.generators import cycle, directed_cycle, path
from resdist.graph.types import EdgeList


def _push_form(G: np.ndarray, d: np.ndarray, s: int, t: int) -> float:
    return G[s, s] / d[s] + G[t, t] / d[t] - G[s, t] / d[s] - G[t, s] / d[t]


def _walk_form(G: np.ndarray, d: np.ndarray, s: int, t: int) -> float:
    return G[s, s] / d[s] - G[s, t] / d[t] - G[t, s] / d[s] + G[t, t] / d[t]


def _push(edges: EdgeList, s: int, t: int, v: int, rmax: float) -> float:
    return push_v_sp(edges.n, edges.m, edges.sources, edges.targets, s, t, v, rmax)


def _walk(edges: EdgeList, s: int, t: int, v: int, times: int, seed: int) -> float:
    return abwalk_v_sp(
        edges.n, edges.m, edges.sources, edges.targets, s, t, v, times, seed
    )


class TestDirectedFourCycle:
    """0 -> 1 -> 2 -> 3 -> 0, s=0, t=2, v=1; the exact value is 1."""

    def test_exact_reference(self, exact_visits) -> None:
        graph = graph_from_edge_list(directed_cycle(4))
        G = exact_visits(graph, 1)
        assert _push_form(G, graph.degree, 0, 2) == pytest.approx(1.0)
        assert _walk_form(G, graph.degree, 0, 2) == pytest.approx(1.0)

    def test_push(self) -> None:
        result = push_v_sp(4, 4, [0, 1, 2, 3], [1, 2, 3, 0], 0, 2, 1, 1e-6)
        assert abs(result - 1.0) < 1e-4

    def test_walk(self) -> None:
        result = abwalk_v_sp(4, 4, [0, 1, 2, 3], [1, 2, 3, 0], 0, 2, 1, 100_000, 12345)
        assert abs(result - 1.0) < 0.05


class TestSymmetry:
    def test_push_s_equals_t_is_zero(self) -> None:
        edges = path(5)
        assert _push(edges, 2, 2, 0, 1e-6) == 0.0

    def test_push_s_equals_t_on_cycle(self) -> None:
        edges = cycle(7)
        assert _push(edges, 4, 4, 1, 1e-3) == 0.0

    def test_walk_s_equals_t_is_zero(self) -> None:
        # with s == t the walk formula cancels within each anchor's batch
        edges = cycle(5)
        assert _walk(edges, 3, 3, 0, 1000, 8) == 0.0


class TestLandmarkAtQueryNode:
    def test_push_v_equals_s(self, caplog: pytest.LogCaptureFixture, exact_visits) -> None:
        edges = path(5)
        graph = graph_from_edge_list(edges)
        G = exact_visits(graph, 0)
        with caplog.at_level(logging.WARNING):
            result = _push(edges, 0, 3, 0, 1e-10)
        # reserve_s is all-zero, and reserve_t[s] is zero because s absorbs
        assert result == pytest.approx(G[3, 3] / graph.degree[3], abs=1e-6)
        assert "degenerate" in caplog.text

    def test_walk_v_equals_s(self, exact_visits) -> None:
        edges = path(5)
        graph = graph_from_edge_list(edges)
        G = exact_visits(graph, 0)
        result = _walk(edges, 0, 3, 0, 20_000, 4)
        assert result == pytest.approx(G[3, 3] / graph.degree[3], abs=0.1)


class TestDeterminism:
    def test_walk_bit_identical(self) -> None:
        edges = path(6)
        r1 = _walk(edges, 2, 5, 0, 5000, 31337)
        r2 = _walk(edges, 2, 5, 0, 5000, 31337)
        assert r1 == r2

    def test_push_repeatable(self) -> None:
        edges = cycle(8)
        assert _push(edges, 1, 5, 3, 1e-7) == _push(edges, 1, 5, 3, 1e-7)

    def test_validation_does_not_change_result(self) -> None:
        edges = path(6)
        checked = _push(edges, 2, 5, 0, 1e-6)
        unchecked = push_v_sp(
            edges.n, edges.m, edges.sources, edges.targets, 2, 5, 0, 1e-6,
            validate=False,
        )
        assert checked == unchecked


class TestAccuracy:
    def test_push_matches_exact_on_path(self, exact_visits) -> None:
        edges = path(5)
        graph = graph_from_edge_list(edges)
        exact = _push_form(exact_visits(graph, 0), graph.degree, 2, 4)
        assert _push(edges, 2, 4, 0, 1e-9) == pytest.approx(exact, abs=1e-6)

    def test_estimators_agree_when_degrees_match(self, exact_visits) -> None:
        # on a cycle deg[s] == deg[t], so both formulas give the same value
        edges = cycle(6)
        graph = graph_from_edge_list(edges)
        G = exact_visits(graph, 0)
        exact = _push_form(G, graph.degree, 2, 4)
        assert _walk_form(G, graph.degree, 2, 4) == pytest.approx(exact)
        assert _push(edges, 2, 4, 0, 1e-9) == pytest.approx(exact, abs=1e-6)
        assert _walk(edges, 2, 4, 0, 50_000, 17) == pytest.approx(exact, abs=0.05)


class TestConvergence:
    """Tighter parameters do not increase error on the 5-node path."""

    def test_push_error_shrinks_with_rmax(self, exact_visits) -> None:
        edges = path(5)
        graph = graph_from_edge_list(edges)
        exact = _push_form(exact_visits(graph, 0), graph.degree, 2, 4)
        errors = [
            abs(_push(edges, 2, 4, 0, rmax) - exact)
            for rmax in (1e-1, 1e-3, 1e-5, 1e-8)
        ]
        assert errors[-1] <= errors[0]
        assert errors[-1] < 1e-6

    def test_walk_error_shrinks_with_times(self, exact_visits) -> None:
        edges = path(5)
        graph = graph_from_edge_list(edges)
        exact = _walk_form(exact_visits(graph, 0), graph.degree, 2, 4)
        seeds = range(20)
        small = np.mean([abs(_walk(edges, 2, 4, 0, 50, seed) - exact) for seed in seeds])
        large = np.mean([abs(_walk(edges, 2, 4, 0, 5000, seed) - exact) for seed in seeds])
        assert large < small


class TestConfigDrivenEstimates:
    def test_estimate_push_uses_config(self) -> None:
        graph = graph_from_edge_list(directed_cycle(4))
        config = EstimatorConfig(push=PushConfig(rmax=1e-3))
        assert estimate_push(graph, 0, 2, 1, config) == 1.0

    def test_estimate_walk_uses_config(self) -> None:
        graph = build_graph_model(4, [0, 1, 2, 3], [1, 2, 3, 0])
        config = EstimatorConfig(walk=WalkConfig(times=10, seed=1))
        assert estimate_walk(graph, 0, 2, 1, config) == 1.0
