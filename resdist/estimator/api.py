"""Entry points for the two landmark-absorbed resistance distance estimators.

push_v_sp and abwalk_v_sp take the flat (n, m, sources, targets) edge
arrays used at the host boundary. estimate_push and estimate_walk run on a
prebuilt GraphModel with parameters from an EstimatorConfig.
"""

import logging

from resdist.config.estimator import EstimatorConfig, PushConfig, WalkConfig
from resdist.estimator.combine import combine_push, combine_walk
from resdist.graph.build import build_graph_model
from resdist.graph.types import GraphModel
from resdist.graph.validation import (
    check_absorbing,
    check_edge_arrays,
    check_nodes,
    check_rmax,
    check_walk_params,
)
from resdist.push.propagation import push_from_anchor
from resdist.walk.absorbing import DEFAULT_MAX_WALK_STEPS, count_visits

log = logging.getLogger(__name__)


def estimate_push(
    graph: GraphModel,
    s: int,
    t: int,
    v: int,
    config: EstimatorConfig,
) -> float:
    """Push-based resistance distance estimate between s and t, absorbed at v."""
    rmax = config.push.rmax
    if config.validate:
        check_nodes(graph.n, s, t, v)
        check_rmax(rmax)
        check_absorbing(graph, (s, t), v)

    log.info("Push estimate: n=%d, m=%d, s=%d, t=%d, v=%d, rmax=%g",
             graph.n, graph.m, s, t, v, rmax)

    state_s = push_from_anchor(graph, s, v, rmax)
    state_t = push_from_anchor(graph, t, v, rmax)
    result = combine_push(state_s.reserve, state_t.reserve, graph.degree, s, t)

    log.info("Push estimate done: %.10g (%d + %d pushes)",
             result, state_s.n_pushes, state_t.n_pushes)
    return result


def estimate_walk(
    graph: GraphModel,
    s: int,
    t: int,
    v: int,
    config: EstimatorConfig,
) -> float:
    """Monte Carlo resistance distance estimate between s and t, absorbed at v."""
    walk = config.walk
    if config.validate:
        check_nodes(graph.n, s, t, v)
        check_walk_params(walk.times, walk.seed, walk.max_steps)
        check_absorbing(graph, (s, t), v)

    log.info("Walk estimate: n=%d, m=%d, s=%d, t=%d, v=%d, times=%d, seed=%d",
             graph.n, graph.m, s, t, v, walk.times, walk.seed)

    counts = count_visits(graph, s, t, v, walk.times, walk.seed, walk.max_steps)
    result = combine_walk(counts, graph.degree, s, t, walk.times)

    log.info("Walk estimate done: %.10g (tau_ss=%d, tau_st=%d, tau_ts=%d, tau_tt=%d)",
             result, counts.tau_ss, counts.tau_st, counts.tau_ts, counts.tau_tt)
    return result


def push_v_sp(
    n: int,
    m: int,
    edge_sources,
    edge_targets,
    s: int,
    t: int,
    v: int,
    rmax: float,
    *,
    validate: bool = True,
) -> float:
    """Push-based estimate from flat edge arrays.

    Args:
        n: Number of nodes.
        m: Number of edges.
        edge_sources: Edge sources, length m.
        edge_targets: Edge targets, length m.
        s: First query node.
        t: Second query node.
        v: Absorbing landmark node.
        rmax: Residual threshold (> 0).
        validate: Raise InvalidGraphError / InvalidParameterError on
            malformed input instead of leaving it undefined.

    Returns:
        reserve_s[s]/d[s] + reserve_t[t]/d[t] - reserve_s[t]/d[s] - reserve_t[s]/d[t]
    """
    if validate:
        check_edge_arrays(n, m, edge_sources, edge_targets)
        check_rmax(rmax)
    graph = build_graph_model(n, edge_sources, edge_targets)
    config = EstimatorConfig(push=PushConfig(rmax=rmax), validate=validate)
    return estimate_push(graph, s, t, v, config)


def abwalk_v_sp(
    n: int,
    m: int,
    edge_sources,
    edge_targets,
    s: int,
    t: int,
    v: int,
    times: int,
    seed: int,
    *,
    max_steps: int | None = DEFAULT_MAX_WALK_STEPS,
    validate: bool = True,
) -> float:
    """Monte Carlo estimate from flat edge arrays, deterministic given seed.

    Args:
        n: Number of nodes.
        m: Number of edges.
        edge_sources: Edge sources, length m.
        edge_targets: Edge targets, length m.
        s: First query node.
        t: Second query node.
        v: Absorbing landmark node.
        times: Walks per anchor (>= 1).
        seed: Seed for the call-local random Generator (>= 0).
        max_steps: Per-walk step cap; WalkDidNotAbsorbError past it.
        validate: Raise InvalidGraphError / InvalidParameterError on
            malformed input instead of leaving it undefined.

    Returns:
        tau_ss/(d[s]T) - tau_st/(d[t]T) - tau_ts/(d[s]T) + tau_tt/(d[t]T)
    """
    if validate:
        check_edge_arrays(n, m, edge_sources, edge_targets)
        check_walk_params(times, seed, max_steps)
    graph = build_graph_model(n, edge_sources, edge_targets)
    config = EstimatorConfig(
        walk=WalkConfig(times=times, seed=seed, max_steps=max_steps),
        validate=validate,
    )
    return estimate_walk(graph, s, t, v, config)
