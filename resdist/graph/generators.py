"""Synthetic graph families as flat edge lists.

Undirected families emit both directions of every edge, so out-degree
equals the undirected degree. directed_cycle is the only one-way family.

Sparse families (matching, planar, disk-intersection, ...) can leave
nodes isolated or split into components; estimates on such graphs fail
validation unless every walk from s and t can reach the landmark.
"""

import logging
from collections.abc import Callable

import numpy as np

from resdist.graph.types import EdgeList

log = logging.getLogger(__name__)


def _undirected(n: int, pairs: list[tuple[int, int]]) -> EdgeList:
    """Expand undirected pairs into an EdgeList holding both directions."""
    sources: list[int] = []
    targets: list[int] = []
    for u, w in pairs:
        sources.extend((u, w))
        targets.extend((w, u))
    return EdgeList(
        n=n,
        sources=np.array(sources, dtype=np.int64),
        targets=np.array(targets, dtype=np.int64),
    )


def cycle(n: int) -> EdgeList:
    return _undirected(n, [(i, (i + 1) % n) for i in range(n)])


def directed_cycle(n: int) -> EdgeList:
    """One-way cycle 0 -> 1 -> ... -> n-1 -> 0, every out-degree 1."""
    sources = np.arange(n, dtype=np.int64)
    return EdgeList(n=n, sources=sources, targets=(sources + 1) % n)


def path(n: int) -> EdgeList:
    return _undirected(n, [(i, i + 1) for i in range(n - 1)])


def star(n: int) -> EdgeList:
    """Node 0 is the hub."""
    return _undirected(n, [(0, i) for i in range(1, n)])


def complete(n: int) -> EdgeList:
    return _undirected(n, [(i, j) for i in range(n) for j in range(i + 1, n)])


def complete_bipartite(n1: int, n2: int) -> EdgeList:
    n = n1 + n2
    return _undirected(n, [(i, j) for i in range(n1) for j in range(n1, n)])


def grid(rows: int, cols: int) -> EdgeList:
    """rows x cols lattice, node id = r * cols + c."""
    pairs = []
    for r in range(rows):
        for c in range(cols):
            u = r * cols + c
            if c + 1 < cols:
                pairs.append((u, u + 1))
            if r + 1 < rows:
                pairs.append((u, u + cols))
    return _undirected(rows * cols, pairs)


def wheel(n: int) -> EdgeList:
    """Hub 0 joined to a rim cycle over nodes 1..n-1."""
    rim = n - 1
    pairs = [(0, i) for i in range(1, n)]
    pairs += [(i, i % rim + 1) for i in range(1, n)]
    return _undirected(n, pairs)


def ladder(n: int) -> EdgeList:
    """Two rails of n nodes each (0..n-1 and n..2n-1) joined by rungs."""
    pairs = [(i, i + n) for i in range(n)]
    pairs += [(i, i + 1) for i in range(n - 1)]
    pairs += [(n + i, n + i + 1) for i in range(n - 1)]
    return _undirected(2 * n, pairs)


def hypercube(dimension: int) -> EdgeList:
    n = 1 << dimension
    pairs = [
        (u, u ^ (1 << bit))
        for u in range(n)
        for bit in range(dimension)
        if u < u ^ (1 << bit)
    ]
    return _undirected(n, pairs)


def random_tree(n: int, rng: np.random.Generator) -> EdgeList:
    """Uniform random labelled tree decoded from a random Prufer sequence.

    Args:
        n: Number of nodes.
        rng: numpy random Generator for reproducibility.
    """
    if n <= 1:
        return _undirected(max(n, 0), [])
    if n == 2:
        return _undirected(2, [(0, 1)])

    prufer = rng.integers(0, n, size=n - 2)
    degree = np.ones(n, dtype=np.int64)
    np.add.at(degree, prufer, 1)

    pairs = []
    for x in prufer:
        leaf = int(np.flatnonzero(degree == 1)[0])
        pairs.append((leaf, int(x)))
        degree[leaf] -= 1
        degree[x] -= 1

    u, w = np.flatnonzero(degree == 1)
    pairs.append((int(u), int(w)))
    return _undirected(n, pairs)


def planar(n: int, rng: np.random.Generator, edge_prob: float = 0.1) -> EdgeList:
    """Sparse random graph with every degree capped at 5.

    Each pair i < j is kept with probability edge_prob while both endpoints
    are below the cap. The cap keeps the graph sparse; planarity itself is
    not checked.
    """
    degree = np.zeros(n, dtype=np.int64)
    pairs = []
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < edge_prob and degree[i] < 5 and degree[j] < 5:
                pairs.append((i, j))
                degree[i] += 1
                degree[j] += 1
    return _undirected(n, pairs)


def matching(n: int) -> EdgeList:
    """Disjoint edges (0, 1), (2, 3), ...; an odd n leaves the last node isolated."""
    return _undirected(n, [(i, i + 1) for i in range(0, n - 1, 2)])


def _spine_with_leaves(spine_length: int, leaves_per_node) -> EdgeList:
    pairs = [(i, i + 1) for i in range(spine_length - 1)]
    next_node = spine_length
    for i, count in enumerate(leaves_per_node):
        for _ in range(int(count)):
            pairs.append((i, next_node))
            next_node += 1
    return _undirected(next_node, pairs)


def lobster(spine_length: int, rng: np.random.Generator, max_legs: int = 2) -> EdgeList:
    """Path spine where every spine node gets 0..max_legs pendant legs."""
    legs = rng.integers(0, max_legs + 1, size=spine_length)
    return _spine_with_leaves(spine_length, legs)


def caterpillar(spine_length: int, rng: np.random.Generator) -> EdgeList:
    """Path spine where each spine node gets one leaf with probability 0.7."""
    leaves = rng.random(spine_length) < 0.7
    return _spine_with_leaves(spine_length, leaves)


def quadrangulation(grid_size: int) -> EdgeList:
    """Square lattice of grid_size x grid_size faces, (grid_size + 1)^2 nodes."""
    return grid(grid_size + 1, grid_size + 1)


def partial_k_tree(n: int, k: int, rng: np.random.Generator) -> EdgeList:
    """Partial k-tree: a k-clique on nodes 0..k-1, then each later node
    joins up to k earlier nodes, each earlier node picked with probability
    0.7 in index order.
    """
    base = min(k, n)
    pairs = [(i, j) for i in range(base) for j in range(i + 1, base)]
    for v in range(k, n):
        picked = []
        for i in range(v):
            if len(picked) >= k:
                break
            if rng.random() < 0.7:
                picked.append(i)
        pairs.extend((v, i) for i in picked)
    return _undirected(n, pairs)


def disk_intersection(n: int, rng: np.random.Generator, radius: float = 0.3) -> EdgeList:
    """Unit-square disk graph: nodes are disks of the given radius at
    uniform random centers, joined when the disks overlap.
    """
    points = rng.random((n, 2))
    iu, ju = np.triu_indices(n, k=1)
    dist = np.hypot(*(points[iu] - points[ju]).T)
    close = dist < 2 * radius
    return _undirected(n, list(zip(iu[close].tolist(), ju[close].tolist())))


def interval_graph(n: int, rng: np.random.Generator) -> EdgeList:
    """Intersection graph of random closed intervals [a, a + l], a ~ U[0, 1), l ~ U[0, 0.5)."""
    draws = rng.random((n, 2))
    start = draws[:, 0]
    end = start + draws[:, 1] * 0.5
    iu, ju = np.triu_indices(n, k=1)
    overlap = (end[iu] >= start[ju]) & (end[ju] >= start[iu])
    return _undirected(n, list(zip(iu[overlap].tolist(), ju[overlap].tolist())))


def small_vertex_cover(n: int, cover_size: int, rng: np.random.Generator) -> EdgeList:
    """Random graph whose edges all touch nodes 0..cover_size-1.

    Each pair with at least one endpoint in the cover is kept with
    probability 0.3.
    """
    pairs = [
        (i, j)
        for i in range(n)
        for j in range(i + 1, n)
        if (i < cover_size or j < cover_size) and rng.random() < 0.3
    ]
    return _undirected(n, pairs)


def small_cutwidth(n: int, rng: np.random.Generator) -> EdgeList:
    """Path 0..n-1 plus chords of span 2 to 4, each with probability 0.2."""
    pairs = [(i, i + 1) for i in range(n - 1)]
    for i in range(n):
        for j in range(i + 2, min(i + 5, n)):
            if rng.random() < 0.2:
                pairs.append((i, j))
    return _undirected(n, pairs)


GENERATORS: dict[str, Callable[[int, np.random.Generator], EdgeList]] = {
    "cycle": lambda size, rng: cycle(size),
    "directed-cycle": lambda size, rng: directed_cycle(size),
    "path": lambda size, rng: path(size),
    "star": lambda size, rng: star(size),
    "complete": lambda size, rng: complete(size),
    "complete-bipartite": lambda size, rng: complete_bipartite(size, size),
    "grid": lambda size, rng: grid(size, size),
    "wheel": lambda size, rng: wheel(size),
    "ladder": lambda size, rng: ladder(size),
    "hypercube": lambda size, rng: hypercube(size),
    "random-tree": lambda size, rng: random_tree(size, rng),
    "planar": lambda size, rng: planar(size, rng),
    "matching": lambda size, rng: matching(size),
    "lobster": lambda size, rng: lobster(size, rng),
    "caterpillar": lambda size, rng: caterpillar(size, rng),
    "quadrangulation": lambda size, rng: quadrangulation(size),
    "partial-k-tree": lambda size, rng: partial_k_tree(size, 3, rng),
    "disk-intersection": lambda size, rng: disk_intersection(size, rng),
    "interval-graph": lambda size, rng: interval_graph(size, rng),
    "small-vertex-cover": lambda size, rng: small_vertex_cover(size, 5, rng),
    "small-cutwidth": lambda size, rng: small_cutwidth(size, rng),
}


def generate_synthetic_graph(kind: str, size: int, seed: int = 0) -> EdgeList:
    """Generate a synthetic graph family by name.

    Args:
        kind: One of the keys of GENERATORS.
        size: Family size parameter: node count, grid side length,
            hypercube dimension, or spine length for lobster and
            caterpillar.
        seed: Seed for the randomized families.

    Returns:
        EdgeList for the generated graph.

    Raises:
        ValueError: If kind is not a known family.
    """
    if kind not in GENERATORS:
        raise ValueError(
            f"Unknown graph family {kind!r}; expected one of {sorted(GENERATORS)}"
        )
    edges = GENERATORS[kind](size, np.random.default_rng(seed))
    log.info("Generated %s graph: n=%d, m=%d", kind, edges.n, edges.m)
    return edges
