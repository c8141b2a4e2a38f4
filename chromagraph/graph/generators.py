"""Topology generators for canonical puzzle graphs.

Every generator returns a fresh Graph with all colors unset. Randomized
generators draw from an explicit ``random.Random``: pass ``rng`` to share
a source, or ``seed`` to pin one instance of the puzzle.
"""

import logging
import math
import random

from ..config import (
    BIPARTITE_EDGE_PROBABILITY,
    RANDOM_EDGE_ATTEMPTS_PER_EDGE,
    RANDOM_EDGE_FACTOR,
)
from ..errors import InvalidParametersError
from ..schema.models import Edge, Graph, Node
from .graph_kinds import MIN_NODE_COUNT, GraphKind
from .layout import Position, circular_layout, hub_and_rim_layout, two_row_layout

logger = logging.getLogger(__name__)


def generate(
    kind: GraphKind | str,
    node_count: int,
    edge_count: int | None = None,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Graph:
    """Generate a puzzle graph of the given kind.

    Args:
        kind: The graph family, as a GraphKind or its string value.
        node_count: Number of nodes.
        edge_count: Target edge count, used by the random family only.
        seed: Seed for a fresh randomness source.
        rng: Randomness source; takes precedence over seed.

    Returns:
        The generated Graph.

    Raises:
        InvalidParametersError: If the kind is unknown or the size is
            degenerate for it.
    """
    try:
        kind = GraphKind(kind)
    except ValueError:
        raise InvalidParametersError(f"Unknown graph kind '{kind}'", "kind") from None

    if kind == GraphKind.CYCLE:
        return cycle_graph(node_count)
    if kind == GraphKind.TREE:
        return tree_graph(node_count, rng=rng, seed=seed)
    if kind == GraphKind.COMPLETE:
        return complete_graph(node_count)
    if kind == GraphKind.BIPARTITE:
        return bipartite_graph(node_count, rng=rng, seed=seed)
    if kind == GraphKind.PLANAR:
        return wheel_graph(node_count)
    return random_connected_graph(node_count, edge_count, rng=rng, seed=seed)


def cycle_graph(node_count: int) -> Graph:
    """Generate a ring: node i is joined to node (i + 1) mod n."""
    _check_node_count(GraphKind.CYCLE, node_count)
    pairs = [(i, (i + 1) % node_count) for i in range(node_count)]
    return _make_graph(
        GraphKind.CYCLE, node_count, pairs, circular_layout(node_count)
    )


def tree_graph(
    node_count: int,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> Graph:
    """Generate a random tree rooted at node 0.

    Each node i >= 1 attaches to a uniformly random earlier node.
    """
    _check_node_count(GraphKind.TREE, node_count)
    rng = _resolve_rng(rng, seed)
    pairs = _random_spanning_tree(node_count, rng)
    return _make_graph(GraphKind.TREE, node_count, pairs, circular_layout(node_count))


def complete_graph(node_count: int) -> Graph:
    """Generate a graph with every pair of distinct nodes connected."""
    _check_node_count(GraphKind.COMPLETE, node_count)
    pairs = [
        (i, j) for i in range(node_count) for j in range(i + 1, node_count)
    ]
    return _make_graph(
        GraphKind.COMPLETE, node_count, pairs, circular_layout(node_count)
    )


def bipartite_graph(
    node_count: int,
    rng: random.Random | None = None,
    seed: int | None = None,
    edge_probability: float = BIPARTITE_EDGE_PROBABILITY,
) -> Graph:
    """Generate a random bipartite graph.

    Nodes 0..ceil(n/2)-1 form the first part and the rest the second.
    Each cross pair is connected independently with edge_probability;
    there are never edges inside a part.
    """
    _check_node_count(GraphKind.BIPARTITE, node_count)
    if not 0.0 <= edge_probability <= 1.0:
        raise InvalidParametersError(
            f"Edge probability must be within [0, 1], got {edge_probability}",
            "edge_probability",
        )
    rng = _resolve_rng(rng, seed)

    part_size = math.ceil(node_count / 2)
    pairs = [
        (i, j)
        for i in range(part_size)
        for j in range(part_size, node_count)
        if rng.random() < edge_probability
    ]
    return _make_graph(
        GraphKind.BIPARTITE,
        node_count,
        pairs,
        two_row_layout(node_count, part_size),
    )


def wheel_graph(node_count: int) -> Graph:
    """Generate a wheel: hub node 0 plus a rim cycle over nodes 1..n-1.

    Rim edges come first, then the spokes from the hub.
    """
    _check_node_count(GraphKind.PLANAR, node_count)
    rim = node_count - 1
    pairs = [(i, (i % rim) + 1) for i in range(1, node_count)]
    pairs.extend((0, i) for i in range(1, node_count))
    return _make_graph(
        GraphKind.PLANAR, node_count, pairs, hub_and_rim_layout(node_count)
    )


def random_connected_graph(
    node_count: int,
    edge_count: int | None = None,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> Graph:
    """Generate a random connected graph.

    A random spanning tree guarantees connectivity; extra random edges are
    then added until edge_count or the simple-graph maximum is reached.
    Sampling gives up after a bounded number of attempts, so edge_count is
    an upper bound rather than a guarantee.

    Args:
        node_count: Number of nodes.
        edge_count: Target edge count; defaults to ceil(1.5 * node_count).
        rng: Randomness source.
        seed: Seed used when rng is not given.

    Returns:
        A connected Graph.
    """
    _check_node_count(GraphKind.RANDOM, node_count)
    if edge_count is None:
        edge_count = math.ceil(node_count * RANDOM_EDGE_FACTOR)
    if edge_count < 0:
        raise InvalidParametersError(
            f"Edge count must not be negative, got {edge_count}", "edge_count"
        )
    rng = _resolve_rng(rng, seed)

    pairs = _random_spanning_tree(node_count, rng)
    seen = {frozenset(pair) for pair in pairs}

    max_edges = node_count * (node_count - 1) // 2
    target = min(edge_count, max_edges)
    attempts = (target - len(pairs)) * RANDOM_EDGE_ATTEMPTS_PER_EDGE

    while len(pairs) < target and attempts > 0:
        attempts -= 1
        source = rng.randrange(node_count)
        target_node = rng.randrange(node_count)
        if source == target_node:
            continue
        key = frozenset((source, target_node))
        if key in seen:
            continue
        seen.add(key)
        pairs.append((source, target_node))

    if len(pairs) < target:
        logger.info(
            "Random graph stopped at %d of %d edges after exhausting attempts",
            len(pairs),
            target,
        )

    return _make_graph(
        GraphKind.RANDOM, node_count, pairs, circular_layout(node_count)
    )


def _random_spanning_tree(
    node_count: int, rng: random.Random
) -> list[tuple[int, int]]:
    return [(rng.randrange(i), i) for i in range(1, node_count)]


def _resolve_rng(rng: random.Random | None, seed: int | None) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def _check_node_count(kind: GraphKind, node_count: int) -> None:
    minimum = MIN_NODE_COUNT[kind]
    if node_count < minimum:
        raise InvalidParametersError(
            f"A {kind.value} graph needs at least {minimum} node(s), got {node_count}",
            "node_count",
        )


def _node_id(index: int) -> str:
    return f"node-{index}"


def _make_graph(
    kind: GraphKind,
    node_count: int,
    pairs: list[tuple[int, int]],
    positions: list[Position],
) -> Graph:
    nodes = [
        Node(id=_node_id(i), x=x, y=y, label=str(i + 1))
        for i, (x, y) in enumerate(positions)
    ]
    edges = [
        Edge(source=_node_id(source), target=_node_id(target))
        for source, target in pairs
    ]
    graph = Graph(nodes=nodes, edges=edges)
    logger.debug(
        "Generated %s graph with %d nodes and %d edges",
        kind.value,
        node_count,
        graph.edge_count,
    )
    return graph
