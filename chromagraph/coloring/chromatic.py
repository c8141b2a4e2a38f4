"""Chromatic number estimator.

This is not an exact solver. A chain of recognizers, each exact for the
shape it matches, is tried in order:

1. complete graph: n colors;
2. bipartite (two-colorable) graph: 2 colors;
3. n >= 3 nodes, n edges, n odd (an odd cycle): 3 colors;
4. wheel: 3 colors for an even rim, 4 for an odd rim;
5. otherwise min(max degree + 1, n).

The last tier is an upper bound and overestimates irregular or dense
graphs that none of the recognizers match.
"""

import logging

from ..graph.builder import build_graph
from ..schema.models import Graph

logger = logging.getLogger(__name__)


def estimate_chromatic_number(graph: Graph) -> int:
    """Estimate the minimum number of colors needed for a graph.

    Args:
        graph: The graph snapshot. Its current coloring is ignored.

    Returns:
        The estimate. Exact for complete, bipartite, odd-cycle and wheel
        graphs; a degree-based upper bound otherwise.
    """
    coloring_graph = build_graph(graph)
    n = coloring_graph.node_count
    edge_count = coloring_graph.edge_count

    if coloring_graph.is_complete():
        return n

    if coloring_graph.is_bipartite():
        return 2

    if n >= 3 and edge_count == n and n % 2 == 1:
        return 3

    rim = coloring_graph.wheel_rim_size()
    if rim is not None:
        return 3 if rim % 2 == 0 else 4

    bound = min(coloring_graph.max_degree() + 1, n)
    logger.debug("Falling back to degree bound %d for %d-node graph", bound, n)
    return bound
