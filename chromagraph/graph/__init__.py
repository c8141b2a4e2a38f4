"""Graph layer: topology generators and networkx-backed queries."""

from .graph_kinds import GraphKind
from .coloring_graph import ColoringGraph
from .builder import build_graph
from .generators import (
    bipartite_graph,
    complete_graph,
    cycle_graph,
    generate,
    random_connected_graph,
    tree_graph,
    wheel_graph,
)

__all__ = [
    "GraphKind",
    "ColoringGraph",
    "build_graph",
    "bipartite_graph",
    "complete_graph",
    "cycle_graph",
    "generate",
    "random_connected_graph",
    "tree_graph",
    "wheel_graph",
]
