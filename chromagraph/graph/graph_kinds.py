"""Graph families the generators can produce."""

from enum import Enum


class GraphKind(str, Enum):
    """Canonical topologies offered as puzzles."""

    CYCLE = "cycle"
    TREE = "tree"
    COMPLETE = "complete"
    BIPARTITE = "bipartite"
    PLANAR = "planar"  # wheel: hub plus rim cycle
    RANDOM = "random"


# Smallest node count for which each family is a simple graph of its kind.
MIN_NODE_COUNT: dict[GraphKind, int] = {
    GraphKind.CYCLE: 3,
    GraphKind.TREE: 1,
    GraphKind.COMPLETE: 1,
    GraphKind.BIPARTITE: 2,
    GraphKind.PLANAR: 4,
    GraphKind.RANDOM: 1,
}
