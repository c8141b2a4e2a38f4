"""Hint engine: which node to color next and which colors are safe."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..graph.builder import build_graph
from ..schema.models import Graph, Node


@dataclass(frozen=True)
class Hint:
    """A suggested node together with the palette colors safe for it."""

    node_id: str
    safe_colors: list[str] = field(default_factory=list)

    @property
    def needs_new_color(self) -> bool:
        """True when every palette color is taken by a neighbour."""
        return not self.safe_colors


def get_adjacent(graph: Graph, node_id: str) -> list[Node]:
    """Get a node's neighbours, or [] if the node is unknown."""
    return graph.adjacent_nodes(node_id)


def suggest_next_node(graph: Graph) -> str | None:
    """Pick the uncolored node with the highest degree.

    Ties go to the node that appears first in the graph.

    Returns:
        The node id, or None if every node is colored.
    """
    coloring_graph = build_graph(graph)
    uncolored = coloring_graph.uncolored_node_ids()
    if not uncolored:
        return None
    return max(uncolored, key=coloring_graph.degree)


def safe_colors(graph: Graph, node_id: str, palette: Sequence[str]) -> list[str]:
    """Get the palette colors not used by any neighbour of a node.

    The node's own color is not considered. Palette order is kept.

    Args:
        graph: The graph snapshot.
        node_id: The node to color.
        palette: Candidate colors in display order.

    Returns:
        The safe colors; empty when every palette color is taken.
    """
    used = {
        neighbour.color
        for neighbour in get_adjacent(graph, node_id)
        if neighbour.color is not None
    }
    return [color for color in palette if color not in used]


def suggest_hint(graph: Graph, palette: Sequence[str]) -> Hint | None:
    """Suggest the next node and its safe colors, or None if all are colored."""
    node_id = suggest_next_node(graph)
    if node_id is None:
        return None
    return Hint(node_id=node_id, safe_colors=safe_colors(graph, node_id, palette))
