"""Coloring validator."""

from ..schema.models import Graph
from .base import ValidationResult


def validate(graph: Graph) -> ValidationResult:
    """Check a colored graph for adjacency conflicts.

    An edge conflicts when both endpoints are colored and the colors are
    equal. Uncolored nodes never conflict, so a partial coloring can be
    valid.

    Args:
        graph: The graph snapshot to check.

    Returns:
        ValidationResult listing conflicts in edge order.
    """
    result = ValidationResult()
    colors = {node.id: node.color for node in graph.nodes}

    for edge in graph.edges:
        source_color = colors.get(edge.source)
        if source_color is not None and source_color == colors.get(edge.target):
            result.add_conflict(edge, source_color)

    return result


def colors_used(graph: Graph) -> list[str]:
    """Get the distinct colors on the graph, in node order."""
    used: list[str] = []
    for node in graph.nodes:
        if node.color is not None and node.color not in used:
            used.append(node.color)
    return used


def is_solved(graph: Graph) -> bool:
    """Check that every node is colored and no edge conflicts."""
    return not graph.uncolored_nodes() and validate(graph).is_valid
