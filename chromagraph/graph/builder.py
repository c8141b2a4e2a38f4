"""Builder for converting Graph snapshots to ColoringGraph."""

from ..schema.models import Graph
from .coloring_graph import ColoringGraph


def build_graph(graph: Graph) -> ColoringGraph:
    """Build a ColoringGraph from a Graph snapshot.

    Nodes are added in display order and edges in insertion order, so
    neighbour and node iteration follow the snapshot.

    Args:
        graph: The graph snapshot.

    Returns:
        A ColoringGraph over the same nodes and edges.
    """
    coloring_graph = ColoringGraph()

    for node in graph.nodes:
        coloring_graph.add_node(node.id, color=node.color, label=node.label)

    for edge in graph.edges:
        coloring_graph.add_edge(edge.source, edge.target)

    return coloring_graph
