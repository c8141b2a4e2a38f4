"""Snapshot-producing recolor events."""

import logging

from ..errors import NodeNotFoundError
from ..schema.models import Graph

logger = logging.getLogger(__name__)


def recolor(graph: Graph, node_id: str, color: str | None) -> Graph:
    """Return a new snapshot with one node recolored.

    An unknown node id is ignored: the event is logged and the same graph
    is returned, so a stale click never breaks the caller.

    Args:
        graph: The current snapshot.
        node_id: The node to recolor.
        color: The new color, or None to clear it.

    Returns:
        The new snapshot, or graph itself if node_id is unknown.
    """
    try:
        return graph.with_node_color(node_id, color)
    except NodeNotFoundError as e:
        logger.warning("Ignoring recolor event: %s", e)
        return graph


def clear_color(graph: Graph, node_id: str) -> Graph:
    """Return a new snapshot with a node's color unset."""
    return recolor(graph, node_id, None)
