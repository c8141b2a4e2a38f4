"""ColoringGraph wrapper around networkx for puzzle graphs."""

from typing import Any

import networkx as nx


class ColoringGraph:
    """A networkx view of a graph snapshot.

    Wraps an undirected networkx Graph with the structural queries the
    estimator and hint engine rely on: degrees, adjacency, connectivity
    and two-coloring.
    """

    def __init__(self):
        """Initialize an empty coloring graph."""
        self._graph = nx.Graph()

    @property
    def graph(self) -> nx.Graph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_node(self, node_id: str, **attrs: Any) -> str:
        """Add a node.

        Args:
            node_id: The node id.
            **attrs: Node attributes (color, label).

        Returns:
            The node ID.
        """
        self._graph.add_node(node_id, **attrs)
        return node_id

    def add_edge(self, source: str, target: str) -> None:
        """Add an undirected edge between two existing nodes."""
        self._graph.add_edge(source, target)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def node_ids(self) -> list[str]:
        """Get node ids in insertion order."""
        return list(self._graph.nodes)

    def has_node(self, node_id: str) -> bool:
        return self._graph.has_node(node_id)

    def color_of(self, node_id: str) -> str | None:
        """Get a node's color, or None if it is uncolored or unknown."""
        if not self._graph.has_node(node_id):
            return None
        return self._graph.nodes[node_id].get("color")

    def neighbors(self, node_id: str) -> list[str]:
        """Get neighbour ids in edge-insertion order, or [] if unknown."""
        if not self._graph.has_node(node_id):
            return []
        return list(self._graph.adj[node_id])

    def degree(self, node_id: str) -> int:
        """Get the number of edges incident to a node, 0 if unknown."""
        if not self._graph.has_node(node_id):
            return 0
        return self._graph.degree[node_id]

    def max_degree(self) -> int:
        """Get the highest degree in the graph, 0 for an empty graph."""
        return max((degree for _, degree in self._graph.degree), default=0)

    def uncolored_node_ids(self) -> list[str]:
        return [
            node_id
            for node_id, data in self._graph.nodes(data=True)
            if data.get("color") is None
        ]

    def is_complete(self) -> bool:
        """Check whether every pair of distinct nodes is adjacent."""
        n = self.node_count
        return self.edge_count == n * (n - 1) // 2

    def two_coloring(self) -> dict[str, int] | None:
        """Try to color the graph with colors 0 and 1.

        Every component is traversed from an unvisited node, alternating
        colors along edges.

        Returns:
            Mapping of node id to 0/1, or None if the graph is not bipartite.
        """
        try:
            return nx.bipartite.color(self._graph)
        except nx.NetworkXError:
            return None

    def is_bipartite(self) -> bool:
        return self.two_coloring() is not None

    def is_connected(self) -> bool:
        """Check that every node is reachable from every other node.

        An empty graph counts as connected.
        """
        if self.node_count == 0:
            return True
        return nx.is_connected(self._graph)

    def reachable_from(self, node_id: str) -> set[str]:
        """Get all nodes reachable from a node (including itself)."""
        if not self._graph.has_node(node_id):
            return set()
        return set(nx.node_connected_component(self._graph, node_id))

    def wheel_rim_size(self) -> int | None:
        """Detect a wheel graph.

        A wheel is a hub adjacent to every other node, with the remaining
        nodes forming a single cycle.

        Returns:
            The number of rim nodes, or None if the graph is not a wheel.
        """
        n = self.node_count
        if n < 4 or self.edge_count != 2 * (n - 1):
            return None

        hubs = [
            node_id for node_id, degree in self._graph.degree if degree == n - 1
        ]
        for hub in hubs:
            rim = self._graph.subgraph(
                node_id for node_id in self._graph.nodes if node_id != hub
            )
            if all(degree == 2 for _, degree in rim.degree) and nx.is_connected(rim):
                return rim.number_of_nodes()

        return None
