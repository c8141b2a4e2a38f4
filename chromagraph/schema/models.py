"""Pydantic models for graph snapshots."""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ..errors import NodeNotFoundError


class Node(BaseModel):
    """A node of a puzzle graph.

    Position and label are presentation metadata; the engine carries them
    through unchanged.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    x: float = 0.0
    y: float = 0.0
    label: str | None = None
    color: str | None = None

    @field_validator("color", mode="before")
    @classmethod
    def normalize_color(cls, value):
        """Treat an empty color as unset."""
        if value == "":
            return None
        return value

    @property
    def is_colored(self) -> bool:
        return self.color is not None


class Edge(BaseModel):
    """An undirected edge between two nodes."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str

    @property
    def key(self) -> frozenset[str]:
        """Order-independent identity of the edge."""
        return frozenset((self.source, self.target))

    def touches(self, node_id: str) -> bool:
        return node_id in (self.source, self.target)

    def other(self, node_id: str) -> str:
        """Return the endpoint opposite to node_id."""
        return self.target if self.source == node_id else self.source

    def __str__(self) -> str:
        return f"{self.source} -- {self.target}"


class Graph(BaseModel):
    """An immutable snapshot of a simple undirected graph and its coloring."""

    model_config = ConfigDict(frozen=True)

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def normalize_graph(cls, data):
        """Normalize shorthand node and edge syntax.

        Nodes may be given as bare id strings and edges as
        ``[source, target]`` pairs.
        """
        if not isinstance(data, dict):
            return data

        nodes = data.get("nodes") or []
        if isinstance(nodes, (list, tuple)):
            data["nodes"] = [
                {"id": node} if isinstance(node, str) else node for node in nodes
            ]

        edges = data.get("edges") or []
        if isinstance(edges, (list, tuple)):
            normalized_edges = []
            for edge in edges:
                if isinstance(edge, (list, tuple)) and len(edge) == 2:
                    normalized_edges.append({"source": edge[0], "target": edge[1]})
                else:
                    normalized_edges.append(edge)
            data["edges"] = normalized_edges

        return data

    @model_validator(mode="after")
    def check_simple_graph(self) -> "Graph":
        """Reject duplicate ids, dangling endpoints, self-loops and parallel edges."""
        node_ids: set[str] = set()
        for node in self.nodes:
            if node.id in node_ids:
                raise ValueError(f"Duplicate node id '{node.id}'")
            node_ids.add(node.id)

        seen: set[frozenset[str]] = set()
        for edge in self.edges:
            if edge.source == edge.target:
                raise ValueError(f"Edge {edge} is a self-loop")
            for endpoint in (edge.source, edge.target):
                if endpoint not in node_ids:
                    raise ValueError(
                        f"Edge {edge} references undefined node '{endpoint}'"
                    )
            if edge.key in seen:
                raise ValueError(f"Duplicate edge {edge}")
            seen.add(edge.key)

        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> list[str]:
        """Get all node ids in display order."""
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> Node | None:
        """Get a node by id, or None if it is not in the graph."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def has_node(self, node_id: str) -> bool:
        return self.get_node(node_id) is not None

    def adjacent_nodes(self, node_id: str) -> list[Node]:
        """Get the neighbours of a node in edge-insertion order.

        Args:
            node_id: The node to look up.

        Returns:
            Neighbouring nodes; empty if the node is unknown or isolated.
        """
        by_id = {node.id: node for node in self.nodes}
        return [
            by_id[edge.other(node_id)]
            for edge in self.edges
            if edge.touches(node_id)
        ]

    def degree(self, node_id: str) -> int:
        """Count the edges incident to a node."""
        return sum(1 for edge in self.edges if edge.touches(node_id))

    def uncolored_nodes(self) -> list[Node]:
        return [node for node in self.nodes if not node.is_colored]

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def with_node_color(self, node_id: str, color: str | None) -> "Graph":
        """Return a new snapshot with one node recolored.

        Args:
            node_id: The node to recolor.
            color: The new color, or None to clear it.

        Returns:
            A new Graph; this one is left untouched.

        Raises:
            NodeNotFoundError: If node_id is not in the graph.
        """
        if not self.has_node(node_id):
            raise NodeNotFoundError(node_id)

        nodes = tuple(
            node.model_copy(update={"color": color or None})
            if node.id == node_id
            else node
            for node in self.nodes
        )
        return self.model_copy(update={"nodes": nodes})
