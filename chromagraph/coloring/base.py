"""Result types for coloring validation."""

from dataclasses import dataclass, field

from ..schema.models import Edge


@dataclass(frozen=True)
class Conflict:
    """An edge whose endpoints share a color."""

    edge: Edge
    color: str

    @property
    def source(self) -> str:
        return self.edge.source

    @property
    def target(self) -> str:
        return self.edge.target

    def __str__(self) -> str:
        return f"{self.edge} share color {self.color}"


@dataclass
class ValidationResult:
    """Result of checking a coloring for adjacency conflicts."""

    conflicts: list[Conflict] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if no edge joins two equally colored nodes."""
        return not self.conflicts

    @property
    def conflict_edges(self) -> list[Edge]:
        return [conflict.edge for conflict in self.conflicts]

    def conflicting_node_ids(self) -> set[str]:
        """Get every node that sits on a conflicting edge."""
        node_ids = set()
        for conflict in self.conflicts:
            node_ids.update((conflict.source, conflict.target))
        return node_ids

    def add_conflict(self, edge: Edge, color: str) -> None:
        """Record a conflicting edge."""
        self.conflicts.append(Conflict(edge=edge, color=color))
