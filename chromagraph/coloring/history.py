"""Undo/redo history over immutable graph snapshots."""

from dataclasses import dataclass, replace

from ..schema.models import Graph


@dataclass(frozen=True)
class ColoringHistory:
    """A sequence of snapshots with a cursor on the active one.

    Every operation returns a new history. Recording after an undo drops
    the snapshots that could have been redone.
    """

    snapshots: tuple[Graph, ...]
    cursor: int = 0

    @classmethod
    def start(cls, graph: Graph) -> "ColoringHistory":
        """Begin a history at an initial snapshot."""
        return cls(snapshots=(graph,))

    @property
    def current(self) -> Graph:
        return self.snapshots[self.cursor]

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < len(self.snapshots) - 1

    def record(self, graph: Graph) -> "ColoringHistory":
        """Make graph the active snapshot, discarding any redo tail."""
        if graph is self.current:
            return self
        snapshots = self.snapshots[: self.cursor + 1] + (graph,)
        return replace(self, snapshots=snapshots, cursor=len(snapshots) - 1)

    def undo(self) -> "ColoringHistory":
        """Step back one snapshot; a no-op at the start."""
        if not self.can_undo:
            return self
        return replace(self, cursor=self.cursor - 1)

    def redo(self) -> "ColoringHistory":
        """Step forward one snapshot; a no-op at the end."""
        if not self.can_redo:
            return self
        return replace(self, cursor=self.cursor + 1)

    def reset(self) -> "ColoringHistory":
        """Return to a history holding only the initial snapshot."""
        return ColoringHistory.start(self.snapshots[0])
