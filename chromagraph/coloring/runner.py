"""Analysis runner that combines every engine query on one snapshot."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..config import DEFAULT_PALETTE
from ..schema.loader import parse_graph
from ..schema.models import Graph
from .base import ValidationResult
from .chromatic import estimate_chromatic_number
from .hints import Hint, suggest_hint
from .validator import colors_used, validate


@dataclass
class ColoringReport:
    """Everything the presentation layer shows about a snapshot."""

    validation: ValidationResult
    chromatic_number: int
    colors_used: list[str]
    node_count: int
    colored_count: int
    hint: Hint | None = None

    @property
    def is_complete(self) -> bool:
        """Check that every node is colored without conflicts."""
        return self.colored_count == self.node_count and self.validation.is_valid

    @property
    def is_optimal(self) -> bool:
        """Check that a complete coloring uses no more colors than estimated."""
        return self.is_complete and len(self.colors_used) <= self.chromatic_number


def analyze_graph(graph: Graph, palette: Sequence[str] | None = None) -> ColoringReport:
    """Run validation, estimation and hinting on a graph.

    Args:
        graph: The graph snapshot.
        palette: Colors offered for the hint; defaults to DEFAULT_PALETTE.

    Returns:
        The combined ColoringReport.
    """
    if palette is None:
        palette = DEFAULT_PALETTE

    uncolored = len(graph.uncolored_nodes())
    return ColoringReport(
        validation=validate(graph),
        chromatic_number=estimate_chromatic_number(graph),
        colors_used=colors_used(graph),
        node_count=graph.node_count,
        colored_count=graph.node_count - uncolored,
        hint=suggest_hint(graph, palette),
    )


def analyze_graph_file(
    path: str | Path, palette: Sequence[str] | None = None
) -> ColoringReport:
    """Load and analyze a graph file.

    Raises:
        GraphLoadError: If the file cannot be loaded.
        GraphSchemaError: If the file is not a simple undirected graph.
    """
    graph = parse_graph(path)
    return analyze_graph(graph, palette)
