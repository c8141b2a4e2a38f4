"""chromagraph: a graph coloring puzzle engine."""

from .errors import ChromagraphError, InvalidParametersError, NodeNotFoundError
from .schema.models import Edge, Graph, Node
from .graph.graph_kinds import GraphKind
from .graph.generators import generate
from .coloring.validator import validate
from .coloring.chromatic import estimate_chromatic_number
from .coloring.hints import safe_colors, suggest_next_node
from .coloring.recolor import recolor

__version__ = "0.1.0"

__all__ = [
    "ChromagraphError",
    "InvalidParametersError",
    "NodeNotFoundError",
    "Edge",
    "Graph",
    "Node",
    "GraphKind",
    "generate",
    "validate",
    "estimate_chromatic_number",
    "safe_colors",
    "suggest_next_node",
    "recolor",
]
