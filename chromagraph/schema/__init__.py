"""Schema layer: graph snapshot models and file loading."""

from .errors import GraphLoadError, GraphSchemaError
from .models import Edge, Graph, Node
from .loader import dump_graph, load_yaml, parse_graph, parse_graph_from_string

__all__ = [
    "GraphLoadError",
    "GraphSchemaError",
    "Edge",
    "Graph",
    "Node",
    "dump_graph",
    "load_yaml",
    "parse_graph",
    "parse_graph_from_string",
]
