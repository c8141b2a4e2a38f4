"""YAML/JSON loading and dumping for graph snapshots."""

import json
from pathlib import Path
from typing import Literal

import yaml
from pydantic import ValidationError

from .errors import GraphLoadError, GraphSchemaError
from .models import Graph


def load_yaml(path: str | Path) -> dict:
    """Load a YAML (or JSON) file and return the raw data.

    Args:
        path: Path to the graph file.

    Returns:
        The parsed data as a dictionary.

    Raises:
        GraphLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise GraphLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise GraphLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise GraphLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise GraphLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise GraphLoadError(
            f"Expected mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def parse_graph(path: str | Path) -> Graph:
    """Load and parse a graph file.

    Raises:
        GraphLoadError: If the file cannot be read or parsed.
        GraphSchemaError: If the data is not a simple undirected graph.
    """
    data = load_yaml(path)
    return _parse_graph_data(data)


def parse_graph_from_string(text: str) -> Graph:
    """Parse a YAML or JSON string into a Graph.

    Raises:
        GraphLoadError: If the text cannot be parsed.
        GraphSchemaError: If the data is not a simple undirected graph.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise GraphLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise GraphLoadError(f"Expected mapping at root, got {type(data).__name__}")

    return _parse_graph_data(data)


def dump_graph(graph: Graph, format: Literal["yaml", "json"] = "yaml") -> str:
    """Serialize a graph snapshot to YAML or JSON text."""
    data = graph.model_dump(mode="json")
    if format == "json":
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, sort_keys=False)


def _parse_graph_data(data: dict) -> Graph:
    try:
        return Graph.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise GraphSchemaError(
            f"Graph validation failed with {len(errors)} error(s)", errors
        ) from e
