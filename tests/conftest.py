"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from chromagraph.graph.builder import build_graph
from chromagraph.schema.loader import parse_graph_from_string

RED = "#FF0000"
GREEN = "#00FF00"
BLUE = "#0000FF"


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def palette() -> list[str]:
    return [RED, GREEN, BLUE]


@pytest.fixture
def path_graph_yaml() -> str:
    """Return an uncolored path a - b - c - d."""
    return """
nodes:
  - id: a
    label: A
  - id: b
    label: B
  - id: c
    label: C
  - id: d
    label: D
edges:
  - [a, b]
  - [b, c]
  - [c, d]
"""


@pytest.fixture
def conflict_pair_yaml() -> str:
    """Return two adjacent nodes sharing a color."""
    return """
nodes:
  - id: left
    color: "#FF0000"
  - id: right
    color: "#FF0000"
edges:
  - [left, right]
"""


@pytest.fixture
def star_graph_yaml() -> str:
    """Return an uncolored hub with four leaves, hub listed third."""
    return """
nodes: [leaf-1, leaf-2, hub, leaf-3, leaf-4]
edges:
  - [hub, leaf-1]
  - [hub, leaf-2]
  - [hub, leaf-3]
  - [hub, leaf-4]
"""


@pytest.fixture
def path_graph(path_graph_yaml):
    """Return a parsed path graph."""
    return parse_graph_from_string(path_graph_yaml)


@pytest.fixture
def conflict_pair(conflict_pair_yaml):
    return parse_graph_from_string(conflict_pair_yaml)


@pytest.fixture
def star_graph(star_graph_yaml):
    return parse_graph_from_string(star_graph_yaml)


@pytest.fixture
def path_coloring_graph(path_graph):
    """Return a ColoringGraph built from the path graph."""
    return build_graph(path_graph)
