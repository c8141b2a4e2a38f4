"""Coloring layer: validation, estimation, hints and history."""

from .base import Conflict, ValidationResult
from .validator import colors_used, is_solved, validate
from .chromatic import estimate_chromatic_number
from .hints import Hint, get_adjacent, safe_colors, suggest_hint, suggest_next_node
from .recolor import clear_color, recolor
from .history import ColoringHistory
from .runner import ColoringReport, analyze_graph, analyze_graph_file

__all__ = [
    "Conflict",
    "ValidationResult",
    "colors_used",
    "is_solved",
    "validate",
    "estimate_chromatic_number",
    "Hint",
    "get_adjacent",
    "safe_colors",
    "suggest_hint",
    "suggest_next_node",
    "clear_color",
    "recolor",
    "ColoringHistory",
    "ColoringReport",
    "analyze_graph",
    "analyze_graph_file",
]
