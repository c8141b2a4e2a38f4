"""Output formatting."""

from .formatter import format_report, format_validation_result

__all__ = ["format_report", "format_validation_result"]
