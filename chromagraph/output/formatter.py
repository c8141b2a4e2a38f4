"""Output formatting for coloring reports."""

import json
from typing import Literal

from ..coloring.base import ValidationResult
from ..coloring.runner import ColoringReport


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(_validation_data(result), indent=2)
    return "\n".join(_conflict_lines(result) + ["", _validation_summary(result)])


def format_report(
    report: ColoringReport,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a full coloring report for output."""
    if format == "json":
        return _format_report_json(report)
    return _format_report_text(report)


def _format_report_text(report: ColoringReport) -> str:
    lines = _conflict_lines(report.validation)
    lines.append("")

    lines.append(f"Nodes colored: {report.colored_count}/{report.node_count}")
    if report.colors_used:
        lines.append(
            f"Colors used: {len(report.colors_used)} ({', '.join(report.colors_used)})"
        )
    else:
        lines.append("Colors used: 0")
    lines.append(f"Estimated chromatic number: {report.chromatic_number}")

    if report.hint is not None:
        lines.append(f"Hint: {_format_hint_text(report.hint)}")

    lines.append("")
    if report.is_complete:
        if report.is_optimal:
            lines.append("Coloring complete with the minimum number of colors")
        else:
            lines.append(
                f"Coloring complete with {len(report.colors_used)} colors "
                f"(estimated minimum {report.chromatic_number})"
            )
    else:
        lines.append(_validation_summary(report.validation))

    return "\n".join(lines)


def _format_hint_text(hint) -> str:
    if hint.needs_new_color:
        return f"color {hint.node_id} with a color outside the palette"
    return f"color {hint.node_id} with one of {', '.join(hint.safe_colors)}"


def _conflict_lines(result: ValidationResult) -> list[str]:
    lines = ["CONFLICTS:"]
    if result.conflicts:
        for conflict in result.conflicts:
            lines.append(f"  ✘ {conflict}")
    else:
        lines.append("  (none)")
    return lines


def _validation_summary(result: ValidationResult) -> str:
    if result.is_valid:
        return "Coloring valid"
    return f"Coloring invalid: {len(result.conflicts)} conflict(s)"


def _validation_data(result: ValidationResult) -> dict:
    return {
        "valid": result.is_valid,
        "conflict_count": len(result.conflicts),
        "conflicts": [
            {
                "source": conflict.source,
                "target": conflict.target,
                "color": conflict.color,
            }
            for conflict in result.conflicts
        ],
    }


def _format_report_json(report: ColoringReport) -> str:
    data = _validation_data(report.validation)
    data.update(
        {
            "complete": report.is_complete,
            "node_count": report.node_count,
            "colored_count": report.colored_count,
            "colors_used": report.colors_used,
            "chromatic_number": report.chromatic_number,
            "hint": (
                None
                if report.hint is None
                else {
                    "node_id": report.hint.node_id,
                    "safe_colors": report.hint.safe_colors,
                }
            ),
        }
    )
    return json.dumps(data, indent=2)
