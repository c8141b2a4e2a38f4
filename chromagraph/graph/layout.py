"""Node placement for generated graphs.

Positions are presentation metadata. The engine computes them alongside
topology for convenience and never reads them back.
"""

import math

from ..config import LAYOUT_MARGIN, LAYOUT_RADIUS

Position = tuple[float, float]


def circular_layout(count: int, radius: float = LAYOUT_RADIUS) -> list[Position]:
    """Place nodes evenly on a circle."""
    positions = []
    for i in range(count):
        angle = (i / count) * 2 * math.pi
        positions.append(
            (
                radius * math.cos(angle) + radius + LAYOUT_MARGIN,
                radius * math.sin(angle) + radius + LAYOUT_MARGIN,
            )
        )
    return positions


def two_row_layout(
    count: int, part_size: int, spacing: float = 70.0
) -> list[Position]:
    """Place the first part_size nodes in one column and the rest in another."""
    positions = []
    for i in range(count):
        if i < part_size:
            positions.append((100.0, i * spacing + 100.0))
        else:
            positions.append((300.0, (i - part_size) * spacing + 100.0))
    return positions


def hub_and_rim_layout(
    count: int, radius: float = LAYOUT_RADIUS, center: float = 250.0
) -> list[Position]:
    """Place node 0 at the center and the others on a surrounding circle."""
    positions = [(center, center)]
    rim = count - 1
    for i in range(1, count):
        angle = ((i - 1) / rim) * 2 * math.pi
        positions.append(
            (radius * math.cos(angle) + center, radius * math.sin(angle) + center)
        )
    return positions
