"""Radar chart geometry.

Maps an ordered list of normalized values onto polygon vertices. Vertex ``i``
of ``n`` sits at angle ``2*pi*i/n - pi/2``: the first vertex points straight
up and the rest follow clockwise in screen coordinates (y grows downward).
"""

import math
from dataclasses import dataclass, field
from typing import Sequence

from ..errors import InvalidInputError

Point = tuple[float, float]

# Number of concentric grid rings drawn in multi-level mode
GRID_LEVELS = 5

# Distance of axis labels beyond the outer polygon
LABEL_OFFSET = 20.0


def angle_for_index(index: int, points: int) -> float:
    """Angle in radians of vertex ``index`` on an ``points``-gon."""
    angle_step = 2.0 * math.pi / points
    return angle_step * index - math.pi / 2.0


def point_for_angle(angle: float, radius: float, center: Point) -> Point:
    cx, cy = center
    return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def polygon(values: Sequence[float], radius: float, center: Point) -> list[Point]:
    """Data polygon vertices, one per value, scaled by ``radius * value``.

    An empty sequence gives an empty polygon. A single value gives a single
    point straight above the center.

    Raises:
        InvalidInputError: If a value is outside (0, 1]
    """
    for value in values:
        if not 0.0 < value <= 1.0:
            raise InvalidInputError(f"Radar values must be in (0, 1], got {value}")

    n = len(values)
    return [
        point_for_angle(angle_for_index(i, n), radius * value, center)
        for i, value in enumerate(values)
    ]


def outer_polygon(points: int, radius: float, center: Point) -> list[Point]:
    """Full-extent vertices of the outer grid."""
    return [
        point_for_angle(angle_for_index(i, points), radius, center)
        for i in range(points)
    ]


def grid_rings(
    points: int, radius: float, center: Point, levels: int = GRID_LEVELS
) -> list[list[Point]]:
    """Concentric rings at ``radius * k / levels`` for k in 1..levels."""
    if points == 0:
        return []
    return [
        outer_polygon(points, radius * level / levels, center)
        for level in range(1, levels + 1)
    ]


def spokes(points: int, radius: float, center: Point) -> list[tuple[Point, Point]]:
    """Line segments from the center to each outer vertex."""
    return [(center, vertex) for vertex in outer_polygon(points, radius, center)]


def label_positions(
    points: int, radius: float, center: Point, offset: float = LABEL_OFFSET
) -> list[Point]:
    """Anchor points for axis labels, just outside the outer polygon."""
    return outer_polygon(points, radius + offset, center)


@dataclass(frozen=True)
class RadarChart:
    """Everything needed to draw a radar chart of ``size`` x ``size``."""

    size: float
    center: Point
    radius: float
    data: list[Point] = field(default_factory=list)
    outer: list[Point] = field(default_factory=list)
    rings: list[list[Point]] = field(default_factory=list)
    spokes: list[tuple[Point, Point]] = field(default_factory=list)
    labels: list[Point] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "size": self.size,
            "center": list(self.center),
            "radius": self.radius,
            "data": [list(p) for p in self.data],
            "outer": [list(p) for p in self.outer],
            "rings": [[list(p) for p in ring] for ring in self.rings],
            "spokes": [[list(a), list(b)] for a, b in self.spokes],
            "labels": [list(p) for p in self.labels],
        }


def build_radar_chart(
    values: Sequence[float],
    size: float = 200.0,
    show_multiple_levels: bool = False,
) -> RadarChart:
    """Lay out a radar chart inside a ``size`` x ``size`` box.

    Without ``show_multiple_levels`` only the outer polygon is returned as the
    grid; with it, the five concentric rings are returned as well.
    """
    if size <= 0:
        raise InvalidInputError(f"Chart size must be positive, got {size}")

    radius = size / 2.0
    center = (radius, radius)
    n = len(values)

    return RadarChart(
        size=size,
        center=center,
        radius=radius,
        data=polygon(values, radius, center),
        outer=outer_polygon(n, radius, center),
        rings=grid_rings(n, radius, center) if show_multiple_levels else [],
        spokes=spokes(n, radius, center),
        labels=label_positions(n, radius, center),
    )
