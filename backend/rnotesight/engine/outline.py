"""Variable-width outline — centerline + pressures → closed filled polygon.

Each centerline point is pushed out along its normal by half the local
thickness, once to the left and once to the right. The outline walks the left
side forward and comes back along the right side, so a stroke recorded with
varying pressure becomes a tapered ribbon. No smoothing is applied.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from rnotesight.models.document import DEFAULT_PRESSURE
from rnotesight.utils.math_helpers import format_number


def direction_vectors(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Central differences inside, one-sided differences at both ends."""
    d = np.empty_like(points)
    d[1:-1] = points[2:] - points[:-2]
    d[0] = points[1] - points[0]
    d[-1] = points[-1] - points[-2]
    return d


def unit_normals(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Left-hand normal (-dy, dx) per point; zero-length directions stay zero."""
    d = direction_vectors(points)
    lengths = np.hypot(d[:, 0], d[:, 1])
    lengths[lengths == 0] = 1.0
    return np.column_stack((-d[:, 1], d[:, 0])) / lengths[:, None]


def variable_width_outline(
    points: Sequence[tuple[float, float]],
    pressures: Sequence[float | None],
    base_width: float,
) -> NDArray[np.float64] | None:
    """Closed outline vertices (left side forward, right side reversed).

    Returns None for fewer than two points. Missing pressures count as 0.5.
    """
    if len(points) < 2:
        return None

    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    pressure = np.array(
        [DEFAULT_PRESSURE if p is None else p for p in pressures], dtype=np.float64
    )
    if len(pressure) < len(pts):
        pressure = np.concatenate([pressure, np.full(len(pts) - len(pressure), DEFAULT_PRESSURE)])

    half = (base_width * pressure[: len(pts)]) / 2
    offset = unit_normals(pts) * half[:, None]

    left = pts + offset
    right = pts - offset
    return np.vstack([left, right[::-1]])


def outline_to_path_data(vertices: NDArray[np.float64]) -> str:
    """SVG path data for a closed polygon: ``M x y L x y … Z``."""
    if len(vertices) == 0:
        return ""
    parts = [f"M {format_number(vertices[0, 0])} {format_number(vertices[0, 1])}"]
    for x, y in vertices[1:]:
        parts.append(f"L {format_number(x)} {format_number(y)}")
    parts.append("Z")
    return " ".join(parts)
