"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def ring_angles(count: int, start: float = 0.0) -> NDArray[np.float64]:
    """Evenly spaced angles (degrees) for ``count`` nodes around a full circle."""
    if count <= 0:
        return np.empty(0)
    return start + np.arange(count) * (360.0 / count)


def polar_to_cartesian(
    cx: float,
    cy: float,
    radius: float,
    angles: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Nx2 array of (x, y) points at ``angles`` (degrees) around (cx, cy).

    0° points right, angles grow clockwise in SVG's y-down space.
    """
    rad = np.deg2rad(angles)
    return np.column_stack([cx + radius * np.cos(rad), cy + radius * np.sin(rad)])


def ring_points(
    cx: float,
    cy: float,
    radius: float,
    count: int,
    start: float = 0.0,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Angles and points for ``count`` nodes evenly spread on a ring."""
    angles = ring_angles(count, start)
    if count <= 0:
        return angles, np.empty((0, 2))
    return angles, polar_to_cartesian(cx, cy, radius, angles)


def text_anchor_for(angle: float) -> str:
    """Label anchor so text reads outward from the ring center."""
    a = angle % 360
    return "end" if 90 < a < 270 else "start"
