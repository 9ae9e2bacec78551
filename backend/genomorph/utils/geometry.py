"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon


def ring_angles(n: int) -> NDArray[np.float64]:
    """n evenly spaced angles starting at 0: 2π·i/n."""
    return (np.pi * 2 * np.arange(n)) / n


def polar_to_xy(
    center: float, radii: NDArray[np.float64], angles: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Nx2 array of (center + r·cos θ, center + r·sin θ)."""
    return np.column_stack((center + np.cos(angles) * radii, center + np.sin(angles) * radii))


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace area of a closed ring (last vertex joins the first). Positive = CCW in y-up."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def radial_distances(points: NDArray[np.float64], center: float) -> NDArray[np.float64]:
    """Distance from (center, center) to each vertex."""
    return np.sqrt((points[:, 0] - center) ** 2 + (points[:, 1] - center) ** 2)


def to_polygon(points: NDArray[np.float64] | list[tuple[float, float]]) -> Polygon:
    """Shapely polygon from a vertex ring. Fewer than 3 vertices → empty polygon."""
    if len(points) < 3:
        return Polygon()
    return Polygon(points)
