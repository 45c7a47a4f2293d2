"""Pairwise angles between the 12 arm positions."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .types import PLACEMENT_LENGTH

ANGLE_CLASSES: Tuple[int, ...] = (0, 60, 90, 120, 180)

# Rows and columns follow ARM_NAMES: a1..a4, b1..b4, g1..g4.
ANGLE_LUT: Tuple[Tuple[int, ...], ...] = (
    (0, 90, 180, 90, 60, 60, 120, 120, 60, 60, 120, 120),
    (90, 0, 90, 180, 120, 120, 60, 60, 60, 60, 120, 120),
    (180, 90, 0, 90, 120, 120, 60, 60, 120, 120, 60, 60),
    (90, 180, 90, 0, 60, 60, 120, 120, 120, 120, 60, 60),
    (60, 120, 120, 60, 0, 90, 180, 90, 60, 120, 120, 60),
    (60, 120, 120, 60, 90, 0, 90, 180, 120, 60, 60, 120),
    (120, 60, 60, 120, 180, 90, 0, 90, 120, 60, 60, 120),
    (120, 60, 60, 120, 90, 180, 90, 0, 60, 120, 120, 60),
    (60, 60, 120, 120, 60, 120, 120, 60, 0, 90, 180, 90),
    (60, 60, 120, 120, 120, 60, 60, 120, 90, 0, 90, 180),
    (120, 120, 60, 60, 120, 60, 60, 120, 180, 90, 0, 90),
    (120, 120, 60, 60, 60, 120, 120, 60, 90, 180, 90, 0),
)

# Alpha arms lie in z=0, beta arms in y=0, gamma arms in x=0.
_VERTICES = (
    (1, 1, 0), (-1, 1, 0), (-1, -1, 0), (1, -1, 0),
    (1, 0, 1), (1, 0, -1), (-1, 0, -1), (-1, 0, 1),
    (0, 1, 1), (0, 1, -1), (0, -1, -1), (0, -1, 1),
)


def angle_between(i: int, j: int) -> int:
    return ANGLE_LUT[i][j]


def cuboctahedron_vertices() -> np.ndarray:
    """Return the arm directions as unit vectors, one row per position."""

    vertices = np.asarray(_VERTICES, dtype=float)
    return vertices / np.linalg.norm(vertices, axis=1, keepdims=True)


def derive_angle_table(vertices: Optional[np.ndarray] = None) -> np.ndarray:
    """Recompute the angle table from vertex directions, rounded to whole degrees."""

    if vertices is None:
        vertices = cuboctahedron_vertices()
    vertices = np.asarray(vertices, dtype=float)
    if vertices.shape != (PLACEMENT_LENGTH, 3):
        raise ValueError(f"expected a ({PLACEMENT_LENGTH}, 3) vertex array, got {vertices.shape}")
    units = vertices / np.linalg.norm(vertices, axis=1, keepdims=True)
    cosines = np.clip(units @ units.T, -1.0, 1.0)
    return np.rint(np.degrees(np.arccos(cosines))).astype(int)
