"""Configuration helpers for the symmetry engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class SymmetryOptions:
    """Which rotations the equivalence test composes."""

    # Special-case turns for tiles lying in a hexagonal great plane.
    use_extended_rotations: bool = True
    # 180-degree turn about the alpha-1 axis after each plane turn.
    use_alpha180: bool = True


_SYMMETRY_OPTIONS = SymmetryOptions()


def get_symmetry_options() -> SymmetryOptions:
    return copy.deepcopy(_SYMMETRY_OPTIONS)


def set_symmetry_options(options: SymmetryOptions) -> None:
    global _SYMMETRY_OPTIONS
    _SYMMETRY_OPTIONS = copy.deepcopy(options)
