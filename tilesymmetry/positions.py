"""Arm naming scheme for the 12 edge-midpoint positions.

Positions come in three axis groups (alpha, beta, gamma) of four arms each and
are written ``a1`` .. ``g4``. The index order below is fixed for the lifetime of
the package: every permutation and lookup table is expressed against it.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Tuple

from .types import PLACEMENT_LENGTH, InvalidPositionName, Placement, ensure_placement

AXIS_GROUPS: Tuple[str, ...] = ("a", "b", "g")

ARM_NAMES: Tuple[str, ...] = tuple(
    f"{group}{number}" for group in AXIS_GROUPS for number in range(1, 5)
)

A1, A2, A3, A4, B1, B2, B3, B4, G1, G2, G3, G4 = range(PLACEMENT_LENGTH)

_INDEX_BY_NAME = {name: index for index, name in enumerate(ARM_NAMES)}
_ARM_SEPARATOR = re.compile(r"[,\s]+")


def position_index(name: str) -> int:
    if not isinstance(name, str):
        raise InvalidPositionName(f"arm name must be a string, got {name!r}")
    key = name.strip().lower()
    try:
        return _INDEX_BY_NAME[key]
    except KeyError:
        raise InvalidPositionName(f"invalid arm name {name!r} (expected [abg][1-4])") from None


def position_name(index: int) -> str:
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < PLACEMENT_LENGTH:
        raise InvalidPositionName(f"invalid arm index {index!r} (expected 0..{PLACEMENT_LENGTH - 1})")
    return ARM_NAMES[index]


def parse_arms(text: str) -> List[str]:
    """Split ``"a1, b2 g3"`` into arm names; separators are commas or whitespace."""

    return [part for part in _ARM_SEPARATOR.split(text.strip()) if part]


def placement_from_names(names: Iterable[str]) -> Placement:
    bits = [False] * PLACEMENT_LENGTH
    for name in names:
        index = position_index(name)
        if bits[index]:
            raise InvalidPositionName(f"arm {ARM_NAMES[index]!r} given more than once")
        bits[index] = True
    return tuple(bits)


def active_names(placement: Sequence[bool]) -> List[str]:
    placement = ensure_placement(placement)
    return [ARM_NAMES[index] for index, bit in enumerate(placement) if bit]


def format_placement(placement: Sequence[bool], sep: str = ", ") -> str:
    names = active_names(placement)
    if not names:
        return "(no arms)"
    return sep.join(name.upper() for name in names)
