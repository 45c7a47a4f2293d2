"""Angle-signature pre-partitioning of placements.

The multiset of angles between active arms survives every rotation, so two
placements with different signatures can never be rotations of one another.
Grouping by signature keeps the symmetry test inside much smaller buckets.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, Iterable, List, Sequence

from .lut import ANGLE_LUT
from .types import AngleSignature, Placement, ensure_placement

logger = logging.getLogger(__name__)


def compute_signature(placement: Sequence[bool]) -> AngleSignature:
    placement = ensure_placement(placement)
    active = [index for index, bit in enumerate(placement) if bit]
    return tuple(sorted(ANGLE_LUT[i][j] for i, j in combinations(active, 2)))


class AngleGrouper:
    """Insertion-ordered buckets of placements keyed by angle signature."""

    def __init__(self) -> None:
        self._groups: Dict[AngleSignature, List[Placement]] = {}

    @property
    def groups(self) -> Dict[AngleSignature, List[Placement]]:
        return self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def group_by(self, placement: Sequence[bool]) -> AngleSignature:
        placement = ensure_placement(placement)
        signature = compute_signature(placement)
        self._groups.setdefault(signature, []).append(placement)
        return signature


def group_placements(placements: Iterable[Sequence[bool]]) -> Dict[AngleSignature, List[Placement]]:
    grouper = AngleGrouper()
    count = 0
    for placement in placements:
        grouper.group_by(placement)
        count += 1
    logger.info("Grouped %d placement(s) into %d angle signature(s)", count, len(grouper))
    return grouper.groups
