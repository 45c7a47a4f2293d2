"""Orbit/stabilizer bookkeeping for verifying the symmetry reduction.

A tracker passed to :func:`~tilesymmetry.rotations.are_symmetric` sees every
derived placement. Calling ``are_symmetric(p, p, tracker=t)`` therefore yields
the orbit of ``p`` in ``t.orbit`` and the number of rotations fixing ``p`` in
``t.stabilizer_count``. Summing orbit sizes over all representatives must give
``C(12, n)``; that is the check :func:`verify_orbits` performs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import comb
from typing import Dict, List, Optional, Sequence, Tuple

from .combos import generate, reduce
from .config import SymmetryOptions, get_symmetry_options
from .logging_utils import apply_debug_logging
from .positions import format_placement
from .rotations import RotationTrace, are_symmetric
from .types import Placement, ensure_placement

logger = logging.getLogger(__name__)


def format_trace(trace: RotationTrace) -> str:
    steps = trace.steps()
    if not steps:
        return "Identity"
    return ", ".join(step.value for step in steps)


class OrbitStabilizerTracker:
    """Collects derived placements and stabilizer hits while enabled."""

    def __init__(self, *, enabled: bool = True, keep_traces: bool = False) -> None:
        self._enabled = enabled
        self._keep_traces = keep_traces
        self._orbit: Dict[Placement, None] = {}
        self._stabilizers = 0
        self.traces: List[Tuple[Placement, RotationTrace, bool]] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True
        self.reset()

    def disable(self) -> None:
        self._enabled = False
        self.reset()

    def reset(self) -> None:
        self._orbit = {}
        self._stabilizers = 0
        self.traces = []

    @property
    def orbit(self) -> Tuple[Placement, ...]:
        return tuple(self._orbit)

    @property
    def orbit_size(self) -> int:
        return len(self._orbit)

    @property
    def stabilizer_count(self) -> int:
        return self._stabilizers

    def record(self, placement: Placement, trace: RotationTrace, matched: bool) -> None:
        if not self._enabled:
            return
        self._orbit[placement] = None
        if matched:
            self._stabilizers += 1
        if self._keep_traces:
            self.traces.append((placement, trace, matched))
        if logger.isEnabledFor(logging.DEBUG):
            label = "Match" if matched else format_placement(placement)
            logger.debug("%s - %s", label, format_trace(trace))


@dataclass(frozen=True)
class OrbitRecord:
    representative: Placement
    orbit: Tuple[Placement, ...]
    stabilizer_count: int

    @property
    def orbit_size(self) -> int:
        return len(self.orbit)


@dataclass
class OrbitReport:
    arms: int
    records: List[OrbitRecord] = field(default_factory=list)
    unreached: List[Placement] = field(default_factory=list)

    @property
    def total_orbit_size(self) -> int:
        return sum(record.orbit_size for record in self.records)

    @property
    def expected_total(self) -> int:
        if not 0 <= self.arms <= 12:
            return 0
        return comb(12, self.arms)

    @property
    def consistent(self) -> bool:
        return not self.unreached and self.total_orbit_size == self.expected_total


def orbit_of(placement: Sequence[bool], options: Optional[SymmetryOptions] = None) -> OrbitRecord:
    placement = ensure_placement(placement)
    tracker = OrbitStabilizerTracker()
    are_symmetric(placement, placement, options, tracker)
    return OrbitRecord(placement, tracker.orbit, tracker.stabilizer_count)


def verify_orbits(
    arms: int,
    options: Optional[SymmetryOptions] = None,
    representatives: Optional[Sequence[Sequence[bool]]] = None,
) -> OrbitReport:
    """Check that the representatives' orbits exactly cover every ``arms``-armed tile."""

    if options is None:
        options = get_symmetry_options()
    placements = generate(arms)
    if representatives is None:
        representatives = reduce(placements, options, anchored=True)

    report = OrbitReport(arms=arms)
    reached: Dict[Placement, None] = {}
    for representative in representatives:
        record = orbit_of(representative, options)
        report.records.append(record)
        reached.update(dict.fromkeys(record.orbit))
        logger.info(
            "%s: orbit=%d stabilizers=%d",
            format_placement(record.representative),
            record.orbit_size,
            record.stabilizer_count,
        )

    report.unreached = [placement for placement in placements if placement not in reached]
    logger.info(
        "Orbit total for %d arm(s): %d of %d, unreached=%d",
        arms,
        report.total_orbit_size,
        report.expected_total,
        len(report.unreached),
    )
    return report


apply_debug_logging(
    globals(),
    logger=logger,
    skip={"format_trace", "OrbitStabilizerTracker.record", "OrbitStabilizerTracker.reset"},
)
