"""Rotation engine for the cuboctahedron's edge-midpoint positions.

Every rotation is a permutation of the 12 positions written as a tuple of
source indices: ``rotated[i] == placement[perm[i]]``. Three generators span the
order-24 rotation group:

* ``ALPHA_PLANE_90``: 90 degrees about the axis normal to the alpha plane,
* ``FACE_120``: 120 degrees about the centre of the a1/b1/g1 triangle,
* ``AXIS1_180``: 180 degrees about the a1/a3 axis.

``are_symmetric`` never materializes the group. It seeds ``F^k p`` for
``k = 0, 1, 2``, applies ``P^j`` for ``j = 0..3`` and optionally the axis flip,
which reaches each of the 24 elements exactly once.

Tiles whose arms all lie in one hexagonal great plane can additionally be
turned onto another hexagonal plane. These four special rotations are partial
maps: they only apply when every arm is inside their domain hexagon.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from operator import itemgetter
from typing import TYPE_CHECKING, Callable, Dict, FrozenSet, Optional, Sequence, Tuple

from .config import SymmetryOptions, get_symmetry_options
from .positions import A1, A2, A3, A4, B1, B2, B3, B4, G1, G2, G3, G4
from .types import PLACEMENT_LENGTH, Placement, ensure_placement

if TYPE_CHECKING:  # pragma: no cover - import only for annotations
    from .diagnostics import OrbitStabilizerTracker

logger = logging.getLogger(__name__)

Permutation = Tuple[int, ...]

ALPHA_PLANE_90: Permutation = (A2, A3, A4, A1, G1, G2, G3, G4, B4, B3, B2, B1)
FACE_120: Permutation = (B1, B2, B3, B4, G1, G4, G3, G2, A1, A4, A3, A2)
AXIS1_180: Permutation = (A1, A4, A3, A2, G2, G1, G4, G3, B2, B1, B4, B3)

_apply_alpha_plane = itemgetter(*ALPHA_PLANE_90)
_apply_face = itemgetter(*FACE_120)
_apply_axis1 = itemgetter(*AXIS1_180)


class RotationStep(enum.Enum):
    FACE120 = "Face 120"
    PLANE90 = "Plane 90"
    ALPHA180 = "Alpha 180"
    ALPHA1_TETRADIHEDRAL = "Alpha 71"
    ALPHA1_TETRAHEDRAL = "Alpha 109"
    ALPHA2_TETRADIHEDRAL = "Alpha2 71"
    ALPHA2_TETRAHEDRAL = "Alpha2 109"


@dataclass(frozen=True)
class RotationTrace:
    """Which generator turns produced a derived placement, in application order."""

    face_turns: int = 0
    plane_turns: int = 0
    alpha180: bool = False
    special: Optional[RotationStep] = None

    def steps(self) -> Tuple[RotationStep, ...]:
        steps = [RotationStep.FACE120] * self.face_turns + [RotationStep.PLANE90] * self.plane_turns
        if self.alpha180:
            steps.append(RotationStep.ALPHA180)
        if self.special is not None:
            steps.append(self.special)
        return tuple(steps)

    @property
    def is_identity(self) -> bool:
        return not self.steps()


@dataclass(frozen=True)
class SpecialRotation:
    """A turn between two hexagonal great planes, defined only on its domain."""

    step: RotationStep
    sources: Tuple[Optional[int], ...]

    @property
    def domain(self) -> FrozenSet[int]:
        return frozenset(source for source in self.sources if source is not None)

    def applies_to(self, placement: Placement) -> bool:
        domain = self.domain
        return not any(bit and index not in domain for index, bit in enumerate(placement))

    def apply(self, placement: Placement) -> Optional[Placement]:
        if not self.applies_to(placement):
            return None
        return tuple(False if source is None else placement[source] for source in self.sources)


def _special(step: RotationStep, mapping: Dict[int, int]) -> SpecialRotation:
    return SpecialRotation(step, tuple(mapping.get(index) for index in range(PLACEMENT_LENGTH)))


# target position -> source position; every other target ends up empty
SPECIAL_ROTATIONS: Tuple[SpecialRotation, ...] = (
    _special(RotationStep.ALPHA1_TETRADIHEDRAL, {A1: A1, A3: A3, B1: G1, B3: G3, G2: B2, G4: B4}),
    _special(RotationStep.ALPHA1_TETRAHEDRAL, {A1: A1, A3: A3, B2: B1, B4: B3, G1: G2, G3: G4}),
    _special(RotationStep.ALPHA2_TETRADIHEDRAL, {A2: A2, A4: A4, B1: G4, B3: G2, G1: B4, G3: B2}),
    _special(RotationStep.ALPHA2_TETRAHEDRAL, {A2: A2, A4: A4, B2: B1, B4: B3, G2: G1, G4: G3}),
)

_SPECIAL_BY_STEP = {special.step: special for special in SPECIAL_ROTATIONS}

# Bitmask of the positions outside each special rotation's domain.
_SPECIAL_GUARDS = tuple(
    (special, sum(1 << index for index in range(PLACEMENT_LENGTH) if index not in special.domain))
    for special in SPECIAL_ROTATIONS
)


def _mask(placement: Placement) -> int:
    mask = 0
    for index, bit in enumerate(placement):
        if bit:
            mask |= 1 << index
    return mask


def rotate(placement: Sequence[bool], permutation: Permutation) -> Placement:
    placement = ensure_placement(placement)
    return tuple(placement[source] for source in permutation)


def rotate_alpha_plane(placement: Sequence[bool]) -> Placement:
    return _apply_alpha_plane(ensure_placement(placement))


def rotate_beta_to_alpha(placement: Sequence[bool]) -> Placement:
    return _apply_face(ensure_placement(placement))


def rotate_around_axis1(placement: Sequence[bool]) -> Placement:
    return _apply_axis1(ensure_placement(placement))


def apply_special_rotation(placement: Sequence[bool], step: RotationStep) -> Optional[Placement]:
    try:
        special = _SPECIAL_BY_STEP[step]
    except KeyError:
        raise ValueError(f"{step!r} is not a special-case rotation") from None
    return special.apply(ensure_placement(placement))


def _match(
    static: Placement,
    candidate: Placement,
    tracker: Optional["OrbitStabilizerTracker"],
    trace: Callable[[], RotationTrace],
) -> bool:
    matched = static == candidate
    if tracker is not None:
        tracker.record(candidate, trace(), matched)
    return matched


def _symmetric_around_alpha_plane(
    static: Placement,
    seed: Placement,
    face_turns: int,
    options: SymmetryOptions,
    tracker: Optional["OrbitStabilizerTracker"],
) -> bool:
    matched = False
    plane = seed
    for plane_turns in range(4):
        if plane_turns:
            plane = _apply_alpha_plane(plane)
        candidates = [(plane, False)]
        if options.use_alpha180:
            candidates.append((_apply_axis1(plane), True))

        for candidate, flipped in candidates:
            base = RotationTrace(face_turns, plane_turns, flipped)
            if _match(static, candidate, tracker, lambda: base):
                if tracker is None:
                    return True
                matched = True
            if not options.use_extended_rotations:
                continue
            mask = _mask(candidate)
            for special, guard in _SPECIAL_GUARDS:
                if mask & guard:
                    continue
                turned = tuple(False if source is None else candidate[source] for source in special.sources)
                if _match(static, turned, tracker, lambda: replace(base, special=special.step)):
                    if tracker is None:
                        return True
                    matched = True
    return matched


def are_symmetric(
    static: Sequence[bool],
    moving: Sequence[bool],
    options: Optional[SymmetryOptions] = None,
    tracker: Optional["OrbitStabilizerTracker"] = None,
) -> bool:
    """Return whether ``moving`` can be turned onto ``static``.

    ``static`` is held fixed while rotated copies of ``moving`` are compared
    against it. Without a tracker the search stops at the first match; with one,
    every derived placement is compared and recorded.
    """

    static = ensure_placement(static)
    moving = ensure_placement(moving)
    if options is None:
        options = get_symmetry_options()

    seed = moving
    matched = False
    for face_turns in range(3):
        if face_turns:
            seed = _apply_face(seed)
        if _symmetric_around_alpha_plane(static, seed, face_turns, options, tracker):
            if tracker is None:
                return True
            matched = True
    return matched
