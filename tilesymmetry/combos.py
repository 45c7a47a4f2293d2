"""Enumerate n-armed tiles and reduce them to one representative per orbit."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from .config import SymmetryOptions, get_symmetry_options
from .grouping import group_placements
from .logging_utils import debug_log_call
from .positions import A1
from .rotations import are_symmetric
from .types import PLACEMENT_LENGTH, Placement, ensure_placement

logger = logging.getLogger(__name__)


def _branch(start: int, remaining: int, prefix: Placement) -> Iterator[Placement]:
    if remaining == 0:
        yield prefix + (False,) * (PLACEMENT_LENGTH - start)
    elif start != PLACEMENT_LENGTH:
        yield from _branch(start + 1, remaining, prefix + (False,))
        yield from _branch(start + 1, remaining - 1, prefix + (True,))


def iter_placements(arms: int) -> Iterator[Placement]:
    """Yield every placement with ``arms`` active positions.

    At each position the empty branch is explored before the armed one, so the
    first placement fills the last positions and the final one fills the first.
    """

    if arms < 0:
        return iter(())
    return _branch(0, arms, ())


@debug_log_call(logger, log_result=False)
def generate(arms: int) -> List[Placement]:
    placements = list(iter_placements(arms))
    logger.info("Generated %d placement(s) with %d arm(s)", len(placements), arms)
    return placements


@debug_log_call(logger, log_result=False)
def reduce(
    placements: Iterable[Sequence[bool]],
    options: Optional[SymmetryOptions] = None,
    *,
    anchored: bool = False,
) -> List[Placement]:
    """Keep one placement per rotational orbit.

    Groups are visited in the order their signature first appeared and each
    group is walked from its last member backwards, so the representative of
    an orbit is its last-generated member. With ``anchored`` only placements
    with an ``a1`` arm are considered; that is only valid when ``placements``
    is closed under rotation, such as the output of :func:`generate`.
    """

    if options is None:
        options = get_symmetry_options()

    groups = group_placements(placements)
    kept: List[Placement] = []
    comparisons = 0
    for signature, group in groups.items():
        group_kept: List[Placement] = []
        for placement in reversed(group):
            if anchored and not placement[A1] and any(placement):
                continue
            for candidate in group_kept:
                comparisons += 1
                if are_symmetric(candidate, placement, options):
                    break
            else:
                group_kept.append(placement)
        logger.debug("Signature %s: kept %d of %d", signature, len(group_kept), len(group))
        kept.extend(group_kept)

    logger.info(
        "Reduced %d angle group(s) to %d representative(s) using %d comparison(s)",
        len(groups),
        len(kept),
        comparisons,
    )
    return kept


def find_representative(
    placement: Sequence[bool],
    representatives: Iterable[Sequence[bool]],
    options: Optional[SymmetryOptions] = None,
) -> Optional[Placement]:
    placement = ensure_placement(placement)
    for representative in representatives:
        if are_symmetric(representative, placement, options):
            return ensure_placement(representative)
    return None


class TileCatalog:
    """The distinct ``arms``-armed tiles, computed on construction."""

    def __init__(self, arms: int = 1, options: Optional[SymmetryOptions] = None) -> None:
        self.arms = arms
        self.options = options if options is not None else get_symmetry_options()
        self.tiles: List[Placement] = reduce(generate(arms), self.options, anchored=True)

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Placement]:
        return iter(self.tiles)

    def lookup(self, placement: Sequence[bool]) -> Optional[Placement]:
        return find_representative(placement, self.tiles, self.options)
