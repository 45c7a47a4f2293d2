from __future__ import annotations

from typing import Sequence, Tuple

PLACEMENT_LENGTH = 12

Placement = Tuple[bool, ...]
AngleSignature = Tuple[int, ...]


class ConfigurationError(RuntimeError):
    """Raised when a placement does not cover exactly the 12 arm positions."""


class InvalidPositionName(ValueError):
    """Raised when an arm name or index does not denote a known position."""


def ensure_placement(bits: Sequence[bool]) -> Placement:
    if len(bits) != PLACEMENT_LENGTH:
        raise ConfigurationError(
            f"placement must have {PLACEMENT_LENGTH} positions, got {len(bits)}"
        )
    if isinstance(bits, tuple) and all(type(bit) is bool for bit in bits):
        return bits
    return tuple(bool(bit) for bit in bits)


def arm_count(placement: Placement) -> int:
    return sum(1 for bit in placement if bit)
