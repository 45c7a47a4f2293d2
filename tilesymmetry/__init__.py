from .types import (
    PLACEMENT_LENGTH,
    AngleSignature,
    ConfigurationError,
    InvalidPositionName,
    Placement,
    arm_count,
    ensure_placement,
)
from .positions import (
    ARM_NAMES,
    active_names,
    format_placement,
    parse_arms,
    placement_from_names,
    position_index,
    position_name,
)
from .lut import ANGLE_CLASSES, ANGLE_LUT, angle_between, cuboctahedron_vertices, derive_angle_table
from .grouping import AngleGrouper, compute_signature, group_placements
from .config import SymmetryOptions, get_symmetry_options, set_symmetry_options
from .rotations import (
    SPECIAL_ROTATIONS,
    RotationStep,
    RotationTrace,
    apply_special_rotation,
    are_symmetric,
    rotate_alpha_plane,
    rotate_around_axis1,
    rotate_beta_to_alpha,
)
from .combos import TileCatalog, find_representative, generate, iter_placements, reduce
from .diagnostics import (
    OrbitRecord,
    OrbitReport,
    OrbitStabilizerTracker,
    format_trace,
    orbit_of,
    verify_orbits,
)

__all__ = [
    'PLACEMENT_LENGTH',
    'AngleSignature',
    'ConfigurationError',
    'InvalidPositionName',
    'Placement',
    'arm_count',
    'ensure_placement',
    'ARM_NAMES',
    'active_names',
    'format_placement',
    'parse_arms',
    'placement_from_names',
    'position_index',
    'position_name',
    'ANGLE_CLASSES',
    'ANGLE_LUT',
    'angle_between',
    'cuboctahedron_vertices',
    'derive_angle_table',
    'AngleGrouper',
    'compute_signature',
    'group_placements',
    'SymmetryOptions',
    'get_symmetry_options',
    'set_symmetry_options',
    'SPECIAL_ROTATIONS',
    'RotationStep',
    'RotationTrace',
    'apply_special_rotation',
    'are_symmetric',
    'rotate_alpha_plane',
    'rotate_around_axis1',
    'rotate_beta_to_alpha',
    'TileCatalog',
    'find_representative',
    'generate',
    'iter_placements',
    'reduce',
    'OrbitRecord',
    'OrbitReport',
    'OrbitStabilizerTracker',
    'format_trace',
    'orbit_of',
    'verify_orbits',
]
