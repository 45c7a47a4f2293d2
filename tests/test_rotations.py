from itertools import combinations

import numpy as np
import pytest

from tilesymmetry import (
    ANGLE_LUT,
    SPECIAL_ROTATIONS,
    ConfigurationError,
    RotationStep,
    SymmetryOptions,
    apply_special_rotation,
    are_symmetric,
    cuboctahedron_vertices,
    generate,
    placement_from_names,
    rotate_alpha_plane,
    rotate_around_axis1,
    rotate_beta_to_alpha,
)
from tilesymmetry.rotations import ALPHA_PLANE_90, AXIS1_180, FACE_120, rotate

EXTENDED = SymmetryOptions(use_extended_rotations=True)
PLAIN = SymmetryOptions(use_extended_rotations=False)


def tile(*names):
    return placement_from_names(names)


def _repeat(func, placement, times):
    for _ in range(times):
        placement = func(placement)
    return placement


@pytest.mark.parametrize(
    'func, order',
    [(rotate_alpha_plane, 4), (rotate_beta_to_alpha, 3), (rotate_around_axis1, 2)],
)
def test_generator_orders(func, order):
    for placement in generate(1) + generate(2):
        assert _repeat(func, placement, order) == placement

    for times in range(1, order):
        assert any(_repeat(func, p, times) != p for p in generate(1))


def test_rotate_alpha_plane_cycles_alpha_arms():
    assert rotate_alpha_plane(tile('a2')) == tile('a1')
    assert rotate_alpha_plane(tile('a1')) == tile('a4')
    assert rotate_alpha_plane(tile('g1')) == tile('b1')


def test_rotate_beta_to_alpha_moves_beta_into_alpha():
    assert rotate_beta_to_alpha(tile('b1', 'b3')) == tile('a1', 'a3')
    assert rotate_beta_to_alpha(tile('a1')) == tile('g1')


def test_rotate_around_axis1_fixes_axis():
    assert rotate_around_axis1(tile('a1', 'a3')) == tile('a1', 'a3')
    assert rotate_around_axis1(tile('a2')) == tile('a4')


def test_rotations_do_not_mutate_input():
    bits = [True, False, True] + [False] * 9
    before = list(bits)

    rotate_alpha_plane(bits)
    rotate_beta_to_alpha(bits)
    rotate_around_axis1(bits)
    are_symmetric(bits, bits)

    assert bits == before


@pytest.mark.parametrize('permutation', [ALPHA_PLANE_90, FACE_120, AXIS1_180])
def test_generators_are_proper_rotations(permutation):
    vertices = cuboctahedron_vertices()
    sources = vertices[list(permutation)]
    # Find R with R @ sources[i] == vertices[i].
    solution, _, _, _ = np.linalg.lstsq(sources, vertices, rcond=None)
    matrix = solution.T

    assert np.allclose(sources @ matrix.T, vertices)
    assert np.allclose(matrix @ matrix.T, np.eye(3))
    assert np.isclose(np.linalg.det(matrix), 1.0)


def test_rotate_applies_arbitrary_permutation():
    placement = tile('b2', 'g3')

    assert rotate(placement, ALPHA_PLANE_90) == rotate_alpha_plane(placement)


def test_special_rotation_domains_are_hexagons():
    assert len(SPECIAL_ROTATIONS) == 4
    for special in SPECIAL_ROTATIONS:
        domain = sorted(special.domain)
        assert len(domain) == 6
        for position in domain:
            neighbours = [other for other in domain if ANGLE_LUT[position][other] == 60]
            assert len(neighbours) == 2


def test_special_rotations_preserve_angles():
    for special in SPECIAL_ROTATIONS:
        pairs = [(target, source) for target, source in enumerate(special.sources) if source is not None]
        for (t1, s1), (t2, s2) in combinations(pairs, 2):
            assert ANGLE_LUT[t1][t2] == ANGLE_LUT[s1][s2]


def test_apply_special_rotation_requires_domain():
    assert apply_special_rotation(tile('a1', 'b2'), RotationStep.ALPHA1_TETRADIHEDRAL) == tile('a1', 'g2')
    assert apply_special_rotation(tile('a1', 'a2'), RotationStep.ALPHA1_TETRADIHEDRAL) is None
    assert apply_special_rotation(tile('a2', 'b1'), RotationStep.ALPHA2_TETRAHEDRAL) == tile('a2', 'b2')


def test_apply_special_rotation_rejects_generators():
    with pytest.raises(ValueError):
        apply_special_rotation(tile('a1'), RotationStep.PLANE90)


@pytest.mark.parametrize('options', [EXTENDED, PLAIN])
def test_are_symmetric_is_reflexive(options):
    for placement in generate(3):
        assert are_symmetric(placement, placement, options)


@pytest.mark.parametrize('options', [EXTENDED, PLAIN])
def test_are_symmetric_is_symmetric(options):
    placements = generate(2)
    for p1 in placements:
        for p2 in placements:
            assert are_symmetric(p1, p2, options) == are_symmetric(p2, p1, options)


@pytest.mark.parametrize('options', [EXTENDED, PLAIN])
def test_single_arms_are_all_equivalent(options):
    singles = generate(1)
    for p1 in singles:
        for p2 in singles:
            assert are_symmetric(p1, p2, options)


def test_different_arm_counts_are_never_symmetric():
    assert not are_symmetric(tile('a1'), tile('a1', 'a2'))
    assert not are_symmetric(tile(), tile('g4'))


def test_antipodal_pair_is_not_adjacent_pair():
    assert not are_symmetric(tile('a1', 'a3'), tile('b1', 'b2'))
    assert are_symmetric(tile('a1', 'a3'), tile('g2', 'g4'))


def test_hexagonal_pairs_merge_only_with_extended_rotations():
    # Both pairs lie in the a1/b2/g3/a3/b4/g1 hexagon, two steps apart.
    first = tile('a1', 'g3')
    second = tile('b2', 'a3')

    assert not are_symmetric(first, second, PLAIN)
    assert are_symmetric(first, second, EXTENDED)


def test_default_options_come_from_config(monkeypatch):
    import tilesymmetry.rotations as rotations

    monkeypatch.setattr(rotations, 'get_symmetry_options', lambda: PLAIN)

    assert not are_symmetric(tile('a1', 'g3'), tile('b2', 'a3'))


@pytest.mark.parametrize(
    'p1, p2',
    [((True,) * 11, (True,) * 12), ((True,) * 12, (False,) * 13), ((), ())],
)
def test_are_symmetric_rejects_wrong_length(p1, p2):
    with pytest.raises(ConfigurationError):
        are_symmetric(p1, p2)
