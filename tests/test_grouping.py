import pytest

from tilesymmetry import (
    AngleGrouper,
    ConfigurationError,
    SymmetryOptions,
    are_symmetric,
    compute_signature,
    generate,
    group_placements,
    placement_from_names,
    rotate_alpha_plane,
    rotate_around_axis1,
    rotate_beta_to_alpha,
)


def tile(*names):
    return placement_from_names(names)


@pytest.mark.parametrize(
    'names, signature',
    [
        ((), ()),
        (('a1',), ()),
        (('a1', 'a3'), (180,)),
        (('a1', 'a2'), (90,)),
        (('a1', 'b1', 'g1'), (60, 60, 60)),
        (('a1', 'a2', 'a3'), (90, 90, 180)),
    ],
)
def test_compute_signature(names, signature):
    assert compute_signature(tile(*names)) == signature


def test_compute_signature_accepts_lists():
    assert compute_signature([True, True] + [False] * 10) == (90,)


def test_compute_signature_rejects_short_placement():
    with pytest.raises(ConfigurationError):
        compute_signature((True,) * 11)


def test_signature_is_invariant_under_generators():
    for placement in generate(3):
        signature = compute_signature(placement)
        assert compute_signature(rotate_alpha_plane(placement)) == signature
        assert compute_signature(rotate_beta_to_alpha(placement)) == signature
        assert compute_signature(rotate_around_axis1(placement)) == signature


def test_grouper_keeps_insertion_order():
    grouper = AngleGrouper()
    first = tile('a1', 'a2')
    second = tile('a1', 'a3')
    third = tile('b1', 'b2')

    assert grouper.group_by(first) == (90,)
    assert grouper.group_by(second) == (180,)
    assert grouper.group_by(third) == (90,)

    assert len(grouper) == 2
    assert list(grouper.groups) == [(90,), (180,)]
    assert grouper.groups[(90,)] == [first, third]


def test_group_placements_covers_input():
    placements = generate(2)
    groups = group_placements(placements)

    assert set(groups) == {(60,), (90,), (120,), (180,)}
    assert sum(len(group) for group in groups.values()) == len(placements)


@pytest.mark.parametrize('extended', [True, False])
def test_symmetric_placements_share_signature(extended):
    options = SymmetryOptions(use_extended_rotations=extended)
    placements = generate(3)
    anchors = [placement for placement in placements if placement[0]]
    for anchor in anchors:
        for placement in placements:
            if are_symmetric(anchor, placement, options):
                assert compute_signature(anchor) == compute_signature(placement)
