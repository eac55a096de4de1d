from __future__ import annotations

import random
from collections import Counter

import pytest

from cubie_layers.core.axis import Axis
from cubie_layers.core.lattice import Convention, build_lattice
from cubie_layers.core.layers import Move, get_layer, layer_index_of, rotate_layer

CONVENTION_SIDES = [
    (Convention.CENTERED, 1),
    (Convention.CENTERED, 3),
    (Convention.CENTERED, 5),
    (Convention.ZERO_BASED, 2),
    (Convention.ZERO_BASED, 3),
    (Convention.ZERO_BASED, 4),
]


def _shuffled_coords(N: int, convention: Convention, seed: int) -> list[tuple[int, int, int]]:
    coords = list(build_lattice(N, convention).index_to_coord)
    random.Random(seed).shuffle(coords)
    return coords


@pytest.mark.parametrize("convention, N", CONVENTION_SIDES)
@pytest.mark.parametrize("axis", list(Axis))
def test_partition_complete_and_disjoint(convention: Convention, N: int, axis: Axis):
    coords = _shuffled_coords(N, convention, seed=N)
    layer = get_layer(coords, axis, convention=convention)

    assert layer.axis is axis
    assert len(layer) == N
    merged = [c for slab in layer.slabs for c in slab]
    assert Counter(merged) == Counter(coords)

    lat = build_lattice(N, convention)
    for i, slab in enumerate(layer.slabs):
        assert len(slab) == N * N
        assert all(c[axis.component] == lat.values[i] for c in slab)


def test_partition_27_along_x():
    coords = build_lattice(3).index_to_coord
    layer = get_layer(coords, "x")
    assert len(layer.slabs) == 3
    assert [len(s) for s in layer.slabs] == [9, 9, 9]
    assert {c[0] for c in layer.slab(0)} == {-1}
    assert {c[0] for c in layer.slab(2)} == {1}


def test_partition_keeps_input_order_and_does_not_mutate():
    coords = _shuffled_coords(3, Convention.CENTERED, seed=11)
    snapshot = list(coords)
    layer = get_layer(coords, Axis.Y)
    assert coords == snapshot
    for slab in layer.slabs:
        positions = [coords.index(c) for c in slab]
        assert positions == sorted(positions)


def test_partition_rejects_non_cube_count():
    coords = build_lattice(3).index_to_coord[:26]
    with pytest.raises(ValueError):
        get_layer(coords, Axis.X)


def test_partition_rejects_off_lattice_coordinate():
    coords = list(build_lattice(3).index_to_coord)
    coords[0] = (5, 0, 0)
    with pytest.raises(ValueError):
        get_layer(coords, Axis.X)


def test_slab_index_out_of_range():
    layer = get_layer(build_lattice(3).index_to_coord, Axis.Z)
    with pytest.raises(ValueError):
        layer.slab(3)
    with pytest.raises(ValueError):
        layer.slab(-1)


def test_rotate_z_scenario():
    slab = [
        (-1, -1, -1), (0, -1, -1), (1, -1, -1),
        (-1, 0, -1), (0, 0, -1), (1, 0, -1),
        (-1, 1, -1), (0, 1, -1), (1, 1, -1),
    ]
    out = rotate_layer(slab, Axis.Z)
    assert out == [(-y, x, z) for x, y, z in slab]
    assert set(out) == {
        (1, -1, -1), (1, 0, -1), (1, 1, -1),
        (0, -1, -1), (0, 0, -1), (0, 1, -1),
        (-1, -1, -1), (-1, 0, -1), (-1, 1, -1),
    }


def test_rotate_is_right_handed_about_each_axis():
    lat = build_lattice(7)
    p = (1, 2, 3)
    assert rotate_layer([p], Axis.X, lattice=lat) == [(1, -3, 2)]
    assert rotate_layer([p], Axis.Y, lattice=lat) == [(3, 2, -1)]
    assert rotate_layer([p], Axis.Z, lattice=lat) == [(-2, 1, 3)]


def test_rotate_negative_turns_is_inverse():
    lat = build_lattice(7)
    p = (1, 2, 3)
    for axis in Axis:
        once = rotate_layer([p], axis, lattice=lat)
        assert rotate_layer(once, axis, turns=-1, lattice=lat) == [p]
        assert rotate_layer([p], axis, turns=-1, lattice=lat) == rotate_layer([p], axis, turns=3, lattice=lat)


def test_rotate_zero_based_turns_about_cube_centre():
    lat = build_lattice(3, Convention.ZERO_BASED)
    assert rotate_layer([(0, 0, 0), (2, 0, 0), (1, 1, 0)], Axis.Z, lattice=lat) == [(2, 0, 0), (2, 2, 0), (1, 1, 0)]


@pytest.mark.parametrize("convention, N", CONVENTION_SIDES)
@pytest.mark.parametrize("axis", list(Axis))
def test_rotate_closure_bijection_and_order_four(convention: Convention, N: int, axis: Axis):
    lat = build_lattice(N, convention)
    layer = get_layer(lat.index_to_coord, axis, convention=convention)
    for i, slab in enumerate(layer.slabs):
        out = rotate_layer(slab, axis, lattice=lat)
        assert len(out) == len(slab)
        assert len(set(out)) == len(slab)
        assert set(out) == set(slab)  # stays on its own slab
        assert all(layer_index_of(c, axis, lat) == i for c in out)

        cur = list(slab)
        for _ in range(4):
            cur = rotate_layer(cur, axis, lattice=lat)
        assert cur == list(slab)


def test_rotate_does_not_mutate_input():
    slab = list(get_layer(build_lattice(3).index_to_coord, Axis.Z).slab(1))
    snapshot = list(slab)
    rotate_layer(slab, Axis.Z)
    assert slab == snapshot


def test_rotate_rejects_off_lattice_input():
    lat = build_lattice(3)
    with pytest.raises(ValueError):
        rotate_layer([(2, 0, 0)], Axis.Z, lattice=lat)


def test_move_inverse():
    m = Move(Axis.X, 1, 1)
    assert m.inverse() == Move(Axis.X, 1, -1)
    assert m.inverse().inverse() == m


def test_zero_based_partition_then_rotate_stays_on_slab():
    coords = build_lattice(3, Convention.ZERO_BASED).index_to_coord
    layer = get_layer(coords, Axis.Z, convention=Convention.ZERO_BASED)
    slab = layer.slab(0)

    out = rotate_layer(slab, Axis.Z, convention=Convention.ZERO_BASED)
    assert set(out) == set(slab)
    assert out == [(2 - y, x, z) for x, y, z in slab]
    assert layer.rotate(0) == out


def test_rotate_infers_lattice_from_slab_size():
    # 9 cubies -> N=3 centered, 16 cubies -> N=4 zero-based
    slab = get_layer(build_lattice(3).index_to_coord, Axis.X).slab(2)
    assert set(rotate_layer(slab, Axis.X)) == set(slab)
    zb = get_layer(build_lattice(4, Convention.ZERO_BASED).index_to_coord, Axis.Y, convention=Convention.ZERO_BASED)
    assert set(rotate_layer(zb.slab(3), Axis.Y, convention=Convention.ZERO_BASED)) == set(zb.slab(3))


def test_rotate_rejects_non_square_slab():
    with pytest.raises(ValueError):
        rotate_layer([(0, 0, 0), (1, 0, 0)], Axis.Z)


def test_rotate_rejects_slab_from_other_convention():
    slab = get_layer(
        build_lattice(3, Convention.ZERO_BASED).index_to_coord, Axis.Z, convention=Convention.ZERO_BASED
    ).slab(2)
    with pytest.raises(ValueError):
        rotate_layer(slab, Axis.Z)  # (2, 2, 2) is not on the centered N=3 lattice


def test_layer_carries_its_lattice():
    layer = get_layer(build_lattice(2, Convention.ZERO_BASED).index_to_coord, Axis.X, convention=Convention.ZERO_BASED)
    assert layer.lattice.N == 2
    assert layer.lattice.convention is Convention.ZERO_BASED


def test_even_side_needs_zero_based_convention():
    coords = build_lattice(2, Convention.ZERO_BASED).index_to_coord
    with pytest.raises(ValueError):
        get_layer(coords, Axis.X)
    assert len(get_layer(coords, Axis.X, convention=Convention.ZERO_BASED)) == 2


def test_rotate_detects_image_off_lattice(monkeypatch):
    import cubie_layers.core.layers as layers

    scale = ((2, 0, 0), (0, 2, 0), (0, 0, 1))
    monkeypatch.setattr(layers, "quarter_turn_matrix", lambda axis, turns=1: scale)
    slab = get_layer(build_lattice(3).index_to_coord, Axis.Z).slab(1)
    with pytest.raises(AssertionError):
        rotate_layer(slab, Axis.Z)


def test_rotate_detects_colliding_images(monkeypatch):
    import cubie_layers.core.layers as layers

    flatten = ((1, 0, 0), (0, 0, 0), (0, 0, 1))
    monkeypatch.setattr(layers, "quarter_turn_matrix", lambda axis, turns=1: flatten)
    slab = get_layer(build_lattice(3).index_to_coord, Axis.Z).slab(1)
    with pytest.raises(AssertionError):
        rotate_layer(slab, Axis.Z)
