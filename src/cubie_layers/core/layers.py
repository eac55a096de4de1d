from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .axis import Axis, parse_axis
from .lattice import Convention, Coord, Lattice, lattice_for, lattice_for_slab
from .rotations import mat_vec, quarter_turn_matrix


@dataclass(frozen=True, slots=True)
class Layer:
    """Coordinates grouped into slabs perpendicular to ``axis``.

    ``slabs[i]`` holds every coordinate whose ``axis`` component equals the
    i-th lattice value (ascending). Input order is kept inside each slab.
    ``lattice`` is the lattice the partition was made on.
    """

    axis: Axis
    slabs: tuple[tuple[Coord, ...], ...]
    lattice: Lattice

    def slab(self, index: int) -> tuple[Coord, ...]:
        if not (0 <= index < len(self.slabs)):
            raise ValueError(f"slab index must be in [0..{len(self.slabs) - 1}]")
        return self.slabs[index]

    def rotate(self, index: int, turns: int = 1) -> list[Coord]:
        """Images of ``slab(index)`` after ``turns`` quarter turns, on this layer's lattice."""
        return rotate_layer(self.slab(index), self.axis, turns=turns, lattice=self.lattice)

    def __len__(self) -> int:
        return len(self.slabs)


@dataclass(frozen=True, slots=True)
class Move:
    """Quarter turns of one slab: ``turns`` right-handed quarter turns about ``axis``."""

    axis: Axis
    index: int
    turns: int = 1

    def inverse(self) -> Move:
        return Move(self.axis, self.index, -self.turns)


def layer_index_of(coord: Coord, axis: Axis, lattice: Lattice) -> int:
    return lattice.value_index(coord[axis.component])


def get_layer(
    all_coords: Sequence[Coord],
    axis: Axis | str,
    *,
    convention: Convention = Convention.CENTERED,
) -> Layer:
    """Partition the full cubie coordinate set into slabs along ``axis``.

    N is the cube root of ``len(all_coords)``; a non-cube count raises
    ValueError, as does a coordinate lying off the lattice along ``axis``.
    The CENTERED default only admits odd N: pass
    ``convention=Convention.ZERO_BASED`` for an even-sided cube.
    """
    axis = parse_axis(axis)
    lattice = lattice_for(all_coords, convention)

    buckets: list[list[Coord]] = [[] for _ in range(lattice.N)]
    for c in all_coords:
        buckets[layer_index_of(c, axis, lattice)].append(tuple(c))  # type: ignore[arg-type]

    return Layer(axis=axis, slabs=tuple(tuple(b) for b in buckets), lattice=lattice)


def rotate_layer(
    slab_coords: Sequence[Coord],
    axis: Axis | str,
    *,
    turns: int = 1,
    convention: Convention = Convention.CENTERED,
    lattice: Lattice | None = None,
) -> list[Coord]:
    """Rotate one slab by ``turns`` right-handed quarter turns about ``axis``.

    Integer arithmetic only. The turn is about the centre of the slab's
    lattice: ``lattice`` when given, otherwise the ``convention`` lattice
    whose slabs hold ``len(slab_coords)`` cubies. Output[i] is the image of
    input[i].

    An input off the lattice raises ValueError; an image off the lattice or
    two colliding images raise AssertionError.
    """
    axis = parse_axis(axis)
    if lattice is None:
        lattice = lattice_for_slab(slab_coords, convention)
    m = quarter_turn_matrix(axis, turns)

    s = lattice.shift
    # R(v - c) + c with c = (s/2, s/2, s/2); each (s - r) is 0 or +-2s.
    rs = mat_vec(m, (s, s, s))
    offset = ((s - rs[0]) // 2, (s - rs[1]) // 2, (s - rs[2]) // 2)

    out: list[Coord] = []
    for c in slab_coords:
        c = tuple(c)  # type: ignore[assignment]
        if not lattice.contains(c):
            raise ValueError(f"coordinate {c} is not on the lattice")
        rx, ry, rz = mat_vec(m, c)
        new_c = (rx + offset[0], ry + offset[1], rz + offset[2])
        if not lattice.contains(new_c):
            raise AssertionError(f"rotation maps coord out of domain: {new_c}")
        out.append(new_c)

    if len(set(out)) != len(set(map(tuple, slab_coords))):
        raise AssertionError("rotation collapsed distinct coordinates")
    return out
