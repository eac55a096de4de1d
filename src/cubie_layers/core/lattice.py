from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int, int]


class Convention(str, Enum):
    """How slab index i maps to a coordinate value along an axis."""

    CENTERED = "centered"  # -k..k, origin at the cube centre
    ZERO_BASED = "zero_based"  # 0..N-1


@dataclass(frozen=True, slots=True)
class Lattice:
    N: int
    convention: Convention
    values: tuple[int, ...]
    index_to_coord: list[Coord]
    coord_to_index: dict[Coord, int]

    @property
    def lo(self) -> int:
        return self.values[0]

    @property
    def hi(self) -> int:
        return self.values[-1]

    @property
    def shift(self) -> int:
        # lo + hi is twice the centre; 0 for the centered convention.
        return self.lo + self.hi

    def contains(self, coord: Coord) -> bool:
        return coord in self.coord_to_index

    def value_index(self, value: int) -> int:
        i = value - self.lo
        if not (0 <= i < self.N):
            raise ValueError(f"coordinate value {value} outside lattice range [{self.lo}..{self.hi}]")
        return i


def infer_side(count: int) -> int:
    """Exact integer cube root of ``count``; raises if ``count`` is not N**3 with N >= 1."""
    if count < 1:
        raise ValueError("coordinate set must be non-empty")
    n = round(count ** (1.0 / 3.0))
    # float cbrt can be off by one for large counts
    for cand in (n - 1, n, n + 1):
        if cand >= 1 and cand**3 == count:
            return cand
    raise ValueError(f"coordinate count {count} is not a perfect cube")


def build_lattice(N: int, convention: Convention = Convention.CENTERED) -> Lattice:
    convention = Convention(convention)
    if N < 1:
        raise ValueError("N must be >= 1")
    if convention is Convention.CENTERED:
        if (N % 2) != 1:
            raise ValueError("centered lattice needs odd N")
        k = N // 2
        values = tuple(range(-k, k + 1))
    else:
        values = tuple(range(N))

    coords = [(x, y, z) for x in values for y in values for z in values]
    index_to_coord = coords
    coord_to_index = {c: i for i, c in enumerate(index_to_coord)}
    if len(coord_to_index) != N**3:
        raise AssertionError("coordinate indexing mismatch")
    return Lattice(
        N=N,
        convention=convention,
        values=values,
        index_to_coord=index_to_coord,
        coord_to_index=coord_to_index,
    )


def lattice_for(coords: Sequence[Coord], convention: Convention = Convention.CENTERED) -> Lattice:
    return build_lattice(infer_side(len(coords)), convention)


def lattice_for_slab(slab: Sequence[Coord], convention: Convention = Convention.CENTERED) -> Lattice:
    """Lattice whose slabs hold ``len(slab)`` cubies, i.e. N = sqrt(len(slab))."""
    count = len(slab)
    n = math.isqrt(count)
    if count < 1 or n * n != count:
        raise ValueError(f"slab size {count} is not N**2 for any N >= 1")
    return build_lattice(n, convention)
