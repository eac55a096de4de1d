from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass

from .axis import parse_axis
from .lattice import Convention, Coord, Lattice, build_lattice
from .layers import Layer, Move, get_layer, rotate_layer

_CONVENTION_CODE = {Convention.CENTERED: 0, Convention.ZERO_BASED: 1}


@dataclass(slots=True)
class CubeState:
    """Cubie id -> coordinate mapping, updated through the layer engine.

    Cubie ``i`` starts at ``lattice.index_to_coord[i]``.
    """

    N: int
    lattice: Lattice
    positions: list[Coord]
    last_move: Move | None

    def __init__(self, N: int, convention: Convention = Convention.CENTERED):
        self.N = N
        self.lattice = build_lattice(N, convention)
        self.positions = list(self.lattice.index_to_coord)
        self.last_move = None

    @property
    def convention(self) -> Convention:
        return self.lattice.convention

    def layer(self, axis) -> Layer:
        return get_layer(self.positions, parse_axis(axis), convention=self.convention)

    def cubies_in(self, axis, index: int) -> list[int]:
        """Cubie ids currently in slab ``index`` along ``axis``."""
        slab = set(self.layer(axis).slab(index))
        return [i for i, c in enumerate(self.positions) if c in slab]

    def apply(self, move: Move) -> None:
        axis = parse_axis(move.axis)
        layer = self.layer(axis)
        slab = layer.slab(move.index)

        by_coord = {c: i for i, c in enumerate(self.positions)}
        ids = [by_coord[c] for c in slab]
        rotated = layer.rotate(move.index, move.turns)

        new = list(self.positions)  # outside the slab unchanged
        for cubie, c in zip(ids, rotated):
            new[cubie] = c
        self.positions = new
        self.last_move = Move(axis, move.index, move.turns)

    def is_solved(self) -> bool:
        return self.positions == self.lattice.index_to_coord

    def state(self) -> dict:
        return {
            "N": self.N,
            "convention": self.convention.value,
            "positions": [list(c) for c in self.positions],
            "last_move": None
            if self.last_move is None
            else {
                "axis": self.last_move.axis.value,
                "index": self.last_move.index,
                "turns": self.last_move.turns,
            },
        }

    def _canonical_bytes(self) -> bytes:
        # little-endian int32 array: [N, convention] + flattened positions
        flat = [v for c in self.positions for v in c]
        fmt = "<" + "i" * (2 + len(flat))
        return struct.pack(fmt, self.N, _CONVENTION_CODE[self.convention], *flat)

    def hash(self) -> str:
        return hashlib.sha256(self._canonical_bytes()).hexdigest()

    def audit(self) -> None:
        # NON-MUTATING: must restore exactly.
        before_positions = list(self.positions)
        before_move = self.last_move
        before_hash = self.hash()

        try:
            self._audit_bijection()
            self._audit_quarter_cycle()
            self._audit_inverse_roundtrip()
        finally:
            self.positions = before_positions
            self.last_move = before_move
            if self.hash() != before_hash:
                raise AssertionError("audit() mutated cube state (hash mismatch)")

    def _audit_bijection(self) -> None:
        n3 = self.N**3
        if len(self.positions) != n3:
            raise AssertionError("positions length mismatch")
        s = set(self.positions)
        if len(s) != n3:
            raise AssertionError("two cubies share a coordinate")
        if s != set(self.lattice.index_to_coord):
            raise AssertionError("cubie coordinate off the lattice")

    def _audit_quarter_cycle(self) -> None:
        if self.last_move is None:
            return
        axis = self.last_move.axis
        layer = self.layer(axis)
        for slab in layer.slabs:
            cur = list(slab)
            for _ in range(4):
                cur = rotate_layer(cur, axis, lattice=layer.lattice)
            if cur != list(slab):
                raise AssertionError(f"four quarter turns about {axis.value} did not restore the slab")

    def _audit_inverse_roundtrip(self) -> None:
        if self.last_move is None:
            return

        snap = self._canonical_bytes()
        move = self.last_move
        self.apply(move)
        self.apply(move.inverse())
        if self._canonical_bytes() != snap:
            raise AssertionError("apply(move); apply(inverse) did not restore state")
