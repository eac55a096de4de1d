from __future__ import annotations

from dataclasses import dataclass

from cubie_layers.core.axis import Axis
from cubie_layers.core.rotations import IDENTITY, QUARTER_TURNS, Matrix3, det3, mat_mul, transpose


@dataclass(frozen=True, slots=True)
class QuarterTurnGroup:
    # compose_table[axis][a][b] == c  <=>  R(axis, a) @ R(axis, b) == R(axis, c)
    compose_table: dict[Axis, list[list[int]]]


def build_compose_table() -> QuarterTurnGroup:
    table: dict[Axis, list[list[int]]] = {}
    for axis in Axis:
        index: dict[Matrix3, int] = {QUARTER_TURNS[(axis, t)]: t for t in range(4)}
        if len(index) != 4:
            raise AssertionError(f"quarter turns about {axis.value} are not distinct")
        if QUARTER_TURNS[(axis, 0)] != IDENTITY:
            raise AssertionError("zero turns must be the identity")

        rows: list[list[int]] = [[-1] * 4 for _ in range(4)]
        for a in range(4):
            m = QUARTER_TURNS[(axis, a)]
            if det3(m) != 1:
                raise AssertionError("quarter turn is not a proper rotation")
            if mat_mul(m, transpose(m)) != IDENTITY:
                raise AssertionError("quarter turn is not orthogonal")
            for b in range(4):
                cmat = mat_mul(m, QUARTER_TURNS[(axis, b)])
                try:
                    c = index[cmat]
                except KeyError as e:
                    raise AssertionError("quarter-turn closure violated") from e
                rows[a][b] = c
        table[axis] = rows
    return QuarterTurnGroup(compose_table=table)
