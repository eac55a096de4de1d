from __future__ import annotations

from enum import Enum

Vector3 = tuple[int, int, int]


class Axis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"

    @property
    def component(self) -> int:
        """Position of this axis inside an (x, y, z) triple."""
        return _COMPONENT[self]


_COMPONENT: dict[Axis, int] = {Axis.X: 0, Axis.Y: 1, Axis.Z: 2}


def axis_vector(axis: Axis) -> Vector3:
    """Unit basis vector along ``axis``: x -> (1,0,0), y -> (0,1,0), z -> (0,0,1)."""
    return (int(axis is Axis.X), int(axis is Axis.Y), int(axis is Axis.Z))


def parse_axis(value: Axis | str) -> Axis:
    if isinstance(value, Axis):
        return value
    if isinstance(value, str):
        try:
            return Axis(value.strip().lower())
        except ValueError as e:
            raise ValueError(f"axis must be one of x, y, z (got {value!r})") from e
    raise ValueError(f"axis must be an Axis or str (got {type(value).__name__})")
