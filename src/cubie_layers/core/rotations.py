from __future__ import annotations

from .axis import Axis, Vector3, axis_vector

Matrix3 = tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]

IDENTITY: Matrix3 = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


def _dot(u: Vector3, v: Vector3) -> int:
    return u[0] * v[0] + u[1] * v[1] + u[2] * v[2]


def _cross(u: Vector3, v: Vector3) -> Vector3:
    return (u[1] * v[2] - u[2] * v[1], u[2] * v[0] - u[0] * v[2], u[0] * v[1] - u[1] * v[0])


def transpose(m: Matrix3) -> Matrix3:
    c0, c1, c2 = zip(*m)
    return (c0, c1, c2)


def det3(m: Matrix3) -> int:
    # scalar triple product of the rows
    return _dot(m[0], _cross(m[1], m[2]))


def mat_vec(m: Matrix3, v: Vector3) -> Vector3:
    return (_dot(m[0], v), _dot(m[1], v), _dot(m[2], v))


def mat_mul(a: Matrix3, b: Matrix3) -> Matrix3:
    cols = transpose(b)
    r0, r1, r2 = (tuple(_dot(row, col) for col in cols) for row in a)
    return (r0, r1, r2)  # type: ignore[return-value]


def mat_pow(m: Matrix3, n: int) -> Matrix3:
    if n < 0:
        raise ValueError("n must be >= 0")
    out = IDENTITY
    for _ in range(n):
        out = mat_mul(m, out)
    return out


def _quarter_turn_from_vector(u: Vector3) -> Matrix3:
    """Right-handed rotation by pi/2 about unit vector ``u``.

    Rodrigues: R = cos(t) I + sin(t) [u]x + (1 - cos(t)) u u^T. At t = pi/2
    this reduces to R = [u]x + u u^T, which is exact in integers.
    """
    ux, uy, uz = u
    cross = ((0, -uz, uy), (uz, 0, -ux), (-uy, ux, 0))
    outer = tuple(tuple(a * b for b in u) for a in u)
    rows = [tuple(cross[r][c] + outer[r][c] for c in range(3)) for r in range(3)]
    return (rows[0], rows[1], rows[2])  # type: ignore[return-value]


def generate_quarter_turns() -> dict[tuple[Axis, int], Matrix3]:
    """Matrices for 0..3 right-handed quarter turns about each principal axis."""
    table: dict[tuple[Axis, int], Matrix3] = {}
    for axis in Axis:
        q = _quarter_turn_from_vector(axis_vector(axis))
        if det3(q) != 1:
            raise AssertionError(f"quarter turn about {axis.value} is not a proper rotation")
        for t in range(4):
            table[(axis, t)] = mat_pow(q, t)
        if mat_pow(q, 4) != IDENTITY:
            raise AssertionError(f"quarter turn about {axis.value} does not have order 4")
    return table


QUARTER_TURNS: dict[tuple[Axis, int], Matrix3] = generate_quarter_turns()


def quarter_turn_matrix(axis: Axis, turns: int = 1) -> Matrix3:
    """Matrix for ``turns`` right-handed quarter turns; negative turns go the other way."""
    return QUARTER_TURNS[(axis, turns % 4)]
