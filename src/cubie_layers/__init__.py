"""Layer selection and quarter-turn transforms for cube-puzzle lattices."""

from .core.axis import Axis, axis_vector
from .core.cube import CubeState
from .core.lattice import Convention, build_lattice
from .core.layers import Layer, Move, get_layer, rotate_layer

__all__ = [
    "Axis",
    "Convention",
    "CubeState",
    "Layer",
    "Move",
    "axis_vector",
    "build_lattice",
    "get_layer",
    "rotate_layer",
]
