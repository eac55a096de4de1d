from __future__ import annotations

import matplotlib.pyplot as plt

from cubie_layers.core.axis import Axis, parse_axis
from cubie_layers.core.cube import CubeState


def plot_layer(state: CubeState, axis: Axis | str, index: int, *, ax=None, title: str | None = None):
    """3D scatter of cubie positions colored by cubie id; slab ``index`` drawn larger."""
    axis = parse_axis(axis)
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d")

    in_slab = set(state.cubies_in(axis, index))
    coords = state.positions
    xs = [c[0] for c in coords]
    ys = [c[1] for c in coords]
    zs = [c[2] for c in coords]
    colors = list(range(len(coords)))
    sizes = [90 if i in in_slab else 20 for i in range(len(coords))]

    sc = ax.scatter(xs, ys, zs, c=colors, cmap="viridis", s=sizes)
    plt.colorbar(sc, ax=ax, shrink=0.7, pad=0.1)

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title(title or f"N={state.N} slab {index} along {axis.value}")
    ax.set_box_aspect((1, 1, 1))
    return ax
