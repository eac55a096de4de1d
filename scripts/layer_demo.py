from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from cubie_layers import Convention, CubeState, Move  # noqa: E402
from cubie_layers.core.axis import parse_axis  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Turn one slab of an N-cube and report the new cubie positions.")
    ap.add_argument("--N", type=int, default=3)
    ap.add_argument("--axis", default="z", help="x, y or z")
    ap.add_argument("--index", type=int, default=0, help="slab index along the axis (0..N-1)")
    ap.add_argument("--turns", type=int, default=1, help="quarter turns; negative turns go the other way")
    ap.add_argument(
        "--convention",
        choices=[c.value for c in Convention],
        default=Convention.CENTERED.value,
    )
    ap.add_argument("--outdir", type=Path, default=None, help="write summary JSON and a plot here")
    args = ap.parse_args()

    cube = CubeState(args.N, Convention(args.convention))
    axis = parse_axis(args.axis)
    moved = cube.cubies_in(axis, args.index)

    before = {i: cube.positions[i] for i in moved}
    cube.apply(Move(axis, args.index, args.turns))
    cube.audit()

    summary = {
        "N": args.N,
        "convention": args.convention,
        "move": {"axis": axis.value, "index": args.index, "turns": args.turns},
        "moved": [{"cubie": i, "from": list(before[i]), "to": list(cube.positions[i])} for i in moved],
        "hash": cube.hash(),
    }
    print(json.dumps(summary, indent=2))

    if args.outdir is not None:
        import matplotlib.pyplot as plt

        from cubie_layers.viz.plot import plot_layer

        args.outdir.mkdir(parents=True, exist_ok=True)
        (args.outdir / "layer_summary.json").write_text(json.dumps(summary, indent=2))
        plot_layer(cube, axis, args.index)
        plt.tight_layout()
        plt.savefig(args.outdir / "layer.png")
        plt.close()
        print(f"Wrote: {args.outdir}/layer_summary.json")
        print(f"Wrote: {args.outdir}/layer.png")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
