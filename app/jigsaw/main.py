from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from app.jigsaw.layout.brute_force import brute_force_partition
from app.jigsaw.layout.errors import LayoutError
from app.jigsaw.layout.justified import LayoutResult, build_layout, optimal_partition
from app.jigsaw.layout.objectives import DEFAULT_IDEAL_HEIGHT, OBJECTIVES, get_objective
from app.jigsaw.layout.partition import AGGREGATES
from app.jigsaw.layout.validation import validate_inputs
from app.jigsaw.utils.aspect import read_aspect_ratios


def run_cli(
    aspect_ratios: Sequence[float],
    *,
    margin: float = 0.0,
    objective: str = "squared_error",
    ideal_height: float = DEFAULT_IDEAL_HEIGHT,
    aggregate: str = "mean",
    brute_force: bool = False,
) -> LayoutResult:
    cost = get_objective(objective, ideal_height)
    if brute_force:
        ratios, m = validate_inputs(aspect_ratios, margin)
        partition = brute_force_partition(ratios, m, cost, aggregate=aggregate)
        result = build_layout(ratios, m, partition)
    else:
        result = optimal_partition(aspect_ratios, margin, cost, aggregate=aggregate)

    print(f"Items: {len(result.widths)}  Rows: {len(result.rows)}")
    for n, row in enumerate(result.rows, start=1):
        widths = ", ".join(f"{result.widths[i]:.4f}" for i in row.indices)
        print(f"- row {n}: items {row.start}-{row.end}  height={row.height:.4f}  widths=[{widths}]")
    print(f"Cost ({aggregate}): {result.cost:.6f}")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Justified photo-row layout")
    parser.add_argument("ratios", nargs="*", type=float, help="Aspect ratios (width / height)")
    parser.add_argument("--image", action="append", default=[], help="Image file to lay out (repeatable)")
    parser.add_argument("--margin", type=float, default=0.0, help="Margin as a fraction of container width")
    parser.add_argument("--ideal-height", type=float, default=DEFAULT_IDEAL_HEIGHT)
    parser.add_argument("--objective", choices=sorted(OBJECTIVES), default="squared_error")
    parser.add_argument("--aggregate", choices=sorted(AGGREGATES), default="mean")
    parser.add_argument("--brute-force", action="store_true", help="Use the exhaustive search (small inputs only)")
    args = parser.parse_args(argv)

    try:
        ratios = list(args.ratios) + read_aspect_ratios(args.image)
    except OSError as e:
        print(f"Error: could not read image: {e}")
        return 1

    try:
        run_cli(
            ratios,
            margin=args.margin,
            objective=args.objective,
            ideal_height=args.ideal_height,
            aggregate=args.aggregate,
            brute_force=args.brute_force,
        )
    except LayoutError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
