"""Solve a triangle from the command line, print its properties, and draw it as SVG.

    python -m diagram.gen_triangle_svg SSS --sideA 3 --sideB 4 --sideC 5 --unit ft -o tri.svg
"""
import argparse
import logging
import sys

from trisolve.constants import PATTERN_FIELDS, PATTERN_LABELS, UNIT_TO_METERS, DEFAULT_UNIT
from trisolve.geometry import SolveError, display_value, type_label, fmt_ft_in
from trisolve.solver import solve_triangle
from trisolve.types import Triangle
from .constants import (
    SVG_WIDTH, SVG_HEIGHT, LABEL_OFFSET, ANGLE_LABEL_OFFSET,
    SIDE_PRECISION, ANGLE_PRECISION,
    STROKE, FILL, SIDE_COLOR, ANGLE_COLOR, PLACEHOLDER_COLOR, PLACEHOLDER_TEXT,
)
from .layout import place_vertices, centroid, make_page_transform

logger = logging.getLogger(__name__)

# ============================================================
# SVG Rendering
# ============================================================
def _svg_open(lines: list[str]) -> None:
    lines.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{SVG_WIDTH}" height="{SVG_HEIGHT}"'
                 f' viewBox="0 0 {SVG_WIDTH} {SVG_HEIGHT}">')

def render_placeholder() -> str:
    """SVG shown while there is no solved triangle."""
    lines: list[str] = []
    _svg_open(lines)
    lines.append(f'<text x="{SVG_WIDTH/2}" y="{SVG_HEIGHT/2}" text-anchor="middle"'
                 f' dominant-baseline="middle" font-family="Arial" font-size="12"'
                 f' fill="{PLACEHOLDER_COLOR}">{PLACEHOLDER_TEXT}</text>')
    lines.append('</svg>')
    return "\n".join(lines)

def render_triangle(tri: Triangle | None) -> str:
    """SVG diagram with side lengths (in the triangle's unit) and angles (degrees)."""
    if tri is None:
        return render_placeholder()
    v = place_vertices(tri)
    to_page = make_page_transform(v)
    pA, pB, pC = (to_page(*p) for p in v)
    gx, gy = to_page(*centroid(v))

    lines: list[str] = []
    _svg_open(lines)
    pts = " ".join(f"{x:.2f},{y:.2f}" for x, y in (pA, pB, pC))
    lines.append(f'<polygon points="{pts}" fill="{FILL}" stroke="{STROKE}" stroke-width="2"/>')

    # Side labels: midpoint of each edge, pushed away from the centroid
    for name, (p, q) in (("a", (pB, pC)), ("b", (pC, pA)), ("c", (pA, pB))):
        mx, my = (p[0]+q[0])/2, (p[1]+q[1])/2
        dx, dy = mx - gx, my - gy; d = (dx**2 + dy**2) ** 0.5 or 1.0
        x, y = mx + LABEL_OFFSET*dx/d, my + LABEL_OFFSET*dy/d
        anchor = "middle" if abs(dx) < abs(dy) else ("start" if dx > 0 else "end")
        value = display_value(getattr(tri.sides, name), SIDE_PRECISION)
        lines.append(f'<text x="{x:.2f}" y="{y:.2f}" text-anchor="{anchor}" dominant-baseline="middle"'
                     f' font-family="Arial" font-size="10" fill="{SIDE_COLOR}">{name}: {value} {tri.unit}</text>')

    # Angle labels: just inside each vertex
    for name, p in (("A", pA), ("B", pB), ("C", pC)):
        dx, dy = gx - p[0], gy - p[1]; d = (dx**2 + dy**2) ** 0.5 or 1.0
        x, y = p[0] + ANGLE_LABEL_OFFSET*dx/d, p[1] + ANGLE_LABEL_OFFSET*dy/d
        value = display_value(getattr(tri.angles, name), ANGLE_PRECISION)
        lines.append(f'<text x="{x:.2f}" y="{y:.2f}" text-anchor="middle" dominant-baseline="middle"'
                     f' font-family="Arial" font-size="10" font-weight="bold"'
                     f' fill="{ANGLE_COLOR}">{name}: {value}°</text>')
    lines.append('</svg>')
    return "\n".join(lines)

# ============================================================
# Text Report
# ============================================================
def format_report(tri: Triangle) -> list[str]:
    """Property table rows, in the triangle's unit."""
    u = tri.unit
    rows = []
    for s, g in zip("abc", "ABC"):
        rows.append(f"  Side {s}  {display_value(getattr(tri.sides, s)):>12} {u:<3}"
                    f"  Angle {g}  {display_value(getattr(tri.angles, g)):>8}°")
    rows.append(f"  Perimeter  {display_value(tri.perimeter)} {u}")
    rows.append(f"  Area       {display_value(tri.area)} {u}²")
    rows.append(f"  Type       {type_label(tri.classification)}")
    for s, h in zip("abc", tri.altitudes):
        rows.append(f"  Height to side {s}  {display_value(h)} {u}")
    if u in ("ft", "in"):
        rows.append("  Sides (ft-in)  " + ", ".join(fmt_ft_in(x, u) for x in tri.sides))
    return rows

# ============================================================
# Command Line
# ============================================================
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Solve a triangle from SSS, SAS, ASA or AAS values.")
    p.add_argument("pattern", choices=list(PATTERN_FIELDS),
                   help="; ".join(PATTERN_LABELS.values()))
    for name in ("sideA", "sideB", "sideC"):
        p.add_argument(f"--{name}", help=f"side {name[-1].lower()}, opposite angle {name[-1]}")
    for name in ("angleA", "angleB", "angleC"):
        p.add_argument(f"--{name}", help=f"angle {name[-1]} in degrees")
    p.add_argument("--unit", choices=list(UNIT_TO_METERS), default=DEFAULT_UNIT,
                   help="unit of the sides (default: %(default)s)")
    p.add_argument("-o", "--output", help="write the SVG diagram to this path")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    fields = {k: v for k, v in vars(args).items() if k.startswith(("side", "angle"))}

    try:
        tri = solve_triangle(args.pattern, fields, args.unit)
    except SolveError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if tri is None:
        need = ", ".join(f"--{f}" for f in PATTERN_FIELDS[args.pattern])
        print(f"{args.pattern} needs numeric values for {need}", file=sys.stderr)
        return 2

    print(f"=== {PATTERN_LABELS[args.pattern]} ===")
    for row in format_report(tri):
        print(row)
    if args.output:
        logger.debug(f"rendering {args.pattern} triangle to {args.output}")
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(render_triangle(tri))
        print(f"\nSVG written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
