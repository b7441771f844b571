"""Vertex placement of a solved triangle and the page transform for drawing it."""
import math
from typing import Callable, NamedTuple

from trisolve.types import Triangle
from .constants import SVG_WIDTH, SVG_HEIGHT, PADDING

Point = tuple[float, float]

class TriangleVertices(NamedTuple):
    A: Point; B: Point; C: Point

def place_vertices(tri: Triangle) -> TriangleVertices:
    """Side c along +x from A at the origin; C above it at distance b, angle A."""
    b, c = tri.sides.b, tri.sides.c
    A_rad = math.radians(tri.angles.A)
    return TriangleVertices((0.0, 0.0), (c, 0.0), (b*math.cos(A_rad), b*math.sin(A_rad)))

def centroid(v: TriangleVertices) -> Point:
    return (sum(p[0] for p in v)/3, sum(p[1] for p in v)/3)

def make_page_transform(
    v: TriangleVertices, width: float = SVG_WIDTH, height: float = SVG_HEIGHT,
    padding: float = PADDING,
) -> Callable[[float, float], tuple[float, float]]:
    """Uniform scale + translate that centres the triangle on the page, y pointing down."""
    xs = [p[0] for p in v]; ys = [p[1] for p in v]
    w = max(xs) - min(xs); h = max(ys) - min(ys)
    s = min((width - 2*padding)/w, (height - 2*padding)/h)
    ox = (width - w*s)/2 - min(xs)*s
    oy = (height - h*s)/2 + max(ys)*s
    def to_page(x: float, y: float) -> tuple[float, float]:
        return (ox + x*s, oy - y*s)
    return to_page
