"""Triangle solver: SSS / SAS / ASA / AAS -> complete triangle.

All internal work is in meters and degrees. Each pattern checks its
preconditions in order and raises at the first violation; nothing is
computed past a failed check.
"""
import logging
import math

from .constants import EPSILON, STRAIGHT_ANGLE, DEFAULT_UNIT
from .types import Sides, Angles, Triangle, CanonicalInput, Pattern, Unit
from .geometry import (
    NonPositiveSide, InvalidAngleRange, TriangleInequalityViolated,
    AngleSumExceeded, DegenerateTriangle, InvalidTriangleGeometry,
    sin_deg, law_of_cosines_angle, law_of_cosines_side,
    heron_area, altitudes,
)
from .classify import classify
from .normalize import normalize_inputs, pattern_fields
from .units import rescale

logger = logging.getLogger(__name__)

# ============================================================
# Precondition Checks
# ============================================================
def _require_positive(**sides: float) -> None:
    if any(not v > 0 for v in sides.values()):
        if len(sides) == 1:
            raise NonPositiveSide("Side length must be positive.")
        raise NonPositiveSide()

def _require_angle_range(**angles: float) -> None:
    for name, x in angles.items():
        if not 0 < x < STRAIGHT_ANGLE:
            if len(angles) == 1:
                raise InvalidAngleRange(f"Angle {name} must be between 0 and 180 degrees.")
            raise InvalidAngleRange()

def _require_angle_sum(A: float, B: float) -> None:
    if A + B >= STRAIGHT_ANGLE - EPSILON:
        raise AngleSumExceeded()

def _require_nonzero_sine(name: str, s: float) -> None:
    if abs(s) < EPSILON:
        raise DegenerateTriangle(f"Angle {name} is too close to 0 or 180, cannot form a triangle.")

# ============================================================
# Per-Pattern Solvers
# ============================================================
def _solve_sss(a: float, b: float, c: float) -> tuple[Sides, Angles]:
    _require_positive(a=a, b=b, c=c)
    if a + b <= c + EPSILON or a + c <= b + EPSILON or b + c <= a + EPSILON:
        raise TriangleInequalityViolated()
    A = law_of_cosines_angle(a, b, c)
    B = law_of_cosines_angle(b, a, c)
    return Sides(a, b, c), Angles(A, B, STRAIGHT_ANGLE - A - B)

def _solve_sas(a: float, B: float, c: float) -> tuple[Sides, Angles]:
    _require_positive(a=a, c=c)
    _require_angle_range(B=B)
    b = law_of_cosines_side(a, c, B)
    if b < EPSILON:
        raise DegenerateTriangle("Angle B is too close to 0, cannot form a triangle.")
    # acos is unambiguous on (0, 180); asin would misreport an obtuse A
    A = law_of_cosines_angle(a, b, c)
    return Sides(a, b, c), Angles(A, B, STRAIGHT_ANGLE - A - B)

def _solve_asa(A: float, c: float, B: float) -> tuple[Sides, Angles]:
    _require_positive(c=c)
    _require_angle_range(A=A, B=B)
    _require_angle_sum(A, B)
    C = STRAIGHT_ANGLE - A - B
    sinC = sin_deg(C)
    _require_nonzero_sine("C", sinC)
    return Sides(c*sin_deg(A)/sinC, c*sin_deg(B)/sinC, c), Angles(A, B, C)

def _solve_aas(A: float, B: float, a: float) -> tuple[Sides, Angles]:
    _require_positive(a=a)
    _require_angle_range(A=A, B=B)
    _require_angle_sum(A, B)
    sinA = sin_deg(A)
    _require_nonzero_sine("A", sinA)
    C = STRAIGHT_ANGLE - A - B
    return Sides(a, a*sin_deg(B)/sinA, a*sin_deg(C)/sinA), Angles(A, B, C)

def solve_base(pattern: Pattern, inp: CanonicalInput) -> tuple[Sides, Angles]:
    """All three sides (meters) and angles (degrees) for a canonical input."""
    pattern_fields(pattern)  # unknown pattern -> ValueError
    s, g = inp.sides, inp.angles
    if pattern == "SSS":
        return _solve_sss(s["a"], s["b"], s["c"])
    if pattern == "SAS":
        return _solve_sas(s["a"], g["B"], s["c"])
    if pattern == "ASA":
        return _solve_asa(g["A"], s["c"], g["B"])
    return _solve_aas(g["A"], g["B"], s["a"])

# ============================================================
# Derived Properties
# ============================================================
def derive_properties(sides: Sides, angles: Angles) -> Triangle:
    """Perimeter, Heron area, altitudes and classification in base units.

    Raises InvalidTriangleGeometry when rounding or overflow leaves a zero,
    negative or non-finite area (or any non-finite side, angle or perimeter)
    that the per-pattern checks did not catch.
    """
    area = heron_area(sides)
    perimeter = sum(sides)
    if not math.isfinite(area) or area <= EPSILON:
        raise InvalidTriangleGeometry()
    if not all(math.isfinite(x) for x in (*sides, *angles, perimeter)):
        raise InvalidTriangleGeometry()
    return Triangle(
        sides=sides, angles=angles,
        perimeter=perimeter, area=area,
        altitudes=altitudes(sides, area),
        classification=classify(sides, angles),
        unit="m",
    )

# ============================================================
# Public Pipeline
# ============================================================
def solve_triangle(pattern: Pattern, fields: dict, unit: Unit = DEFAULT_UNIT) -> Triangle | None:
    """Solve a triangle from the three fields *pattern* reads.

    *fields* maps sideA/sideB/sideC/angleA/angleB/angleC to numbers or
    numeric strings; side values are in *unit*, angles in degrees.

    Returns None while a required field is missing or unparsable.
    Raises a SolveError subclass when the values cannot form a triangle.
    The returned Triangle is expressed in *unit* (area in unit**2).
    """
    inp = normalize_inputs(pattern, fields, unit)
    if inp is None:
        return None
    sides, angles = solve_base(pattern, inp)
    logger.debug(f"{pattern}: sides={tuple(sides)} m, angles={tuple(angles)} deg")
    tri = derive_properties(sides, angles)
    logger.debug(f"{pattern}: area={tri.area:.6g} m^2, {tri.classification}")
    out = rescale(tri, unit)
    if not math.isfinite(out.area):
        raise InvalidTriangleGeometry(f"Area overflows when expressed in {unit}^2.")
    return out
