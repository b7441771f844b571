"""Unit conversion and rescaling of solved triangles.

The solver works in meters. Callers work in whatever unit they typed
their sides in; results are converted back before they are returned.
"""
from .constants import UNIT_TO_METERS
from .types import Triangle, Sides, Altitudes, Unit


def unit_factor(unit: Unit) -> float:
    """Meters per *unit*. Raises ValueError for an unknown unit."""
    try:
        return UNIT_TO_METERS[unit]
    except KeyError:
        raise ValueError(f"Unknown unit {unit!r}; expected one of {sorted(UNIT_TO_METERS)}") from None


def to_base(value: float, unit: Unit) -> float:
    return value * unit_factor(unit)


def from_base(value: float, unit: Unit) -> float:
    return value / unit_factor(unit)


def convert_length(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert a length between two linear units."""
    return from_base(to_base(value, from_unit), to_unit)


def rescale(tri: Triangle, unit: Unit) -> Triangle:
    """Express a triangle's lengths in *unit*.

    Lengths divide by the factor, area by its square. Angles and
    classification are carried through unchanged.
    """
    k = unit_factor(unit) / unit_factor(tri.unit)
    return tri._replace(
        sides=Sides(*(s / k for s in tri.sides)),
        perimeter=tri.perimeter / k,
        area=tri.area / k**2,
        altitudes=Altitudes(*(h / k for h in tri.altitudes)),
        unit=unit,
    )
