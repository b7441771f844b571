"""Input normalizer: raw field values -> canonical meters/degrees record."""
import logging
import math

from .constants import PATTERN_FIELDS, ALL_FIELDS, SIDE_KEYS, ANGLE_KEYS
from .types import CanonicalInput, Pattern, Unit
from .units import to_base, unit_factor

logger = logging.getLogger(__name__)


def pattern_fields(pattern: Pattern) -> tuple[str, ...]:
    """Field names read by *pattern*. Raises ValueError for an unknown pattern."""
    try:
        return PATTERN_FIELDS[pattern]
    except KeyError:
        raise ValueError(f"Unknown pattern {pattern!r}; expected one of {list(PATTERN_FIELDS)}") from None


def parse_field(value) -> float | None:
    """Parse a number or numeric string. None when empty, unparsable or non-finite."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        x = float(value)
    except (TypeError, ValueError):
        return None
    return x if math.isfinite(x) else None


def active_fields(pattern: Pattern, fields: dict) -> dict:
    """Keep only the fields *pattern* reads; clear every other known field to ''."""
    keep = pattern_fields(pattern)
    out = {name: "" for name in ALL_FIELDS}
    for name in keep:
        if fields.get(name) is not None:
            out[name] = fields[name]
    return out


def normalize_inputs(pattern: Pattern, fields: dict, unit: Unit) -> CanonicalInput | None:
    """Canonical input for *pattern*, or None while a required field is incomplete.

    Sides are converted from *unit* to meters; angles pass through in degrees.
    Fields the pattern does not read are ignored.
    """
    unit_factor(unit)  # unknown unit -> ValueError, even with no side fields
    sides, angles = {}, {}
    for name in pattern_fields(pattern):
        x = parse_field(fields.get(name))
        if x is None:
            logger.debug(f"{pattern}: field {name} incomplete ({fields.get(name)!r})")
            return None
        if name in SIDE_KEYS:
            sides[SIDE_KEYS[name]] = to_base(x, unit)
        else:
            angles[ANGLE_KEYS[name]] = x
    return CanonicalInput(sides=sides, angles=angles)
