"""Angle-based and side-based triangle classification."""
from .constants import EPSILON, RIGHT_ANGLE, STRAIGHT_ANGLE
from .geometry import rel_equal
from .types import Sides, Angles, Classification

INVALID = Classification("Invalid", "Invalid")


def angle_type(angles: Angles, tol: float = EPSILON) -> str:
    """Right if any angle is within tol of 90, else Obtuse if any exceeds 90, else Acute."""
    if any(abs(x - RIGHT_ANGLE) < tol for x in angles):
        return "Right"
    if any(x > RIGHT_ANGLE for x in angles):
        return "Obtuse"
    return "Acute"


def side_type(sides: Sides, tol: float = EPSILON) -> str:
    a, b, c = sides
    ab = rel_equal(a, b, tol); bc = rel_equal(b, c, tol); ac = rel_equal(a, c, tol)
    if ab and bc and ac:
        return "Equilateral"
    if ab or bc or ac:
        return "Isosceles"
    return "Scalene"


def classify(sides: Sides, angles: Angles, tol: float = EPSILON) -> Classification:
    """Classify a solved triangle. Expects base-unit sides.

    Angles that do not sum to 180 or are not all positive yield
    ("Invalid", "Invalid") instead of raising.
    """
    if abs(sum(angles) - STRAIGHT_ANGLE) > tol or any(x <= tol for x in angles):
        return INVALID
    return Classification(angle_type(angles, tol), side_type(sides, tol))
