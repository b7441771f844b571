"""Shared type definitions for the triangle solver."""
from typing import Literal, NamedTuple

Pattern = Literal["SSS", "SAS", "ASA", "AAS"]
Unit = Literal["m", "cm", "ft", "in"]
AngleType = Literal["Acute", "Right", "Obtuse", "Invalid"]
SideType = Literal["Equilateral", "Isosceles", "Scalene", "Invalid"]

class Sides(NamedTuple):
    a: float; b: float; c: float

class Angles(NamedTuple):
    A: float; B: float; C: float

class Altitudes(NamedTuple):
    h_a: float; h_b: float; h_c: float

class Classification(NamedTuple):
    angle_type: AngleType; side_type: SideType

class CanonicalInput(NamedTuple):
    sides: dict[str, float]    # a/b/c in meters
    angles: dict[str, float]   # A/B/C in degrees

class Triangle(NamedTuple):
    sides: Sides
    angles: Angles
    perimeter: float
    area: float                # in unit**2
    altitudes: Altitudes
    classification: Classification
    unit: Unit = "m"
