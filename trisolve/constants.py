"""Named tolerances, unit factors and input-pattern tables.

Lengths are converted to meters for solving. Angles are always degrees.
"""

# Tolerances
EPSILON = 1e-9                    # triangle inequality, angle sum, sine, Heron, side equality
FIT_TOLERANCE = 1e-12             # least_squares ftol/xtol/gtol

# Angles (degrees)
RIGHT_ANGLE = 90.0
STRAIGHT_ANGLE = 180.0

# Linear units, factor to meters
UNIT_TO_METERS = {
    "m": 1.0,
    "cm": 0.01,
    "ft": 0.3048,                 # 12" x 25.4 mm
    "in": 0.0254,
}
DEFAULT_UNIT = "m"

# Fields read by each congruence pattern, in display order
PATTERN_FIELDS = {
    "SSS": ("sideA", "sideB", "sideC"),
    "SAS": ("sideA", "angleB", "sideC"),
    "ASA": ("angleA", "sideC", "angleB"),
    "AAS": ("angleA", "angleB", "sideA"),
}
PATTERN_LABELS = {
    "SSS": "SSS (Side-Side-Side)",
    "SAS": "SAS (Side-Angle-Side)",
    "ASA": "ASA (Angle-Side-Angle)",
    "AAS": "AAS (Angle-Angle-Side)",
}
ALL_FIELDS = ("sideA", "sideB", "sideC", "angleA", "angleB", "angleC")

# Field name -> canonical key (side a/b/c, angle A/B/C)
SIDE_KEYS = {"sideA": "a", "sideB": "b", "sideC": "c"}
ANGLE_KEYS = {"angleA": "A", "angleB": "B", "angleC": "C"}
