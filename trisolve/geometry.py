"""Error types, trigonometry helpers, derived quantities, and formatting."""
import math

from .constants import EPSILON
from .types import Sides, Altitudes, Classification, Unit
from .units import convert_length

# ============================================================
# Error Types
# ============================================================
class SolveError(ValueError):
    """Raised when the given measurements cannot form a triangle."""
    default_message = "Invalid input for triangle calculation."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def kind(self) -> str:
        return type(self).__name__

class NonPositiveSide(SolveError):
    default_message = "Side lengths must be positive."

class InvalidAngleRange(SolveError):
    default_message = "Angles must be between 0 and 180 degrees."

class TriangleInequalityViolated(SolveError):
    default_message = "The given sides do not form a valid triangle (triangle inequality violated)."

class AngleSumExceeded(SolveError):
    default_message = "Sum of Angle A and Angle B must be less than 180 degrees."

class DegenerateTriangle(SolveError):
    default_message = "An angle is too close to 0 or 180 degrees, cannot form a triangle."

class InvalidTriangleGeometry(SolveError):
    default_message = ("Calculated values result in an invalid triangle (e.g., zero area). "
                       "Check input consistency.")

class InsufficientMeasurements(SolveError):
    default_message = "At least three measurements, including one side, are required."

# ============================================================
# Trigonometry Helpers
# ============================================================
def clamp_unit(x: float) -> float:
    """Clamp x to [-1, 1] so acos/asin never see rounding overshoot. NaN stays NaN."""
    if math.isnan(x):
        return x
    return max(-1.0, min(1.0, x))

def sin_deg(angle: float) -> float:
    return math.sin(math.radians(angle))

def cos_deg(angle: float) -> float:
    return math.cos(math.radians(angle))

def acos_deg(x: float) -> float:
    """Inverse cosine in degrees with a clamped argument."""
    return math.degrees(math.acos(clamp_unit(x)))

def law_of_cosines_angle(opposite: float, adj1: float, adj2: float) -> float:
    """Angle (degrees) opposite side *opposite*, between sides adj1 and adj2."""
    # sides scaled to the longest so squares stay finite for any float length
    m = max(opposite, adj1, adj2)
    o = opposite/m; p = adj1/m; q = adj2/m
    return acos_deg((p*p + q*q - o*o) / (2*p*q))

def law_of_cosines_side(adj1: float, adj2: float, included: float) -> float:
    """Side opposite the included angle (degrees) between sides adj1 and adj2."""
    m = max(adj1, adj2)
    p = adj1/m; q = adj2/m
    return m * math.sqrt(max(0.0, p*p + q*q - 2*p*q*cos_deg(included)))

# ============================================================
# Derived Quantities
# ============================================================
def heron_area(sides: Sides) -> float:
    """Area from three sides. NaN when the product under the root is negative.

    Computed on sides scaled to the longest, so only the final m*m factor
    can overflow (to inf, never OverflowError).
    """
    m = max(sides)
    if not m > 0:
        return math.nan
    a, b, c = (x/m for x in sides)
    s = (a + b + c) / 2
    prod = s * (s-a) * (s-b) * (s-c)
    return m * m * math.sqrt(prod) if prod >= 0 else math.nan

def altitudes(sides: Sides, area: float) -> Altitudes:
    """Heights onto sides a, b, c: h_X = 2*area / X."""
    return Altitudes(2*area/sides.a, 2*area/sides.b, 2*area/sides.c)

def rel_equal(x: float, y: float, tol: float = EPSILON) -> bool:
    """Relative comparison, scale-independent for lengths in any unit."""
    return abs(x - y) < tol * max(x, y, 1.0)

# ============================================================
# Formatting Helpers
# ============================================================
def display_value(value: float | None, precision: int = 2) -> str:
    """Round for display: '1,234.5' for 1234.5, 'N/A' for missing or NaN."""
    if value is None or math.isnan(value):
        return "N/A"
    s = f"{round(value, precision):,.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s == "-0" else s

def type_label(cls: Classification) -> str:
    """Combined label, e.g. 'Right Scalene'."""
    if cls.angle_type == "Invalid" or cls.side_type == "Invalid":
        return "Invalid Triangle"
    return f"{cls.angle_type} {cls.side_type}"

def fmt_ft_in(length: float, unit: Unit = "ft") -> str:
    """Feet-inches string for a length in *unit*, e.g. 2.5 ft -> 2' 6\"."""
    inches = round(convert_length(length, unit, "in"), 2)
    whole_ft, rem_in = divmod(inches, 12)
    in_str = f"{rem_in:.2f}".rstrip("0").rstrip(".")
    return f"{int(whole_ft)}' {in_str}\""
