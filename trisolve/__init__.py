"""Triangle solver: types, normalizer, solver, classifier, and unit handling."""

from .types import (
    Pattern, Unit, Sides, Angles, Altitudes, Classification, CanonicalInput, Triangle,
)
from .geometry import (
    SolveError, NonPositiveSide, InvalidAngleRange, TriangleInequalityViolated,
    AngleSumExceeded, DegenerateTriangle, InvalidTriangleGeometry, InsufficientMeasurements,
    display_value, type_label, fmt_ft_in,
)
from .normalize import normalize_inputs, parse_field, active_fields, pattern_fields
from .solver import solve_base, derive_properties, solve_triangle
from .classify import classify
from .units import unit_factor, to_base, from_base, convert_length, rescale
from .adjust import AdjustResult, adjust_triangle
