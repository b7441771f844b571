"""
Least-squares adjustment of a triangle to an over-determined set of measurements.

Field measurements of all six values (or any mix of at least three that
includes a side) rarely agree exactly. The three sides are adjusted to
minimise the residuals of every measurement, then the fitted sides are
solved as SSS like any other input.
"""
import logging
import math
from typing import NamedTuple

import numpy as np
from scipy.optimize import least_squares

from .constants import ALL_FIELDS, SIDE_KEYS, ANGLE_KEYS, FIT_TOLERANCE, DEFAULT_UNIT
from .types import Triangle, CanonicalInput, Unit
from .geometry import InsufficientMeasurements, law_of_cosines_angle
from .normalize import parse_field
from .solver import solve_base, derive_properties
from .units import to_base, from_base, rescale

logger = logging.getLogger(__name__)

_SIDE_ORDER = ("a", "b", "c")


class AdjustResult(NamedTuple):
    triangle: Triangle
    residuals: dict[str, float]   # fitted - observed; sides in unit, angles in degrees
    rms: float                    # RMS of side-weighted residuals, in unit


def _angles_of(x) -> dict[str, float]:
    a, b, c = x
    return {"A": law_of_cosines_angle(a, b, c),
            "B": law_of_cosines_angle(b, a, c),
            "C": law_of_cosines_angle(c, a, b)}


def adjust_triangle(fields: dict, unit: Unit = DEFAULT_UNIT) -> AdjustResult:
    """Fit sides a, b, c to every usable measurement in *fields*.

    Angle residuals are converted to arc length at the mean measured side
    so that sides and angles weigh comparably. Raises
    InsufficientMeasurements when fewer than three values parse or no
    side is among them; a fit that cannot close raises the same
    SolveError an SSS solve would.
    """
    obs_sides, obs_angles = {}, {}
    for name in ALL_FIELDS:
        x = parse_field(fields.get(name))
        if x is None:
            continue
        if name in SIDE_KEYS:
            obs_sides[SIDE_KEYS[name]] = to_base(x, unit)
        else:
            obs_angles[ANGLE_KEYS[name]] = x
    if len(obs_sides) + len(obs_angles) < 3 or not obs_sides:
        raise InsufficientMeasurements()

    scale = float(np.mean(list(obs_sides.values())))
    if not scale > 0:
        raise InsufficientMeasurements("Measured sides must be positive.")

    def residuals(x):
        res = [x[_SIDE_ORDER.index(k)] - v for k, v in obs_sides.items()]
        ang = _angles_of(x)
        res += [math.radians(ang[k] - v) * scale for k, v in obs_angles.items()]
        return np.array(res)

    x0 = np.array([obs_sides.get(k, scale) for k in _SIDE_ORDER])
    x0 = np.maximum(x0, scale * 1e-3)
    result = least_squares(residuals, x0, bounds=(scale * 1e-9, np.inf),
                           ftol=FIT_TOLERANCE, xtol=FIT_TOLERANCE, gtol=FIT_TOLERANCE)
    logger.debug(f"adjust: {result.nfev} evaluations, cost={result.cost:.3g}, x={result.x}")

    fitted = CanonicalInput(sides=dict(zip(_SIDE_ORDER, map(float, result.x))), angles={})
    sides, angles = solve_base("SSS", fitted)
    tri = rescale(derive_properties(sides, angles), unit)

    final = {}
    for k, v in obs_sides.items():
        final[f"side{k.upper()}"] = from_base(getattr(sides, k) - v, unit)
    for k, v in obs_angles.items():
        final[f"angle{k}"] = getattr(angles, k) - v
    rms = from_base(math.sqrt(np.mean(result.fun**2)), unit)
    return AdjustResult(triangle=tri, residuals=final, rms=rms)
