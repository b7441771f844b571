"""Tests for trisolve/solver.py: per-pattern solving, rejection, and derived properties."""
import math
import pytest
from trisolve.solver import solve_triangle, solve_base, derive_properties
from trisolve.geometry import (
    NonPositiveSide, InvalidAngleRange, TriangleInequalityViolated,
    AngleSumExceeded, DegenerateTriangle, InvalidTriangleGeometry,
)
from trisolve.types import Triangle, Sides, Angles, CanonicalInput


class TestSSS:
    def test_returns_triangle(self, right_345):
        assert isinstance(right_345, Triangle)
        assert right_345.unit == "m"

    def test_right_angle_opposite_longest_side(self, right_345):
        assert abs(right_345.angles.C - 90.0) < 1e-9
        assert abs(right_345.angles.A - math.degrees(math.atan2(3, 4))) < 1e-9

    def test_area_perimeter(self, right_345):
        assert abs(right_345.area - 6.0) < 1e-9
        assert abs(right_345.perimeter - 12.0) < 1e-12

    def test_altitudes(self, right_345):
        assert abs(right_345.altitudes.h_a - 4.0) < 1e-9
        assert abs(right_345.altitudes.h_b - 3.0) < 1e-9
        assert abs(right_345.altitudes.h_c - 2.4) < 1e-9

    def test_string_inputs(self):
        tri = solve_triangle("SSS", {"sideA": "3", "sideB": " 4 ", "sideC": "5.0"})
        assert abs(tri.area - 6.0) < 1e-9

    def test_triangle_inequality(self):
        with pytest.raises(TriangleInequalityViolated, match="triangle inequality"):
            solve_triangle("SSS", {"sideA": 1, "sideB": 1, "sideC": 5})

    def test_flat_triangle_rejected(self):
        with pytest.raises(TriangleInequalityViolated):
            solve_triangle("SSS", {"sideA": 1, "sideB": 2, "sideC": 3})

    def test_zero_side(self):
        with pytest.raises(NonPositiveSide, match="positive"):
            solve_triangle("SSS", {"sideA": 0, "sideB": 4, "sideC": 5})


class TestSAS:
    def test_included_angle_right(self):
        tri = solve_triangle("SAS", {"sideA": 3, "angleB": 90, "sideC": 4})
        assert abs(tri.sides.b - 5.0) < 1e-9
        assert abs(tri.angles.B - 90.0) < 1e-12

    def test_obtuse_opposite_angle(self, obtuse_sas):
        # b^2 = 100 + 9 - 60 cos30; a^2 > b^2 + c^2 so A is obtuse
        assert obtuse_sas.angles.A > 90.0
        assert obtuse_sas.classification.angle_type == "Obtuse"
        assert abs(sum(obtuse_sas.angles) - 180.0) < 1e-6

    def test_negative_side(self):
        with pytest.raises(NonPositiveSide):
            solve_triangle("SAS", {"sideA": -1, "angleB": 60, "sideC": 5})

    def test_vanishing_included_angle(self):
        with pytest.raises(DegenerateTriangle):
            solve_triangle("SAS", {"sideA": 1, "angleB": 1e-12, "sideC": 1})

    @pytest.mark.parametrize("B", [0, 180, -10, 200])
    def test_angle_out_of_range(self, B):
        with pytest.raises(InvalidAngleRange, match="Angle B"):
            solve_triangle("SAS", {"sideA": 3, "angleB": B, "sideC": 4})


class TestASA:
    def test_matches_sss(self, right_345):
        A, B, _ = right_345.angles
        tri = solve_triangle("ASA", {"angleA": A, "sideC": 5, "angleB": B})
        for x, y in zip(tri.sides, right_345.sides):
            assert abs(x - y) < 1e-9

    def test_angle_sum_exceeded(self):
        with pytest.raises(AngleSumExceeded):
            solve_triangle("ASA", {"angleA": 100, "sideC": 5, "angleB": 80})

    def test_near_straight_rejected_before_division(self):
        with pytest.raises((AngleSumExceeded, DegenerateTriangle)):
            solve_triangle("ASA", {"angleA": 90, "sideC": 1, "angleB": 90 - 1e-12})

    def test_angle_out_of_range(self):
        with pytest.raises(InvalidAngleRange):
            solve_triangle("ASA", {"angleA": 0, "sideC": 5, "angleB": 60})

    def test_nonpositive_side(self):
        with pytest.raises(NonPositiveSide, match="Side length"):
            solve_triangle("ASA", {"angleA": 30, "sideC": 0, "angleB": 60})


class TestAAS:
    def test_matches_asa(self):
        asa = solve_triangle("ASA", {"angleA": 40, "sideC": 7, "angleB": 65})
        aas = solve_triangle("AAS", {"angleA": 40, "angleB": 65, "sideA": asa.sides.a})
        for x, y in zip(aas.sides, asa.sides):
            assert abs(x - y) < 1e-9

    def test_30_60_90(self):
        tri = solve_triangle("AAS", {"angleA": 30, "angleB": 60, "sideA": 1})
        assert abs(tri.sides.b - math.sqrt(3)) < 1e-9
        assert abs(tri.sides.c - 2.0) < 1e-9
        assert tri.classification.angle_type == "Right"

    def test_angle_sum_exceeded(self):
        with pytest.raises(AngleSumExceeded):
            solve_triangle("AAS", {"angleA": 120, "angleB": 60, "sideA": 1})


class TestAngleSum:
    @pytest.mark.parametrize("pattern,fields", [
        ("SSS", {"sideA": 7, "sideB": 9, "sideC": 12}),
        ("SAS", {"sideA": 7, "angleB": 110, "sideC": 2}),
        ("ASA", {"angleA": 20, "sideC": 3, "angleB": 35}),
        ("AAS", {"angleA": 95, "angleB": 15, "sideA": 11}),
    ])
    def test_sum_is_180(self, pattern, fields):
        tri = solve_triangle(pattern, fields, "cm")
        assert abs(sum(tri.angles) - 180.0) < 1e-6
        assert all(x > 0 for x in tri.sides)
        assert tri.area > 0


class TestPipeline:
    def test_incomplete_returns_none(self):
        assert solve_triangle("SSS", {"sideA": 3, "sideB": 4}) is None
        assert solve_triangle("SAS", {"sideA": 3, "angleB": "", "sideC": 4}) is None

    def test_unused_fields_ignored(self):
        tri = solve_triangle("SSS", {"sideA": 3, "sideB": 4, "sideC": 5, "angleA": "junk"})
        assert tri is not None

    def test_unknown_pattern(self):
        with pytest.raises(ValueError, match="Unknown pattern"):
            solve_triangle("SSA", {"sideA": 3, "sideB": 4, "angleA": 30})

    def test_idempotent(self):
        f = {"sideA": 7, "angleB": 48, "sideC": 9}
        assert solve_triangle("SAS", f, "in") == solve_triangle("SAS", f, "in")


class TestDeriveProperties:
    def test_zero_area_rejected(self):
        with pytest.raises(InvalidTriangleGeometry):
            derive_properties(Sides(1.0, 1.0, 2.0), Angles(0.0, 0.0, 180.0))

    def test_base_units(self):
        sides, angles = solve_base("SSS", CanonicalInput({"a": 3.0, "b": 4.0, "c": 5.0}, {}))
        tri = derive_properties(sides, angles)
        assert tri.unit == "m"
        assert tri.classification.side_type == "Scalene"


class TestExtremeMagnitudes:
    def test_huge_finite_sides_solve(self):
        tri = solve_triangle("SSS", {"sideA": 1e100, "sideB": 1e100, "sideC": 1e100})
        for x in tri.angles:
            assert abs(x - 60.0) < 1e-9
        assert math.isfinite(tri.area)
        assert abs(tri.area / (math.sqrt(3) / 4 * 1e200) - 1.0) < 1e-12
        assert all(math.isfinite(h) for h in tri.altitudes)
        assert tri.classification.side_type == "Equilateral"

    def test_area_overflow_rejected(self):
        with pytest.raises(InvalidTriangleGeometry):
            solve_triangle("SSS", {"sideA": 1e200, "sideB": 1e200, "sideC": 1e200})

    def test_huge_sas(self):
        tri = solve_triangle("SAS", {"sideA": 3e150, "angleB": 90, "sideC": 4e150})
        assert abs(tri.sides.b / 5e150 - 1.0) < 1e-12
        assert abs(tri.angles.B - 90.0) < 1e-12

    def test_area_overflow_in_display_unit_rejected(self):
        # finite in m^2, overflows once divided by 0.01^2
        with pytest.raises(InvalidTriangleGeometry, match="cm"):
            solve_triangle("SSS", {"sideA": 3e154, "sideB": 3e154, "sideC": 3e154}, "cm")
