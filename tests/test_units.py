"""Tests for trisolve/units.py and unit invariance of solved shapes."""
import pytest
from trisolve.units import unit_factor, to_base, from_base, convert_length, rescale
from trisolve.solver import solve_triangle


def test_factors():
    assert unit_factor("m") == 1.0
    assert unit_factor("ft") == 0.3048
    assert unit_factor("in") == 0.0254


def test_unknown_unit():
    with pytest.raises(ValueError, match="Unknown unit"):
        unit_factor("furlong")


def test_to_from_base():
    assert abs(to_base(12, "in") - 0.3048) < 1e-12
    assert abs(from_base(1.0, "cm") - 100.0) < 1e-9


def test_convert_length_ft_to_in():
    assert abs(convert_length(2.0, "ft", "in") - 24.0) < 1e-9


class TestUnitInvariance:
    def test_same_shape_ft_and_m(self, right_345_ft):
        tri_m = solve_triangle("SSS", {"sideA": 0.9144, "sideB": 1.2192, "sideC": 1.524}, "m")
        for x, y in zip(right_345_ft.angles, tri_m.angles):
            assert abs(x - y) < 1e-9
        assert right_345_ft.classification == tri_m.classification
        for x_ft, x_m in zip(right_345_ft.sides, tri_m.sides):
            assert abs(convert_length(x_ft, "ft", "m") - x_m) < 1e-9

    def test_results_in_requested_unit(self, right_345_ft):
        assert right_345_ft.unit == "ft"
        assert abs(right_345_ft.sides.c - 5.0) < 1e-9
        assert abs(right_345_ft.area - 6.0) < 1e-9
        assert abs(right_345_ft.perimeter - 12.0) < 1e-9


class TestRescale:
    def test_area_uses_squared_factor(self, right_345):
        tri_cm = rescale(right_345, "cm")
        assert abs(tri_cm.area - 60000.0) < 1e-6
        assert abs(tri_cm.sides.a - 300.0) < 1e-9
        assert abs(tri_cm.altitudes.h_c - 240.0) < 1e-9

    def test_angles_and_classification_unchanged(self, right_345):
        tri_in = rescale(right_345, "in")
        assert tri_in.angles == right_345.angles
        assert tri_in.classification == right_345.classification
        assert tri_in.unit == "in"

    def test_rescale_back(self, right_345):
        back = rescale(rescale(right_345, "ft"), "m")
        assert abs(back.sides.c - 5.0) < 1e-12
