"""Shared test fixtures for triangle solver tests."""
import pytest
from trisolve.solver import solve_triangle


@pytest.fixture(scope="session")
def right_345():
    """SSS 3-4-5 in meters."""
    return solve_triangle("SSS", {"sideA": 3, "sideB": 4, "sideC": 5}, "m")


@pytest.fixture(scope="session")
def right_345_ft():
    """SSS 3-4-5 in feet."""
    return solve_triangle("SSS", {"sideA": 3, "sideB": 4, "sideC": 5}, "ft")


@pytest.fixture(scope="session")
def equilateral():
    return solve_triangle("SSS", {"sideA": 5, "sideB": 5, "sideC": 5}, "m")


@pytest.fixture(scope="session")
def obtuse_sas():
    """SAS with a=10, B=30, c=3: angle A is obtuse."""
    return solve_triangle("SAS", {"sideA": 10, "angleB": 30, "sideC": 3}, "m")
