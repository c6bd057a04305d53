"""Tests for projection onto a FEDVR basis."""

import math

import pytest
import torch

from torchfedvr import (
    BoundaryCondition,
    InvalidInputError,
    basis,
    locations,
    normalization,
    project,
)

KEEP = BoundaryCondition.KEEP_ENDPOINT
REMOVE = BoundaryCondition.REMOVE_ENDPOINT


def _relative_distance(a, b):
    eps = torch.finfo(a.dtype).eps
    return (torch.linalg.norm(a - b) / torch.linalg.norm(a + eps)).item()


class TestProject:
    def test_quartic_reconstruction(self, breakpoints):
        b = basis(breakpoints, 5, KEEP, KEEP)
        x = torch.linspace(0, 1, 301, dtype=torch.float64)
        chi = b(x)

        def f(t):
            return t**3 - 7 * t**2 + t**4 + 2

        coefficients = project(f, b)

        assert coefficients.shape == (b.basis_count,)
        assert _relative_distance(f(x), chi @ coefficients) < 10 * (
            torch.finfo(torch.float64).eps
        )

    def test_vanishing_polynomial_with_removed_endpoints(self, breakpoints):
        b = basis(breakpoints, 5, REMOVE, REMOVE)
        x = torch.linspace(0, 1, 201, dtype=torch.float64)

        def f(t):
            return t * (1 - t) * (1 + 2 * t)

        coefficients = project(f, b)

        assert _relative_distance(f(x), b(x) @ coefficients) < 1e-13

    def test_coefficients(self, breakpoints):
        b = basis(breakpoints, 5, KEEP, REMOVE)

        coefficients = project(torch.cos, b)

        torch.testing.assert_close(
            coefficients, torch.cos(locations(b)) / normalization(b)
        )

    def test_convergence_with_order(self, breakpoints):
        x = torch.linspace(0, 1, 257, dtype=torch.float64)

        def f(t):
            return torch.sin(math.pi * t)

        errors = []
        for n in (3, 5, 7, 9):
            b = basis(breakpoints, n)
            errors.append(_relative_distance(f(x), b(x) @ project(f, b)))

        assert errors == sorted(errors, reverse=True)
        assert errors[-1] < 1e-9

    def test_convergence_with_elements(self):
        x = torch.linspace(0, 2, 257, dtype=torch.float64)

        def f(t):
            return torch.exp(-t) * torch.sin(3 * t)

        errors = []
        for count in (3, 6, 12, 24):
            breaks = torch.linspace(0, 2, count + 1, dtype=torch.float64)
            b = basis(breaks, 4, KEEP, KEEP)
            errors.append(_relative_distance(f(x), b(x) @ project(f, b)))

        assert errors == sorted(errors, reverse=True)

    def test_constant_function(self, breakpoints):
        b = basis(breakpoints, 4, KEEP, KEEP)
        x = torch.linspace(0, 1, 50, dtype=torch.float64)

        coefficients = project(lambda t: 3.0, b)

        torch.testing.assert_close(
            b(x) @ coefficients, torch.full_like(x, 3.0)
        )

    def test_wrong_shape(self, breakpoints):
        b = basis(breakpoints, 4)

        with pytest.raises(InvalidInputError, match="values"):
            project(lambda t: torch.zeros(3, dtype=torch.float64), b)
