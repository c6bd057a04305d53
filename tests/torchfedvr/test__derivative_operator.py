import pytest
import torch
from hypothesis import given, settings

from torchfedvr import (
    BoundaryCondition,
    basis,
    derivative_operator,
    normalization,
    project,
)
from torchfedvr.testing.strategies import available_devices

KEEP = BoundaryCondition.KEEP_ENDPOINT
REMOVE = BoundaryCondition.REMOVE_ENDPOINT


class TestDerivativeOperator:
    def test_shape(self, breakpoints):
        b = basis(breakpoints, 5)

        assert derivative_operator(b).shape == (39, 39)

    def test_banded(self, breakpoints):
        b = basis(breakpoints, 5, KEEP, KEEP)
        d = derivative_operator(b)

        a, c = torch.meshgrid(
            torch.arange(b.basis_count),
            torch.arange(b.basis_count),
            indexing="ij",
        )

        assert torch.count_nonzero(d[(a - c).abs() >= 5]) == 0

    def test_differentiates_polynomial(self, breakpoints):
        b = basis(breakpoints, 5, KEEP, KEEP)

        coefficients = project(lambda x: x**4 + x, b)
        expected = project(lambda x: 4 * x**3 + 1, b)

        torch.testing.assert_close(
            derivative_operator(b) @ coefficients,
            expected,
            atol=1e-10,
            rtol=1e-10,
        )

    def test_differentiates_with_removed_endpoints(self, breakpoints):
        b = basis(breakpoints, 5, REMOVE, REMOVE)

        coefficients = project(lambda x: x - x**4, b)
        expected = project(lambda x: 1 - 4 * x**3, b)

        torch.testing.assert_close(
            derivative_operator(b) @ coefficients,
            expected,
            atol=1e-10,
            rtol=1e-10,
        )

    def test_antisymmetric_with_removed_endpoints(self, breakpoints):
        b = basis(breakpoints, 6, REMOVE, REMOVE)
        d = derivative_operator(b)

        torch.testing.assert_close(
            d + d.T, torch.zeros_like(d), atol=1e-10, rtol=0
        )

    def test_boundary_terms_with_kept_endpoints(self, breakpoints):
        b = basis(breakpoints, 4, KEEP, KEEP)
        d = derivative_operator(b)
        n = normalization(b)

        expected = torch.zeros_like(d)
        expected[0, 0] = -n[0] ** 2
        expected[-1, -1] = n[-1] ** 2

        torch.testing.assert_close(d + d.T, expected, atol=1e-10, rtol=0)

    @pytest.mark.parametrize("n", [2, 3])
    def test_low_order(self, n):
        b = basis([0.0, 0.5, 1.0, 2.0], n, KEEP, KEEP)

        coefficients = project(lambda x: 3 * x - 1, b)
        expected = project(lambda x: torch.full_like(x, 3.0), b)

        torch.testing.assert_close(
            derivative_operator(b) @ coefficients, expected
        )

    def test_empty_basis(self):
        b = basis([0.0, 1.0], 2)

        assert derivative_operator(b).shape == (0, 0)

    def test_differentiable_in_breakpoints(self):
        points = torch.linspace(0, 1, 5, dtype=torch.float64)
        points.requires_grad_()

        d = derivative_operator(basis(points, 4, KEEP, KEEP))

        assert d.requires_grad

        d.diagonal().sum().backward()

        assert points.grad is not None
        assert torch.all(torch.isfinite(points.grad))

    @given(device=available_devices())
    @settings(max_examples=5, deadline=None)
    def test_device(self, device):
        b = basis([0.0, 0.5, 1.0], 4, KEEP, KEEP, device=device)
        d = derivative_operator(b)

        assert d.device.type == device

        coefficients = project(lambda x: x**3, b)
        expected = project(lambda x: 3 * x**2, b)

        torch.testing.assert_close(d @ coefficients, expected)
