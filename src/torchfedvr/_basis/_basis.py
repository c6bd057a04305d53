"""FEDVR basis functions."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from .._boundary_condition import BoundaryCondition
from .._grid import Grid, basis_count, grid
from .._lagrange import lagrange_derivative


class Basis:
    """
    Continuous piecewise-polynomial basis built on a FEDVR grid.

    Basis function j is the normalized Lagrange polynomial of its node,
    joined across the element boundary when the node is shared by two
    elements. Calling the basis evaluates all functions at a sorted
    sample sequence.

    Parameters
    ----------
    grid : Grid
        The grid.

    Attributes
    ----------
    grid : Grid
        The grid.
    basis_count : int
        Number of basis functions.
    derivative_matrices : Tensor
        Per-element differentiation matrices from
        :func:`lagrange_derivative`, shape (n_elements, order, order).
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.basis_count = basis_count(grid)
        self.derivative_matrices = lagrange_derivative(grid)

    def __call__(self, x: Union[float, Sequence[float], Tensor]) -> Tensor:
        """
        Evaluate every basis function.

        Parameters
        ----------
        x : float, sequence of float, or Tensor
            Samples, shape (n_samples,), sorted in ascending order. They
            need not coincide with nodes and may lie outside the domain.

        Returns
        -------
        Tensor
            Shape (n_samples, basis_count). Entry ``[p, j]`` is basis
            function j at ``x[p]``. Rows of samples outside the domain are
            zero.

        Raises
        ------
        InvalidInputError
            If ``x`` is not a sorted 1-D sequence or contains NaN.
        """
        from ._basis_evaluate import basis_evaluate

        return basis_evaluate(self, x)


def basis(
    breakpoints: Union[Tensor, Sequence[float]],
    order: int,
    left_boundary: Union[
        BoundaryCondition, str
    ] = BoundaryCondition.REMOVE_ENDPOINT,
    right_boundary: Union[
        BoundaryCondition, str
    ] = BoundaryCondition.REMOVE_ENDPOINT,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Basis:
    """
    Build a FEDVR basis.

    Takes the same arguments as :func:`grid` and raises the same errors.

    Examples
    --------
    >>> import torch
    >>> from torchfedvr import basis
    >>> b = basis(torch.linspace(0, 1, 11, dtype=torch.float64), 5)
    >>> b(torch.linspace(0, 1, 101, dtype=torch.float64)).shape
    torch.Size([101, 39])
    """
    return Basis(
        grid(
            breakpoints,
            order,
            left_boundary,
            right_boundary,
            dtype=dtype,
            device=device,
        )
    )
