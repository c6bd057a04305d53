from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._grid._boundary_select import kept_nodes

if TYPE_CHECKING:
    from ._basis import Basis


def derivative_operator(basis: Basis) -> Tensor:
    r"""
    First-derivative operator in the basis.

    Parameters
    ----------
    basis : Basis
        The basis.

    Returns
    -------
    Tensor
        Shape (basis_count, basis_count). Entry ``[a, b]`` is the quadrature
        approximation of :math:`\int \chi_a(x) \chi_b'(x) dx`.

    Notes
    -----
    With the Gauss-Lobatto rule of the grid, element e contributes

    .. math::

        w_{e,i} N_{e,i} N_{e,j} L_{e,j}'(x_{e,i})

    to the entry of the functions carried by its local nodes i and j. The
    element blocks are summed into the global matrix through the global
    node numbers, so a shared node collects the contributions of both of
    its elements, and rows and columns of removed endpoints are dropped.

    Applied to the coefficients of :func:`project`, the operator returns the
    coefficients of the derivative whenever the function is a polynomial of
    degree < order on every element and continuous. With both endpoints
    removed the operator is antisymmetric.

    The result is differentiable with respect to the breakpoints and lives
    on the device of the grid.
    """
    g = basis.grid
    count = basis.basis_count

    w = g.quadrature_weights
    normalization = g.normalization

    # local[e, i, j] = w[e, i] N[e, i] N[e, j] D[e, j, i]
    local = (
        (w * normalization).unsqueeze(-1)
        * normalization.unsqueeze(-2)
        * basis.derivative_matrices.transpose(-1, -2)
    )

    # Global function number of every (element, node) pair
    index = g.node_index - kept_nodes(g).start
    valid = (index >= 0) & (index < count)

    rows = index.unsqueeze(-1).expand_as(local)
    columns = index.unsqueeze(-2).expand_as(local)
    mask = valid.unsqueeze(-1) & valid.unsqueeze(-2)

    result = torch.zeros(
        count,
        count,
        dtype=local.dtype,
        device=local.device,
    )

    return result.index_put(
        (rows[mask], columns[mask]),
        local[mask],
        accumulate=True,
    )
