from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from .._grid import Grid


def lagrange_derivative(grid: Grid) -> Tensor:
    r"""
    Per-element differentiation matrices of the Lagrange basis.

    Parameters
    ----------
    grid : Grid
        The grid.

    Returns
    -------
    Tensor
        Shape (n_elements, order, order). Entry ``[i, m, j]`` is
        :math:`L_m'(x_j)`, the derivative of the m-th Lagrange polynomial of
        element i at that element's j-th node. For samples ``c`` of a
        function at the nodes of element i, ``D[i].T @ c`` is the derivative
        of the interpolating polynomial at the same nodes.

    Notes
    -----
    With barycentric weights :math:`w_m = 1 / \prod_{k \neq m}(x_m - x_k)`,

    .. math::

        L_m'(x_j) = \frac{w_m}{w_j (x_j - x_m)}, \quad j \neq m

        L_m'(x_m) = \sum_{k \neq m} \frac{1}{x_m - x_k}

    The diagonal is the analytic limit of the product formula, which is
    0/0 at the defining node itself.
    """
    x = grid.nodes
    n = x.shape[-1]

    eye = torch.eye(n, dtype=torch.bool, device=x.device)

    # difference[i, a, b] = x[i, a] - x[i, b]
    difference = x.unsqueeze(-1) - x.unsqueeze(-2)
    off_diagonal = difference.masked_fill(eye, 1.0)

    # 1 / w
    inverse_weights = off_diagonal.prod(dim=-1)

    # ratio[i, m, j] = w_m / w_j
    ratio = inverse_weights.unsqueeze(-2) / inverse_weights.unsqueeze(-1)

    derivative = ratio / -off_diagonal

    diagonal = (1 / off_diagonal).masked_fill(eye, 0.0).sum(dim=-1)

    return torch.where(eye, torch.diag_embed(diagonal), derivative)
