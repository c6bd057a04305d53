from typing import Union

import torch
from torch import Tensor

from .._invalid_input_error import InvalidInputError


def lagrange(
    nodes: Tensor,
    m: int,
    x: Union[float, Tensor],
) -> Tensor:
    r"""
    Evaluate a Lagrange interpolating polynomial.

    Parameters
    ----------
    nodes : Tensor
        Distinct interpolation nodes, shape (n,).
    m : int
        Index of the node at which the polynomial is one.
    x : float or Tensor
        Evaluation point(s), any shape.

    Returns
    -------
    Tensor
        :math:`L_m(x)`, same shape as ``x``.

    Raises
    ------
    InvalidInputError
        If ``m`` is not a valid node index.

    Notes
    -----
    Uses the product form

    .. math::

        L_m(x) = \prod_{k \neq m} \frac{x - x_k}{x_m - x_k}

    one factor at a time, so that ``lagrange(nodes, m, nodes[m])`` is
    exactly 1 and ``lagrange(nodes, m, nodes[j])`` is exactly 0 for
    ``j != m``. The result at each point depends on that point alone.
    """
    n = nodes.shape[0]

    if not 0 <= m < n:
        raise InvalidInputError(f"m must be in [0, {n}), got {m}")

    x = torch.as_tensor(x, dtype=nodes.dtype, device=nodes.device)

    result = torch.ones_like(x)

    for k in range(n):
        if k == m:
            continue
        result = result * ((x - nodes[k]) / (nodes[m] - nodes[k]))

    return result
