"""Node and weight computation for Gauss-Lobatto quadrature."""

import math
import warnings
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._exceptions import QuadratureWarning


def gauss_lobatto_nodes_weights(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
    max_iter: int = 100,
) -> Tuple[Tensor, Tensor]:
    r"""
    Compute Legendre-Gauss-Lobatto nodes and weights on [-1, 1].

    Parameters
    ----------
    n : int
        Number of quadrature points, including both endpoints.
    dtype : torch.dtype, optional
        Data type. Defaults to float64.
    device : torch.device, optional
        Device for output tensors.
    max_iter : int
        Maximum number of Newton iterations for the interior nodes.

    Returns
    -------
    nodes : Tensor
        Quadrature nodes, shape (n,), strictly ascending from -1 to 1.
    weights : Tensor
        Quadrature weights, shape (n,).

    Raises
    ------
    ValueError
        If n < 2.

    Warns
    -----
    QuadratureWarning
        If the Newton iteration did not converge within ``max_iter`` steps.

    Notes
    -----
    With :math:`N = n - 1`, the interior nodes are the roots of
    :math:`P'_N`, the derivative of the Legendre polynomial of degree
    :math:`N`. They are found by Newton's method started from the
    Chebyshev-Gauss-Lobatto points, using the Legendre differential
    equation for the second derivative:

    .. math::

        (1 - x^2) P''_N(x) = 2 x P'_N(x) - N (N + 1) P_N(x)

    The weights are

    .. math::

        w_i = \frac{2}{N (N + 1) P_N(x_i)^2}

    The rule is exact for polynomials of degree <= 2n - 3. The endpoints
    are returned as exactly -1 and 1.
    """
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")

    if dtype is None:
        dtype = torch.float64

    degree = n - 1

    if n == 2:
        return (
            torch.tensor([-1.0, 1.0], dtype=dtype, device=device),
            torch.tensor([1.0, 1.0], dtype=dtype, device=device),
        )

    j = torch.arange(n, dtype=dtype, device=device)
    x = -torch.cos(math.pi * j / degree)[1:-1]

    tol = 10 * torch.finfo(dtype).eps

    for _ in range(max_iter):
        p, p_prev = _legendre(degree, x)

        dp = degree * (x * p - p_prev) / (x**2 - 1)
        ddp = (2 * x * dp - degree * (degree + 1) * p) / (1 - x**2)

        delta = dp / ddp
        x = x - delta

        if torch.max(torch.abs(delta)) <= tol:
            break
    else:
        warnings.warn(
            f"Gauss-Lobatto node iteration for n={n} did not converge "
            f"within {max_iter} iterations",
            QuadratureWarning,
        )

    one = torch.ones(1, dtype=dtype, device=device)
    nodes = torch.cat([-one, x, one])

    p, _ = _legendre(degree, nodes)
    weights = 2 / (degree * (degree + 1) * p**2)

    return nodes, weights


def _legendre(degree: int, x: Tensor) -> Tuple[Tensor, Tensor]:
    """Evaluate P_degree and P_{degree-1} by the three-term recurrence."""
    p_prev = torch.ones_like(x)
    p = x.clone()

    for k in range(2, degree + 1):
        p_next = ((2 * k - 1) * x * p - (k - 1) * p_prev) / k
        p_prev = p
        p = p_next

    return p, p_prev
