"""Projection of functions onto a FEDVR basis."""

from typing import Callable

import torch
from torch import Tensor

from ._basis import Basis
from ._grid import basis_count, locations, normalization
from ._invalid_input_error import InvalidInputError


def project(f: Callable[[Tensor], Tensor], basis: Basis) -> Tensor:
    r"""
    Expansion coefficients of a function in a FEDVR basis.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Scalar function, applied elementwise to a 1-D tensor of
        coordinates.
    basis : Basis
        The basis.

    Returns
    -------
    Tensor
        Coefficients, shape (basis_count,), such that
        ``basis(x) @ coefficients`` approximates ``f(x)``.

    Raises
    ------
    InvalidInputError
        If ``f`` does not return one value per coordinate.

    Notes
    -----
    Basis function j equals its normalization constant :math:`N_j` at its
    own node and vanishes at every other node, so collocation at the nodes
    gives the coefficients directly,

    .. math::

        \phi_j = f(x_j) / N_j

    and no linear system is solved. The expansion reproduces ``f`` up to
    rounding whenever ``f`` is a polynomial of degree < order on every
    element (and vanishes on removed endpoints).

    Examples
    --------
    >>> import torch
    >>> from torchfedvr import basis, project
    >>> b = basis(torch.linspace(0, 1, 11, dtype=torch.float64), 5)
    >>> coefficients = project(lambda x: torch.sin(torch.pi * x), b)
    >>> coefficients.shape
    torch.Size([39])
    """
    x = locations(basis)

    values = torch.as_tensor(f(x), dtype=x.dtype, device=x.device)

    if values.shape != x.shape:
        if values.numel() == 1:
            values = values.reshape(()).expand(x.shape)
        else:
            raise InvalidInputError(
                f"f must return {basis_count(basis)} values, got shape "
                f"{tuple(values.shape)}"
            )

    return values / normalization(basis)
