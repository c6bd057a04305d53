from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

import torch
from torch import Tensor

from .._grid import find_interval
from .._grid._boundary_select import kept_nodes
from .._invalid_input_error import InvalidInputError
from .._lagrange import lagrange

if TYPE_CHECKING:
    from ._basis import Basis


def basis_evaluate(
    basis: Basis,
    x: Union[float, Sequence[float], Tensor],
) -> Tensor:
    """
    Evaluate every basis function at sorted samples.

    Parameters
    ----------
    basis : Basis
        The basis.
    x : float, sequence of float, or Tensor
        Samples, shape (n_samples,), sorted in ascending order.

    Returns
    -------
    Tensor
        Shape (n_samples, basis_count).

    Raises
    ------
    InvalidInputError
        If ``x`` is not a sorted 1-D sequence or contains NaN.

    Notes
    -----
    A single sweep walks the samples and the elements from left to right.
    Each sample is evaluated only in the element that owns it, so the row
    of a sample does not depend on the other samples: evaluating a
    contiguous slice of ``x`` reproduces the matching rows exactly.

    Both elements adjoining a shared node write into the same column,
    which makes the basis functions continuous across element boundaries.
    """
    g = basis.grid
    nodes = g.nodes

    x = torch.as_tensor(x, dtype=nodes.dtype, device=nodes.device)
    if x.dim() == 0:
        x = x.unsqueeze(0)

    if x.dim() != 1:
        raise InvalidInputError(
            f"x must be one-dimensional, got shape {tuple(x.shape)}"
        )
    if torch.any(torch.isnan(x)):
        raise InvalidInputError("x must not contain NaN")
    if torch.any(x[1:] < x[:-1]):
        raise InvalidInputError("x must be sorted in ascending order")

    result = torch.zeros(
        x.shape[0], basis.basis_count, dtype=nodes.dtype, device=nodes.device
    )

    order = nodes.shape[1]
    offset = kept_nodes(g).start
    column = (g.node_index - offset).tolist()

    selection = range(0, 0)

    for i in range(nodes.shape[0]):
        selection = find_interval(nodes, x, i, selection)

        if len(selection) == 0:
            continue

        rows = slice(selection.start, selection.stop)

        for m in range(order):
            j = column[i][m]

            if not 0 <= j < basis.basis_count:
                continue

            result[rows, j] = (
                lagrange(nodes[i], m, x[rows]) * g.normalization[i, m]
            )

    return result
