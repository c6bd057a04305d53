from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._boundary_condition import BoundaryCondition
from .._invalid_input_error import InvalidInputError

if TYPE_CHECKING:
    from ._grid import Grid


def boundary_select(
    grid: Grid,
    values: Union[Tensor, list],
    reduction: str = "select",
) -> Tensor:
    """
    Reduce per-node values to one value per basis function.

    Parameters
    ----------
    grid : Grid
        The grid the values live on.
    values : Tensor
        Either a table of shape (n_elements, order) holding one value per
        (element, node) pair, or a vector of shape
        (n_elements * (order - 1) + 1,) holding one value per global node
        in element-major order (every element contributes all of its nodes
        but the last, followed by the last node of the last element).
    reduction : str
        How a table is merged at nodes shared by two elements:

        - ``"select"``: keep the value of the element on the right. Use
          this for quantities that already agree at shared nodes, such as
          coordinates or normalization constants.
        - ``"sum"``: add both values. Use this for quadrature weights.

        Ignored for vectors, which are already merged.

    Returns
    -------
    Tensor
        One value per basis function, shape (basis_count,), in the order of
        :func:`locations`. Entries of removed endpoint nodes are dropped.

    Raises
    ------
    InvalidInputError
        If ``values`` has the wrong shape or ``reduction`` is unknown.
    """
    if reduction not in ("select", "sum"):
        raise InvalidInputError(
            f"reduction must be 'select' or 'sum', got '{reduction}'"
        )

    if not isinstance(values, Tensor):
        values = torch.as_tensor(
            values, dtype=grid.nodes.dtype, device=grid.nodes.device
        )

    n_elements, order = grid.nodes.shape
    n_nodes = n_elements * (order - 1) + 1

    if values.dim() == 2:
        if values.shape != grid.nodes.shape:
            raise InvalidInputError(
                f"Expected a table of shape {tuple(grid.nodes.shape)}, got "
                f"{tuple(values.shape)}"
            )
        values = _merge(values, reduction)
    elif values.dim() == 1:
        if values.shape[0] != n_nodes:
            raise InvalidInputError(
                f"Expected {n_nodes} per-node values, got {values.shape[0]}"
            )
    else:
        raise InvalidInputError(
            f"values must be 1-D or 2-D, got {values.dim()}-D"
        )

    return values[kept_nodes(grid)]


def kept_nodes(grid: Grid) -> slice:
    """Range of global node numbers that carry a basis function."""
    n_elements, order = grid.nodes.shape
    n_nodes = n_elements * (order - 1) + 1

    start = 0
    stop = n_nodes

    if grid.left_boundary == BoundaryCondition.REMOVE_ENDPOINT:
        start += 1
    if grid.right_boundary == BoundaryCondition.REMOVE_ENDPOINT:
        stop -= 1

    return slice(start, stop)


def _merge(table: Tensor, reduction: str) -> Tensor:
    order = table.shape[1]

    merged = torch.cat([table[:, :-1].reshape(-1), table[-1:, -1]])

    if reduction == "sum" and table.shape[0] > 1:
        # Global node (i + 1) * (order - 1) is the last node of element i.
        shared = slice(order - 1, merged.shape[0] - 1, order - 1)
        merged[shared] = merged[shared] + table[:-1, -1]

    return merged
