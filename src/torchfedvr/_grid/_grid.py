"""Finite-element grid of Gauss-Lobatto nodes."""

from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._boundary_condition import BoundaryCondition, boundary_condition
from .._configuration_error import ConfigurationError
from ..quadrature import gauss_lobatto_nodes_weights


@tensorclass
class Grid:
    """Partition of an interval into elements carrying quadrature nodes.

    Grids built by :func:`grid` are locked: fields cannot be reassigned.
    Tensors must not be edited in place either, since a :class:`Basis`
    caches quantities derived from them.

    Attributes
    ----------
    breakpoints : Tensor
        Element boundaries, shape (n_elements + 1,). Strictly increasing.
    nodes : Tensor
        Node coordinates, shape (n_elements, order). The last node of
        element i is the first node of element i + 1, bit for bit.
    quadrature_weights : Tensor
        Quadrature weights matching ``nodes``, shape (n_elements, order).
    normalization : Tensor
        Normalization constants matching ``nodes``, shape
        (n_elements, order). ``1 / sqrt(w)`` at element-interior nodes and
        ``1 / sqrt(w_left + w_right)`` at nodes shared by two elements.
    node_index : Tensor
        Global node number of every (element, node) pair, shape
        (n_elements, order). Shared nodes receive a single number, so the
        numbers run from 0 to ``n_elements * (order - 1)``.
    order : int
        Number of quadrature nodes per element. Stored as a 0-d tensor;
        use :func:`order` for a Python int.
    left_boundary : BoundaryCondition
        Treatment of the first global node.
    right_boundary : BoundaryCondition
        Treatment of the last global node.
    """

    breakpoints: Tensor
    nodes: Tensor
    quadrature_weights: Tensor
    normalization: Tensor
    node_index: Tensor
    order: int
    left_boundary: BoundaryCondition
    right_boundary: BoundaryCondition


def grid(
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
) -> Grid:
    """
    Build a FEDVR grid.

    Parameters
    ----------
    breakpoints : Tensor or sequence of float
        Element boundaries, shape (n_elements + 1,). Must be strictly
        increasing and contain at least two points.
    order : int
        Number of Gauss-Lobatto nodes per element. Must be at least 2.
    left_boundary, right_boundary : BoundaryCondition or str
        Whether the basis function on the respective domain endpoint is
        kept or removed. Defaults to removing both, i.e. expanded
        functions vanish at the domain edges.
    dtype : torch.dtype, optional
        Floating point type. Defaults to the dtype of a floating
        ``breakpoints`` tensor, otherwise float64.
    device : torch.device, optional
        Device for all tables.

    Returns
    -------
    Grid
        The grid.

    Raises
    ------
    ConfigurationError
        If the breakpoints are not a strictly increasing, finite 1-D
        sequence of at least two points, if ``order`` is not an integer
        >= 2, or if a boundary condition is not recognized.

    Examples
    --------
    >>> import torch
    >>> from torchfedvr import grid, basis_count
    >>> g = grid(torch.linspace(0, 1, 11, dtype=torch.float64), 5)
    >>> basis_count(g)
    39
    """
    left_boundary = boundary_condition(left_boundary)
    right_boundary = boundary_condition(right_boundary)

    if isinstance(order, bool) or not isinstance(order, int):
        raise ConfigurationError(
            f"order must be an integer, got {type(order).__name__}"
        )
    if order < 2:
        raise ConfigurationError(f"order must be at least 2, got {order}")

    if dtype is None:
        if isinstance(breakpoints, Tensor) and breakpoints.is_floating_point():
            dtype = breakpoints.dtype
        else:
            dtype = torch.float64

    breakpoints = torch.as_tensor(breakpoints, dtype=dtype, device=device)

    if breakpoints.dim() != 1:
        raise ConfigurationError(
            f"breakpoints must be one-dimensional, got shape "
            f"{tuple(breakpoints.shape)}"
        )
    if breakpoints.shape[0] < 2:
        raise ConfigurationError(
            f"Need at least 2 breakpoints, got {breakpoints.shape[0]}"
        )
    if not torch.all(torch.isfinite(breakpoints)):
        raise ConfigurationError("breakpoints must be finite")
    if torch.any(breakpoints[1:] == breakpoints[:-1]):
        raise ConfigurationError(
            "breakpoints contain duplicates, which would create "
            "zero-length elements"
        )
    if not torch.all(breakpoints[1:] > breakpoints[:-1]):
        raise ConfigurationError("breakpoints must be strictly increasing")

    n_elements = breakpoints.shape[0] - 1

    xi, w = gauss_lobatto_nodes_weights(
        order, dtype=dtype, device=breakpoints.device
    )

    a = breakpoints[:-1].unsqueeze(-1)
    b = breakpoints[1:].unsqueeze(-1)
    half = (b - a) / 2

    nodes = a + half * (xi + 1)
    # Element endpoints come straight from the breakpoints so that
    # neighbouring elements share them exactly.
    nodes[:, 0] = breakpoints[:-1]
    nodes[:, -1] = breakpoints[1:]

    quadrature_weights = half * w

    normalization = 1 / torch.sqrt(quadrature_weights)
    if n_elements > 1:
        shared = 1 / torch.sqrt(
            quadrature_weights[:-1, -1] + quadrature_weights[1:, 0]
        )
        normalization[:-1, -1] = shared
        normalization[1:, 0] = shared

    element = torch.arange(
        n_elements, dtype=torch.int64, device=breakpoints.device
    )
    local = torch.arange(order, dtype=torch.int64, device=breakpoints.device)
    node_index = element.unsqueeze(-1) * (order - 1) + local

    result = Grid(
        breakpoints=breakpoints,
        nodes=nodes,
        quadrature_weights=quadrature_weights,
        normalization=normalization,
        node_index=node_index,
        order=order,
        left_boundary=left_boundary,
        right_boundary=right_boundary,
        batch_size=[],
    )
    result.lock_()

    return result
