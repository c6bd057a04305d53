"""Text and curve descriptions of grids and bases for display."""

from typing import List, Tuple

import torch
from torch import Tensor

from ._basis import Basis
from ._grid import Grid, basis_count, domain, element_count, order


def describe(obj) -> str:
    """Human-readable one-line summary of a :class:`Grid` or :class:`Basis`.

    Examples
    --------
    >>> import torch
    >>> from torchfedvr import describe, grid
    >>> g = grid(torch.linspace(0, 1, 11, dtype=torch.float64), 5)
    >>> describe(g)  # doctest: +ELLIPSIS
    'FEDVR Grid: 10 elements of order 5 on [0, 1], ...'
    """
    if isinstance(obj, Basis):
        kind = "Basis"
        g = obj.grid
    elif isinstance(obj, Grid):
        kind = "Grid"
        g = obj
    else:
        raise TypeError(
            f"Expected a Grid or Basis, got {type(obj).__name__}"
        )

    a, b = domain(g)

    return (
        f"FEDVR {kind}: {element_count(g)} elements of order {order(g)} "
        f"on [{a:g}, {b:g}], "
        f"left boundary {g.left_boundary.value}, "
        f"right boundary {g.right_boundary.value}, "
        f"{basis_count(g)} basis functions"
    )


def display_curves(
    obj,
    samples_per_element: int = 50,
) -> List[Tuple[Tensor, Tensor]]:
    """
    Curves of every basis function, for plotting.

    Parameters
    ----------
    obj : Grid or Basis
        The grid (a basis is built on it) or basis to draw.
    samples_per_element : int
        Number of uniform samples per element; the domain is sampled at
        ``samples_per_element * n_elements + 1`` points.

    Returns
    -------
    list of tuple of Tensor
        One ``(x, y)`` pair per basis function, in the order of
        :func:`locations`. All pairs share the same ``x``.
    """
    if isinstance(obj, Grid):
        obj = Basis(obj)

    if samples_per_element < 1:
        raise ValueError(
            f"samples_per_element must be at least 1, got "
            f"{samples_per_element}"
        )

    a, b = domain(obj)
    nodes = obj.grid.nodes

    x = torch.linspace(
        a,
        b,
        samples_per_element * element_count(obj) + 1,
        dtype=nodes.dtype,
        device=nodes.device,
    )
    y = obj(x)

    return [(x, y[:, j]) for j in range(basis_count(obj))]
