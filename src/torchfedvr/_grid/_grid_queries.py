"""Read-only queries on a grid.

Every query accepts a :class:`Grid` or a :class:`Basis`; a basis is
resolved to the grid it was built on.
"""

from typing import List, Optional, Tuple

from torch import Tensor

from .._invalid_input_error import InvalidInputError
from ._boundary_select import boundary_select, kept_nodes
from ._grid import Grid


def _resolve_grid(obj) -> Grid:
    from .._basis._basis import Basis

    if isinstance(obj, Basis):
        return obj.grid
    return obj


def element_count(obj) -> int:
    """Number of elements."""
    return _resolve_grid(obj).nodes.shape[0]


def elements(obj) -> range:
    """Element indices in ascending order."""
    return range(element_count(obj))


def order(obj) -> int:
    """Number of quadrature nodes per element."""
    # tensorclass stores the order as a 0-d tensor
    return int(_resolve_grid(obj).order)


def basis_count(obj) -> int:
    """Number of basis functions.

    Every element contributes ``order`` nodes, the ``n_elements - 1``
    shared nodes are counted once, and each removed endpoint takes one
    more away.
    """
    selection = kept_nodes(_resolve_grid(obj))
    return selection.stop - selection.start


def domain(obj) -> Tuple[float, float]:
    """The ``(min, max)`` breakpoints."""
    breakpoints = _resolve_grid(obj).breakpoints
    return breakpoints[0].item(), breakpoints[-1].item()


def locations(obj) -> Tensor:
    """Coordinates of the basis functions, shape (basis_count,), ascending.

    A removed endpoint is absent, so the first (last) location lies strictly
    inside the domain; a kept endpoint appears as the exact breakpoint.
    """
    g = _resolve_grid(obj)
    return boundary_select(g, g.nodes, "select")


def weights(obj) -> Tensor:
    """Effective quadrature weight of every basis function.

    Weights of the two elements meeting at a shared node are added.
    """
    g = _resolve_grid(obj)
    return boundary_select(g, g.quadrature_weights, "sum")


def normalization(obj) -> Tensor:
    """Normalization constant of every basis function."""
    g = _resolve_grid(obj)
    return boundary_select(g, g.normalization, "select")


def neighbors(obj, element: int) -> Tuple[Optional[int], Optional[int]]:
    """Elements to the left and right of ``element``.

    ``None`` marks a side where the domain ends.
    """
    n_elements = element_count(obj)

    if not 0 <= element < n_elements:
        raise InvalidInputError(
            f"element must be in [0, {n_elements}), got {element}"
        )

    left = element - 1 if element > 0 else None
    right = element + 1 if element < n_elements - 1 else None

    return left, right


def basis_support(obj) -> List[Tuple[Tuple[int, int], ...]]:
    """The (element, node) pairs every basis function is built from.

    Returns
    -------
    list of tuple
        One entry per basis function, in the order of :func:`locations`.
        A function on a node shared by two elements has two pairs, the left
        element's last node followed by the right element's first node;
        every other function has a single pair.
    """
    g = _resolve_grid(obj)
    n_elements, n = g.nodes.shape
    stride = n - 1
    n_nodes = n_elements * stride + 1

    support = []

    for node in range(n_nodes)[kept_nodes(g)]:
        element, local = divmod(node, stride)

        if local == 0 and 0 < node < n_nodes - 1:
            support.append(((element - 1, stride), (element, 0)))
        elif element == n_elements:
            support.append(((element - 1, stride),))
        else:
            support.append(((element, local),))

    return support
