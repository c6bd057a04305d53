import torch
from torch import Tensor

from .._invalid_input_error import InvalidInputError


def find_interval(
    nodes: Tensor,
    x: Tensor,
    element: int,
    previous: range,
) -> range:
    """
    Locate the samples falling into one element.

    Intended to be called for elements 0, 1, 2, ... in turn while sweeping
    a sorted sample sequence from left to right, passing the range found
    for the previous element each time.

    Parameters
    ----------
    nodes : Tensor
        Node table of a grid, shape (n_elements, order).
    x : Tensor
        Samples, shape (n_samples,). Must be sorted in ascending order;
        this is not checked here.
    element : int
        Element index.
    previous : range
        Range returned for the previous element of the sweep, or
        ``range(0, 0)`` to start a sweep.

    Returns
    -------
    range
        Indices of the samples inside the element. Elements are half-open,
        ``[left, right)``, except the last one which also includes its right
        endpoint. The range is empty if no sample falls inside.

    Raises
    ------
    InvalidInputError
        If ``element`` is out of range.

    Notes
    -----
    The search only looks at ``x[previous.start:]``, so a full sweep over
    all elements never moves backwards through the samples.
    """
    n_elements = nodes.shape[0]

    if not 0 <= element < n_elements:
        raise InvalidInputError(
            f"element must be in [0, {n_elements}), got {element}"
        )

    start = previous.start
    tail = x[start:]

    last = element == n_elements - 1

    left = nodes[element, :1].to(x.dtype)
    right = nodes[element, -1:].to(x.dtype)

    lo = start + int(torch.searchsorted(tail, left).item())
    hi = start + int(torch.searchsorted(tail, right, right=last).item())

    return range(lo, max(lo, hi))
