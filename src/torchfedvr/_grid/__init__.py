from ._boundary_select import boundary_select
from ._find_interval import find_interval
from ._grid import Grid, grid
from ._grid_queries import (
    basis_count,
    basis_support,
    domain,
    element_count,
    elements,
    locations,
    neighbors,
    normalization,
    order,
    weights,
)

__all__ = [
    "Grid",
    "basis_count",
    "basis_support",
    "boundary_select",
    "domain",
    "element_count",
    "elements",
    "find_interval",
    "grid",
    "locations",
    "neighbors",
    "normalization",
    "order",
    "weights",
]
