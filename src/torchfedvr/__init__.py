"""torchfedvr: finite-element DVR bases for PyTorch.

Construction
------------
grid
    Partition an interval into elements of Gauss-Lobatto nodes.
basis
    Build the FEDVR basis on a grid; the basis is callable.

Queries
-------
element_count, elements, order, basis_count, domain, locations, weights,
normalization, neighbors, basis_support, boundary_select, find_interval

Lagrange polynomials
--------------------
lagrange
    Evaluate a Lagrange interpolating polynomial.
lagrange_derivative
    Per-element differentiation matrices.
kronecker_delta
    Kronecker delta with ``None`` for a missing neighbour.

Operators
---------
project
    Expansion coefficients of a function.
derivative_operator
    First-derivative matrix in the basis.

Display
-------
describe, display_curves

Data Types
----------
Grid, Basis, BoundaryCondition

Exceptions
----------
FEDVRError
    Base exception.
ConfigurationError
    Invalid breakpoints, order, or boundary condition.
InvalidInputError
    Invalid evaluation or query input.
"""

from . import quadrature
from ._basis import Basis, basis, basis_evaluate, derivative_operator
from ._boundary_condition import BoundaryCondition, boundary_condition
from ._configuration_error import ConfigurationError
from ._display import describe, display_curves
from ._fedvr_error import FEDVRError
from ._grid import (
    Grid,
    basis_count,
    basis_support,
    boundary_select,
    domain,
    element_count,
    elements,
    find_interval,
    grid,
    locations,
    neighbors,
    normalization,
    order,
    weights,
)
from ._invalid_input_error import InvalidInputError
from ._lagrange import kronecker_delta, lagrange, lagrange_derivative
from ._projection import project

__all__ = [
    "Basis",
    "BoundaryCondition",
    "ConfigurationError",
    "FEDVRError",
    "Grid",
    "InvalidInputError",
    "basis",
    "basis_count",
    "basis_evaluate",
    "basis_support",
    "boundary_condition",
    "boundary_select",
    "derivative_operator",
    "describe",
    "display_curves",
    "domain",
    "element_count",
    "elements",
    "find_interval",
    "grid",
    "kronecker_delta",
    "lagrange",
    "lagrange_derivative",
    "locations",
    "neighbors",
    "normalization",
    "order",
    "project",
    "quadrature",
    "weights",
]

__version__ = "0.1.0"
