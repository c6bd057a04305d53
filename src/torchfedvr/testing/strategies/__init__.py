"""Hypothesis strategies for FEDVR testing."""

from ._available_devices import available_devices
from ._boundary_conditions import boundary_conditions
from ._breakpoints import breakpoints
from ._orders import orders

__all__ = [
    # Grid strategies
    "breakpoints",
    "orders",
    "boundary_conditions",
    # Device strategies
    "available_devices",
]
