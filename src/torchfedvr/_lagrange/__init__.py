from ._kronecker_delta import kronecker_delta
from ._lagrange import lagrange
from ._lagrange_derivative import lagrange_derivative

__all__ = [
    "kronecker_delta",
    "lagrange",
    "lagrange_derivative",
]
