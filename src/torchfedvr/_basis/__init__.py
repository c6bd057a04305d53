from ._basis import Basis, basis
from ._basis_evaluate import basis_evaluate
from ._derivative_operator import derivative_operator

__all__ = [
    "Basis",
    "basis",
    "basis_evaluate",
    "derivative_operator",
]
