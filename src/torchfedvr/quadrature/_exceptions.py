"""Exceptions for quadrature rules."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., slow convergence)."""

    pass
