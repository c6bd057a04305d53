"""Boundary conditions at the two ends of a FEDVR domain."""

import enum

from ._configuration_error import ConfigurationError


class BoundaryCondition(str, enum.Enum):
    """Treatment of the basis function sitting on a domain endpoint.

    Attributes
    ----------
    KEEP_ENDPOINT
        The endpoint function is part of the basis, so expanded functions
        may take a nonzero value at that edge.
    REMOVE_ENDPOINT
        The endpoint function is dropped, so every expanded function
        vanishes at that edge.
    """

    KEEP_ENDPOINT = "keep"
    REMOVE_ENDPOINT = "remove"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _ALIASES.get(value.lower())
        return None


_ALIASES = {
    "keep": BoundaryCondition.KEEP_ENDPOINT,
    "remove": BoundaryCondition.REMOVE_ENDPOINT,
    "dirichlet0": BoundaryCondition.REMOVE_ENDPOINT,
    "dirichlet1": BoundaryCondition.KEEP_ENDPOINT,
}


def boundary_condition(value) -> BoundaryCondition:
    """Coerce ``value`` to a :class:`BoundaryCondition`.

    Raises
    ------
    ConfigurationError
        If ``value`` names neither boundary condition.
    """
    try:
        return BoundaryCondition(value)
    except ValueError:
        raise ConfigurationError(
            f"boundary condition must be one of "
            f"{[member.value for member in BoundaryCondition]}, "
            f"got {value!r}"
        ) from None
