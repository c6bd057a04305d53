from ._fedvr_error import FEDVRError


class ConfigurationError(FEDVRError):
    """Raised for invalid breakpoints, orders, or boundary conditions."""

    pass
