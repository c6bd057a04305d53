class FEDVRError(Exception):
    """Base exception for FEDVR basis construction and evaluation."""

    pass
