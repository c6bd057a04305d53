from ._fedvr_error import FEDVRError


class InvalidInputError(FEDVRError):
    """Raised for evaluation or query inputs that violate preconditions.

    The most common cause is a sample sequence that is not sorted in
    ascending order, which the element sweep relies on.
    """

    pass
