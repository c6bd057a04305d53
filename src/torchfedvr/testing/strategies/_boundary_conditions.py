import hypothesis.strategies

from torchfedvr._boundary_condition import BoundaryCondition


def boundary_conditions() -> hypothesis.strategies.SearchStrategy[
    BoundaryCondition
]:
    """Strategy for boundary conditions."""
    return hypothesis.strategies.sampled_from(list(BoundaryCondition))
