import pytest

from torchfedvr import (
    BoundaryCondition,
    ConfigurationError,
    FEDVRError,
    InvalidInputError,
    boundary_condition,
)


class TestBoundaryCondition:
    def test_members(self):
        assert set(BoundaryCondition) == {
            BoundaryCondition.KEEP_ENDPOINT,
            BoundaryCondition.REMOVE_ENDPOINT,
        }

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("keep", BoundaryCondition.KEEP_ENDPOINT),
            ("remove", BoundaryCondition.REMOVE_ENDPOINT),
            ("KEEP", BoundaryCondition.KEEP_ENDPOINT),
            ("dirichlet0", BoundaryCondition.REMOVE_ENDPOINT),
            ("dirichlet1", BoundaryCondition.KEEP_ENDPOINT),
            (
                BoundaryCondition.KEEP_ENDPOINT,
                BoundaryCondition.KEEP_ENDPOINT,
            ),
        ],
    )
    def test_coercion(self, value, expected):
        assert boundary_condition(value) is expected

    @pytest.mark.parametrize("value", ["neumann", "", None, 0])
    def test_unrecognized(self, value):
        with pytest.raises(ConfigurationError, match="boundary condition"):
            boundary_condition(value)


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(FEDVRError, Exception)
        assert issubclass(ConfigurationError, FEDVRError)
        assert issubclass(InvalidInputError, FEDVRError)

    def test_configuration_error_can_be_raised(self):
        with pytest.raises(FEDVRError, match="order"):
            raise ConfigurationError("bad order")
