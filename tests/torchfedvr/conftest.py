"""Test fixtures for torchfedvr tests."""

import pytest
import torch


@pytest.fixture
def breakpoints():
    """Eleven evenly spaced breakpoints on [0, 1]."""
    return torch.linspace(0, 1, 11, dtype=torch.float64)
