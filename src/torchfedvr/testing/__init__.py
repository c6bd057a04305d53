"""Testing utilities for torchfedvr."""

from . import strategies

__all__ = ["strategies"]
