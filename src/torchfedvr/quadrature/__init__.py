"""
Quadrature rules underlying the FEDVR grid.

Node/weight computation:
    gauss_lobatto_nodes_weights

Warnings:
    QuadratureWarning
"""

from torchfedvr.quadrature._exceptions import QuadratureWarning
from torchfedvr.quadrature._nodes import gauss_lobatto_nodes_weights

__all__ = [
    "gauss_lobatto_nodes_weights",
    "QuadratureWarning",
]
