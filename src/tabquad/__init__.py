"""tabquad: quadrature rules over tabulated functions, built on PyTorch."""

from . import quadrature

__all__ = [
    "quadrature",
]

__version__ = "0.1.0"
