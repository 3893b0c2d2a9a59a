"""Trapezoidal rule for tabulated samples."""

import torch
from torch import Tensor

from ._validation import _check_samples


def trapezoid(y: Tensor, x: Tensor) -> Tensor:
    """
    Integrate tabulated samples using the composite trapezoidal rule.

    Parameters
    ----------
    y : Tensor
        Function values, shape (n,).
    x : Tensor
        Sample points, shape (n,). Spacing may vary between samples.

    Returns
    -------
    Tensor
        Definite integral approximation (0-dim). Zero for a single point.

    Raises
    ------
    SizeMismatchError
        If ``y`` and ``x`` are not one-dimensional tensors of equal length.
    InsufficientSamplesError
        If there are no samples.

    Notes
    -----
    Fully differentiable with respect to both ``y`` and ``x``.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 2.0, 3.0, 4.0], dtype=torch.float64)
    >>> trapezoid(x**2, x)
    tensor(22., dtype=torch.float64)
    """
    _check_samples(y, x, "trapezoid")

    return torch.trapezoid(y, x)
