"""Rectangle rules for tabulated samples."""

from torch import Tensor

from ._validation import _check_samples


def left_rectangle(y: Tensor, x: Tensor) -> Tensor:
    """
    Integrate tabulated samples with the left rectangle rule.

    Each interval ``[x[i], x[i+1]]`` contributes ``y[i] * (x[i+1] - x[i])``.

    Parameters
    ----------
    y : Tensor
        Function values, shape (n,).
    x : Tensor
        Sample points, shape (n,). Need not be sorted or uniform.

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

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 2.0, 3.0, 4.0], dtype=torch.float64)
    >>> left_rectangle(x**2, x)
    tensor(14., dtype=torch.float64)
    """
    _check_samples(y, x, "left_rectangle")

    return (y[:-1] * (x[1:] - x[:-1])).sum()


def right_rectangle(y: Tensor, x: Tensor) -> Tensor:
    """
    Integrate tabulated samples with the right rectangle rule.

    Each interval ``[x[i-1], x[i]]`` contributes ``y[i] * (x[i] - x[i-1])``.

    Parameters
    ----------
    y : Tensor
        Function values, shape (n,).
    x : Tensor
        Sample points, shape (n,).

    Returns
    -------
    Tensor
        Definite integral approximation (0-dim). Zero for a single point.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 2.0, 3.0, 4.0], dtype=torch.float64)
    >>> right_rectangle(x**2, x)
    tensor(30., dtype=torch.float64)
    """
    _check_samples(y, x, "right_rectangle")

    return (y[1:] * (x[1:] - x[:-1])).sum()


def midpoint_rectangle(y: Tensor, x: Tensor) -> Tensor:
    """
    Integrate tabulated samples with the midpoint rectangle rule.

    The function is not available between samples, so the height of each
    rectangle is the mean of the two endpoint values.

    Parameters
    ----------
    y : Tensor
        Function values, shape (n,).
    x : Tensor
        Sample points, shape (n,).

    Returns
    -------
    Tensor
        Definite integral approximation (0-dim). Zero for a single point.

    Notes
    -----
    On tabulated data this coincides with the trapezoidal rule.
    """
    _check_samples(y, x, "midpoint_rectangle")

    heights = (y[:-1] + y[1:]) / 2

    return (heights * (x[1:] - x[:-1])).sum()
