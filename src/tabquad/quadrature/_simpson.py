"""Simpson's 1/3 rule for tabulated samples."""

from torch import Tensor

from ._exceptions import InsufficientSamplesError, InvalidPointCountError
from ._validation import _check_samples, _warn_if_nonuniform


def simpson(y: Tensor, x: Tensor) -> Tensor:
    """
    Integrate tabulated samples using composite Simpson's 1/3 rule.

    Parameters
    ----------
    y : Tensor
        Function values, shape (n,). ``n`` must be odd and at least 3.
    x : Tensor
        Sample points, shape (n,). Assumed uniformly spaced; the step is
        taken as ``(x[-1] - x[0]) / (n - 1)``.

    Returns
    -------
    Tensor
        Definite integral approximation (0-dim).

    Raises
    ------
    InvalidPointCountError
        If ``n`` is even.
    InsufficientSamplesError
        If ``n`` is less than 3.

    Warns
    -----
    QuadratureWarning
        If the spacing of ``x`` is not uniform.

    Notes
    -----
    Exact for polynomials up to degree 3.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 2.0, 3.0, 4.0], dtype=torch.float64)
    >>> simpson(x**2, x)
    tensor(21.3333, dtype=torch.float64)
    """
    # Even counts, zero included, are a parity error
    n = _check_samples(y, x, "simpson", min_points=0)

    if n % 2 == 0:
        raise InvalidPointCountError(
            "The number of intervals must be odd for Simpson's method, "
            f"got {n} points"
        )

    if n < 3:
        raise InsufficientSamplesError(
            f"simpson requires at least 3 points, got {n}"
        )

    _warn_if_nonuniform(x, "simpson")

    h = (x[-1] - x[0]) / (n - 1)

    # (h/3) * [y0 + 4*y1 + 2*y2 + 4*y3 + ... + 4*y_{n-2} + y_{n-1}]
    return (
        h
        / 3
        * (y[0] + 4 * y[1:-1:2].sum() + 2 * y[2:-1:2].sum() + y[-1])
    )
