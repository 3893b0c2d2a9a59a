"""Newton's 3/8 rule for tabulated samples."""

from torch import Tensor

from ._exceptions import InvalidPointCountError
from ._validation import _check_samples, _warn_if_nonuniform


def newton_3_8(y: Tensor, x: Tensor) -> Tensor:
    """
    Integrate tabulated samples using composite Newton's 3/8 rule.

    The samples are split into groups of four consecutive points sharing
    their endpoints, ``[0, 3], [3, 6], ...``. Each group contributes
    ``(y0 + 3*y1 + 3*y2 + y3) * 3h/8`` with its own step
    ``h = (x3 - x0) / 3``.

    Parameters
    ----------
    y : Tensor
        Function values, shape (n,).
    x : Tensor
        Sample points, shape (n,). Assumed uniformly spaced within each
        group.

    Returns
    -------
    Tensor
        Definite integral approximation (0-dim).

    Raises
    ------
    InvalidPointCountError
        If ``n < 4`` or ``(n - 1) % 3 != 0``.

    Warns
    -----
    QuadratureWarning
        If the spacing of ``x`` is not uniform.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
    >>> newton_3_8(x**3, x)
    tensor(20.2500, dtype=torch.float64)
    """
    n = _check_samples(y, x, "newton_3_8", min_points=0)

    if n < 4 or (n - 1) % 3 != 0:
        raise InvalidPointCountError(
            "Invalid number of points for Newton's 3/8 rule. It must satisfy "
            "the condition: (number_of_points - 1) % 3 == 0, with at least "
            f"4 points, got {n}"
        )

    _warn_if_nonuniform(x, "newton_3_8")

    h = (x[3::3] - x[:-1:3]) / 3

    weighted = y[:-1:3] + 3 * y[1::3] + 3 * y[2::3] + y[3::3]

    return (weighted * 3 * h / 8).sum()
