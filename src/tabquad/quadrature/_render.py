"""Text rendering of sample tables and quadrature results."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Union

from torch import Tensor

if TYPE_CHECKING:
    from ._sample_table import SampleTable


def _format_number(value: float) -> str:
    # Six significant digits, as a default C++ output stream prints doubles
    return format(value, "g")


def render_sample_table(table: SampleTable) -> str:
    """Render a sample table as two newline-terminated lines.

    The first line lists the arguments separated by two spaces, the second
    lists the function values separated by one space::

        input= argument 0  1  2
        function 0 1 4

    Parameters
    ----------
    table : SampleTable
        Table to render.

    Returns
    -------
    str
        Rendered table.
    """
    arguments = "  ".join(_format_number(a) for a in table.arguments.tolist())
    values = " ".join(
        _format_number(v) for v in table.function_values.tolist()
    )

    return f"input= argument {arguments}\nfunction {values}\n"


def round_to_tenths(value: Union[Tensor, float]) -> float:
    """Round to one decimal place, halves away from zero.

    NaN and infinities are returned unchanged.

    Examples
    --------
    >>> round_to_tenths(21.333333)
    21.3
    >>> round_to_tenths(-0.25)
    -0.3
    """
    scaled = float(value) * 10

    if not math.isfinite(scaled):
        return float(value)

    magnitude = abs(scaled)
    rounded = math.floor(magnitude)

    # floor(magnitude + 0.5) would round 0.49999999999999994 up
    if magnitude - rounded >= 0.5:
        rounded += 1

    return math.copysign(rounded, scaled) / 10


def format_result(label: str, value: Union[Tensor, float]) -> str:
    """Format a quadrature result for display as ``<label>= <value>``.

    Examples
    --------
    >>> format_result("Simpson", 21.333333)
    'Simpson= 21.3'
    """
    return f"{label}= {_format_number(round_to_tenths(value))}"
