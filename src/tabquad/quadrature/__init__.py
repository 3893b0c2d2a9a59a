"""
Numerical integration (quadrature) over tabulated functions.

Sample table:
    SampleTable, sample_table

Sample-based integration (operates on tabulated values):
    left_rectangle, right_rectangle, midpoint_rectangle, trapezoid,
    simpson, newton_3_8

Rendering:
    render_sample_table, round_to_tenths, format_result

Exceptions:
    QuadratureWarning, QuadratureError, SizeMismatchError,
    IndexOutOfRangeError, InvalidPointCountError, InsufficientSamplesError
"""

from tabquad.quadrature._exceptions import (
    IndexOutOfRangeError,
    InsufficientSamplesError,
    InvalidPointCountError,
    QuadratureError,
    QuadratureWarning,
    SizeMismatchError,
)
from tabquad.quadrature._newton import newton_3_8
from tabquad.quadrature._rectangle import (
    left_rectangle,
    midpoint_rectangle,
    right_rectangle,
)
from tabquad.quadrature._render import (
    format_result,
    render_sample_table,
    round_to_tenths,
)
from tabquad.quadrature._sample_table import (
    SampleTable,
    sample_table,
)
from tabquad.quadrature._simpson import simpson
from tabquad.quadrature._trapezoid import trapezoid

__all__ = [
    # Sample table
    "SampleTable",
    "sample_table",
    # Sample-based
    "left_rectangle",
    "right_rectangle",
    "midpoint_rectangle",
    "trapezoid",
    "simpson",
    "newton_3_8",
    # Rendering
    "render_sample_table",
    "round_to_tenths",
    "format_result",
    # Exceptions
    "QuadratureWarning",
    "QuadratureError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "InvalidPointCountError",
    "InsufficientSamplesError",
]
