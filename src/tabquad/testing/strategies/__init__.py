"""Hypothesis strategies for sample-table testing."""

from ._point_counts import point_counts
from ._real_numbers import real_numbers
from ._sample_tables import sample_tables
from ._uniform_grids import uniform_grids

__all__ = [
    # Numeric strategies
    "real_numbers",
    "point_counts",
    # Tensor strategies
    "uniform_grids",
    # Table strategies
    "sample_tables",
]
