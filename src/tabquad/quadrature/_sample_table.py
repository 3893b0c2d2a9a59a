"""Sample table tensorclass for tabulated functions."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._exceptions import IndexOutOfRangeError, SizeMismatchError


@tensorclass
class SampleTable:
    """Tabulated function as paired (argument, value) samples.

    Index ``i`` of ``arguments`` and ``function_values`` refers to the same
    sample. Samples are never reordered, and neither sortedness nor uniform
    spacing is assumed; rules that need a uniform grid say so.

    As a tensorclass, SampleTable supports:
    - Deep copies: `table.clone()`
    - Device movement: `table.to("cuda")`
    - Serialization: `torch.save(table, path)` / `torch.load(path)`

    Tables built with :func:`sample_table` own copies of their inputs and
    are locked, so their fields cannot be reassigned. Copies made with
    :meth:`clone` are locked as well. The ``arguments`` and
    ``function_values`` tensors are exposed for reading only; modifying
    them in place is not supported and changes every later result.

    Attributes
    ----------
    arguments : Tensor
        Independent-variable grid, shape (n,).
    function_values : Tensor
        Function values at each argument, shape (n,).
    """

    arguments: Tensor
    function_values: Tensor

    def __post_init__(self):
        if self.arguments.dim() != 1 or self.function_values.dim() != 1:
            raise SizeMismatchError(
                "arguments and function values must be one-dimensional, got "
                f"shapes {tuple(self.arguments.shape)} and "
                f"{tuple(self.function_values.shape)}"
            )
        if self.arguments.shape != self.function_values.shape:
            raise SizeMismatchError(
                "Size mismatch between argument values and function values: "
                f"{self.arguments.shape[0]} != {self.function_values.shape[0]}"
            )

    @property
    def n(self) -> int:
        """Number of samples."""
        return self.function_values.shape[-1]

    def value_at(self, index: int) -> Tensor:
        """Return the function value of sample ``index``.

        Raises
        ------
        IndexOutOfRangeError
            If ``index`` is negative or not less than ``n``.
        """
        if index < 0 or index >= self.n:
            raise IndexOutOfRangeError(
                f"Index {index} out of range for table of {self.n} samples"
            )

        return self.function_values[index].clone()

    def clone(self, recurse: bool = True, **kwargs) -> SampleTable:
        """Return a locked deep copy of the table."""
        table = SampleTable(
            arguments=self.arguments.clone(),
            function_values=self.function_values.clone(),
            batch_size=[],
        )

        table.lock_()

        return table

    def render(self) -> str:
        from ._render import render_sample_table

        return render_sample_table(self)

    def left_rectangle(self) -> Tensor:
        from ._rectangle import left_rectangle

        return left_rectangle(self.function_values, self.arguments)

    def right_rectangle(self) -> Tensor:
        from ._rectangle import right_rectangle

        return right_rectangle(self.function_values, self.arguments)

    def midpoint_rectangle(self) -> Tensor:
        from ._rectangle import midpoint_rectangle

        return midpoint_rectangle(self.function_values, self.arguments)

    def trapezoid(self) -> Tensor:
        from ._trapezoid import trapezoid

        return trapezoid(self.function_values, self.arguments)

    def simpson(self) -> Tensor:
        from ._simpson import simpson

        return simpson(self.function_values, self.arguments)

    def newton_3_8(self) -> Tensor:
        from ._newton import newton_3_8

        return newton_3_8(self.function_values, self.arguments)


def sample_table(
    n: int,
    arguments: Union[Tensor, Sequence[float]],
    values: Union[Tensor, Sequence[float]],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> SampleTable:
    """Create a sample table from a count and two sequences.

    Parameters
    ----------
    n : int
        Number of samples. Zero builds an empty table.
    arguments : Tensor or sequence of float
        Independent-variable grid. Must hold exactly ``n`` elements.
    values : Tensor or sequence of float
        Function values. Must hold exactly ``n`` elements.
    dtype : torch.dtype, optional
        Floating dtype of the stored samples. Default is ``torch.float64``.
    device : torch.device, optional
        Device of the stored samples. Default is CPU.

    Returns
    -------
    SampleTable
        Locked table holding copies of ``arguments`` and ``values``.

    Raises
    ------
    SizeMismatchError
        If either sequence is ragged, is not one-dimensional or does not
        hold ``n`` elements.

    Examples
    --------
    >>> table = sample_table(3, [0.0, 1.0, 2.0], [0.0, 1.0, 4.0])
    >>> table.n
    3
    >>> table.value_at(2)
    tensor(4., dtype=torch.float64)
    """
    if dtype is None:
        dtype = torch.float64

    try:
        arguments = torch.as_tensor(
            arguments, dtype=dtype, device=device
        ).clone()
        values = torch.as_tensor(values, dtype=dtype, device=device).clone()
    except ValueError as e:
        raise SizeMismatchError(f"Ragged or malformed samples: {e}") from e

    for name, samples in (("arguments", arguments), ("values", values)):
        if samples.dim() != 1 or samples.shape[0] != n:
            raise SizeMismatchError(
                f"Size mismatch: expected {n} {name}, got shape "
                f"{tuple(samples.shape)}"
            )

    table = SampleTable(
        arguments=arguments, function_values=values, batch_size=[]
    )

    table.lock_()

    return table
