"""Shared argument checks for the sample-based rules."""

import warnings

import torch
from torch import Tensor

from ._exceptions import (
    InsufficientSamplesError,
    QuadratureWarning,
    SizeMismatchError,
)


def _check_samples(
    y: Tensor, x: Tensor, name: str, min_points: int = 1
) -> int:
    """Validate a pair of sample tensors and return the number of samples."""
    if y.dim() != 1 or x.dim() != 1:
        raise SizeMismatchError(
            f"{name} expects one-dimensional samples, got y of shape "
            f"{tuple(y.shape)} and x of shape {tuple(x.shape)}"
        )

    if y.shape[0] != x.shape[0]:
        raise SizeMismatchError(
            f"{name} got {y.shape[0]} values for {x.shape[0]} arguments"
        )

    n = y.shape[0]

    if n < min_points:
        raise InsufficientSamplesError(
            f"{name} requires at least {min_points} point(s), got {n}"
        )

    return n


def _warn_if_nonuniform(x: Tensor, name: str) -> None:
    """Warn when the grid spacing is not constant."""
    spacing = x[1:] - x[:-1]

    if spacing.numel() < 2:
        return

    if not torch.allclose(spacing, spacing[0].expand_as(spacing)):
        warnings.warn(
            f"{name} assumes a uniform grid; spacing varies from "
            f"{spacing.min().item():.6g} to {spacing.max().item():.6g}",
            QuadratureWarning,
        )
