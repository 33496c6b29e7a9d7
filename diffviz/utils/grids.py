"""Time and space discretisation."""

from __future__ import annotations

from typing import Sequence

import torch


def time_grid(T: float, steps: int) -> torch.Tensor:
    """``steps`` evenly spaced times from ``0`` to ``T`` inclusive."""
    return torch.linspace(0.0, float(T), int(steps), dtype=torch.float64)


def spatial_grid(x_range: Sequence[float], num: int = 100) -> torch.Tensor:
    """``num`` evenly spaced positions covering ``x_range``."""
    x_min, x_max = x_range
    return torch.linspace(float(x_min), float(x_max), int(num), dtype=torch.float64)


def as_tensor(x) -> torch.Tensor:
    """Convert a scalar, sequence or tensor (times, positions, scales) to ``float64``."""
    if isinstance(x, torch.Tensor):
        return x.to(torch.float64)
    return torch.as_tensor(x, dtype=torch.float64)
