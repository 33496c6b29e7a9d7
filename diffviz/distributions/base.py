"""Base class for one dimensional data distributions.

A distribution offers three operations, each taking all parameters
explicitly:

* :meth:`Distribution.sample` draws ``n`` values,
* :meth:`Distribution.pdf` evaluates the density of the distribution,
* :meth:`Distribution.marginal_pdf` evaluates the density after a linear
  Gaussian forward process has scaled every position by ``decay`` and
  added noise with standard deviation ``sigma``. This is the density
  shown in the heatmap of the SDE demo.

Scales are floored at :data:`SCALE_FLOOR` so that a zero spread gives a
sharply peaked density instead of a division by zero.
"""

from __future__ import annotations

import abc
import math
from typing import Optional, Union

import torch

from ..utils.grids import as_tensor

SCALE_FLOOR = 1e-3

Number = Union[float, torch.Tensor]


def floor_scale(scale: Number) -> torch.Tensor:
    """Clamp a standard deviation (or width) from below."""
    return torch.clamp(as_tensor(scale), min=SCALE_FLOOR)


def normal_pdf(x, mean: Number = 0.0, std: Number = 1.0) -> torch.Tensor:
    """Gaussian density with a floored standard deviation."""
    x = as_tensor(x)
    std = floor_scale(std)
    z = (x - as_tensor(mean)) / std
    return torch.exp(-0.5 * z ** 2) / (std * math.sqrt(2.0 * math.pi))


def uniform(n: int, generator: Optional[torch.Generator] = None) -> torch.Tensor:
    return torch.rand(int(n), generator=generator, dtype=torch.float64)


class Distribution(abc.ABC):
    """Abstract base class for the demo distributions."""

    #: Human readable name.
    name: str = "Distribution"

    @abc.abstractmethod
    def kind(self) -> str:
        """Return the string identifier of the distribution."""

    @abc.abstractmethod
    def sample(
        self,
        n: int,
        center: float = 0.0,
        spread: float = 0.5,
        generator: Optional[torch.Generator] = None,
    ) -> torch.Tensor:
        """Draw ``n`` samples as a ``float64`` tensor."""

    @abc.abstractmethod
    def pdf(self, x, center: float = 0.0, spread: float = 0.5) -> torch.Tensor:
        """Density of the distribution at ``x``."""

    @abc.abstractmethod
    def marginal_pdf(
        self,
        x,
        decay: Number,
        sigma: Number,
        center: float = 0.0,
        spread: float = 0.5,
    ) -> torch.Tensor:
        """Density of ``decay * X + sigma * Z`` at ``x``.

        ``decay`` and ``sigma`` may be tensors broadcastable against
        ``x`` so that a whole ``(space, time)`` grid is evaluated at once.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
