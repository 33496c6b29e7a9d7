"""Continuous single-component distributions.

Besides the plain Gaussian, the module provides a box-shaped uniform,
a heavy tailed Laplace and a wide Gaussian. After a linear Gaussian
forward process the last two are approximated by a Gaussian with a
matching variance.
"""

from __future__ import annotations

from typing import Optional

import torch

from ..utils.noise import clt_normal
from .base import Distribution, SCALE_FLOOR, as_tensor, normal_pdf, uniform

# Lowest uniform used by the Laplace inverse CDF, keeps log() finite
_U_FLOOR = 1e-12


class Gaussian(Distribution):
    """Normal distribution ``N(center, spread^2)``."""

    name = "Gaussian"

    def kind(self) -> str:
        return "gaussian"

    def sample(self, n, center=0.0, spread=0.5, generator: Optional[torch.Generator] = None) -> torch.Tensor:
        return float(center) + float(spread) * clt_normal(int(n), generator)

    def pdf(self, x, center=0.0, spread=0.5) -> torch.Tensor:
        return normal_pdf(x, center, spread)

    def marginal_pdf(self, x, decay, sigma, center=0.0, spread=0.5) -> torch.Tensor:
        decay = as_tensor(decay)
        std = torch.sqrt(as_tensor(sigma) ** 2 + (decay * spread) ** 2)
        return normal_pdf(x, decay * center, std)


class Uniform(Distribution):
    """Uniform distribution on ``[-half_width, half_width]``."""

    name = "Uniform Distribution"

    def __init__(self, half_width: float = 2.0) -> None:
        self.half_width = half_width

    def kind(self) -> str:
        return "uniform"

    def sample(self, n, center=0.0, spread=0.5, generator: Optional[torch.Generator] = None) -> torch.Tensor:
        return (uniform(n, generator) - 0.5) * 2.0 * self.half_width

    def _box(self, x, bound) -> torch.Tensor:
        x = as_tensor(x)
        bound = torch.clamp(torch.abs(as_tensor(bound)), min=SCALE_FLOOR)
        inside = torch.abs(x) <= bound
        return torch.where(inside, 1.0 / (2.0 * bound), torch.zeros_like(bound))

    def pdf(self, x, center=0.0, spread=0.5) -> torch.Tensor:
        return self._box(x, self.half_width)

    def marginal_pdf(self, x, decay, sigma, center=0.0, spread=0.5) -> torch.Tensor:
        # The box is only rescaled; the added noise is not convolved in
        return self._box(x, self.half_width * as_tensor(decay))

    def __repr__(self) -> str:
        return f"Uniform(half_width={self.half_width})"


class Laplace(Distribution):
    """Laplace distribution with scale ``b`` around ``center``."""

    name = "Laplace (Heavy Tails)"

    def __init__(self, b: float = 0.8) -> None:
        self.b = b

    def kind(self) -> str:
        return "laplace"

    def sample(self, n, center=0.0, spread=0.5, generator: Optional[torch.Generator] = None) -> torch.Tensor:
        u = torch.clamp(uniform(n, generator), min=_U_FLOOR) - 0.5
        # Inverse CDF, one branch per side of the median
        left = self.b * torch.log1p(2.0 * u)
        right = -self.b * torch.log1p(-2.0 * u)
        return float(center) + torch.where(u < 0, left, right)

    def pdf(self, x, center=0.0, spread=0.5) -> torch.Tensor:
        x = as_tensor(x)
        return torch.exp(-torch.abs(x - center) / self.b) / (2.0 * self.b)

    def marginal_pdf(self, x, decay, sigma, center=0.0, spread=0.5) -> torch.Tensor:
        decay = as_tensor(decay)
        # Laplace variance is 2 b^2
        std = torch.sqrt(as_tensor(sigma) ** 2 + 2.0 * self.b ** 2 * decay ** 2)
        return normal_pdf(x, decay * center, std)

    def __repr__(self) -> str:
        return f"Laplace(b={self.b})"


class WideGaussian(Distribution):
    """Broad initial distribution drawn as ``N(center, s0^2)``.

    Samples are spread uniformly over ``center +- 2``.
    """

    name = "Wide Gaussian"

    def __init__(self, s0: float = 1.2) -> None:
        self.s0 = s0

    def kind(self) -> str:
        return "wide"

    def sample(self, n, center=0.0, spread=0.5, generator: Optional[torch.Generator] = None) -> torch.Tensor:
        return float(center) + (uniform(n, generator) - 0.5) * 4.0

    def pdf(self, x, center=0.0, spread=0.5) -> torch.Tensor:
        return normal_pdf(x, center, self.s0)

    def marginal_pdf(self, x, decay, sigma, center=0.0, spread=0.5) -> torch.Tensor:
        decay = as_tensor(decay)
        std = torch.sqrt(as_tensor(sigma) ** 2 + (self.s0 * decay) ** 2)
        return normal_pdf(x, decay * center, std)

    def __repr__(self) -> str:
        return f"WideGaussian(s0={self.s0})"

