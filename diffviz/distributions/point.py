"""Point mass distribution."""

from __future__ import annotations

from typing import Optional

import torch

from .base import Distribution, as_tensor, normal_pdf, uniform


class PointMass(Distribution):
    """All mass at ``center``.

    The density is drawn as a narrow Gaussian of width ``display_width``
    since a Dirac delta cannot be evaluated on a grid. With ``jitter``
    set, samples are spread uniformly over ``center +- spread / 2``; the
    forward SDE demo samples this way.
    """

    name = "Single Point"

    def __init__(self, display_width: float = 0.15, jitter: bool = False) -> None:
        self.display_width = display_width
        self.jitter = jitter

    def kind(self) -> str:
        return "single"

    def sample(self, n, center=0.0, spread=0.5, generator: Optional[torch.Generator] = None) -> torch.Tensor:
        samples = torch.full((int(n),), float(center), dtype=torch.float64)
        if self.jitter:
            samples = samples + (uniform(n, generator) - 0.5) * float(spread)
        return samples

    def pdf(self, x, center=0.0, spread=0.5) -> torch.Tensor:
        return normal_pdf(x, center, self.display_width)

    def marginal_pdf(self, x, decay, sigma, center=0.0, spread=0.5) -> torch.Tensor:
        return normal_pdf(x, as_tensor(decay) * center, sigma)
