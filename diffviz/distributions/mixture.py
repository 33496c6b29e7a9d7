"""Gaussian-like mixtures with fixed modes.

The modes sit at fixed positions (``-2``, ``0``, ``2``) regardless of
``center``; ``spread`` sets the width of the jitter applied to samples
and the standard deviation of each component of the density.
"""

from __future__ import annotations

from typing import Optional, Sequence

import torch

from .base import Distribution, as_tensor, normal_pdf, uniform


class Mixture(Distribution):
    """Weighted mixture of components located at ``modes``."""

    name = "Mixture"

    def __init__(self, modes: Sequence[float], weights: Sequence[float]) -> None:
        if len(modes) != len(weights):
            raise ValueError("modes and weights must have the same length")
        self.modes = torch.tensor(modes, dtype=torch.float64)
        w = torch.tensor(weights, dtype=torch.float64)
        self.weights = w / w.sum()

    def kind(self) -> str:
        return "mixture"

    def sample(self, n, center=0.0, spread=0.5, generator: Optional[torch.Generator] = None) -> torch.Tensor:
        # Pick a component by inverting the cumulative weights
        cum = torch.cumsum(self.weights, dim=0)
        idx = torch.searchsorted(cum, uniform(n, generator), right=True)
        idx = torch.clamp(idx, max=len(self.modes) - 1)
        jitter = (uniform(n, generator) - 0.5) * float(spread)
        return self.modes[idx] + jitter

    def _mix(self, x, means, std) -> torch.Tensor:
        x = as_tensor(x)
        total = torch.zeros_like(x)
        for w, m in zip(self.weights, means):
            total = total + w * normal_pdf(x, m, std)
        return total

    def pdf(self, x, center=0.0, spread=0.5) -> torch.Tensor:
        return self._mix(x, self.modes, spread)

    def marginal_pdf(self, x, decay, sigma, center=0.0, spread=0.5) -> torch.Tensor:
        decay = as_tensor(decay)
        return self._mix(x, [decay * m for m in self.modes], sigma)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(modes={self.modes.tolist()}, weights={self.weights.tolist()})"


class Bimodal(Mixture):
    name = "Bimodal Gaussian"

    def __init__(self) -> None:
        super().__init__(modes=(-2.0, 2.0), weights=(0.5, 0.5))

    def kind(self) -> str:
        return "bimodal"


class Trimodal(Mixture):
    name = "Trimodal Gaussian"

    def __init__(self) -> None:
        super().__init__(modes=(-2.0, 0.0, 2.0), weights=(1.0, 1.0, 1.0))

    def kind(self) -> str:
        return "trimodal"


class AsymmetricBimodal(Mixture):
    name = "Asymmetric Bimodal"

    def __init__(self, left_weight: float = 0.7) -> None:
        super().__init__(modes=(-2.0, 2.0), weights=(left_weight, 1.0 - left_weight))

    def kind(self) -> str:
        return "asymmetric"
