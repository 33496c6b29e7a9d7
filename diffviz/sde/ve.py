r"""Variance exploding SDE (VE‑SDE).

Implements the driftless SDE

.. math::

    dx = \sqrt{r t + 1} \, dW_t,

whose noise level grows without bound. The mean of ``x(0)`` is left
untouched and the variance shown in the demo is ``t^2``.
"""

from __future__ import annotations

import torch

from .base import SDE


class VESDE(SDE):
    """Variance exploding SDE."""

    name = "Variance Exploding (VE-SDE)"

    def __init__(self, rate: float = 2.0) -> None:
        self.rate = rate

    def sde_type(self) -> str:
        return "ve"

    def drift_rate(self, t: torch.Tensor) -> torch.Tensor:
        # VE SDE has zero drift
        return torch.zeros_like(t)

    def diffusion(self, t: torch.Tensor) -> torch.Tensor:
        return torch.sqrt(self.rate * t + 1.0)

    def mu_decay(self, t: torch.Tensor) -> torch.Tensor:
        return torch.ones_like(t)

    def variance(self, t: torch.Tensor) -> torch.Tensor:
        return t ** 2

    def __repr__(self) -> str:
        return f"VESDE(rate={self.rate})"
