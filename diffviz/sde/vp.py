r"""Variance preserving SDE (VP‑SDE).

Implements the SDE

.. math::

    dx = -\tfrac{1}{2} \beta x \, dt + \sqrt{\beta} \, dW_t

with a constant noise rate ``beta``. The closed‑form marginal is
``x(t) = e^{-\beta t/2} x(0) + \sqrt{1 - e^{-\beta t}} z`` so that a
unit variance prior is preserved for all ``t``.
"""

from __future__ import annotations

import torch

from .base import SDE


class VPSDE(SDE):
    """Variance preserving SDE."""

    name = "Variance Preserving (VP-SDE)"

    def __init__(self, beta: float = 1.0) -> None:
        self.beta = beta

    def sde_type(self) -> str:
        return "vp"

    def drift_rate(self, t: torch.Tensor) -> torch.Tensor:
        return torch.full_like(t, -0.5 * self.beta)

    def diffusion(self, t: torch.Tensor) -> torch.Tensor:
        return torch.full_like(t, self.beta ** 0.5)

    def mu_decay(self, t: torch.Tensor) -> torch.Tensor:
        return torch.exp(-0.5 * self.beta * t)

    def variance(self, t: torch.Tensor) -> torch.Tensor:
        return 1.0 - torch.exp(-self.beta * t)

    def __repr__(self) -> str:
        return f"VPSDE(beta={self.beta})"
