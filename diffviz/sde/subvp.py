r"""Sub-variance preserving SDE.

An Ornstein–Uhlenbeck process with a slower contraction and a damped
noise scale,

.. math::

    dx = -\theta x \, dt + g \, dW_t,

whose marginal variance ``g^2 (1 - e^{-2 \theta t})`` stays below the
unit variance of the VP process.
"""

from __future__ import annotations

import torch

from .base import SDE


class SubVPSDE(SDE):
    """Sub-variance preserving SDE."""

    name = "Sub-VP SDE"

    def __init__(self, theta: float = 0.25, scale: float = 0.8) -> None:
        self.theta = theta
        self.scale = scale

    def sde_type(self) -> str:
        return "subvp"

    def drift_rate(self, t: torch.Tensor) -> torch.Tensor:
        return torch.full_like(t, -self.theta)

    def diffusion(self, t: torch.Tensor) -> torch.Tensor:
        return torch.full_like(t, self.scale)

    def mu_decay(self, t: torch.Tensor) -> torch.Tensor:
        return torch.exp(-self.theta * t)

    def variance(self, t: torch.Tensor) -> torch.Tensor:
        return self.scale ** 2 * (1.0 - torch.exp(-2.0 * self.theta * t))

    def __repr__(self) -> str:
        return f"SubVPSDE(theta={self.theta}, scale={self.scale})"
