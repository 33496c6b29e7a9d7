"""Dual diffusion implicit bridge (DDIB) schedule.

Two consecutive diffusions through a shared standard normal latent:
the first half of the horizon noises the source into the latent, the
second half denoises the latent into the target. At the midpoint the
bridge carries no information about either endpoint.
"""

from __future__ import annotations

import torch

from .base import BridgeCoefficients, BridgeSchedule


class DDIBBridge(BridgeSchedule):
    """DDIB bridge (source -> latent -> target)."""

    name = "DDIB"

    def bridge_type(self) -> str:
        return "ddib"

    def _coefficients(self, t: torch.Tensor, T: float, sigma_max: float) -> BridgeCoefficients:
        s = self.normalised_time(t, T)
        first = s <= 0.5
        # progress within each phase, 0 -> 1
        u_first = torch.clamp(2.0 * s, 0.0, 1.0)
        u_second = torch.clamp(2.0 * (s - 0.5), 0.0, 1.0)
        zeros = torch.zeros_like(s)
        a_t = torch.where(first, torch.sqrt(1.0 - u_first), zeros)
        b_t = torch.where(first, zeros, torch.sqrt(u_second))
        sigma_t = torch.where(first, torch.sqrt(u_first), torch.sqrt(1.0 - u_second))
        return BridgeCoefficients(a_t, b_t, sigma_t)
