"""Denoising diffusion bridge model (DDBM) schedule.

Linear interpolation between the endpoints with a Brownian-bridge like
noise profile ``sigma_t = sigma_max * sqrt(4 s (1 - s))`` that vanishes
at both ends and reaches ``sigma_max`` at ``s = 1/2``.
"""

from __future__ import annotations

import torch

from .base import BridgeCoefficients, BridgeSchedule


class DDBMBridge(BridgeSchedule):
    """DDBM bridge."""

    name = "DDBM"

    def bridge_type(self) -> str:
        return "ddbm"

    def _coefficients(self, t: torch.Tensor, T: float, sigma_max: float) -> BridgeCoefficients:
        s = self.normalised_time(t, T)
        a_t = 1.0 - s
        b_t = s
        # clamp guards against tiny negative products from rounding at s=1
        sigma_t = sigma_max * torch.sqrt(torch.clamp(4.0 * s * (1.0 - s), min=0.0))
        return BridgeCoefficients(a_t, b_t, sigma_t)
