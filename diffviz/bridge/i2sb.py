"""Image-to-image Schrödinger bridge (I2SB) schedule.

Same linear mean as DDBM but with a triangular noise profile peaking
at the midpoint.
"""

from __future__ import annotations

import torch

from .base import BridgeCoefficients, BridgeSchedule


class I2SBBridge(BridgeSchedule):
    """I2SB bridge."""

    name = "I2SB"

    def bridge_type(self) -> str:
        return "i2sb"

    def _coefficients(self, t: torch.Tensor, T: float, sigma_max: float) -> BridgeCoefficients:
        s = self.normalised_time(t, T)
        sigma_t = sigma_max * 2.0 * torch.minimum(s, 1.0 - s)
        return BridgeCoefficients(1.0 - s, s, sigma_t)
