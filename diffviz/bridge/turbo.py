"""Turbo (consistency-style) bridge schedule.

A near-deterministic transport: linear interpolation between the
endpoints with only a faint ``sin(pi s)`` noise bump.
"""

from __future__ import annotations

import math

import torch

from .base import BridgeCoefficients, BridgeSchedule


class TurboBridge(BridgeSchedule):
    """Turbo bridge."""

    name = "Turbo"

    def __init__(self, noise_fraction: float = 0.1) -> None:
        self.noise_fraction = noise_fraction

    def bridge_type(self) -> str:
        return "turbo"

    def _coefficients(self, t: torch.Tensor, T: float, sigma_max: float) -> BridgeCoefficients:
        s = self.normalised_time(t, T)
        sigma_t = sigma_max * self.noise_fraction * torch.sin(math.pi * s)
        return BridgeCoefficients(1.0 - s, s, sigma_t)

    def __repr__(self) -> str:
        return f"TurboBridge(noise_fraction={self.noise_fraction})"
