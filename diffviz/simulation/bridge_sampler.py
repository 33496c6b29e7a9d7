"""Sampling of diffusion bridge paths.

A bridge path is not integrated step by step. For each endpoint pair
``(x, y)`` every grid time receives an independent draw of the bridge
marginal ``a_t x + b_t y + sigma_t eps``, which is what the closed form
schedules describe.
"""

from __future__ import annotations

from typing import Optional, Tuple

import torch

from ..bridge.base import BridgeSchedule
from ..distributions.base import Distribution
from ..utils.noise import DEFAULT_NOISE, standard_normal


def sample_pairs(
    source: Distribution,
    target: Distribution,
    n: int,
    source_center: float = 0.0,
    source_spread: float = 0.5,
    target_center: float = 0.0,
    target_spread: float = 0.5,
    generator: Optional[torch.Generator] = None,
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Draw ``n`` independent ``(x, y)`` endpoint pairs."""
    x = source.sample(n, source_center, source_spread, generator)
    y = target.sample(n, target_center, target_spread, generator)
    return x, y


def horizon(t: torch.Tensor) -> float:
    """Horizon ``T`` of a time grid (its last entry)."""
    return float(t[-1]) if t.numel() else 0.0


@torch.no_grad()
def bridge_paths(
    bridge: BridgeSchedule,
    x: torch.Tensor,
    y: torch.Tensor,
    t: torch.Tensor,
    sigma_max: float,
    generator: Optional[torch.Generator] = None,
    noise: str = DEFAULT_NOISE,
) -> torch.Tensor:
    """One path per pair, shape ``(len(x), len(t))``.

    Fresh noise is drawn for every path and every grid time.
    """
    eps = standard_normal((x.shape[0], t.shape[0]), generator, noise)
    return bridge.sample(x[:, None], y[:, None], t, eps, horizon(t), sigma_max)
