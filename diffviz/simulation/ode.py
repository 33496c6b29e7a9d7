"""Deterministic mean trajectories.

For the SDE demo the probability flow of a linear SDE started at a
point ``x0`` is drawn as ``x0 * mu_decay(t)``; a few representative
starting points are chosen per initial distribution. For the bridge
demo a single mean path interpolates linearly between the average
source and target samples.
"""

from __future__ import annotations

from typing import Dict, Tuple

import torch

from ..bridge.base import T_FLOOR
from ..sde.base import SDE

REPRESENTATIVE_POINTS: Dict[str, Tuple[float, ...]] = {
    "bimodal": (-2.0, 2.0),
    "asymmetric": (-2.0, 2.0),
    "trimodal": (-2.0, 0.0, 2.0),
    "uniform": (-2.0, 0.0, 2.0),
    "single": (-1.0, 0.0, 1.0),
    "gaussian": (-1.0, 0.0, 1.0),
    "laplace": (-1.0, 0.0, 1.0),
    "wide": (-1.0, 0.0, 1.0),
}

# Distributions whose location follows the configured center
_CENTERED = {"single", "gaussian", "laplace", "wide"}


def representative_points(kind: str, center: float = 0.0) -> torch.Tensor:
    """Starting points of the mean trajectories for a distribution."""
    points = torch.tensor(REPRESENTATIVE_POINTS.get(kind, (-2.0, 2.0)), dtype=torch.float64)
    if kind in _CENTERED:
        points = points + center
    return points


def sde_mean_paths(sde: SDE, starts: torch.Tensor, t: torch.Tensor) -> torch.Tensor:
    """Noise free trajectories ``x0 * mu_decay(t)``, shape ``(len(starts), len(t))``."""
    mean, _ = sde.marginal_prob(starts[:, None], t[None, :])
    return mean


def bridge_mean_path(x_mean: float, y_mean: float, t: torch.Tensor) -> torch.Tensor:
    """Linear interpolation from ``x_mean`` to ``y_mean``, shape ``(1, len(t))``."""
    T = float(t[-1]) if t.numel() else 0.0
    s = t / max(T, T_FLOOR)
    return ((1.0 - s) * x_mean + s * y_mean)[None, :]
