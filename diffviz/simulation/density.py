"""Density grids for the heatmaps.

Both estimators return a ``(len(x_grid), len(t))`` matrix: rows follow
the spatial grid and columns follow the time grid.

* :func:`analytic_density` evaluates the exact marginal of a linear SDE
  started from a known distribution.
* :func:`monte_carlo_density` estimates the marginal of a bridge by
  averaging Gaussian kernels centred at the noise free bridge positions
  of the sampled endpoint pairs.
"""

from __future__ import annotations

import torch

from ..bridge.base import BridgeSchedule
from ..distributions.base import Distribution, normal_pdf
from ..sde.base import SDE
from .bridge_sampler import horizon

# Added to the variance so that the density at t=0 has a finite width
VARIANCE_FLOOR = 0.05
# Added to the kernel width of the Monte Carlo estimate
KERNEL_FLOOR = 0.05
# Number of pairs evaluated at once
_CHUNK = 256


@torch.no_grad()
def analytic_density(
    distribution: Distribution,
    sde: SDE,
    x_grid: torch.Tensor,
    t: torch.Tensor,
    center: float = 0.0,
    spread: float = 0.5,
    eps: float = VARIANCE_FLOOR,
) -> torch.Tensor:
    """Exact density of ``x(t)`` on the grid.

    Uses ``distribution.marginal_pdf(x, mu_decay(t), sqrt(variance(t) + eps))``.
    """
    decay = sde.mu_decay(t)[None, :]
    sigma = torch.sqrt(sde.variance(t) + eps)[None, :]
    density = distribution.marginal_pdf(x_grid[:, None], decay, sigma, center, spread)
    return density.expand(x_grid.shape[0], t.shape[0]).contiguous()


@torch.no_grad()
def monte_carlo_density(
    bridge: BridgeSchedule,
    x_grid: torch.Tensor,
    t: torch.Tensor,
    x: torch.Tensor,
    y: torch.Tensor,
    sigma_max: float,
    bandwidth: float = KERNEL_FLOOR,
) -> torch.Tensor:
    """Kernel density estimate of the bridge marginal.

    For every grid cell the density is the mean over pairs of
    ``N(x; a_t x_i + b_t y_i, (sigma_t + bandwidth)^2)``. Returns zeros
    when no pairs are given.
    """
    density = torch.zeros((x_grid.shape[0], t.shape[0]), dtype=torch.float64)
    n_pairs = x.shape[0]
    if n_pairs == 0:
        return density
    a_t, b_t, sigma_t = bridge.coefficients(t, horizon(t), sigma_max)
    std = (sigma_t + bandwidth)[None, None, :]
    grid = x_grid[:, None, None]
    for start in range(0, n_pairs, _CHUNK):
        xs = x[start:start + _CHUNK, None]
        ys = y[start:start + _CHUNK, None]
        mean = a_t[None, :] * xs + b_t[None, :] * ys
        density += normal_pdf(grid, mean[None, :, :], std).sum(dim=1)
    return density / n_pairs
