r"""Euler–Maruyama integration of forward SDE paths.

Paths start from samples of the initial distribution and are advanced
with

.. math::

    x_{n+1} = x_n + f(x_n, t_n) \Delta t + g(t_n) \sqrt{\Delta t} \, \xi_n,

where ``xi_n`` is (approximately) standard normal. All paths are
advanced together as one vector.
"""

from __future__ import annotations

import math
from typing import Optional

import torch

from ..sde.base import SDE
from ..utils.logging import progress
from ..utils.noise import DEFAULT_NOISE, standard_normal


@torch.no_grad()
def euler_maruyama_paths(
    sde: SDE,
    x0: torch.Tensor,
    t: torch.Tensor,
    dt: float,
    generator: Optional[torch.Generator] = None,
    noise: str = DEFAULT_NOISE,
    show_progress: bool = False,
) -> torch.Tensor:
    """Integrate ``len(x0)`` paths of the forward SDE.

    Parameters
    ----------
    sde: SDE
        Forward process supplying drift and diffusion.
    x0: torch.Tensor
        Initial values, shape ``(paths,)``.
    t: torch.Tensor
        Time grid, shape ``(steps,)``. Coefficients are evaluated at
        ``t[n]`` for the step leaving ``t[n]``.
    dt: float
        Step size used for the drift and the Brownian increments.
    generator: Optional[torch.Generator]
        Source of randomness for the increments.
    noise: str
        Normal generator, see :func:`diffviz.utils.noise.standard_normal`.
    show_progress: bool
        Display a ``tqdm`` progress bar over the steps.

    Returns
    -------
    torch.Tensor
        Paths of shape ``(paths, steps)`` whose first column is ``x0``.
    """
    x = x0.to(torch.float64).clone()
    n_paths = x.shape[0]
    steps = t.shape[0]
    paths = torch.empty((n_paths, steps), dtype=torch.float64)
    if steps == 0:
        return paths
    paths[:, 0] = x
    sqrt_dt = math.sqrt(max(dt, 0.0))
    for n in progress(range(steps - 1), enabled=show_progress, desc="Euler-Maruyama", total=steps - 1):
        t_n = t[n]
        dw = standard_normal(n_paths, generator, noise) * sqrt_dt
        x = x + sde.drift(x, t_n) * dt + sde.diffusion(t_n) * dw
        paths[:, n + 1] = x
    return paths
