r"""Base classes and common utilities for forward SDEs.

All SDE implementations derive from :class:`SDE`. The demo processes
are one dimensional with a drift that is linear in ``x``,

.. math::

    dx = r(t) x \, dt + g(t) \, dW_t,

so every process is fully described by four scalar functions of time:
the drift rate ``r(t)``, the diffusion coefficient ``g(t)``, the factor
``mu_decay(t)`` by which the mean of ``x(0)`` is scaled and the
variance added by the noise. Concrete SDEs provide these in closed
form; everything else is derived here.
"""

from __future__ import annotations

import abc
import math
from typing import NamedTuple, Tuple

import torch

from ..utils.grids import as_tensor


class SDECoefficients(NamedTuple):
    """Coefficients of a linear SDE at a given time."""

    drift_rate: torch.Tensor
    diffusion: torch.Tensor
    mu_decay: torch.Tensor
    variance: torch.Tensor


class SDE(abc.ABC):
    """Abstract base class for one dimensional linear SDEs."""

    #: Human readable name of the process.
    name: str = "SDE"

    @abc.abstractmethod
    def sde_type(self) -> str:
        """Return a string identifier for the SDE type."""

    @abc.abstractmethod
    def drift_rate(self, t: torch.Tensor) -> torch.Tensor:
        """Coefficient ``r(t)`` of the linear drift ``f(x,t) = r(t) x``."""

    @abc.abstractmethod
    def diffusion(self, t: torch.Tensor) -> torch.Tensor:
        """Diffusion coefficient ``g(t)`` of the forward SDE."""

    @abc.abstractmethod
    def mu_decay(self, t: torch.Tensor) -> torch.Tensor:
        """Factor applied to ``x(0)`` in the mean of ``x(t)``."""

    @abc.abstractmethod
    def variance(self, t: torch.Tensor) -> torch.Tensor:
        """Variance of ``x(t)`` given ``x(0)``."""

    def drift(self, x: torch.Tensor, t: torch.Tensor) -> torch.Tensor:
        """Drift term ``f(x,t)`` of the forward SDE."""
        return self.drift_rate(as_tensor(t)) * x

    def coefficients(self, t) -> SDECoefficients:
        """Evaluate all coefficients at ``t`` (scalar or tensor)."""
        t = as_tensor(t)
        return SDECoefficients(
            drift_rate=self.drift_rate(t),
            diffusion=self.diffusion(t),
            mu_decay=self.mu_decay(t),
            variance=self.variance(t),
        )

    def marginal_prob(self, x0: torch.Tensor, t: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
        """Compute the mean and standard deviation of ``x(t)`` given ``x(0)``."""
        t = as_tensor(t)
        mean = self.mu_decay(t) * x0
        std = torch.sqrt(self.variance(t))
        return mean, std

    def prior_pdf(self, x: torch.Tensor) -> torch.Tensor:
        """Density of the standard normal reference prior."""
        return torch.exp(-0.5 * x ** 2) / math.sqrt(2.0 * math.pi)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
