r"""Base class for diffusion bridge schedules.

A diffusion bridge interpolates between a source sample ``x`` and a
target sample ``y``. Every bridge considered here has Gaussian marginals
of the form

.. math::

    z_t = a_t x + b_t y + \sigma_t \epsilon, \qquad \epsilon \sim N(0, 1),

so a schedule is fully described by the three coefficients
``(a_t, b_t, sigma_t)`` as functions of time, the horizon ``T`` and the
noise scale ``sigma_max``. Subclasses implement :meth:`_coefficients`
on the normalised time ``s = t / T``.
"""

from __future__ import annotations

import abc
from typing import NamedTuple

import torch

from ..utils.grids import as_tensor

# Floor on the horizon so that s = t / T stays finite
T_FLOOR = 1e-10


class BridgeCoefficients(NamedTuple):
    """Coefficients of ``z_t = a_t x + b_t y + sigma_t eps``."""

    a_t: torch.Tensor
    b_t: torch.Tensor
    sigma_t: torch.Tensor


class BridgeSchedule(abc.ABC):
    """Abstract base class for bridge coefficient schedules."""

    name: str = "Bridge"

    @abc.abstractmethod
    def bridge_type(self) -> str:
        """Return a string identifier for the bridge type."""

    @abc.abstractmethod
    def _coefficients(self, t: torch.Tensor, T: float, sigma_max: float) -> BridgeCoefficients:
        """Coefficients for a ``float64`` time tensor ``t``."""

    def coefficients(self, t, T: float = 1.0, sigma_max: float = 1.0) -> BridgeCoefficients:
        """Evaluate ``(a_t, b_t, sigma_t)`` at ``t`` (scalar or tensor)."""
        return self._coefficients(as_tensor(t), float(T), float(sigma_max))

    @staticmethod
    def normalised_time(t: torch.Tensor, T: float) -> torch.Tensor:
        return t / max(T, T_FLOOR)

    def mean(self, x: torch.Tensor, y: torch.Tensor, t, T: float = 1.0, sigma_max: float = 1.0) -> torch.Tensor:
        """Noise free part ``a_t x + b_t y``."""
        a_t, b_t, _ = self.coefficients(t, T, sigma_max)
        return a_t * x + b_t * y

    def sample(
        self,
        x: torch.Tensor,
        y: torch.Tensor,
        t,
        noise: torch.Tensor,
        T: float = 1.0,
        sigma_max: float = 1.0,
    ) -> torch.Tensor:
        """Draw ``z_t`` given the endpoints and standard normal ``noise``."""
        a_t, b_t, sigma_t = self.coefficients(t, T, sigma_max)
        return a_t * x + b_t * y + sigma_t * noise

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
