r"""Diffusion bridge implicit model (DBIM) schedule.

Built on a variance preserving noise schedule with

.. math::

    \alpha(u) = \exp(-\tfrac12 \beta_{\min} u - \tfrac14 \beta_d u^2), \qquad
    \rho^2(u) = \exp(\beta_{\min} u + \tfrac12 \beta_d u^2) - 1,

evaluated at the rescaled diffusion time ``u = (t / T) sigma_max``.
With ``alpha_T``, ``rho_T`` taken at ``u = sigma_max`` the marginal is

.. math::

    z_t = \frac{\bar\alpha_t \rho_t^2}{\rho_T^2} x
        + \frac{\alpha_t \bar\rho_t^2}{\rho_T^2} y
        + \frac{\alpha_t \bar\rho_t \rho_t}{\rho_T} \epsilon,

where ``alpha_bar_t = alpha_t / alpha_T`` and
``rho_bar_t^2 = rho_T^2 - rho_t^2``. Unlike the other bridges the
weight on ``y`` is one at ``t = 0``: DBIM runs from ``y`` towards ``x``.
"""

from __future__ import annotations

import math

import torch

from .base import BridgeCoefficients, BridgeSchedule

# Divisions by rho_T are skipped below this value
RHO_FLOOR = 1e-20


class DBIMBridge(BridgeSchedule):
    """DBIM bridge on a VP noise schedule."""

    name = "DBIM"

    def __init__(self, beta_min: float = 0.1, beta_d: float = 2.0) -> None:
        self.beta_min = beta_min
        self.beta_d = beta_d

    def bridge_type(self) -> str:
        return "dbim"

    def _log_alpha(self, u):
        return -0.5 * self.beta_min * u - 0.25 * self.beta_d * u ** 2

    def _rho_sq(self, u):
        return self.beta_min * u + 0.5 * self.beta_d * u ** 2

    def _coefficients(self, t: torch.Tensor, T: float, sigma_max: float) -> BridgeCoefficients:
        sigma = self.normalised_time(t, T) * sigma_max
        alpha_T = math.exp(self._log_alpha(sigma_max))
        rho_T_sq = max(0.0, math.expm1(self._rho_sq(sigma_max)))
        rho_T = math.sqrt(rho_T_sq)

        alpha_t = torch.exp(self._log_alpha(sigma))
        alpha_bar_t = alpha_t / alpha_T
        rho_t_sq = torch.clamp(torch.expm1(self._rho_sq(sigma)), min=0.0)
        rho_bar_t_sq = torch.clamp(rho_T_sq - rho_t_sq, min=0.0)

        if rho_T_sq > RHO_FLOOR:
            a_t = alpha_bar_t * rho_t_sq / rho_T_sq
            b_t = alpha_t * rho_bar_t_sq / rho_T_sq
        else:
            a_t = (sigma >= 0.99 * sigma_max).to(torch.float64)
            b_t = (sigma <= 1e-6).to(torch.float64)
        if rho_T > RHO_FLOOR:
            c_t = alpha_t * torch.sqrt(rho_bar_t_sq) * torch.sqrt(rho_t_sq) / rho_T
        else:
            c_t = torch.zeros_like(sigma)
        return BridgeCoefficients(a_t, b_t, c_t)

    def __repr__(self) -> str:
        return f"DBIMBridge(beta_min={self.beta_min}, beta_d={self.beta_d})"
