"""Tests for SDE coefficients and marginal distributions."""

import math

import pytest
import torch

from diffviz.schedules import schedule
from diffviz.sde import SDECoefficients, SubVPSDE, VESDE, VPSDE, get_sde
from diffviz.simulation.ode import sde_mean_paths
from diffviz.utils.grids import time_grid


def test_vp_example_grid_and_decay():
    t = time_grid(1.0, 3)
    assert torch.allclose(t, torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64))
    sde = VPSDE()
    decay = sde.mu_decay(t)
    assert decay[0].item() == pytest.approx(1.0)
    assert decay[1].item() == pytest.approx(math.exp(-0.25), abs=1e-6)
    assert decay[2].item() == pytest.approx(math.exp(-0.5), abs=1e-6)


def test_vp_ode_path_from_two():
    t = time_grid(1.0, 3)
    path = sde_mean_paths(VPSDE(), torch.tensor([2.0], dtype=torch.float64), t)[0]
    expected = torch.tensor([2.0, 1.5576, 1.2131], dtype=torch.float64)
    assert torch.allclose(path, expected, atol=1e-3)


def test_vp_marginal():
    sde = VPSDE()
    x0 = torch.randn(5, dtype=torch.float64)
    t = torch.rand(5, dtype=torch.float64)
    mean, std = sde.marginal_prob(x0, t)
    assert torch.allclose(mean, x0 * torch.exp(-0.5 * t))
    assert torch.allclose(std, torch.sqrt(1 - torch.exp(-t)))


def test_ve_coefficients():
    sde = VESDE()
    t = torch.tensor([0.0, 1.0, 4.0], dtype=torch.float64)
    coeffs = sde.coefficients(t)
    assert torch.all(coeffs.drift_rate == 0)
    assert torch.allclose(coeffs.diffusion, torch.sqrt(2 * t + 1))
    assert torch.all(coeffs.mu_decay == 1)
    assert torch.allclose(coeffs.variance, t ** 2)


def test_subvp_coefficients():
    sde = SubVPSDE()
    t = torch.tensor([0.0, 2.0], dtype=torch.float64)
    coeffs = sde.coefficients(t)
    assert torch.allclose(coeffs.drift_rate, torch.full_like(t, -0.25))
    assert torch.allclose(coeffs.diffusion, torch.full_like(t, 0.8))
    assert torch.allclose(coeffs.mu_decay, torch.exp(-0.25 * t))
    assert torch.allclose(coeffs.variance, 0.64 * (1 - torch.exp(-0.5 * t)))
    # drift is linear in x
    x = torch.tensor([1.0, -2.0], dtype=torch.float64)
    assert torch.allclose(sde.drift(x, 1.0), -0.25 * x)


def test_variance_starts_at_zero():
    for name in ("vp", "ve", "subvp"):
        coeffs = get_sde(name).coefficients(0.0)
        assert coeffs.variance.item() == pytest.approx(0.0)
        assert coeffs.mu_decay.item() == pytest.approx(1.0)


def test_unknown_sde_falls_back_to_vp(caplog):
    with caplog.at_level("WARNING"):
        sde = get_sde("not-an-sde")
    assert isinstance(sde, VPSDE)
    assert "not-an-sde" in caplog.text


def test_schedule_dispatches_on_name():
    coeffs = schedule("subvp", 1.0)
    assert isinstance(coeffs, SDECoefficients)
    assert coeffs.mu_decay.item() == pytest.approx(math.exp(-0.25))
    fallback = schedule("typo", 1.0)
    assert fallback.mu_decay.item() == pytest.approx(math.exp(-0.5))
