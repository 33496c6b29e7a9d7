"""Tests for diffusion bridge schedules."""

import math

import pytest
import torch

from diffviz.bridge import (
    BridgeCoefficients,
    DBIMBridge,
    DDBMBridge,
    DDIBBridge,
    I2SBBridge,
    TurboBridge,
    get_bridge,
)
from diffviz.schedules import schedule


def _values(coeffs):
    return tuple(float(c) for c in coeffs)


@pytest.mark.parametrize("bridge", [DDBMBridge(), I2SBBridge(), TurboBridge()])
def test_interpolating_bridges_boundaries(bridge):
    T, sigma_max = 2.0, 0.8
    assert _values(bridge.coefficients(0.0, T, sigma_max)) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)
    assert _values(bridge.coefficients(T, T, sigma_max)) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_ddbm_midpoint():
    sigma_max = 0.8
    a_t, b_t, sigma_t = _values(DDBMBridge().coefficients(0.5, 1.0, sigma_max))
    assert a_t == pytest.approx(0.5)
    assert b_t == pytest.approx(0.5)
    assert sigma_t == pytest.approx(sigma_max)


def test_i2sb_triangular_noise():
    t = torch.tensor([0.25, 0.5, 0.75], dtype=torch.float64)
    sigma_t = I2SBBridge().coefficients(t, 1.0, 1.0).sigma_t
    assert torch.allclose(sigma_t, torch.tensor([0.5, 1.0, 0.5], dtype=torch.float64))


def test_ddib_phases():
    bridge = DDIBBridge()
    assert _values(bridge.coefficients(0.0, 1.0, 1.0)) == pytest.approx((1.0, 0.0, 0.0))
    assert _values(bridge.coefficients(0.5, 1.0, 1.0)) == pytest.approx((0.0, 0.0, 1.0))
    assert _values(bridge.coefficients(1.0, 1.0, 1.0)) == pytest.approx((0.0, 1.0, 0.0))
    a_t, b_t, sigma_t = _values(bridge.coefficients(0.75, 1.0, 1.0))
    assert a_t == 0.0
    assert b_t == pytest.approx(0.5 ** 0.5)
    assert sigma_t == pytest.approx(0.5 ** 0.5)


def test_dbim_boundaries():
    bridge = DBIMBridge()
    assert _values(bridge.coefficients(0.0, 1.0, 0.8)) == pytest.approx((0.0, 1.0, 0.0), abs=1e-6)
    assert _values(bridge.coefficients(1.0, 1.0, 0.8)) == pytest.approx((1.0, 0.0, 0.0), abs=1e-6)


def test_dbim_degenerate_noise_scale():
    a_t, b_t, c_t = _values(DBIMBridge().coefficients(0.5, 1.0, 0.0))
    assert (a_t, b_t, c_t) == (1.0, 1.0, 0.0)


def test_zero_horizon_is_finite():
    for name in ("ddbm", "i2sb", "ddib", "dbim", "turbo"):
        coeffs = get_bridge(name).coefficients(torch.tensor([0.0]), 0.0, 0.8)
        for c in coeffs:
            assert torch.isfinite(c).all()


def test_coefficients_vectorised():
    t = torch.linspace(0, 1, 11, dtype=torch.float64)
    for name in ("ddbm", "i2sb", "ddib", "dbim", "turbo"):
        coeffs = get_bridge(name).coefficients(t, 1.0, 0.8)
        assert all(c.shape == t.shape for c in coeffs)
        assert torch.all(coeffs.sigma_t >= 0)


def test_sample_without_noise_is_mean():
    bridge = DDBMBridge()
    x = torch.tensor([-2.0], dtype=torch.float64)
    y = torch.tensor([2.0], dtype=torch.float64)
    z = bridge.sample(x, y, 0.25, torch.zeros(1, dtype=torch.float64))
    assert torch.allclose(z, bridge.mean(x, y, 0.25))
    assert z.item() == pytest.approx(-1.0)


def test_unknown_bridge_falls_back_to_ddbm():
    assert isinstance(get_bridge("unknown"), DDBMBridge)


def test_schedule_returns_bridge_coefficients():
    coeffs = schedule("ddbm", 0.5, T=1.0, sigma_max=0.8)
    assert isinstance(coeffs, BridgeCoefficients)
    assert float(coeffs.sigma_t) == pytest.approx(0.8)


def test_dbim_interior_time():
    t, sigma_max = 0.37, 0.8
    beta_min, beta_d = 0.1, 2.0

    def alpha(u):
        return math.exp(-0.5 * beta_min * u - 0.25 * beta_d * u ** 2)

    def rho_sq(u):
        return math.exp(beta_min * u + 0.5 * beta_d * u ** 2) - 1.0

    u = t * sigma_max
    rho_T_sq = rho_sq(sigma_max)
    rho_bar_sq = rho_T_sq - rho_sq(u)
    expected_a = alpha(u) / alpha(sigma_max) * rho_sq(u) / rho_T_sq
    expected_b = alpha(u) * rho_bar_sq / rho_T_sq
    expected_c = alpha(u) * math.sqrt(rho_bar_sq) * math.sqrt(rho_sq(u)) / math.sqrt(rho_T_sq)

    a_t, b_t, c_t = _values(DBIMBridge().coefficients(t, 1.0, sigma_max))
    assert a_t == pytest.approx(expected_a, rel=1e-9)
    assert b_t == pytest.approx(expected_b, rel=1e-9)
    assert c_t == pytest.approx(expected_c, rel=1e-9)
    assert 0.0 < c_t < 1.0


def test_dbim_horizon_rescales_time():
    short = _values(DBIMBridge().coefficients(0.37, 1.0, 0.8))
    long = _values(DBIMBridge().coefficients(0.74, 2.0, 0.8))
    assert long == pytest.approx(short, rel=1e-12)


def test_turbo_noise_bump():
    sigma_max = 0.8
    bridge = TurboBridge()
    a_t, b_t, sigma_t = _values(bridge.coefficients(0.5, 1.0, sigma_max))
    assert (a_t, b_t) == pytest.approx((0.5, 0.5))
    assert sigma_t == pytest.approx(0.1 * sigma_max)
    a_t, b_t, sigma_t = _values(bridge.coefficients(0.37, 1.0, sigma_max))
    assert a_t == pytest.approx(0.63)
    assert b_t == pytest.approx(0.37)
    assert sigma_t == pytest.approx(0.1 * sigma_max * math.sin(0.37 * math.pi))
    # peak sits at the midpoint of the horizon
    assert float(bridge.coefficients(1.0, 2.0, sigma_max).sigma_t) == pytest.approx(0.1 * sigma_max)
