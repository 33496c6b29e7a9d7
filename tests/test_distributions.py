"""Tests for the demo distributions."""

import pytest
import torch

from diffviz.distributions import (
    Bimodal,
    DistributionKind,
    Gaussian,
    PointMass,
    get_distribution,
)
from diffviz.distributions import base as dist_base
from diffviz.utils.grids import as_tensor
from diffviz.utils.seed import make_generator

ALL_KINDS = [k.value for k in DistributionKind]


def _mass(values, x):
    return float(values.sum() * (x[1] - x[0]))


@pytest.mark.parametrize("kind", ALL_KINDS)
@pytest.mark.parametrize("spread", [0.0, 0.5, 2.0])
def test_pdf_non_negative(kind, spread):
    dist = get_distribution(kind)
    x = torch.linspace(-50, 50, 2001, dtype=torch.float64)
    p = dist.pdf(x, center=1.0, spread=spread)
    assert torch.isfinite(p).all()
    assert torch.all(p >= 0)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_marginal_pdf_non_negative(kind):
    dist = get_distribution(kind)
    x = torch.linspace(-10, 10, 501, dtype=torch.float64)[:, None]
    decay = torch.tensor([[1.0, 0.5, 0.0]], dtype=torch.float64)
    sigma = torch.tensor([[0.0, 0.3, 1.0]], dtype=torch.float64)
    p = dist.marginal_pdf(x, decay, sigma)
    assert p.shape == (501, 3)
    assert torch.isfinite(p).all()
    assert torch.all(p >= 0)


def test_point_mass_and_gaussian_integrate_to_one():
    x = torch.linspace(-10, 10, 4001, dtype=torch.float64)
    assert _mass(PointMass().pdf(x, center=2.0), x) == pytest.approx(1.0, abs=1e-3)
    assert _mass(Gaussian().pdf(x, center=-1.0, spread=0.7), x) == pytest.approx(1.0, abs=1e-3)


@pytest.mark.parametrize("kind", ["bimodal", "trimodal", "asymmetric", "uniform", "laplace", "wide"])
def test_other_densities_integrate_to_one(kind):
    x = torch.linspace(-20, 20, 8001, dtype=torch.float64)
    assert _mass(get_distribution(kind).pdf(x, spread=0.5), x) == pytest.approx(1.0, abs=1e-2)


def test_zero_spread_is_sharp_not_infinite():
    x = torch.tensor([-2.0, -1.0], dtype=torch.float64)
    p = Bimodal().pdf(x, spread=0.0)
    assert torch.isfinite(p).all()
    assert p[0] > 100.0
    assert p[1] == pytest.approx(0.0)


def test_point_mass_samples_center():
    samples = PointMass().sample(5, center=-2.0)
    assert torch.all(samples == -2.0)


def test_point_mass_jitter_uses_spread():
    samples = PointMass(jitter=True).sample(500, center=1.0, spread=0.5, generator=make_generator(0))
    assert torch.all((samples - 1.0).abs() <= 0.25)
    assert float(samples.std()) > 0.1
    assert torch.all(PointMass(jitter=True).sample(5, center=1.0, spread=0.0) == 1.0)


def test_mixture_samples_near_modes():
    samples = get_distribution("trimodal").sample(300, spread=0.5, generator=make_generator(0))
    offsets = torch.stack([samples + 2.0, samples, samples - 2.0]).abs().min(dim=0).values
    assert torch.all(offsets <= 0.25 + 1e-12)


def test_asymmetric_weights():
    samples = get_distribution("asymmetric").sample(20000, generator=make_generator(1))
    left = float((samples < 0).double().mean())
    assert left == pytest.approx(0.7, abs=0.02)


def test_uniform_samples_in_range():
    samples = get_distribution("uniform").sample(1000, generator=make_generator(2))
    assert torch.all(samples.abs() <= 2.0)


def test_laplace_samples_finite_and_centered():
    samples = get_distribution("laplace").sample(20000, center=1.0, generator=make_generator(3))
    assert torch.isfinite(samples).all()
    assert float(samples.median()) == pytest.approx(1.0, abs=0.05)


def test_gaussian_samples_match_moments():
    samples = Gaussian().sample(20000, center=1.0, spread=0.5, generator=make_generator(4))
    assert float(samples.mean()) == pytest.approx(1.0, abs=0.02)
    assert float(samples.std()) == pytest.approx(0.5, abs=0.02)


def test_samples_reproducible_with_generator():
    for kind in ALL_KINDS:
        dist = get_distribution(kind)
        a = dist.sample(10, generator=make_generator(7))
        b = dist.sample(10, generator=make_generator(7))
        assert torch.equal(a, b)
        assert a.shape == (10,)


def test_marginal_at_unit_decay_matches_mixture_modes():
    x = torch.tensor([-2.0, 0.0, 2.0], dtype=torch.float64)
    p = Bimodal().marginal_pdf(x, 1.0, 0.5)
    assert torch.allclose(p, Bimodal().pdf(x, spread=0.5))


def test_unknown_distribution_uses_default():
    assert get_distribution("nope").kind() == "bimodal"
    assert get_distribution("nope", DistributionKind.SINGLE).kind() == "single"


def test_as_tensor_converts_to_float64():
    assert as_tensor(1).dtype == torch.float64
    assert as_tensor([0.5, 1.5]).tolist() == [0.5, 1.5]
    assert as_tensor(torch.tensor([1, 2])).dtype == torch.float64
    assert dist_base.as_tensor is as_tensor
