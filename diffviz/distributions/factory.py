"""Lookup of distributions by name."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from .base import Distribution
from .continuous import Gaussian, Laplace, Uniform, WideGaussian
from .mixture import AsymmetricBimodal, Bimodal, Trimodal
from .point import PointMass

logger = logging.getLogger(__name__)


class DistributionKind(str, Enum):
    SINGLE = "single"
    BIMODAL = "bimodal"
    TRIMODAL = "trimodal"
    ASYMMETRIC = "asymmetric"
    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"
    LAPLACE = "laplace"
    WIDE = "wide"


_DISTRIBUTION_CLASSES = {
    DistributionKind.SINGLE: PointMass,
    DistributionKind.BIMODAL: Bimodal,
    DistributionKind.TRIMODAL: Trimodal,
    DistributionKind.ASYMMETRIC: AsymmetricBimodal,
    DistributionKind.UNIFORM: Uniform,
    DistributionKind.GAUSSIAN: Gaussian,
    DistributionKind.LAPLACE: Laplace,
    DistributionKind.WIDE: WideGaussian,
}


def resolve_distribution_kind(
    name: Union[str, DistributionKind],
    default: DistributionKind = DistributionKind.BIMODAL,
) -> DistributionKind:
    """Map ``name`` to a :class:`DistributionKind`, falling back to ``default``."""
    if isinstance(name, DistributionKind):
        return name
    try:
        return DistributionKind(str(name).lower())
    except ValueError:
        logger.warning("Unknown distribution %r, falling back to %r", name, DistributionKind(default).value)
        return DistributionKind(default)


def get_distribution(
    name: Union[str, DistributionKind],
    default: DistributionKind = DistributionKind.BIMODAL,
) -> Distribution:
    """Instantiate the distribution registered under ``name``.

    The SDE demo falls back to ``bimodal`` and the bridge demo to
    ``single``; pass the relevant ``default``.
    """
    return _DISTRIBUTION_CLASSES[resolve_distribution_kind(name, default)]()
