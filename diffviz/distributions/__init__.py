"""One dimensional data distributions used as initial, source and
target distributions of the demos."""

from .base import Distribution, SCALE_FLOOR, normal_pdf
from .continuous import Gaussian, Laplace, Uniform, WideGaussian
from .factory import DistributionKind, get_distribution, resolve_distribution_kind
from .mixture import AsymmetricBimodal, Bimodal, Mixture, Trimodal
from .point import PointMass

__all__ = [
    "Distribution",
    "DistributionKind",
    "SCALE_FLOOR",
    "normal_pdf",
    "PointMass",
    "Mixture",
    "Bimodal",
    "Trimodal",
    "AsymmetricBimodal",
    "Gaussian",
    "Uniform",
    "Laplace",
    "WideGaussian",
    "get_distribution",
    "resolve_distribution_kind",
]
