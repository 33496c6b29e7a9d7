"""Utility subpackage for diffviz.

Groups helper modules used across the repository: seeding, noise
generation, time/space grids, logging and result serialisation.
"""

from .grids import time_grid, spatial_grid, as_tensor
from .io import save_result, load_result
from .logging import configure_logging, progress
from .noise import standard_normal, box_muller, clt_normal, uniform_normal, NOISE_METHODS
from .seed import set_seed, make_generator

__all__ = [
    "time_grid",
    "spatial_grid",
    "as_tensor",
    "save_result",
    "load_result",
    "configure_logging",
    "progress",
    "standard_normal",
    "box_muller",
    "clt_normal",
    "uniform_normal",
    "NOISE_METHODS",
    "set_seed",
    "make_generator",
]
