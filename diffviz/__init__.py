"""Top level package for the diffviz library.

This package computes the data behind two interactive visualisations:
forward stochastic differential equations (VP, VE and Sub-VP) carrying
a data distribution to a Gaussian prior, and diffusion bridges (DDBM,
I2SB, DDIB, DBIM and Turbo) interpolating between a source and a target
distribution. For each demo it produces the time and space grids, a
density matrix for a heatmap, sampled trajectories, mean trajectories
and marginal summaries. Rendering is left to the caller.

Examples
--------
>>> from diffviz.config import BridgeConfig
>>> from diffviz.simulation import BridgeSimulator
>>> result = BridgeSimulator(BridgeConfig(model_type="ddbm", seed=0)).generate()
>>> result.density.shape
torch.Size([100, 200])

The version number of the package is available as ``diffviz.__version__``.
"""

from importlib.metadata import PackageNotFoundError, version as _package_version

# Public API: import key subpackages so they appear under diffviz.*
from . import config, distributions, sde, bridge, schedules, simulation, utils, cli
from .schedules import schedule

try:
    __version__ = _package_version(__name__)
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "config", "distributions", "sde", "bridge", "schedules", "simulation", "utils", "cli",
    "schedule", "__version__"
]
