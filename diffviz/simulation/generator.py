"""Simulators assembling the data of one visualisation frame.

:class:`SDESimulator` and :class:`BridgeSimulator` read a snapshot of
their configuration, look up the process and distributions, build the
time and space grids and return a :class:`SimulationResult` holding
everything a renderer needs. A new result is created on every call to
``generate``; nothing is cached between calls.

Examples
--------
>>> from diffviz.config import SDEConfig
>>> result = SDESimulator(SDEConfig(steps=50, seed=0)).generate()
>>> result.paths.shape
torch.Size([20, 50])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import torch

from ..bridge import get_bridge
from ..config import BridgeConfig, SDEConfig, SimulationConfig
from ..distributions import DistributionKind, PointMass, get_distribution
from ..sde import get_sde
from ..utils.grids import spatial_grid, time_grid
from ..utils.io import to_numpy
from ..utils.seed import make_generator
from .bridge_sampler import bridge_paths, sample_pairs
from .density import analytic_density, monte_carlo_density
from .em import euler_maruyama_paths
from .ode import bridge_mean_path, representative_points, sde_mean_paths

logger = logging.getLogger(__name__)

# Width of the data marginal drawn next to the SDE heatmap
DATA_MARGINAL_SIGMA = 0.2


@dataclass(frozen=True)
class SimulationResult:
    """Output of one ``generate`` call.

    Attributes
    ----------
    demo: str
        ``'sde'`` or ``'bridge'``.
    process: str
        Resolved SDE or bridge type.
    t: torch.Tensor
        Time grid, shape ``(steps,)``.
    x_grid: torch.Tensor
        Spatial grid, shape ``(grid_points,)``.
    density: torch.Tensor
        Density matrix, shape ``(grid_points, steps)``.
    paths: torch.Tensor
        Stochastic trajectories, shape ``(paths, steps)``.
    mean_paths: torch.Tensor
        Deterministic trajectories, shape ``(k, steps)``.
    start_marginal, end_marginal: torch.Tensor
        Densities on ``x_grid`` at the start and the end of the process.
    start_mean, end_mean: float
        Mean of the sampled start and end values.
    """

    demo: str
    process: str
    t: torch.Tensor
    x_grid: torch.Tensor
    density: torch.Tensor
    paths: torch.Tensor
    mean_paths: torch.Tensor
    start_marginal: torch.Tensor
    end_marginal: torch.Tensor
    start_mean: float
    end_mean: float

    @property
    def num_paths(self) -> int:
        return self.paths.shape[0]

    @property
    def steps(self) -> int:
        return self.t.shape[0]

    def to_dict(self) -> Dict[str, Any]:
        """Plain numpy / float representation for renderers."""
        return {
            "demo": self.demo,
            "process": self.process,
            "t": to_numpy(self.t),
            "x_grid": to_numpy(self.x_grid),
            "density": to_numpy(self.density),
            "paths": to_numpy(self.paths),
            "mean_paths": to_numpy(self.mean_paths),
            "start_marginal": to_numpy(self.start_marginal),
            "end_marginal": to_numpy(self.end_marginal),
            "start_mean": self.start_mean,
            "end_mean": self.end_mean,
        }


def _mean(values: torch.Tensor) -> float:
    return float(values.mean()) if values.numel() else 0.0


class SDESimulator:
    """Forward SDE demo: analytic density, Euler–Maruyama paths and
    probability flow trajectories."""

    def __init__(self, config: Optional[SDEConfig] = None, show_progress: bool = False) -> None:
        self.config = config if config is not None else SDEConfig()
        self.show_progress = show_progress

    def update_config(self, config: SDEConfig) -> None:
        self.config = config

    def generate(self, generator: Optional[torch.Generator] = None) -> SimulationResult:
        cfg = self.config.copy()
        if generator is None:
            generator = make_generator(cfg.seed)
        sde = get_sde(cfg.sde_type)
        dist = get_distribution(cfg.initial_dist, DistributionKind.BIMODAL)
        if isinstance(dist, PointMass):
            dist = PointMass(dist.display_width, jitter=True)

        t = time_grid(cfg.T, cfg.steps)
        x_grid = spatial_grid(cfg.x_range, cfg.grid_points)
        density = analytic_density(dist, sde, x_grid, t, cfg.initial_center, cfg.initial_spread)

        x0 = dist.sample(cfg.paths, cfg.initial_center, cfg.initial_spread, generator)
        paths = euler_maruyama_paths(sde, x0, t, cfg.dt, generator, cfg.noise, self.show_progress)
        starts = representative_points(dist.kind(), cfg.initial_center)
        mean_paths = sde_mean_paths(sde, starts, t)

        start_marginal = dist.marginal_pdf(
            x_grid, 1.0, DATA_MARGINAL_SIGMA, cfg.initial_center, cfg.initial_spread
        )
        end_marginal = sde.prior_pdf(x_grid)

        logger.debug(
            "SDE demo: %s from %s, %d paths x %d steps, T=%g, dt=%g",
            sde.sde_type(), dist.kind(), cfg.paths, cfg.steps, cfg.T, cfg.dt,
        )
        return SimulationResult(
            demo=cfg.demo,
            process=sde.sde_type(),
            t=t,
            x_grid=x_grid,
            density=density,
            paths=paths,
            mean_paths=mean_paths,
            start_marginal=start_marginal,
            end_marginal=end_marginal,
            start_mean=_mean(x0),
            end_mean=_mean(paths[:, -1]) if cfg.steps > 0 else 0.0,
        )


class BridgeSimulator:
    """Diffusion bridge demo: sampled endpoint pairs, bridge paths and a
    Monte Carlo density built from the same pairs."""

    def __init__(self, config: Optional[BridgeConfig] = None) -> None:
        self.config = config if config is not None else BridgeConfig()

    def update_config(self, config: BridgeConfig) -> None:
        self.config = config

    def generate(self, generator: Optional[torch.Generator] = None) -> SimulationResult:
        cfg = self.config.copy()
        if generator is None:
            generator = make_generator(cfg.seed)
        bridge = get_bridge(cfg.model_type)
        source = get_distribution(cfg.source_dist, DistributionKind.SINGLE)
        target = get_distribution(cfg.target_dist, DistributionKind.SINGLE)

        t = time_grid(cfg.T, cfg.steps)
        x_grid = spatial_grid(cfg.x_range, cfg.grid_points)

        x, y = sample_pairs(
            source, target, cfg.paths,
            cfg.source_center, cfg.source_spread,
            cfg.target_center, cfg.target_spread,
            generator,
        )
        paths = bridge_paths(bridge, x, y, t, cfg.sigma_max, generator, cfg.noise)
        density = monte_carlo_density(bridge, x_grid, t, x, y, cfg.sigma_max)

        x_mean, y_mean = _mean(x), _mean(y)
        mean_paths = bridge_mean_path(x_mean, y_mean, t)

        logger.debug(
            "Bridge demo: %s from %s to %s, %d paths x %d steps, sigma_max=%g",
            bridge.bridge_type(), source.kind(), target.kind(), cfg.paths, cfg.steps, cfg.sigma_max,
        )
        return SimulationResult(
            demo=cfg.demo,
            process=bridge.bridge_type(),
            t=t,
            x_grid=x_grid,
            density=density,
            paths=paths,
            mean_paths=mean_paths,
            start_marginal=source.pdf(x_grid, cfg.source_center, cfg.source_spread),
            end_marginal=target.pdf(x_grid, cfg.target_center, cfg.target_spread),
            start_mean=x_mean,
            end_mean=y_mean,
        )


Simulator = Union[SDESimulator, BridgeSimulator]


def create_simulator(config: SimulationConfig) -> Simulator:
    """Build the simulator matching the type of ``config``."""
    if isinstance(config, BridgeConfig):
        return BridgeSimulator(config)
    if isinstance(config, SDEConfig):
        return SDESimulator(config)
    raise TypeError(f"No simulator for configuration of type {type(config).__name__}")
