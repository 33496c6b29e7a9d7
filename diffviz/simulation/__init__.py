"""Path generation, density estimation and the demo simulators."""

from .bridge_sampler import bridge_paths, sample_pairs
from .density import analytic_density, monte_carlo_density
from .em import euler_maruyama_paths
from .generator import BridgeSimulator, SDESimulator, SimulationResult, create_simulator
from .ode import bridge_mean_path, representative_points, sde_mean_paths
from .session import SimulationSession

__all__ = [
    "bridge_paths",
    "sample_pairs",
    "analytic_density",
    "monte_carlo_density",
    "euler_maruyama_paths",
    "BridgeSimulator",
    "SDESimulator",
    "SimulationResult",
    "create_simulator",
    "bridge_mean_path",
    "representative_points",
    "sde_mean_paths",
    "SimulationSession",
]
