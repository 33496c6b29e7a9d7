"""Configuration handling for diffviz.

Each demo has a flat dataclass holding every user selectable parameter:
:class:`SDEConfig` for the forward SDE demo and :class:`BridgeConfig`
for the diffusion bridge demo. Both share the simulation grid settings
defined on :class:`SimulationConfig`. A configuration is created with
defaults, mutated field by field through :meth:`SimulationConfig.update`
(as a user interface would do) and read wholesale by the simulator at
generation time. Configurations can also be loaded from YAML files,
see ``configs/`` for examples.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Settings shared by both demos.

    ``dt`` is not a field: it is always derived as ``T / steps`` so it
    follows every change of ``steps`` or ``T``.
    """

    steps: int = 200
    paths: int = 20
    T: float = 1.0
    x_range: Tuple[float, float] = (-4.0, 4.0)
    grid_points: int = 100
    noise: str = "box_muller"
    seed: Optional[int] = None

    demo: ClassVar[str] = ""

    @property
    def dt(self) -> float:
        return self.T / max(self.steps, 1)

    @classmethod
    def keys(cls) -> List[str]:
        """Names of the options accepted by :meth:`update`."""
        return [f.name for f in fields(cls)]

    def get(self, key: str) -> Any:
        if key == "dt":
            return self.dt
        if key not in self.keys():
            raise KeyError(key)
        return getattr(self, key)

    def update(self, key: str, value: Any) -> bool:
        """Set option ``key`` to ``value``.

        Returns ``False`` and leaves the configuration unchanged if
        ``key`` is not a recognised option. String values are converted
        to the type of the current value.
        """
        if key not in self.keys():
            logger.warning("Ignoring unknown %s option %r", self.demo or "simulation", key)
            return False
        setattr(self, key, self._coerce(key, value))
        return True

    def update_from_overrides(self, overrides: Dict[str, Any]) -> List[str]:
        """Apply several updates, returning the keys that were rejected.

        Keys may be prefixed with the demo name, e.g. ``bridge.sigma_max``.
        """
        rejected = []
        for key, value in overrides.items():
            if "." in key:
                section, key = key.split(".", 1)
                if section != self.demo:
                    rejected.append(f"{section}.{key}")
                    continue
            if not self.update(key, value):
                rejected.append(key)
        return rejected

    def _coerce(self, key: str, value: Any) -> Any:
        if key == "x_range":
            if isinstance(value, str):
                value = value.replace("(", "").replace(")", "").split(",")
            lo, hi = value
            return (float(lo), float(hi))
        if key == "seed":
            if value is None or (isinstance(value, str) and value.lower() in {"", "none", "null"}):
                return None
            return int(value)
        current = getattr(self, key)
        if isinstance(current, bool):
            if isinstance(value, str):
                return value.lower() in {"1", "true", "yes", "on"}
            return bool(value)
        if isinstance(current, int):
            return int(value)
        if isinstance(current, float):
            return float(value)
        return value

    def as_dict(self) -> Dict[str, Any]:
        data = dataclasses.asdict(self)
        data["dt"] = self.dt
        return data

    def copy(self):
        """Independent snapshot of this configuration."""
        return dataclasses.replace(self)


@dataclass
class SDEConfig(SimulationConfig):
    """Configuration of the forward SDE demo."""

    T: float = 4.0
    sde_type: str = "vp"
    initial_dist: str = "bimodal"
    initial_center: float = 0.0
    initial_spread: float = 0.5

    demo: ClassVar[str] = "sde"


@dataclass
class BridgeConfig(SimulationConfig):
    """Configuration of the diffusion bridge demo.

    Bridges follow ``z_t = a_t x + b_t y + sigma_t eps`` between a source
    sample ``x`` and a target sample ``y``; ``sigma_max`` scales the noise.
    """

    T: float = 1.0
    sigma_max: float = 0.8
    model_type: str = "dbim"
    source_dist: str = "trimodal"
    target_dist: str = "single"
    source_center: float = -2.0
    target_center: float = 2.0
    source_spread: float = 0.5
    target_spread: float = 0.5

    demo: ClassVar[str] = "bridge"


CONFIG_CLASSES = {
    SDEConfig.demo: SDEConfig,
    BridgeConfig.demo: BridgeConfig,
}


def build_config(demo: str = "sde") -> SimulationConfig:
    """Return the default configuration of ``demo`` (``'sde'`` or ``'bridge'``)."""
    try:
        return CONFIG_CLASSES[demo.lower()]()
    except KeyError:
        raise ValueError(f"Unknown demo: {demo}") from None


def load_config(path: str) -> SimulationConfig:
    """Load a configuration from a YAML file.

    Parameters
    ----------
    path: str
        Path to a YAML file. The optional top level ``demo`` key selects
        the demo (default ``'sde'``); all other keys are applied with
        :meth:`SimulationConfig.update`.

    Returns
    -------
    SimulationConfig
        A populated :class:`SDEConfig` or :class:`BridgeConfig`.
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    cfg = build_config(str(data.pop("demo", "sde")))
    for key, value in data.items():
        cfg.update(key, value)
    return cfg
