"""Interactive session around a simulator.

A user interface holds exactly one :class:`SimulationSession`. It edits
the active configuration through :meth:`SimulationSession.update` and
asks for a new frame with :meth:`SimulationSession.regenerate`. Only one
generation may be in flight: a request arriving while the session is
busy is rejected rather than queued. Failures are logged and kept in
:attr:`SimulationSession.last_error` for display, and the session is
ready again afterwards.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import torch

from ..config import SimulationConfig, build_config
from .generator import SimulationResult, Simulator, create_simulator

logger = logging.getLogger(__name__)


class SimulationSession:
    """Holds the active configuration and gates regeneration."""

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        self.simulator: Simulator = create_simulator(config)
        self.last_result: Optional[SimulationResult] = None
        self.last_error: Optional[str] = None
        self._busy = False

    @classmethod
    def for_demo(cls, demo: str) -> "SimulationSession":
        return cls(build_config(demo))

    @property
    def ready(self) -> bool:
        return not self._busy

    def update(self, key: str, value: Any) -> bool:
        """Change one option of the active configuration."""
        return self.config.update(key, value)

    def reset(self) -> None:
        """Restore the default configuration of the current demo."""
        self.config = build_config(self.config.demo)
        self.simulator.update_config(self.config)

    def regenerate(self, generator: Optional[torch.Generator] = None) -> Optional[SimulationResult]:
        """Run one generation.

        Returns the new result, or ``None`` if the session was busy or
        the generation failed (see :attr:`last_error`).
        """
        if self._busy:
            logger.debug("Regeneration requested while busy, ignoring")
            return None
        self._busy = True
        try:
            result = self.simulator.generate(generator)
        except Exception as exc:
            logger.exception("Error regenerating %s simulation", self.config.demo)
            self.last_error = f"{type(exc).__name__}: {exc}"
            return None
        finally:
            self._busy = False
        self.last_error = None
        self.last_result = result
        return result
