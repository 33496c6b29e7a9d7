"""Standard normal noise generators.

The visualisations only need increments that look Gaussian, so besides
an explicit Box–Muller transform two cheaper approximations are
offered: the sum of twelve uniforms (central limit theorem) and a
symmetric uniform rescaled to unit variance. All generators draw from
an optional ``torch.Generator`` and return ``float64`` tensors.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple, Union

import torch

logger = logging.getLogger(__name__)

NOISE_METHODS = ("box_muller", "clt", "uniform")
DEFAULT_NOISE = "box_muller"

# Smallest uniform fed into log() by the Box–Muller transform
_U_FLOOR = 1e-12

Shape = Union[int, Tuple[int, ...]]


def _uniform(shape: Shape, generator: Optional[torch.Generator]) -> torch.Tensor:
    if isinstance(shape, int):
        shape = (shape,)
    return torch.rand(*shape, generator=generator, dtype=torch.float64)


def box_muller(shape: Shape, generator: Optional[torch.Generator] = None) -> torch.Tensor:
    """Exact standard normal draws via the Box–Muller transform."""
    u1 = _uniform(shape, generator).clamp_min(_U_FLOOR)
    u2 = _uniform(shape, generator)
    return torch.sqrt(-2.0 * torch.log(u1)) * torch.cos(2.0 * math.pi * u2)


def clt_normal(shape: Shape, generator: Optional[torch.Generator] = None) -> torch.Tensor:
    """Approximate normal draws: sum of twelve uniforms minus six."""
    if isinstance(shape, int):
        shape = (shape,)
    u = _uniform((12, *shape), generator)
    return u.sum(dim=0) - 6.0


def uniform_normal(shape: Shape, generator: Optional[torch.Generator] = None) -> torch.Tensor:
    """Symmetric uniform on ``[-sqrt(3), sqrt(3)]`` (zero mean, unit variance)."""
    return (_uniform(shape, generator) - 0.5) * 2.0 * math.sqrt(3.0)


_GENERATORS = {
    "box_muller": box_muller,
    "clt": clt_normal,
    "uniform": uniform_normal,
}


def standard_normal(
    shape: Shape,
    generator: Optional[torch.Generator] = None,
    method: str = DEFAULT_NOISE,
) -> torch.Tensor:
    """Draw (approximately) standard normal noise.

    Parameters
    ----------
    shape: int or Tuple[int, ...]
        Output shape.
    generator: Optional[torch.Generator]
        Source of randomness; ``None`` uses torch's global generator.
    method: str
        One of ``'box_muller'``, ``'clt'`` or ``'uniform'``. Unknown
        names fall back to ``'box_muller'``.

    Returns
    -------
    torch.Tensor
        ``float64`` tensor of the requested shape.
    """
    fn = _GENERATORS.get(method)
    if fn is None:
        logger.warning("Unknown noise method %r, falling back to %r", method, DEFAULT_NOISE)
        fn = _GENERATORS[DEFAULT_NOISE]
    return fn(shape, generator)
