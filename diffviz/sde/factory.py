"""Lookup of SDE implementations by name."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from .base import SDE
from .subvp import SubVPSDE
from .ve import VESDE
from .vp import VPSDE

logger = logging.getLogger(__name__)


class SDEType(str, Enum):
    VP = "vp"
    VE = "ve"
    SUBVP = "subvp"


DEFAULT_SDE = SDEType.VP

_SDE_CLASSES = {
    SDEType.VP: VPSDE,
    SDEType.VE: VESDE,
    SDEType.SUBVP: SubVPSDE,
}


def resolve_sde_type(name: Union[str, SDEType]) -> SDEType:
    """Map ``name`` to an :class:`SDEType`, falling back to VP."""
    if isinstance(name, SDEType):
        return name
    try:
        return SDEType(str(name).lower())
    except ValueError:
        logger.warning("Unknown SDE type %r, falling back to %r", name, DEFAULT_SDE.value)
        return DEFAULT_SDE


def get_sde(name: Union[str, SDEType]) -> SDE:
    """Instantiate the SDE registered under ``name`` with default parameters."""
    return _SDE_CLASSES[resolve_sde_type(name)]()
