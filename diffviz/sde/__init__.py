"""Forward SDE implementations.

The base :class:`diffviz.sde.base.SDE` defines the interface, while
concrete classes implement the variance preserving (VP), variance
exploding (VE) and sub-variance preserving (Sub-VP) processes.
"""

from .base import SDE, SDECoefficients
from .factory import SDEType, get_sde, resolve_sde_type
from .subvp import SubVPSDE
from .ve import VESDE
from .vp import VPSDE

__all__ = [
    "SDE",
    "SDECoefficients",
    "SDEType",
    "VESDE",
    "VPSDE",
    "SubVPSDE",
    "get_sde",
    "resolve_sde_type",
]
