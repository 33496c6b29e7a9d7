"""Single entry point for schedule lookup.

:func:`schedule` accepts any process name of either demo. Bridge names
return :class:`~diffviz.bridge.BridgeCoefficients`, SDE names return
:class:`~diffviz.sde.SDECoefficients`; unknown names are treated as the
default VP SDE.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .bridge import BridgeCoefficients, BridgeType, get_bridge
from .sde import SDECoefficients, get_sde

_BRIDGE_NAMES = {b.value for b in BridgeType}


def schedule(
    kind: str,
    t,
    T: float = 1.0,
    sigma_max: float = 1.0,
) -> Union[BridgeCoefficients, SDECoefficients]:
    """Coefficients of process ``kind`` at time ``t``.

    ``T`` and ``sigma_max`` only affect bridge schedules.
    """
    name = kind.value if isinstance(kind, Enum) else str(kind).lower()
    if name in _BRIDGE_NAMES:
        return get_bridge(name).coefficients(t, T, sigma_max)
    return get_sde(name).coefficients(t)
