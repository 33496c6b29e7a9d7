"""Diffusion bridge schedules.

Each schedule maps a time to the coefficients ``(a_t, b_t, sigma_t)`` of
``z_t = a_t x + b_t y + sigma_t eps``. The base class lives in
:mod:`diffviz.bridge.base`; DDBM, I2SB, DDIB, DBIM and Turbo are the
concrete variants.
"""

from .base import BridgeCoefficients, BridgeSchedule
from .dbim import DBIMBridge
from .ddbm import DDBMBridge
from .ddib import DDIBBridge
from .factory import BridgeType, get_bridge, resolve_bridge_type
from .i2sb import I2SBBridge
from .turbo import TurboBridge

__all__ = [
    "BridgeCoefficients",
    "BridgeSchedule",
    "BridgeType",
    "DBIMBridge",
    "DDBMBridge",
    "DDIBBridge",
    "I2SBBridge",
    "TurboBridge",
    "get_bridge",
    "resolve_bridge_type",
]
