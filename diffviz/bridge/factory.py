"""Lookup of bridge schedules by name."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Union

from .base import BridgeSchedule
from .dbim import DBIMBridge
from .ddbm import DDBMBridge
from .ddib import DDIBBridge
from .i2sb import I2SBBridge
from .turbo import TurboBridge

logger = logging.getLogger(__name__)


class BridgeType(str, Enum):
    DDBM = "ddbm"
    I2SB = "i2sb"
    DDIB = "ddib"
    DBIM = "dbim"
    TURBO = "turbo"


DEFAULT_BRIDGE = BridgeType.DDBM

_BRIDGE_CLASSES = {
    BridgeType.DDBM: DDBMBridge,
    BridgeType.I2SB: I2SBBridge,
    BridgeType.DDIB: DDIBBridge,
    BridgeType.DBIM: DBIMBridge,
    BridgeType.TURBO: TurboBridge,
}


def resolve_bridge_type(name: Union[str, BridgeType]) -> BridgeType:
    """Map ``name`` to a :class:`BridgeType`, falling back to DDBM."""
    if isinstance(name, BridgeType):
        return name
    try:
        return BridgeType(str(name).lower())
    except ValueError:
        logger.warning("Unknown bridge type %r, falling back to %r", name, DEFAULT_BRIDGE.value)
        return DEFAULT_BRIDGE


def get_bridge(name: Union[str, BridgeType]) -> BridgeSchedule:
    """Instantiate the bridge schedule registered under ``name``."""
    return _BRIDGE_CLASSES[resolve_bridge_type(name)]()
