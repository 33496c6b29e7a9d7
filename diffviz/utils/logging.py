"""Logging and progress reporting helpers.

All modules log through ``logging.getLogger(__name__)``; this module
only configures the root handler and wraps ``tqdm`` so that long loops
(path integration over many steps) can show a progress bar on demand.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TypeVar

from tqdm import tqdm

T = TypeVar("T")

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    filename: Optional[str] = None,
) -> None:
    """Configure package-wide logging.

    Parameters
    ----------
    level: int
        Logging level, e.g. ``logging.DEBUG``.
    format_string: Optional[str]
        Custom format string for log records.
    filename: Optional[str]
        If provided, records are appended to this file instead of
        being written to stderr.
    """
    logging_config = {
        "level": level,
        "format": format_string or DEFAULT_FORMAT,
        "datefmt": "%Y-%m-%d %H:%M:%S",
        "force": True,
    }
    if filename:
        logging_config["filename"] = filename
        logging_config["filemode"] = "a"
    logging.basicConfig(**logging_config)


def progress(
    iterable: Iterable[T],
    enabled: bool = False,
    desc: Optional[str] = None,
    total: Optional[int] = None,
) -> Iterable[T]:
    """Wrap ``iterable`` in a ``tqdm`` bar when ``enabled`` is set."""
    return tqdm(iterable, desc=desc, total=total, leave=False, disable=not enabled)
