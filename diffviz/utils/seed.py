"""Random seed utilities.

Reproducible simulations need a controlled source of randomness. Two
helpers are provided: :func:`set_seed` seeds the global generators of
Python's ``random`` module, NumPy and PyTorch, while
:func:`make_generator` returns a private ``torch.Generator`` so that a
single simulation can be repeated without touching global state.
"""

from __future__ import annotations

import random
from typing import Optional

import numpy as np
import torch


def set_seed(seed: int) -> None:
    """Seed Python, NumPy and torch global state.

    The command line calls this for ``--seed`` so that code drawing from
    the global torch generator (e.g. a renderer jittering points) is
    repeatable along with the simulation itself.
    """
    seed = int(seed)
    for seed_fn in (random.seed, np.random.seed, torch.manual_seed):
        seed_fn(seed)


def make_generator(seed: Optional[int] = None) -> Optional[torch.Generator]:
    """Return a CPU ``torch.Generator`` seeded with ``seed``.

    ``None`` is passed through so that callers fall back to torch's
    global generator.
    """
    if seed is None:
        return None
    generator = torch.Generator()
    generator.manual_seed(int(seed))
    return generator
