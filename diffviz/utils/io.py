"""Saving and loading simulation results.

Results are stored with ``torch.save`` as plain dictionaries so that a
renderer can load them without importing :mod:`diffviz`.
"""

from __future__ import annotations

import os
from typing import Any, Dict

import numpy as np
import torch


def save_result(path: str, data: Dict[str, Any]) -> str:
    """Serialize a result dictionary to disk.

    Parameters
    ----------
    path: str
        Output file path (will be created or overwritten).
    data: Dict[str, Any]
        Typically the output of :meth:`SimulationResult.to_dict`.
        Tensors are detached and moved to CPU, numpy arrays are kept.

    Returns
    -------
    str
        The path written.
    """
    cpu_data: Dict[str, Any] = {}
    for k, v in data.items():
        if isinstance(v, torch.Tensor):
            cpu_data[k] = v.detach().cpu()
        else:
            cpu_data[k] = v
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    torch.save(cpu_data, path)
    return path


def load_result(path: str) -> Dict[str, Any]:
    """Load a dictionary previously written by :func:`save_result`."""
    # numpy arrays are not on torch's safe-globals allow list
    return torch.load(path, weights_only=False)


def to_numpy(value: Any) -> Any:
    if isinstance(value, torch.Tensor):
        return value.detach().cpu().numpy()
    if isinstance(value, (list, tuple)):
        return np.asarray(value)
    return value
