"""Ordering of admittance samples by a scalar key."""
from __future__ import annotations

import numpy as np


def ascending_permutation(values) -> np.ndarray:
    """
    Return the permutation that sorts *values* in ascending order.

    Parameters
    ----------
    values : array_like
        One-dimensional scalar keys (e.g. frequencies).

    Returns
    -------
    np.ndarray
        Integer indices such that ``values[perm]`` is non-decreasing.
        Ties keep their input order.
    """
    keys = np.asarray(values, dtype=float)
    if keys.ndim != 1:
        raise ValueError(f"values must be one-dimensional, got shape {keys.shape}.")
    return np.argsort(keys, kind='stable')
