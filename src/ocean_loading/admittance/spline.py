"""
Natural cubic spline fitting and evaluation over unevenly spaced samples.

The fit returns the second derivative of the interpolant at every
sample (the classic ``SPLINE``/``EVAL`` split of HARDISP), so the
samples and coefficients can be stored side by side and sliced per
tidal species.  Coefficients are computed with
:class:`scipy.interpolate.CubicSpline` using natural end conditions.

Within an interval ``[x_k, x_k+1]`` of width ``h`` the interpolant is::

    y(x) = (s_k (x_k+1 - x)^3 + s_k+1 (x - x_k)^3) / (6 h)
           + (x - x_k)   (y_k+1 / h - s_k+1 h / 6)
           + (x_k+1 - x) (y_k / h   - s_k h / 6)

Degenerate inputs never raise: an empty sample set evaluates to zero,
fewer than three samples (or repeated abscissae) give straight lines.
"""
from __future__ import annotations

import logging

import numpy as np
from scipy.interpolate import CubicSpline

logger = logging.getLogger(__name__)


def fit_spline(
    xs: np.ndarray,
    ys: np.ndarray,
    logger: logging.Logger | None = None,
) -> np.ndarray:
    """
    Second derivatives of the natural cubic spline through ``(xs, ys)``.

    Parameters
    ----------
    xs : np.ndarray
        Sample abscissae in non-decreasing order.
    ys : np.ndarray
        Sample values.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    np.ndarray
        Second derivative at each sample, same length as *xs*.  All zero
        when fewer than three samples are given or *xs* is not strictly
        increasing.

    Raises
    ------
    ValueError
        If *xs* and *ys* have different lengths.
    """
    _log = logger or logging.getLogger(__name__)

    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if len(xs) != len(ys):
        raise ValueError(
            f"xs ({len(xs)}) and ys ({len(ys)}) must have the same length."
        )

    n = len(xs)
    if n < 3:
        return np.zeros(n)
    if np.any(np.diff(xs) <= 0.0):
        _log.debug(
            'Spline abscissae not strictly increasing (%d samples); '
            'using straight lines.', n,
        )
        return np.zeros(n)

    spline = CubicSpline(xs, ys, bc_type='natural')
    coeffs = spline(xs, 2)
    # Natural end conditions hold exactly.
    coeffs[0] = 0.0
    coeffs[-1] = 0.0
    return coeffs


def evaluate_spline(x, xs: np.ndarray, ys: np.ndarray, coeffs: np.ndarray):
    """
    Evaluate a spline fitted by :func:`fit_spline`.

    Parameters
    ----------
    x : float or array_like
        Abscissa(e) at which to evaluate.
    xs, ys : np.ndarray
        The samples passed to :func:`fit_spline`.
    coeffs : np.ndarray
        Second derivatives returned by :func:`fit_spline`.

    Returns
    -------
    float or np.ndarray
        Interpolated value(s).  Points outside ``[xs[0], xs[-1]]`` take
        the nearest endpoint value.  With no samples the result is 0.
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    coeffs = np.asarray(coeffs, dtype=float)
    scalar = np.ndim(x) == 0
    x = np.atleast_1d(np.asarray(x, dtype=float))

    n = len(xs)
    if n == 0:
        values = np.zeros_like(x)
    elif n == 1:
        values = np.full_like(x, ys[0])
    else:
        xc = np.clip(x, xs[0], xs[-1])
        k = np.clip(np.searchsorted(xs, xc, side='right') - 1, 0, n - 2)
        x0, x1 = xs[k], xs[k + 1]
        h = x1 - x0
        flat = h <= 0.0
        h = np.where(flat, 1.0, h)

        dy = x1 - xc
        dy1 = xc - x0
        cubic = (coeffs[k] * dy ** 3 + coeffs[k + 1] * dy1 ** 3) / (6.0 * h)
        upper = dy1 * (ys[k + 1] / h - coeffs[k + 1] * h / 6.0)
        lower = dy * (ys[k] / h - coeffs[k] * h / 6.0)
        values = np.where(flat, ys[k], cubic + upper + lower)

    if scalar:
        return float(values[0])
    return values
