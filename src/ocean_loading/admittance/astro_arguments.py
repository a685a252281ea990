"""
Instantaneous frequency and phase of tidal harmonics at an epoch.

Evaluates the six Doodson fundamental arguments (tau, s, h, p, N', ps)
from the IERS expressions for the Delaunay arguments, then combines
them with a harmonic's Doodson multipliers::

    phase = sum(n_i * D_i)        (degrees, reduced to [0, 360))
    freq  = sum(n_i * dD_i/dt)    (cycles per day)

Replaces the ``TDFRPH``, ``JULDAT`` and ``ETUTC`` routines of the IERS
HARDISP program.  The Delaunay arguments are evaluated at Julian
centuries of Terrestrial Time since J2000.0; the UTC to TT offset comes
from the leap-second table below.

References
----------
- Petit, G. and Luzum, B. (eds.) (2010). IERS Conventions (2010),
  Chapter 5 (Delaunay arguments) and Chapter 7 (HARDISP).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

J2000_DAY_NUMBER: int = 2451545
"""Julian day number of 2000 January 1."""

TT_MINUS_TAI: float = 32.184
"""Offset between Terrestrial Time and TAI in seconds."""

# ---------------------------------------------------------------------------
# TAI - UTC in seconds, effective from the given decimal year.
# ---------------------------------------------------------------------------

_LEAP_SECOND_EPOCHS = np.array([
    1972.0, 1972.5, 1973.0, 1974.0, 1975.0, 1976.0, 1977.0, 1978.0,
    1979.0, 1980.0, 1981.5, 1982.5, 1983.5, 1985.5, 1988.0, 1990.0,
    1991.0, 1992.5, 1993.5, 1994.5, 1996.0, 1997.5, 1999.0, 2006.0,
    2009.0, 2012.5, 2015.5, 2017.0,
])
_TAI_MINUS_UTC = np.arange(10.0, 10.0 + len(_LEAP_SECOND_EPOCHS))


@dataclass(frozen=True)
class Epoch:
    """
    Observation epoch in UTC.

    Attributes
    ----------
    year : int
        Calendar year.
    day_of_year : int
        Day of year, 1 for January 1.
    hour, minute, second : int
        Time of day (UTC).
    """

    year: int
    day_of_year: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        if not 1 <= self.day_of_year <= 366:
            raise ValueError(
                f"day_of_year must be in 1..366, got {self.day_of_year}."
            )
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}.")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {self.minute}.")
        if not 0 <= self.second <= 60:
            raise ValueError(f"second must be in 0..60, got {self.second}.")

    @classmethod
    def from_datetime(cls, value) -> Epoch:
        """
        Build an epoch from anything :class:`pandas.Timestamp` accepts.

        Timezone-aware values are converted to UTC; naive values are
        taken to be UTC already.  Sub-second precision is truncated.
        """
        ts = pd.Timestamp(value)
        if ts.tzinfo is not None:
            ts = ts.tz_convert('UTC')
        return cls(
            year=ts.year,
            day_of_year=ts.dayofyear,
            hour=ts.hour,
            minute=ts.minute,
            second=ts.second,
        )

    @property
    def day_fraction(self) -> float:
        """Fraction of the UTC day elapsed."""
        return self.hour / 24.0 + self.minute / 1440.0 + self.second / 86400.0

    @property
    def decimal_year(self) -> float:
        leap = 1 if self.year % 4 == 0 else 0
        return self.year + (self.day_of_year + self.day_fraction) / (365.0 + leap)


@dataclass(frozen=True)
class DoodsonArguments:
    """Doodson fundamental angles (degrees) and rates (cycles/day)."""

    angles: np.ndarray
    rates: np.ndarray

    def frequency_phase(self, doodson) -> tuple:
        """
        Frequency and phase of one or more harmonics.

        Parameters
        ----------
        doodson : array_like
            Doodson multipliers, shape ``(6,)`` or ``(n, 6)``.

        Returns
        -------
        tuple
            ``(frequency, phase)`` -- floats for a single code, arrays of
            length *n* otherwise.  Phase is in ``[0, 360)``.
        """
        codes = np.asarray(doodson, dtype=float)
        if codes.shape[-1:] != (6,) or codes.ndim > 2:
            raise ValueError(
                f"Doodson numbers must have shape (6,) or (n, 6), got "
                f"{codes.shape}."
            )
        freq = codes @ self.rates
        phase = np.mod(codes @ self.angles, 360.0)
        phase = np.where(phase >= 360.0, phase - 360.0, phase)
        if codes.ndim == 1:
            return float(freq), float(phase)
        return freq, phase


def julian_day_number(epoch: Epoch) -> int:
    """Julian day number of the calendar day of *epoch* (noon-based)."""
    new_year = pd.Timestamp(year=epoch.year, month=1, day=1)
    return int(new_year.to_julian_date() + 0.5) + epoch.day_of_year - 1


def et_minus_utc(decimal_year: float) -> float:
    """
    Difference ET - UTC in seconds at *decimal_year*.

    Years before 1972 use the 1972 offset.
    """
    i = int(np.searchsorted(_LEAP_SECOND_EPOCHS, decimal_year, side='right'))
    if i == 0:
        logger.debug(
            'Year %.3f predates the leap-second table; using the 1972 offset.',
            decimal_year,
        )
        i = 1
    return float(_TAI_MINUS_UTC[i - 1]) + TT_MINUS_TAI


def doodson_arguments(epoch: Epoch) -> DoodsonArguments:
    """
    Evaluate the Doodson fundamental arguments at *epoch*.

    Parameters
    ----------
    epoch : Epoch
        Observation epoch (UTC).

    Returns
    -------
    DoodsonArguments
        Angles in degrees and rates in cycles per day.
    """
    dayfr = epoch.day_fraction
    # Days since J2000.0 (noon); the day number starts at noon.
    djd = julian_day_number(epoch) - 0.5 - J2000_DAY_NUMBER + dayfr
    delta = et_minus_utc(epoch.decimal_year)
    t = (djd + delta / 86400.0) / 36525.0

    # Delaunay arguments l, l', F, D, Omega in degrees
    f1 = (134.9634025100 + t * (477198.8675605000 + t * (0.0088553333
          + t * (0.0000143431 + t * -0.0000000680))))
    f2 = (357.5291091806 + t * (35999.0502911389 + t * (-0.0001536667
          + t * (0.0000000378 + t * -0.0000000032))))
    f3 = (93.2720906200 + t * (483202.0174577222 + t * (-0.0035420000
          + t * (-0.0000002881 + t * 0.0000000012))))
    f4 = (297.8501954694 + t * (445267.1114469445 + t * (-0.0017696111
          + t * (0.0000018314 + t * -0.0000000088))))
    f5 = (125.0445550100 + t * (-1934.1362619722 + t * (0.0020756111
          + t * (0.0000021394 + t * -0.0000000165))))

    angles = np.empty(6)
    angles[0] = 360.0 * dayfr - f4
    angles[1] = f3 + f5
    angles[2] = angles[1] - f4
    angles[3] = angles[1] - f1
    angles[4] = -f5
    angles[5] = angles[2] - f2

    # Rates of the Delaunay arguments in cycles per day
    fd1 = 0.0362916471 + 0.0000000013 * t
    fd2 = 0.0027377786
    fd3 = 0.0367481951 - 0.0000000005 * t
    fd4 = 0.0338631920 - 0.0000000003 * t
    fd5 = -0.0001470938 + 0.0000000003 * t

    rates = np.empty(6)
    rates[0] = 1.0 - fd4
    rates[1] = fd3 + fd5
    rates[2] = rates[1] - fd4
    rates[3] = rates[1] - fd1
    rates[4] = -fd5
    rates[5] = rates[2] - fd2

    return DoodsonArguments(angles=angles, rates=rates)


def tidal_frequency_phase(doodson, epoch: Epoch) -> tuple:
    """
    Instantaneous frequency (cycles/day) and phase (degrees) of harmonics.

    Parameters
    ----------
    doodson : array_like
        Doodson multipliers, shape ``(6,)`` or ``(n, 6)``.
    epoch : Epoch
        Observation epoch (UTC).

    Returns
    -------
    tuple
        ``(frequency, phase)``; see :meth:`DoodsonArguments.frequency_phase`.
    """
    return doodson_arguments(epoch).frequency_phase(doodson)
