"""
Fixed catalog of tidal harmonics used for admittance interpolation.

Holds the Doodson numbers and Cartwright-Edden amplitudes of the 342
harmonics evaluated by the IERS HARDISP program (IERS Conventions 2010,
Chapter 7).  Entries are ordered semidiurnal, diurnal, long-period, each
group by decreasing amplitude.

The first Doodson digit of every entry is its tidal species:

* ``0`` -- long-period
* ``1`` -- diurnal
* ``2`` -- semidiurnal

References
----------
- Cartwright, D.E. and Edden, A.C. (1973). Corrected tables of tidal
  harmonics.  Geophys. J. R. astr. Soc., 33, 253-264.
- Petit, G. and Luzum, B. (eds.) (2010). IERS Conventions (2010).
  IERS Technical Note No. 36.
"""
from __future__ import annotations

import enum

import numpy as np

N_HARMONICS: int = 342
"""Number of harmonics in the catalog."""

MAX_CONSTITUENTS: int = 20
"""Maximum number of input constituents kept as admittance samples."""


class Species(enum.IntEnum):
    """Tidal species, keyed by the first Doodson digit."""

    LONG_PERIOD = 0
    DIURNAL = 1
    SEMIDIURNAL = 2

    @property
    def phase_offset(self) -> float:
        """Equilibrium-tide phase correction in degrees."""
        return _PHASE_OFFSETS[self]

    @classmethod
    def from_doodson(cls, doodson) -> Species:
        return cls(int(doodson[0]))


_PHASE_OFFSETS = {
    Species.LONG_PERIOD: 180.0,
    Species.DIURNAL: 90.0,
    Species.SEMIDIURNAL: 0.0,
}

# ---------------------------------------------------------------------------
# Doodson numbers (multipliers of tau, s, h, p, N', ps).
# ---------------------------------------------------------------------------

_DOODSON = [
    ( 2,  0,  0,  0,  0,  0), ( 2,  2, -2,  0,  0,  0), ( 2, -1,  0,  1,  0,  0),
    ( 2,  2,  0,  0,  0,  0), ( 2,  2,  0,  0,  1,  0), ( 2,  0,  0,  0, -1,  0),
    ( 2, -1,  2, -1,  0,  0), ( 2, -2,  2,  0,  0,  0), ( 2,  1,  0, -1,  0,  0),
    ( 2,  2, -3,  0,  0,  1), ( 2, -2,  0,  2,  0,  0), ( 2, -3,  2,  1,  0,  0),
    ( 2,  1, -2,  1,  0,  0), ( 2, -1,  0,  1, -1,  0), ( 2,  3,  0, -1,  0,  0),
    ( 2,  1,  0,  1,  0,  0), ( 2,  2,  0,  0,  2,  0), ( 2,  2, -1,  0,  0, -1),
    ( 2,  0, -1,  0,  0,  1), ( 2,  1,  0,  1,  1,  0), ( 2,  3,  0, -1,  1,  0),
    ( 2,  0,  1,  0,  0, -1), ( 2,  0, -2,  2,  0,  0), ( 2, -3,  0,  3,  0,  0),
    ( 2, -2,  3,  0,  0, -1), ( 2,  4,  0,  0,  0,  0), ( 2, -1,  1,  1,  0, -1),
    ( 2, -1,  3, -1,  0, -1), ( 2,  2,  0,  0, -1,  0), ( 2, -1, -1,  1,  0,  1),
    ( 2,  4,  0,  0,  1,  0), ( 2, -3,  4, -1,  0,  0), ( 2, -1,  2, -1, -1,  0),
    ( 2,  3, -2,  1,  0,  0), ( 2,  1,  2, -1,  0,  0), ( 2, -4,  2,  2,  0,  0),
    ( 2,  4, -2,  0,  0,  0), ( 2,  0,  2,  0,  0,  0), ( 2, -2,  2,  0, -1,  0),
    ( 2,  2, -4,  0,  0,  2), ( 2,  2, -2,  0, -1,  0), ( 2,  1,  0, -1, -1,  0),
    ( 2, -1,  1,  0,  0,  0), ( 2,  2, -1,  0,  0,  1), ( 2,  2,  1,  0,  0, -1),
    ( 2, -2,  0,  2, -1,  0), ( 2, -2,  4, -2,  0,  0), ( 2,  2,  2,  0,  0,  0),
    ( 2, -4,  4,  0,  0,  0), ( 2, -1,  0, -1, -2,  0), ( 2,  1,  2, -1,  1,  0),
    ( 2, -1, -2,  3,  0,  0), ( 2,  3, -2,  1,  1,  0), ( 2,  4,  0, -2,  0,  0),
    ( 2,  0,  0,  2,  0,  0), ( 2,  0,  2, -2,  0,  0), ( 2,  0,  2,  0,  1,  0),
    ( 2, -3,  3,  1,  0, -1), ( 2,  0,  0,  0, -2,  0), ( 2,  4,  0,  0,  2,  0),
    ( 2,  4, -2,  0,  1,  0), ( 2,  0,  0,  0,  0,  2), ( 2,  1,  0,  1,  2,  0),
    ( 2,  0, -2,  0, -2,  0), ( 2, -2,  1,  0,  0,  1), ( 2, -2,  1,  2,  0, -1),
    ( 2, -1,  1, -1,  0,  1), ( 2,  5,  0, -1,  0,  0), ( 2,  1, -3,  1,  0,  1),
    ( 2, -2, -1,  2,  0,  1), ( 2,  3,  0, -1,  2,  0), ( 2,  1, -2,  1, -1,  0),
    ( 2,  5,  0, -1,  1,  0), ( 2, -4,  0,  4,  0,  0), ( 2, -3,  2,  1, -1,  0),
    ( 2, -2,  1,  1,  0,  0), ( 2,  4,  0, -2,  1,  0), ( 2,  0,  0,  2,  1,  0),
    ( 2, -5,  4,  1,  0,  0), ( 2,  0,  2,  0,  2,  0), ( 2, -1,  2,  1,  0,  0),
    ( 2,  5, -2, -1,  0,  0), ( 2,  1, -1,  0,  0,  0), ( 2,  2, -2,  0,  0,  2),
    ( 2, -5,  2,  3,  0,  0), ( 2, -1, -2,  1, -2,  0), ( 2, -3,  5, -1,  0, -1),
    ( 2, -1,  0,  0,  0,  1), ( 2, -2,  0,  0, -2,  0), ( 2,  0, -1,  1,  0,  0),
    ( 2, -3,  1,  1,  0,  1), ( 2,  3,  0, -1, -1,  0), ( 2,  1,  0,  1, -1,  0),
    ( 2, -1,  2,  1,  1,  0), ( 2,  0, -3,  2,  0,  1), ( 2,  1, -1, -1,  0,  1),
    ( 2, -3,  0,  3, -1,  0), ( 2,  0, -2,  2, -1,  0), ( 2, -4,  3,  2,  0, -1),
    ( 2, -1,  0,  1, -2,  0), ( 2,  5,  0, -1,  2,  0), ( 2, -4,  5,  0,  0, -1),
    ( 2, -2,  4,  0,  0, -2), ( 2, -1,  0,  1,  0,  2), ( 2, -2, -2,  4,  0,  0),
    ( 2,  3, -2, -1, -1,  0), ( 2, -2,  5, -2,  0, -1), ( 2,  0, -1,  0, -1,  1),
    ( 2,  5, -2, -1,  1,  0), ( 1,  1,  0,  0,  0,  0), ( 1, -1,  0,  0,  0,  0),
    ( 1,  1, -2,  0,  0,  0), ( 1, -2,  0,  1,  0,  0), ( 1,  1,  0,  0,  1,  0),
    ( 1, -1,  0,  0, -1,  0), ( 1,  2,  0, -1,  0,  0), ( 1,  0,  0,  1,  0,  0),
    ( 1,  3,  0,  0,  0,  0), ( 1, -2,  2, -1,  0,  0), ( 1, -2,  0,  1, -1,  0),
    ( 1, -3,  2,  0,  0,  0), ( 1,  0,  0, -1,  0,  0), ( 1,  1,  0,  0, -1,  0),
    ( 1,  3,  0,  0,  1,  0), ( 1,  1, -3,  0,  0,  1), ( 1, -3,  0,  2,  0,  0),
    ( 1,  1,  2,  0,  0,  0), ( 1,  0,  0,  1,  1,  0), ( 1,  2,  0, -1,  1,  0),
    ( 1,  0,  2, -1,  0,  0), ( 1,  2, -2,  1,  0,  0), ( 1,  3, -2,  0,  0,  0),
    ( 1, -1,  2,  0,  0,  0), ( 1,  1,  1,  0,  0, -1), ( 1,  1, -1,  0,  0,  1),
    ( 1,  4,  0, -1,  0,  0), ( 1, -4,  2,  1,  0,  0), ( 1,  0, -2,  1,  0,  0),
    ( 1, -2,  2, -1, -1,  0), ( 1,  3,  0, -2,  0,  0), ( 1, -1,  0,  2,  0,  0),
    ( 1, -1,  0,  0, -2,  0), ( 1,  3,  0,  0,  2,  0), ( 1, -3,  2,  0, -1,  0),
    ( 1,  4,  0, -1,  1,  0), ( 1,  0,  0, -1, -1,  0), ( 1,  1, -2,  0, -1,  0),
    ( 1, -3,  0,  2, -1,  0), ( 1,  1,  0,  0,  2,  0), ( 1,  1, -1,  0,  0, -1),
    ( 1, -1, -1,  0,  0,  1), ( 1,  0,  2, -1,  1,  0), ( 1, -1,  1,  0,  0, -1),
    ( 1, -1, -2,  2,  0,  0), ( 1,  2, -2,  1,  1,  0), ( 1, -4,  0,  3,  0,  0),
    ( 1, -1,  2,  0,  1,  0), ( 1,  3, -2,  0,  1,  0), ( 1,  2,  0, -1, -1,  0),
    ( 1,  0,  0,  1, -1,  0), ( 1, -2,  2,  1,  0,  0), ( 1,  4, -2, -1,  0,  0),
    ( 1, -3,  3,  0,  0, -1), ( 1, -2,  1,  1,  0, -1), ( 1, -2,  3, -1,  0, -1),
    ( 1,  0, -2,  1, -1,  0), ( 1, -2, -1,  1,  0,  1), ( 1,  4, -2,  1,  0,  0),
    ( 1, -4,  4, -1,  0,  0), ( 1, -4,  2,  1, -1,  0), ( 1,  5, -2,  0,  0,  0),
    ( 1,  3,  0, -2,  1,  0), ( 1, -5,  2,  2,  0,  0), ( 1,  2,  0,  1,  0,  0),
    ( 1,  1,  3,  0,  0, -1), ( 1, -2,  0,  1, -2,  0), ( 1,  4,  0, -1,  2,  0),
    ( 1,  1, -4,  0,  0,  2), ( 1,  5,  0, -2,  0,  0), ( 1, -1,  0,  2,  1,  0),
    ( 1, -2,  1,  0,  0,  0), ( 1,  4, -2,  1,  1,  0), ( 1, -3,  4, -2,  0,  0),
    ( 1, -1,  3,  0,  0, -1), ( 1,  3, -3,  0,  0,  1), ( 1,  5, -2,  0,  1,  0),
    ( 1,  1,  2,  0,  1,  0), ( 1,  2,  0,  1,  1,  0), ( 1, -5,  4,  0,  0,  0),
    ( 1, -2,  0, -1, -2,  0), ( 1,  5,  0, -2,  1,  0), ( 1,  1,  2, -2,  0,  0),
    ( 1,  1, -2,  2,  0,  0), ( 1, -2,  2,  1,  1,  0), ( 1,  0,  3, -1,  0, -1),
    ( 1,  2, -3,  1,  0,  1), ( 1, -2, -2,  3,  0,  0), ( 1, -1,  2, -2,  0,  0),
    ( 1, -4,  3,  1,  0, -1), ( 1, -4,  0,  3, -1,  0), ( 1, -1, -2,  2, -1,  0),
    ( 1, -2,  0,  3,  0,  0), ( 1,  4,  0, -3,  0,  0), ( 1,  0,  1,  1,  0, -1),
    ( 1,  2, -1, -1,  0,  1), ( 1,  2, -2,  1, -1,  0), ( 1,  0,  0, -1, -2,  0),
    ( 1,  2,  0,  1,  2,  0), ( 1,  2, -2, -1, -1,  0), ( 1,  0,  0,  1,  2,  0),
    ( 1,  0,  1,  0,  0,  0), ( 1,  2, -1,  0,  0,  0), ( 1,  0,  2, -1, -1,  0),
    ( 1, -1, -2,  0, -2,  0), ( 1, -3,  1,  0,  0,  1), ( 1,  3, -2,  0, -1,  0),
    ( 1, -1, -1,  0, -1,  1), ( 1,  4, -2, -1,  1,  0), ( 1,  2,  1, -1,  0, -1),
    ( 1,  0, -1,  1,  0,  1), ( 1, -2,  4, -1,  0,  0), ( 1,  4, -4,  1,  0,  0),
    ( 1, -3,  1,  2,  0, -1), ( 1, -3,  3,  0, -1, -1), ( 1,  1,  2,  0,  2,  0),
    ( 1,  1, -2,  0, -2,  0), ( 1,  3,  0,  0,  3,  0), ( 1, -1,  2,  0, -1,  0),
    ( 1, -2,  1, -1,  0,  1), ( 1,  0, -3,  1,  0,  1), ( 1, -3, -1,  2,  0,  1),
    ( 1,  2,  0, -1,  2,  0), ( 1,  6, -2, -1,  0,  0), ( 1,  2,  2, -1,  0,  0),
    ( 1, -1,  1,  0, -1, -1), ( 1, -2,  3, -1, -1, -1), ( 1, -1,  0,  0,  0,  2),
    ( 1, -5,  0,  4,  0,  0), ( 1,  1,  0,  0,  0, -2), ( 1, -2,  1,  1, -1, -1),
    ( 1,  1, -1,  0,  1,  1), ( 1,  1,  2,  0,  0, -2), ( 1, -3,  1,  1,  0,  0),
    ( 1, -4,  4, -1, -1,  0), ( 1,  1,  0, -2, -1,  0), ( 1, -2, -1,  1, -1,  1),
    ( 1, -3,  2,  2,  0,  0), ( 1,  5, -2, -2,  0,  0), ( 1,  3, -4,  2,  0,  0),
    ( 1,  1, -2,  0,  0,  2), ( 1, -1,  4, -2,  0,  0), ( 1,  2,  2, -1,  1,  0),
    ( 1, -5,  2,  2, -1,  0), ( 1,  1, -3,  0, -1,  1), ( 1,  1,  1,  0,  1, -1),
    ( 1,  6, -2, -1,  1,  0), ( 1, -2,  2, -1, -2,  0), ( 1,  4, -2,  1,  2,  0),
    ( 1, -6,  4,  1,  0,  0), ( 1,  5, -4,  0,  0,  0), ( 1, -3,  4,  0,  0,  0),
    ( 1,  1,  2, -2,  1,  0), ( 1, -2,  1,  0, -1,  0), ( 0,  2,  0,  0,  0,  0),
    ( 0,  1,  0, -1,  0,  0), ( 0,  0,  2,  0,  0,  0), ( 0,  0,  0,  0,  1,  0),
    ( 0,  2,  0,  0,  1,  0), ( 0,  3,  0, -1,  0,  0), ( 0,  1, -2,  1,  0,  0),
    ( 0,  2, -2,  0,  0,  0), ( 0,  3,  0, -1,  1,  0), ( 0,  0,  1,  0,  0, -1),
    ( 0,  2,  0, -2,  0,  0), ( 0,  2,  0,  0,  2,  0), ( 0,  3, -2,  1,  0,  0),
    ( 0,  1,  0, -1, -1,  0), ( 0,  1,  0, -1,  1,  0), ( 0,  4, -2,  0,  0,  0),
    ( 0,  1,  0,  1,  0,  0), ( 0,  0,  3,  0,  0, -1), ( 0,  4,  0, -2,  0,  0),
    ( 0,  3, -2,  1,  1,  0), ( 0,  3, -2, -1,  0,  0), ( 0,  4, -2,  0,  1,  0),
    ( 0,  0,  2,  0,  1,  0), ( 0,  1,  0,  1,  1,  0), ( 0,  4,  0, -2,  1,  0),
    ( 0,  3,  0, -1,  2,  0), ( 0,  5, -2, -1,  0,  0), ( 0,  1,  2, -1,  0,  0),
    ( 0,  1, -2,  1, -1,  0), ( 0,  1, -2,  1,  1,  0), ( 0,  2, -2,  0, -1,  0),
    ( 0,  2, -3,  0,  0,  1), ( 0,  2, -2,  0,  1,  0), ( 0,  0,  2, -2,  0,  0),
    ( 0,  1, -3,  1,  0,  1), ( 0,  0,  0,  0,  2,  0), ( 0,  0,  1,  0,  0,  1),
    ( 0,  1,  2, -1,  1,  0), ( 0,  3,  0, -3,  0,  0), ( 0,  2,  1,  0,  0, -1),
    ( 0,  1, -1, -1,  0,  1), ( 0,  1,  0,  1,  2,  0), ( 0,  5, -2, -1,  1,  0),
    ( 0,  2, -1,  0,  0,  1), ( 0,  2,  2, -2,  0,  0), ( 0,  1, -1,  0,  0,  0),
    ( 0,  5,  0, -3,  0,  0), ( 0,  2,  0, -2,  1,  0), ( 0,  1,  1, -1,  0, -1),
    ( 0,  3, -4,  1,  0,  0), ( 0,  0,  2,  0,  2,  0), ( 0,  2,  0, -2, -1,  0),
    ( 0,  4, -3,  0,  0,  1), ( 0,  3, -1, -1,  0,  1), ( 0,  0,  2,  0,  0, -2),
    ( 0,  3, -3,  1,  0,  1), ( 0,  2, -4,  2,  0,  0), ( 0,  4, -2, -2,  0,  0),
    ( 0,  3,  1, -1,  0, -1), ( 0,  5, -4,  1,  0,  0), ( 0,  3, -2, -1, -1,  0),
    ( 0,  3, -2,  1,  2,  0), ( 0,  4, -4,  0,  0,  0), ( 0,  6, -2, -2,  0,  0),
    ( 0,  5,  0, -3,  1,  0), ( 0,  4, -2,  0,  2,  0), ( 0,  2,  2, -2,  1,  0),
    ( 0,  0,  4,  0,  0, -2), ( 0,  3, -1,  0,  0,  0), ( 0,  3, -3, -1,  0,  1),
    ( 0,  4,  0, -2,  2,  0), ( 0,  1, -2, -1, -1,  0), ( 0,  2, -1,  0,  0, -1),
    ( 0,  4, -4,  2,  0,  0), ( 0,  2,  1,  0,  1, -1), ( 0,  3, -2, -1,  1,  0),
    ( 0,  4, -3,  0,  1,  1), ( 0,  2,  0,  0,  3,  0), ( 0,  6, -4,  0,  0,  0),
]

DOODSON_NUMBERS: np.ndarray = np.array(_DOODSON, dtype=int)
"""Doodson numbers of the catalog harmonics, shape ``(342, 6)``."""
DOODSON_NUMBERS.flags.writeable = False

# ---------------------------------------------------------------------------
# Cartwright-Edden amplitudes (signed), same order as _DOODSON.
# ---------------------------------------------------------------------------

_AMPLITUDES = [
     0.632208,  0.294107,  0.121046,  0.079915,  0.023818, -0.023589,
     0.022994,  0.019333, -0.017871,  0.017192,  0.016018,  0.004671,
    -0.004662, -0.004519,  0.004470,  0.004467,  0.002589, -0.002455,
    -0.002172,  0.001972,  0.001947,  0.001914, -0.001898,  0.001802,
     0.001304,  0.001170,  0.001130,  0.001061, -0.001022, -0.001017,
     0.001014,  0.000901, -0.000857,  0.000855,  0.000855,  0.000772,
     0.000741,  0.000741, -0.000721,  0.000698,  0.000658,  0.000654,
    -0.000653,  0.000633,  0.000626, -0.000598,  0.000590,  0.000544,
     0.000479, -0.000464,  0.000413, -0.000390,  0.000373,  0.000366,
     0.000366, -0.000360, -0.000355,  0.000354,  0.000329,  0.000328,
     0.000319,  0.000302,  0.000279, -0.000274, -0.000272,  0.000248,
    -0.000225,  0.000224, -0.000223, -0.000216,  0.000211,  0.000209,
     0.000194,  0.000185, -0.000174, -0.000171,  0.000159,  0.000131,
     0.000127,  0.000120,  0.000118,  0.000117,  0.000108,  0.000107,
     0.000105, -0.000102,  0.000102,  0.000099, -0.000096,  0.000095,
    -0.000089, -0.000085, -0.000084, -0.000081, -0.000077, -0.000072,
    -0.000067,  0.000066,  0.000064,  0.000063,  0.000063,  0.000063,
     0.000062,  0.000062, -0.000060,  0.000056,  0.000053,  0.000051,
     0.000050,  0.368645, -0.262232, -0.121995, -0.050208,  0.050031,
    -0.049470,  0.020620,  0.020613,  0.011279, -0.009530, -0.009469,
    -0.008012,  0.007414, -0.007300,  0.007227, -0.007131, -0.006644,
     0.005249,  0.004137,  0.004087,  0.003944,  0.003943,  0.003420,
     0.003418,  0.002885,  0.002884,  0.002160, -0.001936,  0.001934,
    -0.001798,  0.001690,  0.001689,  0.001516,  0.001514, -0.001511,
     0.001383,  0.001372,  0.001371, -0.001253, -0.001075,  0.001020,
     0.000901,  0.000865, -0.000794,  0.000788,  0.000782, -0.000747,
    -0.000745,  0.000670, -0.000603, -0.000597,  0.000542,  0.000542,
    -0.000541, -0.000469, -0.000440,  0.000438,  0.000422,  0.000410,
    -0.000374, -0.000365,  0.000345,  0.000335, -0.000321, -0.000319,
     0.000307,  0.000291,  0.000290, -0.000289,  0.000286,  0.000275,
     0.000271,  0.000263, -0.000245,  0.000225,  0.000225,  0.000221,
    -0.000202, -0.000200, -0.000199,  0.000192,  0.000183,  0.000183,
     0.000183, -0.000170,  0.000169,  0.000168,  0.000162,  0.000149,
    -0.000147, -0.000141,  0.000138,  0.000136,  0.000136,  0.000127,
     0.000127, -0.000126, -0.000121, -0.000121,  0.000117, -0.000116,
    -0.000114, -0.000114, -0.000114,  0.000114,  0.000113,  0.000109,
     0.000108,  0.000106, -0.000106, -0.000106,  0.000105,  0.000104,
    -0.000103, -0.000100, -0.000100, -0.000100,  0.000099, -0.000098,
     0.000093,  0.000093,  0.000090, -0.000088,  0.000083, -0.000083,
    -0.000082, -0.000081, -0.000079, -0.000077, -0.000075, -0.000075,
    -0.000075,  0.000071,  0.000071, -0.000071,  0.000068,  0.000068,
     0.000065,  0.000065,  0.000064,  0.000064,  0.000064, -0.000064,
    -0.000060,  0.000056,  0.000056,  0.000053,  0.000053,  0.000053,
    -0.000053,  0.000053,  0.000053,  0.000052,  0.000050, -0.066607,
    -0.035184, -0.030988,  0.027929, -0.027616, -0.012753, -0.006728,
    -0.005837, -0.005286, -0.004921, -0.002884, -0.002583, -0.002422,
     0.002310,  0.002283, -0.002037,  0.001883, -0.001811, -0.001687,
    -0.001004, -0.000925, -0.000844,  0.000766,  0.000766, -0.000700,
    -0.000495, -0.000492,  0.000491,  0.000483,  0.000437, -0.000416,
    -0.000384,  0.000374, -0.000312, -0.000288, -0.000273,  0.000259,
     0.000245, -0.000232,  0.000229, -0.000216,  0.000206, -0.000204,
    -0.000202,  0.000200,  0.000195, -0.000190,  0.000187,  0.000180,
    -0.000179,  0.000170,  0.000153, -0.000137, -0.000119, -0.000119,
    -0.000112, -0.000110, -0.000110,  0.000107, -0.000095, -0.000095,
    -0.000091, -0.000090, -0.000081, -0.000079, -0.000079,  0.000077,
    -0.000073,  0.000069, -0.000067, -0.000066,  0.000065,  0.000064,
    -0.000062,  0.000060,  0.000059, -0.000056,  0.000055, -0.000051,
]

CARTWRIGHT_EDDEN_AMPLITUDES: np.ndarray = np.array(_AMPLITUDES, dtype=float)
"""Signed Cartwright-Edden amplitudes of the catalog harmonics."""
CARTWRIGHT_EDDEN_AMPLITUDES.flags.writeable = False

SPECIES: np.ndarray = DOODSON_NUMBERS[:, 0].copy()
"""Species index (first Doodson digit) of every catalog harmonic."""
SPECIES.flags.writeable = False

# ---------------------------------------------------------------------------
# Constituents published in Bos-Scherneck BLQ files, in file order.
# ---------------------------------------------------------------------------

BLQ_CONSTITUENTS: dict[str, tuple[int, ...]] = {
    'M2':  (2, 0, 0, 0, 0, 0),
    'S2':  (2, 2, -2, 0, 0, 0),
    'N2':  (2, -1, 0, 1, 0, 0),
    'K2':  (2, 2, 0, 0, 0, 0),
    'K1':  (1, 1, 0, 0, 0, 0),
    'O1':  (1, -1, 0, 0, 0, 0),
    'P1':  (1, 1, -2, 0, 0, 0),
    'Q1':  (1, -2, 0, 1, 0, 0),
    'MF':  (0, 2, 0, 0, 0, 0),
    'MM':  (0, 1, 0, -1, 0, 0),
    'SSA': (0, 0, 2, 0, 0, 0),
}
"""Doodson numbers of the 11 BLQ constituents (upper-case names)."""


def match_harmonics(doodson) -> np.ndarray:
    """
    Find catalog entries whose Doodson number equals *doodson*.

    Parameters
    ----------
    doodson : array_like
        Six integer Doodson multipliers.

    Returns
    -------
    np.ndarray
        Catalog indices (ascending) of every exact match.  Empty when
        the code is not in the catalog.
    """
    code = np.asarray(doodson, dtype=int)
    if code.shape != (6,):
        raise ValueError(
            f"Doodson number must have 6 components, got shape {code.shape}."
        )
    distance = np.abs(DOODSON_NUMBERS - code).sum(axis=1)
    return np.flatnonzero(distance == 0)
