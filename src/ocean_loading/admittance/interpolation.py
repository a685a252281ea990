"""
Ocean-loading admittance interpolation over the full harmonic catalog.

Given loading amplitudes and phases at a handful of reference
constituents (typically the 11 constituents of a Bos-Scherneck BLQ
file), the complex admittance -- loading response divided by the
Cartwright-Edden potential amplitude -- is splined across frequency
within each tidal species and evaluated at every catalog harmonic::

    Z(f)      = A exp(i phi) / |H|       at the reference constituents
    amplitude = H_k |Z(f_k)|
    phase     = V_k + offset(species) + arg Z(f_k)

where ``H`` is the Cartwright-Edden amplitude, ``V_k`` the astronomical
argument of harmonic *k* at the epoch and the offset converts the
equilibrium tide to cosine form (+180 long-period, +90 diurnal, 0
semidiurnal).

Replaces the ``ADMINT`` routine of the IERS HARDISP program.  Two
legacy behaviours are kept for compatibility with published results:

* samples at exactly 0.5 or 1.5 cycles/day belong to no species, and
* the reported ``nout`` is one less than the number of harmonics
  written.

Phases are wrapped once (``phase - 360`` when above 180), so
long-period and diurnal phases may still exceed 180 degrees.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from .astro_arguments import Epoch, doodson_arguments
from .catalog import (
    BLQ_CONSTITUENTS,
    CARTWRIGHT_EDDEN_AMPLITUDES,
    DOODSON_NUMBERS,
    MAX_CONSTITUENTS,
    N_HARMONICS,
    SPECIES,
    Species,
    match_harmonics,
)
from .sorting import ascending_permutation
from .spline import evaluate_spline, fit_spline

logger = logging.getLogger(__name__)

# Species frequency bands in cycles per day; bounds are exclusive.
LONG_PERIOD_MAX_FREQ: float = 0.5
DIURNAL_MAX_FREQ: float = 1.5
SEMIDIURNAL_MAX_FREQ: float = 2.5


@dataclass
class AdmittanceSamples:
    """Admittance at the matched input constituents."""

    frequency: np.ndarray
    real: np.ndarray
    imag: np.ndarray
    harmonic_index: np.ndarray

    def __len__(self) -> int:
        return len(self.frequency)

    def sorted_by_frequency(self) -> AdmittanceSamples:
        """Return a copy with every channel ordered by ascending frequency."""
        perm = ascending_permutation(self.frequency)
        return AdmittanceSamples(
            frequency=self.frequency[perm],
            real=self.real[perm],
            imag=self.imag[perm],
            harmonic_index=self.harmonic_index[perm],
        )


@dataclass
class SpeciesSpline:
    """Real and imaginary admittance splines for one tidal species."""

    species: Species
    frequency: np.ndarray
    real: np.ndarray
    imag: np.ndarray
    real_coeffs: np.ndarray
    imag_coeffs: np.ndarray

    def __len__(self) -> int:
        return len(self.frequency)

    def evaluate(self, frequency) -> tuple:
        """Real and imaginary admittance at *frequency* (cycles/day)."""
        re = evaluate_spline(frequency, self.frequency, self.real, self.real_coeffs)
        im = evaluate_spline(frequency, self.frequency, self.imag, self.imag_coeffs)
        return re, im


@dataclass
class LoadingHarmonics:
    """
    Loading amplitude, frequency and phase of the catalog harmonics.

    The arrays are sized to the catalog; the first ``n_evaluated``
    entries hold the evaluated harmonics in catalog order and the rest
    are zero.

    Attributes
    ----------
    amplitude : np.ndarray
        Loading amplitude (input units; sign follows the
        Cartwright-Edden amplitude).
    frequency : np.ndarray
        Frequency in cycles per day.
    phase : np.ndarray
        Phase in degrees.
    harmonic_index : np.ndarray
        Catalog index of each evaluated harmonic.
    nout : int
        Legacy harmonic count, ``n_evaluated - 1``.
    """

    amplitude: np.ndarray
    frequency: np.ndarray
    phase: np.ndarray
    harmonic_index: np.ndarray
    nout: int

    @property
    def n_evaluated(self) -> int:
        return len(self.harmonic_index)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Evaluated harmonics as a table.

        Returns
        -------
        pd.DataFrame
            Columns: ``Doodson``, ``Species``, ``Amplitude``,
            ``Frequency``, ``Phase``; one row per evaluated harmonic.
        """
        n = self.n_evaluated
        codes = DOODSON_NUMBERS[self.harmonic_index]
        return pd.DataFrame({
            'Doodson': [tuple(int(c) for c in code) for code in codes],
            'Species': [Species(int(s)).name for s in codes[:, 0]],
            'Amplitude': self.amplitude[:n],
            'Frequency': self.frequency[:n],
            'Phase': self.phase[:n],
        }, index=pd.Index(self.harmonic_index, name='Harmonic'))


def _as_inputs(doodson, amplitudes, phases) -> tuple:
    codes = np.asarray(doodson, dtype=int)
    if codes.size == 0:
        codes = codes.reshape(0, 6)
    if codes.ndim != 2 or codes.shape[1] != 6:
        raise ValueError(
            f"doodson must have shape (n, 6), got {codes.shape}."
        )
    amplitudes = np.asarray(amplitudes, dtype=float).ravel()
    phases = np.asarray(phases, dtype=float).ravel()
    if not len(codes) == len(amplitudes) == len(phases):
        raise ValueError(
            'doodson, amplitudes and phases must have the same length.  Got '
            f"doodson={len(codes)}, amplitudes={len(amplitudes)}, "
            f"phases={len(phases)}."
        )
    return codes, amplitudes, phases


def collect_admittance_samples(
    doodson,
    amplitudes,
    phases,
    epoch: Epoch,
    max_constituents: int = MAX_CONSTITUENTS,
    logger: logging.Logger | None = None,
) -> AdmittanceSamples:
    """
    Convert input constituents into admittance samples.

    Each input is compared against the whole catalog.  Every exact
    Doodson match is accepted while fewer than *max_constituents*
    samples have been collected; unmatched inputs and matches beyond
    capacity are dropped.  Repeated inputs are kept as repeated samples.

    Parameters
    ----------
    doodson : array_like
        Doodson numbers of the input constituents, shape ``(n, 6)``.
    amplitudes : array_like
        Loading amplitudes, length *n*.
    phases : array_like
        Loading phases in degrees, length *n*.
    epoch : Epoch
        Epoch at which frequencies are evaluated.
    max_constituents : int, optional
        Sample capacity (default :data:`MAX_CONSTITUENTS`).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    AdmittanceSamples
        Samples in input order.

    Raises
    ------
    ValueError
        If the inputs are not shaped ``(n, 6)``, ``(n,)``, ``(n,)``.
    """
    _log = logger or logging.getLogger(__name__)
    codes, amplitudes, phases = _as_inputs(doodson, amplitudes, phases)

    matched = []
    for i, code in enumerate(codes):
        hits = match_harmonics(code)
        if len(hits) == 0:
            _log.debug('Constituent %s is not in the catalog; ignored.', tuple(code))
            continue
        for kk in hits:
            if len(matched) >= max_constituents:
                _log.warning(
                    'Capacity of %d constituents reached; dropping %s.',
                    max_constituents, tuple(code),
                )
                continue
            matched.append((i, kk))

    inputs = np.array([i for i, _ in matched], dtype=int)
    index = np.array([kk for _, kk in matched], dtype=int)

    scale = np.abs(CARTWRIGHT_EDDEN_AMPLITUDES[index])
    phi = np.radians(phases[inputs])
    real = amplitudes[inputs] * np.cos(phi) / scale
    imag = amplitudes[inputs] * np.sin(phi) / scale

    args = doodson_arguments(epoch)
    frequency, _ = args.frequency_phase(DOODSON_NUMBERS[index])

    return AdmittanceSamples(
        frequency=np.asarray(frequency, dtype=float),
        real=real,
        imag=imag,
        harmonic_index=index,
    )


def species_counts(frequency) -> tuple:
    """
    Count samples per species band.

    Parameters
    ----------
    frequency : array_like
        Sample frequencies in cycles per day.

    Returns
    -------
    tuple
        ``(n_long_period, n_diurnal, n_semidiurnal)``.  Samples at
        exactly 0.5 or 1.5 cycles/day are not counted.
    """
    f = np.asarray(frequency, dtype=float)
    nlp = int(np.count_nonzero(f < LONG_PERIOD_MAX_FREQ))
    ndi = int(np.count_nonzero((f < DIURNAL_MAX_FREQ) & (f > LONG_PERIOD_MAX_FREQ)))
    nsd = int(np.count_nonzero((f < SEMIDIURNAL_MAX_FREQ) & (f > DIURNAL_MAX_FREQ)))
    return nlp, ndi, nsd


def build_species_splines(
    samples: AdmittanceSamples,
    counts: tuple,
    logger: logging.Logger | None = None,
) -> dict[Species, SpeciesSpline]:
    """
    Fit real and imaginary admittance splines for each species.

    Parameters
    ----------
    samples : AdmittanceSamples
        Samples sorted by frequency.
    counts : tuple
        ``(nlp, ndi, nsd)`` from :func:`species_counts`.  Species take
        consecutive slices of *samples* in that order.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    dict
        ``{Species: SpeciesSpline}``.  The long-period spline is absent
        when ``nlp`` is zero; diurnal and semidiurnal are always present,
        possibly empty.
    """
    _log = logger or logging.getLogger(__name__)
    splines = {}
    start = 0
    for species, n in zip(Species, counts):
        stop = start + n
        if species is Species.LONG_PERIOD and n == 0:
            continue
        freq = samples.frequency[start:stop]
        re = samples.real[start:stop]
        im = samples.imag[start:stop]
        splines[species] = SpeciesSpline(
            species=species,
            frequency=freq,
            real=re,
            imag=im,
            real_coeffs=fit_spline(freq, re, logger=_log),
            imag_coeffs=fit_spline(freq, im, logger=_log),
        )
        start = stop
    return splines


def interpolate_admittance(
    doodson,
    amplitudes,
    phases,
    epoch: Epoch,
    max_constituents: int = MAX_CONSTITUENTS,
    logger: logging.Logger | None = None,
) -> LoadingHarmonics:
    """
    Interpolate loading admittance to every catalog harmonic.

    Parameters
    ----------
    doodson : array_like
        Doodson numbers of the input constituents, shape ``(n, 6)``.
        May be empty.
    amplitudes : array_like
        Loading amplitudes at the input constituents.
    phases : array_like
        Loading phases in degrees at the input constituents.
    epoch : Epoch or datetime-like
        Observation epoch (UTC).
    max_constituents : int, optional
        Maximum number of admittance samples (default 20).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    LoadingHarmonics
        Amplitude, frequency and phase of every evaluated harmonic.
        Long-period harmonics are skipped when no long-period
        constituent was supplied.
    """
    _log = logger or logging.getLogger(__name__)
    if not isinstance(epoch, Epoch):
        epoch = Epoch.from_datetime(epoch)

    samples = collect_admittance_samples(
        doodson, amplitudes, phases, epoch,
        max_constituents=max_constituents, logger=_log,
    ).sorted_by_frequency()
    counts = species_counts(samples.frequency)
    nlp, ndi, nsd = counts
    _log.info(
        'Admittance samples: %d matched, %d long-period, %d diurnal, '
        '%d semidiurnal.', len(samples), nlp, ndi, nsd,
    )
    if nlp + ndi + nsd < len(samples):
        _log.debug(
            '%d sample(s) fall on a species boundary and are not used.',
            len(samples) - nlp - ndi - nsd,
        )

    splines = build_species_splines(samples, counts, logger=_log)

    # Only long-period harmonics are skipped, and only without long-period data.
    index = np.flatnonzero(SPECIES + nlp != 0)
    args = doodson_arguments(epoch)
    freq, phase = args.frequency_phase(DOODSON_NUMBERS[index])

    re = np.zeros(len(index))
    im = np.zeros(len(index))
    for species, spline in splines.items():
        sel = SPECIES[index] == species
        if not np.any(sel):
            continue
        phase[sel] += species.phase_offset
        re[sel], im[sel] = spline.evaluate(freq[sel])

    n = len(index)
    amplitude = np.zeros(N_HARMONICS)
    frequency = np.zeros(N_HARMONICS)
    out_phase = np.zeros(N_HARMONICS)

    amplitude[:n] = CARTWRIGHT_EDDEN_AMPLITUDES[index] * np.hypot(re, im)
    frequency[:n] = freq
    phase = phase + np.degrees(np.arctan2(im, re))
    out_phase[:n] = np.where(phase > 180.0, phase - 360.0, phase)

    _log.info('Evaluated %d of %d catalog harmonics.', n, N_HARMONICS)
    return LoadingHarmonics(
        amplitude=amplitude,
        frequency=frequency,
        phase=out_phase,
        harmonic_index=index,
        nout=n - 1,
    )


def interpolate_blq(
    amplitudes: dict[str, float],
    phases: dict[str, float],
    epoch: Epoch,
    max_constituents: int = MAX_CONSTITUENTS,
    logger: logging.Logger | None = None,
) -> LoadingHarmonics:
    """
    Interpolate admittance from BLQ-style constituent tables.

    BLQ files list Greenwich phase lags, so phases are negated before
    interpolation.

    Parameters
    ----------
    amplitudes : dict
        ``{constituent_name: amplitude}``, names as in
        :data:`~ocean_loading.admittance.catalog.BLQ_CONSTITUENTS`
        (case-insensitive).
    phases : dict
        ``{constituent_name: phase_lag_degrees}``.
    epoch : Epoch or datetime-like
        Observation epoch (UTC).
    max_constituents : int, optional
        Maximum number of admittance samples (default 20).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    LoadingHarmonics
        See :func:`interpolate_admittance`.

    Raises
    ------
    ValueError
        If a name is not a BLQ constituent.
    """
    amps = {name.strip().upper(): value for name, value in amplitudes.items()}
    lags = {name.strip().upper(): value for name, value in phases.items()}
    unknown = sorted((set(amps) | set(lags)) - set(BLQ_CONSTITUENTS))
    if unknown:
        raise ValueError(f"Unknown BLQ constituent(s): {unknown}.")

    names = [n for n in BLQ_CONSTITUENTS if n in amps and n in lags]
    doodson = np.array([BLQ_CONSTITUENTS[n] for n in names], dtype=int).reshape(-1, 6)
    return interpolate_admittance(
        doodson,
        [amps[n] for n in names],
        [-lags[n] for n in names],
        epoch,
        max_constituents=max_constituents,
        logger=logger,
    )
