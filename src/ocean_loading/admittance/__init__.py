"""
Admittance Interpolation Subpackage

Provides functionality for:
- The fixed 342-harmonic catalog (Doodson numbers, Cartwright-Edden
  amplitudes, tidal species)
- Instantaneous frequency and phase of tidal harmonics at an epoch
- Natural cubic spline fitting and evaluation
- Interpolation of ocean-loading admittance from a few reference
  constituents to the full catalog
"""

from ocean_loading.admittance.astro_arguments import (
    DoodsonArguments,
    Epoch,
    doodson_arguments,
    et_minus_utc,
    julian_day_number,
    tidal_frequency_phase,
)
from ocean_loading.admittance.catalog import (
    BLQ_CONSTITUENTS,
    CARTWRIGHT_EDDEN_AMPLITUDES,
    DOODSON_NUMBERS,
    MAX_CONSTITUENTS,
    N_HARMONICS,
    Species,
    match_harmonics,
)
from ocean_loading.admittance.interpolation import (
    AdmittanceSamples,
    LoadingHarmonics,
    SpeciesSpline,
    build_species_splines,
    collect_admittance_samples,
    interpolate_admittance,
    interpolate_blq,
    species_counts,
)
from ocean_loading.admittance.sorting import ascending_permutation
from ocean_loading.admittance.spline import evaluate_spline, fit_spline

__all__ = [
    # Catalog
    'N_HARMONICS',
    'MAX_CONSTITUENTS',
    'DOODSON_NUMBERS',
    'CARTWRIGHT_EDDEN_AMPLITUDES',
    'BLQ_CONSTITUENTS',
    'Species',
    'match_harmonics',
    # Frequency and phase
    'Epoch',
    'DoodsonArguments',
    'doodson_arguments',
    'tidal_frequency_phase',
    'julian_day_number',
    'et_minus_utc',
    # Numerical primitives
    'ascending_permutation',
    'fit_spline',
    'evaluate_spline',
    # Admittance interpolation
    'AdmittanceSamples',
    'SpeciesSpline',
    'LoadingHarmonics',
    'collect_admittance_samples',
    'species_counts',
    'build_species_splines',
    'interpolate_admittance',
    'interpolate_blq',
]
