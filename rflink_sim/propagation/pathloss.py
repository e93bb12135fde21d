"""Path-loss models: FSPL, two-ray ground, and the inverse range solver."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from ..errors import InvalidConfigurationError, NonFiniteResultError

# FSPL constant for distance in km and frequency in GHz
FSPL_CONSTANT_DB = 92.45


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round *value* to *ndigits* decimals, ties away from zero.

    Works on the exact binary value, so ``1.005`` (stored as 1.00499…) rounds
    to ``1.0`` at two decimals. Unlike :func:`round`, ties never go to even.
    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def free_space_path_loss(distance_km: np.ndarray | float, freq_ghz: float) -> np.ndarray:
    """Free-Space Path Loss.

    FSPL(dB) = 20·log10(d) + 20·log10(f) + 92.45
    where *d* in km, *f* in GHz.

    Raises
    ------
    NonFiniteResultError
        If any distance (or the frequency) is not strictly positive.
    """
    d_km = np.asarray(distance_km, dtype=np.float64)
    if np.any(d_km <= 0) or freq_ghz <= 0:
        raise NonFiniteResultError("FSPL needs positive distance and frequency")
    return 20.0 * np.log10(d_km) + 20.0 * np.log10(freq_ghz) + FSPL_CONSTANT_DB  # type: ignore[return-value]


def two_ray_ground_path_loss(
    distance_km: np.ndarray | float,
    freq_ghz: float,
    tx_height_m: float,
    rx_height_m: float,
) -> np.ndarray:
    """Two-ray ground reflection model.

    PL = FSPL(d, f) − 20·log10(h_tx·h_rx) + 10
    """
    if tx_height_m <= 0 or rx_height_m <= 0:
        raise InvalidConfigurationError("two-ray model needs positive antenna heights")
    fspl = free_space_path_loss(distance_km, freq_ghz)
    return fspl - 20.0 * np.log10(tx_height_m * rx_height_m) + 10.0  # type: ignore[return-value]


def select_path_loss(
    distance_km: np.ndarray | float,
    freq_ghz: float,
    tx_height_m: float = 0.0,
    rx_height_m: float = 0.0,
) -> np.ndarray:
    """Two-ray ground when both heights are positive, FSPL otherwise."""
    if tx_height_m > 0 and rx_height_m > 0:
        return two_ray_ground_path_loss(distance_km, freq_ghz, tx_height_m, rx_height_m)
    return free_space_path_loss(distance_km, freq_ghz)


def frequency_correction_factor(freq_mhz: float, near_ground: bool = True) -> float:
    """Empirical exponent correction for links operating near the ground.

    Cubic fit in frequency (MHz), rounded to 4 decimals. Returns 0 for links
    well clear of the ground.
    """
    if not near_ground:
        return 0.0
    f = freq_mhz
    poly = -0.0000000000313 * f**3 + 0.0000004618 * f**2 - 0.0024096 * f + 5.8421
    # nearest 1e-4, ties toward +inf
    return math.floor(poly * 10000.0 + 0.5) / 10000.0


def range_from_link_budget(
    tx_power_dbm: float,
    rx_sensitivity_dbm: float,
    fade_margin_db: float,
    antenna_gain_dbi: float,
    freq_mhz: float,
    correction: float = 0.0,
    ndigits: int | None = 1,
) -> float:
    """Solve the free-space budget for distance in metres.

    d = 10^((P_tx − S − FM + G) / (20 + correction)) · 300 / f / (4π)

    Parameters
    ----------
    correction : float
        Output of :func:`frequency_correction_factor`.
    ndigits : int | None
        Decimal places to round to (``None`` keeps full precision).

    Raises
    ------
    InvalidConfigurationError
        If the frequency or the exponent denominator is not positive.
    NonFiniteResultError
        If an input or the result is NaN or infinite.
    """
    inputs = (tx_power_dbm, rx_sensitivity_dbm, fade_margin_db, antenna_gain_dbi, freq_mhz, correction)
    if not all(math.isfinite(v) for v in inputs):
        raise NonFiniteResultError(f"non-finite link budget input: {inputs}")
    if freq_mhz <= 0:
        raise InvalidConfigurationError(f"frequency must be positive, got {freq_mhz} MHz")
    denominator = 20.0 + correction
    if denominator <= 0:
        raise InvalidConfigurationError(f"range exponent denominator must be positive, got {denominator}")

    budget_db = tx_power_dbm - rx_sensitivity_dbm - fade_margin_db + antenna_gain_dbi
    try:
        distance_m = 10.0 ** (budget_db / denominator) * 300.0 / freq_mhz / (4.0 * math.pi)
    except OverflowError as exc:
        raise NonFiniteResultError(f"range overflow for budget {budget_db:.1f} dB") from exc
    if not math.isfinite(distance_m):
        raise NonFiniteResultError(f"range is not finite for budget {budget_db:.1f} dB")
    if ndigits is None:
        return distance_m
    return round_half_up(distance_m, ndigits)
