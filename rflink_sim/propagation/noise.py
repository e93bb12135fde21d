"""Noise-floor and SNR helpers."""

from __future__ import annotations

import numpy as np

from ..errors import InvalidConfigurationError

BOLTZMANN = 1.38064852e-23  # J/K


def noise_floor_dbm(
    bandwidth_mhz: float,
    temperature_c: float = 25.0,
    noise_figure_db: float = 4.0,
) -> float:
    """Receiver noise floor in dBm.

    N = 10·log10(k·T·B·1000) + NF, with *T* in kelvin and *B* in Hz.
    """
    if bandwidth_mhz <= 0:
        raise InvalidConfigurationError(f"bandwidth must be positive, got {bandwidth_mhz} MHz")
    temperature_k = temperature_c + 273.15
    thermal = 10.0 * np.log10(BOLTZMANN * temperature_k * bandwidth_mhz * 1e6 * 1000.0)
    return float(thermal) + noise_figure_db


def effective_noise_floor_dbm(bandwidth_mhz: float, implementation_loss_db: float = 3.0) -> float:
    """Noise floor used by the MCS sweep: −174 dBm/Hz over the channel plus a fixed loss."""
    if bandwidth_mhz <= 0:
        raise InvalidConfigurationError(f"bandwidth must be positive, got {bandwidth_mhz} MHz")
    return -174.0 + 10.0 * float(np.log10(bandwidth_mhz * 1e6)) + implementation_loss_db


def snr_db(signal_dbm: float, noise_dbm: float) -> float:
    """SNR in dB (simple difference)."""
    return signal_dbm - noise_dbm
