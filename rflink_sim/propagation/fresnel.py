"""Fresnel-zone clearance helpers."""

from __future__ import annotations

import numpy as np

from ..errors import InvalidConfigurationError


def fresnel_zone_radius(
    distance_km: np.ndarray | float,
    freq_ghz: float,
    clearance_pct: float = 60.0,
) -> np.ndarray:
    """Radius (m) of the clearance fraction of the first Fresnel zone at mid-path.

    r = 8.66·sqrt(d/f)·clearance/100, *d* in km, *f* in GHz.
    """
    if freq_ghz <= 0:
        raise InvalidConfigurationError(f"frequency must be positive, got {freq_ghz} GHz")
    d_km = np.asarray(distance_km, dtype=np.float64)
    return 8.66 * np.sqrt(d_km / freq_ghz) * clearance_pct / 100.0  # type: ignore[return-value]


def required_antenna_height(
    distance_km: float,
    freq_ghz: float,
    obstacle_height_m: float,
    terrain_clearance_m: float = 2.0,
) -> float:
    """Antenna height (m) that keeps 60 % of the first Fresnel zone clear of an obstacle."""
    radius = float(fresnel_zone_radius(distance_km, freq_ghz, 60.0))
    return obstacle_height_m + radius + terrain_clearance_m
