"""Environmental attenuation: rain, fog/cloud, vegetation and building walls.

Each contribution is an independent, additive loss in dB. Frequencies are in
GHz and path lengths in km unless stated otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

# (upper frequency bound GHz, k, alpha) for the simplified ITU-R P.838 power law
RAIN_COEFFICIENTS: List[Tuple[float, float, float]] = [
    (2.5, 0.0000855, 0.9),
    (5.0, 0.000138, 1.1),
    (7.0, 0.00175, 1.3),
    (float("inf"), 0.01, 1.6),
]


def rain_coefficients(freq_ghz: float) -> Tuple[float, float]:
    """Return the ``(k, alpha)`` pair for the band containing *freq_ghz*."""
    for upper, k, alpha in RAIN_COEFFICIENTS:
        if freq_ghz < upper:
            return k, alpha
    return RAIN_COEFFICIENTS[-1][1], RAIN_COEFFICIENTS[-1][2]


def rain_attenuation(freq_ghz: float, distance_km: float, rain_rate_mm_hr: float) -> float:
    """Rain loss k·f^α·R^0.8·d (dB); zero when it is not raining."""
    if rain_rate_mm_hr <= 0:
        return 0.0
    k, alpha = rain_coefficients(freq_ghz)
    return k * freq_ghz**alpha * rain_rate_mm_hr**0.8 * distance_km


def fog_attenuation(freq_ghz: float, distance_km: float, liquid_water_density: float = 0.05) -> float:
    """Fog/cloud loss 1e-4·f²·M·d (dB).

    *liquid_water_density* in g/m³: light 0.05, medium 0.2, heavy 0.5.
    """
    return 0.0001 * freq_ghz**2 * liquid_water_density * distance_km


def vegetation_loss(freq_ghz: float, depth_m: float) -> float:
    """Foliage loss 0.2·f·depth (dB)."""
    if depth_m <= 0:
        return 0.0
    return 0.2 * freq_ghz * depth_m


def building_penetration_loss(freq_ghz: float, walls_count: int) -> float:
    """4 dB per wall below 2.5 GHz, 6 dB per wall above."""
    if walls_count <= 0:
        return 0.0
    return walls_count * (4.0 if freq_ghz < 2.5 else 6.0)


@dataclass(frozen=True)
class EnvironmentalLosses:
    """Per-factor environmental loss breakdown (dB)."""

    rain_db: float = 0.0
    fog_db: float = 0.0
    vegetation_db: float = 0.0
    building_db: float = 0.0
    additional_db: float = 0.0

    @property
    def total(self) -> float:
        return self.rain_db + self.fog_db + self.vegetation_db + self.building_db + self.additional_db


def environment_losses(
    freq_ghz: float,
    distance_km: float,
    rain_rate_mm_hr: float = 0.0,
    fog_density_g_m3: float = 0.0,
    vegetation_depth_m: float = 0.0,
    walls_count: int = 0,
    additional_loss_db: float = 0.0,
) -> EnvironmentalLosses:
    """Evaluate every environmental factor for one path."""
    return EnvironmentalLosses(
        rain_db=rain_attenuation(freq_ghz, distance_km, rain_rate_mm_hr),
        fog_db=fog_attenuation(freq_ghz, distance_km, fog_density_g_m3),
        vegetation_db=vegetation_loss(freq_ghz, vegetation_depth_m),
        building_db=building_penetration_loss(freq_ghz, walls_count),
        additional_db=additional_loss_db,
    )
