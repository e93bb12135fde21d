"""Per-request link configuration for the MCS sweep."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

from ..errors import InvalidConfigurationError

FEET_PER_METER = 3.28084

SUPPORTED_BANDWIDTHS_MHZ: FrozenSet[float] = frozenset({3.0, 5.0, 10.0, 15.0, 20.0, 26.0, 40.0})

# Aggregation cap for links flying close to the ground
NEAR_GROUND_MAX_AGGREGATION = 2


class McsFamily(str, Enum):
    """Diversity uses one stream (MCS 0–7); multiplexing uses all streams (MCS 8–15)."""

    DIVERSITY = "diversity"
    MULTIPLEXING = "multiplexing"


class HeightUnit(str, Enum):
    FEET = "feet"
    METERS = "meters"


def convert_height(value: float, from_unit: HeightUnit | str, to_unit: HeightUnit | str) -> float:
    """Convert a height between feet and metres."""
    src, dst = HeightUnit(from_unit), HeightUnit(to_unit)
    if src == dst:
        return value
    if dst == HeightUnit.METERS:
        return value / FEET_PER_METER
    return value * FEET_PER_METER


@dataclass(frozen=True)
class LinkConfiguration:
    """RF and application parameters for one sweep.

    Parameters
    ----------
    frequency_mhz : float
        Carrier frequency (MHz).
    bandwidth_mhz : float
        Channel bandwidth, one of 3, 5, 10, 15, 20, 26 or 40 MHz.
    antennas, streams : int
        1 or 2 each; only ``min(streams, antennas)`` streams are usable.
    frame_aggregation : int
        A-MPDU frames per aggregate; capped at 2 when *near_ground*.
    telemetry_kbps, video_mbps : float
        Application demand; the sweep compares their sum against throughput.
    height_agl, height_unit
        Antenna height above ground level, compared with Fresnel clearance.
    mcs_family : McsFamily
        Which sweep the caller wants to show first. Both are always computed.
    """

    frequency_mhz: float = 2450.0
    bandwidth_mhz: float = 20.0
    antennas: int = 2
    streams: int = 2
    antenna_gain_dbi: float = 6.0
    fade_margin_db: float = 10.0
    power_limit_dbm: float = 33.0
    frame_aggregation: int = 10
    near_ground: bool = False
    fresnel_clearance_pct: float = 60.0
    telemetry_kbps: float = 50.0
    video_mbps: float = 3.0
    height_agl: float = 400.0
    height_unit: HeightUnit = HeightUnit.FEET
    udp_payload_bytes: int = 1500
    mcs_family: McsFamily = McsFamily.DIVERSITY

    def __post_init__(self) -> None:
        object.__setattr__(self, "height_unit", HeightUnit(self.height_unit))
        object.__setattr__(self, "mcs_family", McsFamily(self.mcs_family))

        numeric = {
            "frequency_mhz": self.frequency_mhz,
            "bandwidth_mhz": self.bandwidth_mhz,
            "antenna_gain_dbi": self.antenna_gain_dbi,
            "fade_margin_db": self.fade_margin_db,
            "power_limit_dbm": self.power_limit_dbm,
            "fresnel_clearance_pct": self.fresnel_clearance_pct,
            "telemetry_kbps": self.telemetry_kbps,
            "video_mbps": self.video_mbps,
            "height_agl": self.height_agl,
        }
        for name, value in numeric.items():
            if not math.isfinite(value):
                raise InvalidConfigurationError(f"{name} must be finite, got {value}")

        if self.frequency_mhz <= 0:
            raise InvalidConfigurationError(f"frequency_mhz must be positive, got {self.frequency_mhz}")
        if self.bandwidth_mhz not in SUPPORTED_BANDWIDTHS_MHZ:
            raise InvalidConfigurationError(
                f"bandwidth_mhz must be one of {sorted(SUPPORTED_BANDWIDTHS_MHZ)}, got {self.bandwidth_mhz}"
            )
        if self.antennas not in (1, 2):
            raise InvalidConfigurationError(f"antennas must be 1 or 2, got {self.antennas}")
        if self.streams not in (1, 2):
            raise InvalidConfigurationError(f"streams must be 1 or 2, got {self.streams}")
        if self.frame_aggregation < 1:
            raise InvalidConfigurationError(f"frame_aggregation must be >= 1, got {self.frame_aggregation}")
        if self.fresnel_clearance_pct <= 0:
            raise InvalidConfigurationError("fresnel_clearance_pct must be positive")
        if self.udp_payload_bytes <= 0:
            raise InvalidConfigurationError("udp_payload_bytes must be positive")
        if self.telemetry_kbps < 0 or self.video_mbps < 0:
            raise InvalidConfigurationError("throughput demand cannot be negative")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def effective_streams(self) -> int:
        return min(self.streams, self.antennas)

    @property
    def effective_frame_aggregation(self) -> int:
        if self.near_ground:
            return min(self.frame_aggregation, NEAR_GROUND_MAX_AGGREGATION)
        return self.frame_aggregation

    @property
    def throughput_demand_mbps(self) -> float:
        """Telemetry plus video demand in Mbps."""
        return self.telemetry_kbps / 1000.0 + self.video_mbps

    @property
    def height_agl_m(self) -> float:
        return convert_height(self.height_agl, self.height_unit, HeightUnit.METERS)
