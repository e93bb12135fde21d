"""802.11n aggregated-frame airtime model.

All times are in microseconds and all rates in Mbit/s (bits per µs).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

# Encapsulation overhead per UDP datagram (bytes)
HEADER_BYTES: Dict[str, int] = {
    "ipv4": 20,
    "eth2": 14,
    "bat_adv": 10,
    "llc": 8,
    "ieee80211": 42,
    "phy": 4,
}
HEADER_TOTAL_BYTES = sum(HEADER_BYTES.values())

AIFS_SLOTS = 8
CW_SLOTS = 15
PHY_HEADER_US = 40
LTF_US = 4
SIFS_US = 10
BASIC_RATE_MBPS = 12.0
MPDU_DELIMITER_US = 0
TXOP_LIMIT_US = 100000
BLOCK_ACK_BYTES = 32
PACKET_SUCCESS_PCT = 90


def guard_interval_rate(bandwidth_mhz: float) -> float:
    """Per-stream data subcarrier rate factor: 14.4 at 40 MHz, 13 otherwise."""
    return 14.4 if bandwidth_mhz == 40 else 13.0


def slot_time_us(bandwidth_mhz: float) -> int:
    stbw = min(bandwidth_mhz, 20.0)
    return 4 + math.ceil((17 * 5) / stbw)


def phy_overhead_us(bandwidth_mhz: float, streams: int) -> float:
    """Fixed AIFS + contention window + PHY preamble time per transmission."""
    return (AIFS_SLOTS + CW_SLOTS) * slot_time_us(bandwidth_mhz) + (
        PHY_HEADER_US + streams * LTF_US
    ) * 20.0 / bandwidth_mhz


def link_speed_mbps(bits_per_symbol: int, coding_rate: float, streams: int, bandwidth_mhz: float) -> float:
    return bits_per_symbol * coding_rate * streams * guard_interval_rate(bandwidth_mhz) * bandwidth_mhz / 20.0


def basic_rate_speed_mbps(bits_per_symbol: int, coding_rate: float, bandwidth_mhz: float) -> float:
    """Rate of the control response (block ack), capped at coding rate 3/4."""
    return BASIC_RATE_MBPS * (bandwidth_mhz / 20.0) * bits_per_symbol * min(coding_rate, 0.75)


@dataclass(frozen=True)
class FrameTiming:
    """Airtime breakdown of one aggregated exchange."""

    link_speed_mbps: float
    max_frames: float
    phy_time_us: float
    ba_response_us: float
    phy_overhead_us: float

    @property
    def time_without_transit_us(self) -> float:
        return self.phy_time_us + self.phy_overhead_us + self.ba_response_us


def frame_timing(
    bits_per_symbol: int,
    coding_rate: float,
    streams: int,
    bandwidth_mhz: float,
    udp_payload_bytes: int,
    frame_aggregation: int,
    overhead_streams: int | None = None,
) -> FrameTiming:
    """Compute the airtime of one A-MPDU exchange at a given MCS.

    Parameters
    ----------
    streams : int
        Spatial streams carried by this MCS.
    overhead_streams : int | None
        Streams counted in the fixed PHY overhead (defaults to *streams*).
    """
    if overhead_streams is None:
        overhead_streams = streams
    speed = link_speed_mbps(bits_per_symbol, coding_rate, streams, bandwidth_mhz)
    basic = basic_rate_speed_mbps(bits_per_symbol, coding_rate, bandwidth_mhz)
    frame_bytes = udp_payload_bytes + HEADER_TOTAL_BYTES

    max_frames = max(min(TXOP_LIMIT_US / ((frame_bytes * 8) / speed), frame_aggregation), 1)
    phy_time = (frame_aggregation - 1) * MPDU_DELIMITER_US + math.ceil(
        (frame_bytes * max_frames * 8 / speed) / 4
    ) * 4
    ba_response = (
        SIFS_US
        + (PHY_HEADER_US + streams * LTF_US)
        + math.ceil((BLOCK_ACK_BYTES * 8) / (basic * (bandwidth_mhz / 20.0)))
    )
    return FrameTiming(
        link_speed_mbps=speed,
        max_frames=max_frames,
        phy_time_us=phy_time,
        ba_response_us=ba_response,
        phy_overhead_us=phy_overhead_us(bandwidth_mhz, overhead_streams),
    )
