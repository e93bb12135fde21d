"""Static MCS → throughput estimate."""

from __future__ import annotations

from typing import Tuple

# Datasheet rates (Mbps) on a 20 MHz channel; MCS 8–15 are two-stream rates
BASE_THROUGHPUT_MBPS: Tuple[float, ...] = (
    5.4, 10.62, 15.66, 20.52, 29.88, 38.88, 43.11, 47.34,
    10.53, 20.43, 29.7, 38.52, 54.72, 69.3, 76.14, 82.8,
)


def estimate_throughput(
    mcs: int,
    bandwidth_mhz: float,
    mimo_streams: int = 1,
    packet_loss_pct: float = 0.0,
) -> float:
    """Expected throughput (Mbps) at *mcs*, scaled to the channel bandwidth.

    The stream count is implied by the MCS index (8–15 are two-stream), so
    *mimo_streams* does not change the result. Indices past the table reuse
    MCS 7 plus 10 %.
    """
    if 0 <= mcs < len(BASE_THROUGHPUT_MBPS):
        base = BASE_THROUGHPUT_MBPS[mcs]
    else:
        base = BASE_THROUGHPUT_MBPS[7] * 1.1
    throughput = base * (bandwidth_mhz / 20.0)
    throughput *= 1.0 - packet_loss_pct / 100.0
    return max(0.0, throughput)
