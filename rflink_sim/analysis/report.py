"""Human-readable link analysis report."""

from __future__ import annotations

import math
from typing import List

from .link_budget import LinkBudget
from .quality import SignalQuality
from .throughput import estimate_throughput


def _recommendations(budget: LinkBudget, freq_ghz: float, bandwidth_mhz: float) -> List[str]:
    status = budget.link_status
    margin = budget.link_margin_db
    mcs = budget.recommended_mcs
    lines: List[str] = []

    if status == SignalQuality.CRITICAL:
        lines.append("**Critical Link Condition**: Link is unreliable and requires immediate attention.")
        if margin < 0:
            lines.append("**Negative Link Margin**: Signal level is below receiver sensitivity.")
        lines.append(
            f"Consider adding higher gain antennas (+{math.ceil(abs(margin) + 5)} dBi improvement needed)."
        )
        lines.append("Reduce obstacles in the path if possible.")
        lines.append("Consider decreasing distance between nodes or adding intermediate relay nodes.")
    elif status == SignalQuality.POOR:
        lines.append(
            "**Poor Link Condition**: Link may experience intermittent issues during adverse weather."
        )
        lines.append(f"Consider increasing antenna gain by at least {math.ceil(10 - margin)} dBi.")
        lines.append("Ensure proper Fresnel zone clearance.")
        lines.append(f"Consider using lower MCS ({max(0, mcs - 2)}) for more reliable connection.")
    elif status == SignalQuality.FAIR:
        lines.append("Link should be stable in fair weather conditions.")
        lines.append("Consider implementing adaptive MCS to optimize for changing conditions.")
        if freq_ghz > 5:
            lines.append(
                "Monitor performance during rain events; consider fallback to lower frequency band if available."
            )
    else:
        lines.append("Link has good margin and should be reliable in most conditions.")
        if mcs < 7:
            lines.append(f"MCS can potentially be increased to {min(15, mcs + 2)} for higher throughput.")
        if bandwidth_mhz < 20:
            lines.append(
                f"Consider increasing channel bandwidth to {min(20, bandwidth_mhz * 2):g} MHz for higher throughput."
            )
    return lines


def generate_report(budget: LinkBudget, distance_km: float, freq_ghz: float, bandwidth_mhz: float) -> str:
    """Format *budget* as a Markdown report with status-specific recommendations."""
    throughput = estimate_throughput(budget.recommended_mcs, bandwidth_mhz, 2, 0.0)

    out = ["# RF Link Analysis Report", "", "## Link Summary"]
    out.append(f"- Distance: {distance_km:.2f} km")
    out.append(f"- Frequency: {freq_ghz:.2f} GHz")
    out.append(f"- Channel Bandwidth: {bandwidth_mhz:g} MHz")
    out.append(f"- Link Status: {budget.link_status.value}")
    out.append(f"- Received Signal Power: {budget.received_signal_power_dbm:.2f} dBm")
    out.append(f"- Signal-to-Noise Ratio: {budget.snr_db:.2f} dB")
    out.append(f"- Link Margin: {budget.link_margin_db:.2f} dB")
    out.append(f"- Optimal MCS: {budget.recommended_mcs}")
    out.append(f"- Estimated Throughput: {throughput:.2f} Mbps")
    out.append("")
    out.append("## Recommendations")
    out.extend(f"- {line}" for line in _recommendations(budget, freq_ghz, bandwidth_mhz))
    return "\n".join(out) + "\n"
