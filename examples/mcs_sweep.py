#!/usr/bin/env python3
"""MCS sweep example.

Sweeps a Mini-OEM link at 2.45 GHz / 20 MHz carrying 3 Mbps of video plus
telemetry, and prints both MCS families with the selected operating point.
"""

from rflink_sim.core import LinkConfiguration, sweep_mcs
from rflink_sim.log import setup_logging


def main() -> None:
    setup_logging("INFO")

    # --- Link ---
    config = LinkConfiguration(
        frequency_mhz=2450,
        bandwidth_mhz=20,
        antennas=2,
        streams=2,
        antenna_gain_dbi=6.0,
        fade_margin_db=10.0,
        video_mbps=3.0,
        telemetry_kbps=50.0,
        height_agl=400,
        height_unit="feet",
    )

    # --- Sweep ---
    pair = sweep_mcs("Mini-OEM", config)

    for result in pair:
        print("=" * 72)
        print(f"{result.profile_name} | {result.family.value} | demand {result.total_throughput_demand_mbps:.2f} Mbps")
        print("=" * 72)
        print(f"{'MCS':>4} {'mod':>7} {'range m':>9} {'Mbps':>7} {'fresnel m':>10} {'SNR dB':>7}  ok")
        for p in result.points:
            flag = "yes" if p.meets_throughput and p.meets_clearance else "no"
            print(
                f"{p.mcs_index:>4} {p.modulation.value:>7} {p.range_m:>9.1f} {p.throughput_mbps:>7.2f} "
                f"{p.fresnel_clearance_m:>10.1f} {p.snr_db if p.snr_db is not None else '-':>7}  {flag}"
            )
        print(f"  -> operating point MCS {result.final_mcs_index} at {result.final_range_m:.1f} m")
        print(f"  -> range given up vs MCS {result.max_mcs_index}: {result.range_delta_m:.1f} m")


if __name__ == "__main__":
    main()
