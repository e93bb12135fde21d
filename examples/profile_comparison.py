#!/usr/bin/env python3
"""Compare the operating point of every radio profile on the same link."""

from rflink_sim.core import LinkConfiguration, sweep_mcs
from rflink_sim.profiles import list_profiles, power_limit_options


def main() -> None:
    config = LinkConfiguration(bandwidth_mhz=10, video_mbps=8.0, near_ground=True, height_agl=30, height_unit="meters")

    print(f"{'profile':<15} {'family':<13} {'MCS':>4} {'range m':>9} {'max range m':>12} {'power limits':>14}")
    for profile in list_profiles():
        limits = power_limit_options(profile.key)
        pair = sweep_mcs(profile, config)
        for result in pair:
            print(
                f"{profile.name:<15} {result.family.value:<13} {result.final_mcs_index:>4} "
                f"{result.final_range_m:>9.1f} {result.max_range_m:>12.1f} {limits[-1]:>6.0f}-{limits[0]:.0f} dBm"
            )


if __name__ == "__main__":
    main()
