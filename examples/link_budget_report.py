#!/usr/bin/env python3
"""Fixed-distance link budget with weather, written out as a Markdown report."""

from pathlib import Path

from rflink_sim.analysis import LinkBudgetParams, compute_link_budget, generate_report


def main() -> None:
    params = LinkBudgetParams(
        distance_km=3.0,
        frequency_ghz=5.8,
        bandwidth_mhz=20.0,
        tx_power_dbm=23.0,
        tx_antenna_gain_dbi=14.0,
        rx_antenna_gain_dbi=14.0,
        tx_cable_loss_db=1.0,
        rx_cable_loss_db=1.0,
        rain_rate_mm_hr=25.0,
        fog_density_g_m3=0.05,
        vegetation_depth_m=5.0,
        tx_height_m=10.0,
        rx_height_m=10.0,
        obstacle_height_m=8.0,
        mimo_streams=2,
    )
    budget = compute_link_budget(params)
    report = generate_report(budget, params.distance_km, params.frequency_ghz, params.bandwidth_mhz)

    print(report)
    print(f"Environmental loss: {budget.environment_loss_db:.2f} dB")
    print(f"Required antenna height: {budget.required_antenna_height_m:.1f} m")

    out = Path("link_report.md")
    out.write_text(report)
    print(f"Report saved: {out}")


if __name__ == "__main__":
    main()
