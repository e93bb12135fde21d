"""Tests for the Markdown link report."""

import pytest

from rflink_sim.analysis import (
    LinkBudget,
    LinkBudgetParams,
    SignalQuality,
    classify_link_margin,
    compute_link_budget,
    generate_report,
)
from rflink_sim.propagation import EnvironmentalLosses


def budget_with(margin, mcs=4):
    return LinkBudget(
        path_loss_db=100.0,
        environment=EnvironmentalLosses(),
        fading_margin_db=10.0,
        eirp_dbm=26.0,
        received_signal_power_dbm=-80.0 + margin,
        noise_floor_dbm=-96.0,
        snr_db=16.0 + margin,
        recommended_mcs=mcs,
        sensitivity_dbm=-80.0,
        link_margin_db=margin,
        link_status=classify_link_margin(margin),
        required_antenna_height_m=12.0,
    )


class TestReportLayout:
    def test_sections(self):
        text = generate_report(budget_with(12.0), 5.0, 2.45, 20.0)
        assert text.startswith("# RF Link Analysis Report")
        assert "## Link Summary" in text
        assert "## Recommendations" in text
        assert "- Distance: 5.00 km" in text
        assert "- Frequency: 2.45 GHz" in text
        assert "- Channel Bandwidth: 20 MHz" in text
        assert "- Link Status: fair" in text

    def test_throughput_line(self):
        text = generate_report(budget_with(12.0, mcs=4), 5.0, 2.45, 20.0)
        assert "- Estimated Throughput: 29.88 Mbps" in text


class TestRecommendations:
    def test_critical_negative_margin(self):
        text = generate_report(budget_with(-3.0), 5.0, 2.45, 20.0)
        assert "**Critical Link Condition**" in text
        assert "**Negative Link Margin**" in text
        assert "+8 dBi improvement needed" in text

    def test_critical_positive_margin(self):
        text = generate_report(budget_with(2.0), 5.0, 2.45, 20.0)
        assert "**Critical Link Condition**" in text
        assert "Negative Link Margin" not in text

    def test_poor(self):
        text = generate_report(budget_with(7.5, mcs=4), 5.0, 2.45, 20.0)
        assert "**Poor Link Condition**" in text
        assert "at least 3 dBi" in text
        assert "lower MCS (2)" in text

    def test_fair_high_band_mentions_rain(self):
        text = generate_report(budget_with(12.0), 5.0, 5.8, 20.0)
        assert "rain events" in text

    def test_fair_low_band(self):
        text = generate_report(budget_with(12.0), 5.0, 2.45, 20.0)
        assert "adaptive MCS" in text
        assert "rain events" not in text

    def test_good_suggests_higher_mcs_and_bandwidth(self):
        text = generate_report(budget_with(25.0, mcs=4), 1.0, 2.45, 10.0)
        assert "increased to 6" in text
        assert "bandwidth to 20 MHz" in text

    def test_good_at_top_mcs(self):
        text = generate_report(budget_with(25.0, mcs=7), 1.0, 2.45, 20.0)
        assert "good margin" in text
        assert "increased to" not in text
        assert "bandwidth" not in text.split("## Recommendations")[1]


class TestComputedReport:
    def test_reference_link_is_poor(self):
        p = LinkBudgetParams(
            distance_km=5.0,
            frequency_ghz=2.45,
            bandwidth_mhz=20.0,
            tx_power_dbm=20.0,
            tx_antenna_gain_dbi=6.0,
            rx_antenna_gain_dbi=6.0,
        )
        budget = compute_link_budget(p)
        assert budget.link_status is SignalQuality.POOR
        text = generate_report(budget, 5.0, 2.45, 20.0)
        assert "**Poor Link Condition**" in text
        assert "at least 4 dBi" in text
        assert f"- Link Margin: {budget.link_margin_db:.2f} dB" in text

    @pytest.mark.parametrize("margin", [-10.0, 3.0, 8.0, 12.0, 18.0, 30.0])
    def test_always_has_recommendations(self, margin):
        text = generate_report(budget_with(margin), 2.0, 2.45, 20.0)
        recs = text.split("## Recommendations\n")[1].strip().splitlines()
        assert recs
        assert all(line.startswith("- ") for line in recs)
