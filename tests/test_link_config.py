"""Tests for link configuration and airtime."""

import pytest

from rflink_sim.core import (
    FEET_PER_METER,
    HeightUnit,
    LinkConfiguration,
    McsFamily,
    convert_height,
    frame_timing,
    guard_interval_rate,
)
from rflink_sim.core.airtime import HEADER_TOTAL_BYTES, phy_overhead_us, slot_time_us
from rflink_sim.errors import InvalidConfigurationError


class TestLinkConfiguration:
    def test_defaults(self):
        cfg = LinkConfiguration()
        assert cfg.effective_streams == 2
        assert cfg.effective_frame_aggregation == 10
        assert cfg.throughput_demand_mbps == pytest.approx(3.05)
        assert cfg.height_agl_m == pytest.approx(400 / FEET_PER_METER)

    def test_effective_streams_limited_by_antennas(self):
        assert LinkConfiguration(antennas=1, streams=2).effective_streams == 1

    def test_near_ground_caps_aggregation(self):
        assert LinkConfiguration(near_ground=True, frame_aggregation=10).effective_frame_aggregation == 2
        assert LinkConfiguration(near_ground=True, frame_aggregation=1).effective_frame_aggregation == 1

    def test_string_enums_accepted(self):
        cfg = LinkConfiguration(height_unit="meters", mcs_family="multiplexing", height_agl=50.0)
        assert cfg.height_unit is HeightUnit.METERS
        assert cfg.mcs_family is McsFamily.MULTIPLEXING
        assert cfg.height_agl_m == 50.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"bandwidth_mhz": 7.0},
            {"frequency_mhz": 0.0},
            {"frequency_mhz": float("nan")},
            {"antennas": 3},
            {"streams": 0},
            {"frame_aggregation": 0},
            {"udp_payload_bytes": 0},
            {"video_mbps": -1.0},
            {"fade_margin_db": float("inf")},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidConfigurationError):
            LinkConfiguration(**kwargs)

    def test_bad_unit(self):
        with pytest.raises(ValueError):
            LinkConfiguration(height_unit="furlongs")


class TestHeightConversion:
    def test_feet_to_meters(self):
        assert convert_height(400.0, "feet", "meters") == pytest.approx(121.92, abs=0.01)

    def test_meters_to_feet(self):
        assert convert_height(100.0, HeightUnit.METERS, HeightUnit.FEET) == pytest.approx(328.084)

    def test_same_unit(self):
        assert convert_height(12.5, "meters", "meters") == 12.5


class TestAirtime:
    def test_guard_interval_rate(self):
        assert guard_interval_rate(40) == 14.4
        for bw in (3, 5, 10, 15, 20, 26):
            assert guard_interval_rate(bw) == 13.0

    def test_header_bytes(self):
        assert HEADER_TOTAL_BYTES == 98

    def test_slot_time(self):
        assert slot_time_us(20) == 9
        assert slot_time_us(40) == 9
        assert slot_time_us(5) == 21

    def test_phy_overhead(self):
        assert phy_overhead_us(20, 2) == pytest.approx(255.0)

    def test_bpsk_single_stream(self):
        t = frame_timing(1, 0.5, 1, 20, 1500, 10, overhead_streams=2)
        assert t.link_speed_mbps == pytest.approx(6.5)
        assert t.max_frames == 10
        assert t.phy_time_us == 19668
        assert t.ba_response_us == 97
        assert t.time_without_transit_us == pytest.approx(20020.0)

    def test_txop_limits_frames(self):
        # at 6.5 Mbps a 1598-byte frame takes ~1967 µs, so only ~50 fit in the TXOP
        t = frame_timing(1, 0.5, 1, 20, 1500, 64)
        assert t.max_frames == pytest.approx(100000 / (1598 * 8 / 6.5))
