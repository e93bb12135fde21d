"""Tests for propagation models."""

import numpy as np
import pytest

from rflink_sim.errors import InvalidConfigurationError, NonFiniteResultError
from rflink_sim.propagation.pathloss import (
    free_space_path_loss,
    frequency_correction_factor,
    range_from_link_budget,
    round_half_up,
    select_path_loss,
    two_ray_ground_path_loss,
)
from rflink_sim.propagation.fresnel import fresnel_zone_radius, required_antenna_height
from rflink_sim.propagation.noise import effective_noise_floor_dbm, noise_floor_dbm, snr_db


class TestFSPL:
    def test_1km_2450mhz(self):
        # FSPL at 1 km, 2.45 GHz ≈ 100.2 dB
        pl = float(free_space_path_loss(1.0, 2.45))
        assert pl == pytest.approx(100.23, abs=0.01)

    def test_increases_with_distance(self):
        pl1 = float(free_space_path_loss(0.1, 2.45))
        pl2 = float(free_space_path_loss(1.0, 2.45))
        assert pl2 - pl1 == pytest.approx(20.0)

    def test_array_input(self):
        pl = free_space_path_loss(np.array([1.0, 10.0]), 2.45)
        assert pl.shape == (2,)
        assert pl[1] - pl[0] == pytest.approx(20.0)

    @pytest.mark.parametrize("distance", [0.0, -1.0])
    def test_non_positive_distance_fails(self, distance):
        with pytest.raises(NonFiniteResultError):
            free_space_path_loss(distance, 2.45)


class TestTwoRay:
    def test_formula(self):
        fspl = float(free_space_path_loss(5.0, 2.45))
        pl = float(two_ray_ground_path_loss(5.0, 2.45, 3.0, 3.0))
        assert pl == pytest.approx(fspl - 20 * np.log10(9.0) + 10.0)

    def test_needs_positive_heights(self):
        with pytest.raises(InvalidConfigurationError):
            two_ray_ground_path_loss(5.0, 2.45, 0.0, 3.0)

    def test_select_falls_back_to_fspl(self):
        assert float(select_path_loss(5.0, 2.45, 0.0, 3.0)) == pytest.approx(
            float(free_space_path_loss(5.0, 2.45))
        )
        assert float(select_path_loss(5.0, 2.45, 3.0, 3.0)) == pytest.approx(
            float(two_ray_ground_path_loss(5.0, 2.45, 3.0, 3.0))
        )


class TestFresnel:
    def test_linear_in_clearance(self):
        r60 = float(fresnel_zone_radius(4.0, 2.45, 60))
        r100 = float(fresnel_zone_radius(4.0, 2.45, 100))
        assert r60 == pytest.approx(0.6 * r100)

    def test_full_zone_value(self):
        # 8.66·sqrt(1/1) at 100 %
        assert float(fresnel_zone_radius(1.0, 1.0, 100)) == pytest.approx(8.66)

    def test_required_antenna_height(self):
        r = float(fresnel_zone_radius(2.0, 2.45, 60))
        assert required_antenna_height(2.0, 2.45, 10.0) == pytest.approx(10.0 + r + 2.0)


class TestFrequencyCorrection:
    def test_zero_when_clear_of_ground(self):
        assert frequency_correction_factor(2450.0, near_ground=False) == 0.0

    def test_non_zero_near_ground(self):
        c = frequency_correction_factor(2450.0)
        assert c != 0.0
        assert c == pytest.approx(2.2503, abs=1e-3)

    def test_rounded_to_four_decimals(self):
        c = frequency_correction_factor(5500.0)
        assert round(c, 4) == pytest.approx(c, abs=1e-12)


class TestRangeFromLinkBudget:
    def test_rounded_to_decimetre(self):
        r = range_from_link_budget(27, -90.0103, 10, 6, 2450)
        assert r == pytest.approx(4357.7, abs=0.2)
        assert round(r, 1) == pytest.approx(r, abs=1e-9)

    def test_decreasing_in_fade_margin(self):
        ranges = [range_from_link_budget(27, -87, fm, 6, 2450) for fm in (0, 5, 10, 15, 20)]
        assert all(a > b for a, b in zip(ranges, ranges[1:]))

    def test_increasing_in_antenna_gain(self):
        ranges = [range_from_link_budget(27, -87, 10, g, 2450) for g in (0, 3, 6, 9, 12)]
        assert all(a < b for a, b in zip(ranges, ranges[1:]))

    def test_inverse_of_fspl(self):
        # 92.45 is the rounded FSPL constant, so the round trip agrees to ~0.01 dB
        budget = 27 - (-87) - 10 + 6
        d_m = range_from_link_budget(27, -87, 10, 6, 2450, ndigits=None)
        assert float(free_space_path_loss(d_m / 1000.0, 2.45)) == pytest.approx(budget, abs=0.01)

    def test_correction_shortens_range(self):
        plain = range_from_link_budget(27, -87, 10, 6, 2450, 0.0)
        corrected = range_from_link_budget(27, -87, 10, 6, 2450, 2.25)
        assert corrected < plain

    def test_invalid_frequency(self):
        with pytest.raises(InvalidConfigurationError):
            range_from_link_budget(27, -87, 10, 6, 0)

    def test_non_finite_input(self):
        with pytest.raises(NonFiniteResultError):
            range_from_link_budget(float("nan"), -87, 10, 6, 2450)

    def test_overflow_is_reported(self):
        with pytest.raises(NonFiniteResultError):
            range_from_link_budget(1e6, -87, 10, 6, 2450)


class TestRounding:
    def test_ties_round_up(self):
        assert round_half_up(0.25, 1) == pytest.approx(0.3)
        assert round_half_up(2.5) == 3.0

    def test_plain_values(self):
        assert round_half_up(1.234, 2) == pytest.approx(1.23)

    def test_uses_exact_binary_value(self):
        # 1.005 and 2.675 are stored just below the tie
        assert round_half_up(1.005, 2) == 1.0
        assert round_half_up(2.675, 2) == 2.67
        assert round_half_up(0.125, 2) == 0.13

    def test_negative_ties_away_from_zero(self):
        assert round_half_up(-2.5) == -3.0
        assert round_half_up(-0.25, 1) == -0.3

    def test_non_finite_passthrough(self):
        assert round_half_up(float("inf"), 1) == float("inf")


class TestNoise:
    def test_thermal_noise_20mhz(self):
        # kTB at 25 °C over 20 MHz ≈ -100.8 dBm, plus 4 dB NF
        n = noise_floor_dbm(20.0, 25.0, 4.0)
        assert n == pytest.approx(-96.85, abs=0.05)

    def test_effective_noise_floor(self):
        assert effective_noise_floor_dbm(20.0) == pytest.approx(-174 + 73.01 + 3, abs=0.01)

    def test_bad_bandwidth(self):
        with pytest.raises(InvalidConfigurationError):
            noise_floor_dbm(0.0)

    def test_snr(self):
        assert snr_db(-70.0, -95.0) == pytest.approx(25.0)
