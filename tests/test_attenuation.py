"""Tests for environmental attenuation."""

import pytest

from rflink_sim.propagation.attenuation import (
    EnvironmentalLosses,
    building_penetration_loss,
    environment_losses,
    fog_attenuation,
    rain_attenuation,
    rain_coefficients,
    vegetation_loss,
)

BANDS_GHZ = [0.9, 2.4, 3.5, 5.8, 10.0]


class TestRain:
    @pytest.mark.parametrize("freq", BANDS_GHZ)
    def test_zero_without_rain(self, freq):
        assert rain_attenuation(freq, 5.0, 0.0) == 0.0

    @pytest.mark.parametrize("freq", BANDS_GHZ)
    def test_positive_with_rain(self, freq):
        assert rain_attenuation(freq, 5.0, 10.0) > 0.0

    def test_band_coefficients(self):
        assert rain_coefficients(2.4) == (0.0000855, 0.9)
        assert rain_coefficients(5.8) == (0.00175, 1.3)
        assert rain_coefficients(24.0) == (0.01, 1.6)

    def test_scales_with_distance(self):
        assert rain_attenuation(5.8, 10.0, 25.0) == pytest.approx(2 * rain_attenuation(5.8, 5.0, 25.0))

    def test_heavier_rain_more_loss(self):
        assert rain_attenuation(10.0, 2.0, 50.0) > rain_attenuation(10.0, 2.0, 5.0)


class TestFog:
    def test_formula(self):
        assert fog_attenuation(10.0, 2.0, 0.5) == pytest.approx(0.01)

    def test_zero_density(self):
        assert fog_attenuation(10.0, 2.0, 0.0) == 0.0


class TestVegetation:
    def test_formula(self):
        assert vegetation_loss(2.4, 10.0) == pytest.approx(4.8)

    def test_no_foliage(self):
        assert vegetation_loss(2.4, 0.0) == 0.0


class TestBuildings:
    def test_low_band(self):
        assert building_penetration_loss(2.4, 3) == pytest.approx(12.0)

    def test_high_band(self):
        assert building_penetration_loss(5.8, 2) == pytest.approx(12.0)

    def test_no_walls(self):
        assert building_penetration_loss(5.8, 0) == 0.0


class TestCombined:
    def test_total_is_sum(self):
        env = environment_losses(
            5.8, 3.0,
            rain_rate_mm_hr=25.0,
            fog_density_g_m3=0.2,
            vegetation_depth_m=5.0,
            walls_count=1,
            additional_loss_db=2.0,
        )
        expected = env.rain_db + env.fog_db + env.vegetation_db + env.building_db + env.additional_db
        assert env.total == pytest.approx(expected)
        assert env.building_db == pytest.approx(6.0)
        assert env.additional_db == 2.0

    def test_clear_conditions(self):
        assert environment_losses(2.4, 5.0) == EnvironmentalLosses()
        assert EnvironmentalLosses().total == 0.0
