from .pathloss import (
    free_space_path_loss,
    two_ray_ground_path_loss,
    select_path_loss,
    frequency_correction_factor,
    range_from_link_budget,
    round_half_up,
)
from .fresnel import fresnel_zone_radius, required_antenna_height
from .attenuation import (
    EnvironmentalLosses,
    rain_attenuation,
    fog_attenuation,
    vegetation_loss,
    building_penetration_loss,
    environment_losses,
)
from .noise import noise_floor_dbm, effective_noise_floor_dbm, snr_db

__all__ = [
    "free_space_path_loss", "two_ray_ground_path_loss", "select_path_loss",
    "frequency_correction_factor", "range_from_link_budget", "round_half_up",
    "fresnel_zone_radius", "required_antenna_height",
    "EnvironmentalLosses", "rain_attenuation", "fog_attenuation", "vegetation_loss",
    "building_penetration_loss", "environment_losses",
    "noise_floor_dbm", "effective_noise_floor_dbm", "snr_db",
]
