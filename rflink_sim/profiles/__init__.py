from .base import BASE_MCS_COUNT, HT_MCS_TABLE, MCSCharacteristics, Modulation, RadioProfile
from .catalog import PROFILES, get_profile, list_profiles, power_limit_options

__all__ = [
    "BASE_MCS_COUNT", "HT_MCS_TABLE", "MCSCharacteristics", "Modulation", "RadioProfile",
    "PROFILES", "get_profile", "list_profiles", "power_limit_options",
]
