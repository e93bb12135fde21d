"""Static catalog of radio hardware variants."""

from __future__ import annotations

from typing import Dict, List

from ..errors import UnknownProfileError
from .base import RadioProfile

NANO_OEM = RadioProfile(
    key="1L",
    name="Nano-OEM",
    power=(24, 23, 23, 23, 22, 21, 20, 18),
    sensitivity=(-87, -85, -83, -81, -77, -73, -71, -69),
    max_tx_power_dbm=24.0,
)

MINI_OEM = RadioProfile(
    key="2L",
    name="Mini-OEM",
    power=(27, 26, 26, 26, 25, 24, 23, 21),
    sensitivity=(-87, -85, -83, -81, -77, -73, -71, -69),
    max_tx_power_dbm=27.0,
)

OEM_V2 = RadioProfile(
    key="2KO",
    name="OEM (V2)",
    power=(30, 29, 29, 29, 28, 27, 26, 24),
    sensitivity=(-89, -87, -85, -83, -79, -75, -73, -71),
    max_tx_power_dbm=30.0,
    supported_frequencies_mhz=(2400.0, 2450.0, 2500.0, 5000.0, 5500.0),
)

WEARABLE_V2 = RadioProfile(
    key="2KW",
    name="Wearable (V2)",
    power=(27, 26, 26, 26, 25, 24, 23, 21),
    sensitivity=(-87, -85, -83, -81, -77, -73, -71, -69),
    max_tx_power_dbm=27.0,
)

PROFILES: Dict[str, RadioProfile] = {
    p.key: p for p in (NANO_OEM, MINI_OEM, OEM_V2, WEARABLE_V2)
}


def list_profiles() -> List[RadioProfile]:
    return list(PROFILES.values())


def get_profile(key_or_name: str) -> RadioProfile:
    """Look up a profile by catalog key (``"2L"``) or name (``"mini-oem"``).

    Raises
    ------
    UnknownProfileError
        If nothing in the catalog matches.
    """
    profile = PROFILES.get(key_or_name)
    if profile is not None:
        return profile
    wanted = key_or_name.strip().lower()
    for profile in PROFILES.values():
        if profile.key.lower() == wanted or profile.name.lower() == wanted:
            return profile
    raise UnknownProfileError(key_or_name, list(PROFILES))


def power_limit_options(key_or_name: str) -> List[float]:
    """Selectable regulatory power limits (dBm) for a profile, highest first."""
    profile = get_profile(key_or_name)
    lo, hi = (18, 30) if profile.key == "1L" else (21, 33)
    return [float(v) for v in range(hi, lo - 1, -1)]
