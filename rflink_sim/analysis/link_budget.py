"""Top-down link budget for a fixed distance.

Unlike the MCS sweep, which solves for range from per-MCS profile tables, the
budget fixes the distance and solves for received power, SNR and link margin.
Receiver sensitivity here follows a coarse three-tier model keyed on the
recommended MCS.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Tuple

from ..errors import InvalidConfigurationError
from ..propagation.attenuation import EnvironmentalLosses, environment_losses
from ..propagation.fresnel import required_antenna_height
from ..propagation.noise import noise_floor_dbm, snr_db
from ..propagation.pathloss import select_path_loss
from .quality import SignalQuality, classify_link_margin

logger = logging.getLogger(__name__)

# (MCS, minimum SNR dB) for reliable single-stream operation
MCS_SNR_THRESHOLDS: Tuple[Tuple[int, float], ...] = (
    (0, 5.0),
    (1, 10.0),
    (2, 14.0),
    (3, 16.0),
    (4, 20.0),
    (5, 25.0),
    (6, 27.0),
    (7, 29.0),
)

MCS_SAFETY_MARGIN_DB = 3.0


def determine_optimal_mcs(snr: float, mimo_streams: int = 1) -> int:
    """Highest MCS whose SNR threshold is met; shifted to MCS 8–15 for two streams.

    Below the MCS 0 threshold the result is still the lowest MCS of the family.
    """
    mcs = 0
    for index, threshold in reversed(MCS_SNR_THRESHOLDS):
        if snr >= threshold:
            mcs = index
            break
    if mimo_streams == 2:
        return mcs + 8
    return mcs


def sensitivity_for_mcs(mcs: int) -> float:
    """Simplified receiver sensitivity: −90 dBm up to MCS 3, −80 up to MCS 7, else −70."""
    if mcs <= 3:
        return -90.0
    if mcs <= 7:
        return -80.0
    return -70.0


def fading_margin_db(distance_km: float, freq_ghz: float) -> float:
    """Empirical fading allowance 5 + 5·log10(d·f)."""
    return 5.0 + 5.0 * math.log10(distance_km * freq_ghz)


@dataclass(frozen=True)
class LinkBudgetParams:
    """Inputs of a link budget.

    Distances in km, frequency in GHz, bandwidth in MHz, heights in metres.
    Environmental inputs default to zero (no loss).
    """

    distance_km: float
    frequency_ghz: float
    bandwidth_mhz: float
    tx_power_dbm: float
    tx_antenna_gain_dbi: float
    rx_antenna_gain_dbi: float
    tx_cable_loss_db: float = 0.0
    rx_cable_loss_db: float = 0.0
    noise_figure_db: float = 4.0
    rain_rate_mm_hr: float = 0.0
    fog_density_g_m3: float = 0.0
    vegetation_depth_m: float = 0.0
    walls_count: int = 0
    additional_loss_db: float = 0.0
    temperature_c: float = 25.0
    tx_height_m: float = 3.0
    rx_height_m: float = 3.0
    obstacle_height_m: float = 0.0
    mimo_streams: int = 1

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise InvalidConfigurationError(f"{f.name} must be finite, got {value}")
        for name in ("distance_km", "frequency_ghz", "bandwidth_mhz"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidConfigurationError(f"{name} must be positive, got {value}")
        if self.mimo_streams not in (1, 2):
            raise InvalidConfigurationError(f"mimo_streams must be 1 or 2, got {self.mimo_streams}")
        if self.temperature_c <= -273.15:
            raise InvalidConfigurationError("temperature must be above absolute zero")


@dataclass(frozen=True)
class LinkBudget:
    """Gain/loss budget of one link."""

    path_loss_db: float
    environment: EnvironmentalLosses
    fading_margin_db: float
    eirp_dbm: float
    received_signal_power_dbm: float
    noise_floor_dbm: float
    snr_db: float
    recommended_mcs: int
    sensitivity_dbm: float
    link_margin_db: float
    link_status: SignalQuality
    required_antenna_height_m: float

    @property
    def environment_loss_db(self) -> float:
        return self.environment.total


def compute_link_budget(params: LinkBudgetParams) -> LinkBudget:
    """Compute path loss, received power, SNR, margin and status for *params*."""
    d = params.distance_km
    f = params.frequency_ghz

    path_loss = float(select_path_loss(d, f, params.tx_height_m, params.rx_height_m))
    env = environment_losses(
        f,
        d,
        rain_rate_mm_hr=params.rain_rate_mm_hr,
        fog_density_g_m3=params.fog_density_g_m3,
        vegetation_depth_m=params.vegetation_depth_m,
        walls_count=params.walls_count,
        additional_loss_db=params.additional_loss_db,
    )

    eirp = params.tx_power_dbm + params.tx_antenna_gain_dbi - params.tx_cable_loss_db
    received = eirp - path_loss - env.total + params.rx_antenna_gain_dbi - params.rx_cable_loss_db
    noise = noise_floor_dbm(params.bandwidth_mhz, params.temperature_c, params.noise_figure_db)
    snr = snr_db(received, noise)

    mcs = determine_optimal_mcs(snr - MCS_SAFETY_MARGIN_DB, params.mimo_streams)
    sensitivity = sensitivity_for_mcs(mcs)
    margin = received - sensitivity
    status = classify_link_margin(margin)

    logger.debug(
        "link budget %.2f km @ %.3f GHz: rx %.2f dBm, snr %.2f dB, margin %.2f dB (%s)",
        d, f, received, snr, margin, status.value,
    )

    return LinkBudget(
        path_loss_db=path_loss,
        environment=env,
        fading_margin_db=fading_margin_db(d, f),
        eirp_dbm=eirp,
        received_signal_power_dbm=received,
        noise_floor_dbm=noise,
        snr_db=snr,
        recommended_mcs=mcs,
        sensitivity_dbm=sensitivity,
        link_margin_db=margin,
        link_status=status,
        required_antenna_height_m=required_antenna_height(d, f, params.obstacle_height_m),
    )
