"""MCS sweep: range, throughput and Fresnel clearance per MCS index."""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..analysis.quality import SignalQuality, link_quality_from_snr
from ..errors import InvalidConfigurationError
from ..profiles.base import BASE_MCS_COUNT, Modulation, RadioProfile
from ..profiles.catalog import get_profile
from ..propagation.fresnel import fresnel_zone_radius
from ..propagation.noise import effective_noise_floor_dbm
from ..propagation.pathloss import (
    free_space_path_loss,
    frequency_correction_factor,
    range_from_link_budget,
    round_half_up,
)
from .airtime import PACKET_SUCCESS_PCT, frame_timing
from .link_config import LinkConfiguration, McsFamily

logger = logging.getLogger(__name__)

# Transmit power is held this far below the regulatory limit
POWER_LIMIT_MARGIN_DB = 3.0


@dataclass(frozen=True)
class MCSPoint:
    """Link performance at one MCS index."""

    mcs_index: int
    range_m: float
    throughput_mbps: float
    ideal_throughput_mbps: float
    fresnel_clearance_m: float
    modulation: Modulation
    coding_rate: float
    tx_power_dbm: float
    sensitivity_dbm: float
    received_power_dbm: Optional[float]
    snr_db: Optional[float]
    meets_throughput: bool
    meets_clearance: bool

    @property
    def viable(self) -> bool:
        """A non-positive range means no usable link at this MCS."""
        return self.range_m > 0

    @property
    def quality(self) -> SignalQuality:
        if self.snr_db is None:
            return SignalQuality.CRITICAL
        return link_quality_from_snr(self.snr_db)


@dataclass(frozen=True)
class SweepResult:
    """Outcome of one MCS family sweep, including the selected operating point."""

    family: McsFamily
    profile_name: str
    points: Tuple[MCSPoint, ...]
    final_range_m: float
    final_mcs_index: int
    final_fresnel_clearance_m: float
    total_throughput_demand_mbps: float
    height_agl_m: float

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    @property
    def final_point(self) -> MCSPoint:
        for point in self.points:
            if point.mcs_index == self.final_mcs_index:
                return point
        raise LookupError(f"MCS {self.final_mcs_index} not in sweep")

    @property
    def max_range_m(self) -> float:
        return self.points[0].range_m

    @property
    def max_mcs_index(self) -> int:
        return self.points[0].mcs_index

    @property
    def max_throughput_mbps(self) -> float:
        return self.points[0].throughput_mbps

    @property
    def throughput_delta_mbps(self) -> float:
        return max(0.0, self.total_throughput_demand_mbps - self.max_throughput_mbps)

    @property
    def range_delta_m(self) -> float:
        return max(0.0, self.max_range_m - self.final_range_m)

    @property
    def agl_delta_m(self) -> float:
        """Height above ground beyond the clearance needed at the final point."""
        return self.height_agl_m - self.final_fresnel_clearance_m

    @property
    def agl_increase_needed_m(self) -> float:
        return max(0.0, self.final_fresnel_clearance_m - self.height_agl_m)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = asdict(self)
        out["family"] = self.family.value
        for point in out["points"]:
            point["modulation"] = Modulation(point["modulation"]).value
        out.update(
            max_range_m=self.max_range_m,
            max_mcs_index=self.max_mcs_index,
            max_throughput_mbps=self.max_throughput_mbps,
            throughput_delta_mbps=round_half_up(self.throughput_delta_mbps, 2),
            range_delta_m=round_half_up(self.range_delta_m, 2),
            agl_delta_m=round_half_up(self.agl_delta_m, 2),
            agl_increase_needed_m=round_half_up(self.agl_increase_needed_m, 2),
        )
        return out


@dataclass(frozen=True)
class SweepPair:
    """Both family sweeps for one request; unpacks as ``(diversity, multiplexing)``."""

    diversity: SweepResult
    multiplexing: SweepResult
    preferred: McsFamily = McsFamily.DIVERSITY

    @property
    def selected(self) -> SweepResult:
        if self.preferred == McsFamily.MULTIPLEXING:
            return self.multiplexing
        return self.diversity

    def __iter__(self) -> Iterator[SweepResult]:
        return iter((self.diversity, self.multiplexing))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "preferred": self.preferred.value,
            "diversity": self.diversity.to_dict(),
            "multiplexing": self.multiplexing.to_dict(),
        }


# ------------------------------------------------------------------
# Selection rule
# ------------------------------------------------------------------

def select_operating_point(points: List[MCSPoint] | Tuple[MCSPoint, ...]) -> MCSPoint:
    """Walk up the MCS ladder while the previous index still breaks the link.

    Point *i* is adopted when point *i − 1* misses either the throughput or
    the clearance constraint. The look-back is one index, not a search.
    """
    final = points[0]
    for i in range(1, len(points)):
        prev = points[i - 1]
        if not prev.meets_throughput or not prev.meets_clearance:
            final = points[i]
    return final


# ------------------------------------------------------------------
# Sweep
# ------------------------------------------------------------------

def _sweep_point(
    profile: RadioProfile,
    config: LinkConfiguration,
    i: int,
    ant_streams: int,
    correction: float,
) -> MCSPoint:
    bw = config.bandwidth_mhz
    freq = config.frequency_mhz
    mcs = profile.mcs[i]

    tx_power = min(float(profile.power[i]), config.power_limit_dbm - POWER_LIMIT_MARGIN_DB)
    sensitivity = (
        profile.sensitivity[i]
        - 10.0 * math.log10(config.antennas / ant_streams)
        - 10.0 * math.log10(20.0 / bw)
    )
    mcs_index = i + (ant_streams - 1) * BASE_MCS_COUNT

    timing = frame_timing(
        mcs.bits_per_symbol,
        mcs.coding_rate,
        ant_streams,
        bw,
        config.udp_payload_bytes,
        config.effective_frame_aggregation,
        overhead_streams=config.effective_streams,
    )

    range_m = range_from_link_budget(
        tx_power, sensitivity, config.fade_margin_db, config.antenna_gain_dbi, freq, correction
    )

    transit_us = math.floor(1000.0 * 4.0 * range_m / 300.0 + 0.5) / 1000.0
    time_no_transit = timing.time_without_transit_us
    time_total = round_half_up(time_no_transit + transit_us, 1)

    payload_bits = timing.max_frames * config.udp_payload_bytes * 8
    ideal = round_half_up(payload_bits / time_no_transit, 1)
    max_tpt = round_half_up(payload_bits / time_total, 1)
    adjusted = round_half_up(max_tpt * PACKET_SUCCESS_PCT / 100, 2)

    fresnel = round_half_up(
        float(fresnel_zone_radius(range_m / 1000.0, freq / 1000.0, config.fresnel_clearance_pct)), 1
    )

    received: Optional[float] = None
    snr: Optional[float] = None
    if range_m > 0:
        received = tx_power + config.antenna_gain_dbi - float(free_space_path_loss(range_m / 1000.0, freq / 1000.0))
        snr = round_half_up(received - effective_noise_floor_dbm(bw), 1)

    return MCSPoint(
        mcs_index=mcs_index,
        range_m=range_m,
        throughput_mbps=adjusted,
        ideal_throughput_mbps=ideal,
        fresnel_clearance_m=fresnel,
        modulation=mcs.modulation,
        coding_rate=mcs.coding_rate,
        tx_power_dbm=tx_power,
        sensitivity_dbm=sensitivity,
        received_power_dbm=received,
        snr_db=snr,
        meets_throughput=config.throughput_demand_mbps <= adjusted,
        meets_clearance=config.height_agl_m >= fresnel,
    )


def sweep_family(
    profile: RadioProfile,
    config: LinkConfiguration,
    family: McsFamily | str,
) -> SweepResult:
    """Evaluate the 8 base MCS indices of one family and select an operating point.

    Diversity forces a single stream (MCS 0–7). Multiplexing uses
    ``config.effective_streams`` (MCS 8–15 with two usable streams).
    """
    family = McsFamily(family)
    ant_streams = 1 if family == McsFamily.DIVERSITY else config.effective_streams
    if ant_streams < 1:
        raise InvalidConfigurationError(f"streams must be positive, got {ant_streams}")
    correction = frequency_correction_factor(config.frequency_mhz, config.near_ground)

    points = tuple(
        _sweep_point(profile, config, i, ant_streams, correction) for i in range(BASE_MCS_COUNT)
    )
    final = select_operating_point(points)

    logger.debug(
        "%s sweep on %s: final MCS %d at %.1f m (demand %.2f Mbps)",
        family.value, profile.name, final.mcs_index, final.range_m, config.throughput_demand_mbps,
    )
    if not final.viable:
        logger.warning("%s sweep on %s has no viable link", family.value, profile.name)

    return SweepResult(
        family=family,
        profile_name=profile.name,
        points=points,
        final_range_m=final.range_m,
        final_mcs_index=final.mcs_index,
        final_fresnel_clearance_m=final.fresnel_clearance_m,
        total_throughput_demand_mbps=config.throughput_demand_mbps,
        height_agl_m=config.height_agl_m,
    )


def sweep_mcs(profile: RadioProfile | str, config: LinkConfiguration) -> SweepPair:
    """Run the diversity and multiplexing sweeps for one configuration.

    Parameters
    ----------
    profile : RadioProfile | str
        A profile, or its catalog key or name.

    Raises
    ------
    UnknownProfileError
        If *profile* names nothing in the catalog.
    InvalidConfigurationError
        If the configuration is out of domain.
    """
    if isinstance(profile, str):
        profile = get_profile(profile)
    if not profile.supports_frequency(config.frequency_mhz):
        logger.warning(
            "%.1f MHz is outside the supported frequencies of %s %s",
            config.frequency_mhz, profile.name, list(profile.supported_frequencies_mhz),
        )

    diversity = sweep_family(profile, config, McsFamily.DIVERSITY)
    multiplexing = sweep_family(profile, config, McsFamily.MULTIPLEXING)
    return SweepPair(diversity=diversity, multiplexing=multiplexing, preferred=config.mcs_family)
