from .link_config import (
    LinkConfiguration, McsFamily, HeightUnit, convert_height,
    FEET_PER_METER, SUPPORTED_BANDWIDTHS_MHZ,
)
from .airtime import FrameTiming, frame_timing, guard_interval_rate
from .sweep import MCSPoint, SweepResult, SweepPair, select_operating_point, sweep_family, sweep_mcs

__all__ = [
    "LinkConfiguration", "McsFamily", "HeightUnit", "convert_height",
    "FEET_PER_METER", "SUPPORTED_BANDWIDTHS_MHZ",
    "FrameTiming", "frame_timing", "guard_interval_rate",
    "MCSPoint", "SweepResult", "SweepPair", "select_operating_point", "sweep_family", "sweep_mcs",
]
