from .quality import SignalQuality, classify_link_margin, link_quality_from_snr
from .throughput import BASE_THROUGHPUT_MBPS, estimate_throughput
from .link_budget import (
    LinkBudget, LinkBudgetParams, compute_link_budget,
    determine_optimal_mcs, sensitivity_for_mcs, fading_margin_db,
)
from .report import generate_report

__all__ = [
    "SignalQuality", "classify_link_margin", "link_quality_from_snr",
    "BASE_THROUGHPUT_MBPS", "estimate_throughput",
    "LinkBudget", "LinkBudgetParams", "compute_link_budget",
    "determine_optimal_mcs", "sensitivity_for_mcs", "fading_margin_db",
    "generate_report",
]
