"""Qualitative link-quality classification."""

from __future__ import annotations

from enum import Enum


class SignalQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    CRITICAL = "critical"


def classify_link_margin(link_margin_db: float) -> SignalQuality:
    """Classify a link margin: >20 excellent, >15 good, >10 fair, >5 poor, else critical."""
    if link_margin_db > 20:
        return SignalQuality.EXCELLENT
    if link_margin_db > 15:
        return SignalQuality.GOOD
    if link_margin_db > 10:
        return SignalQuality.FAIR
    if link_margin_db > 5:
        return SignalQuality.POOR
    return SignalQuality.CRITICAL


def link_quality_from_snr(snr_db: float) -> SignalQuality:
    """Classify an SNR: <10 poor, <15 fair, <25 good, else excellent."""
    if snr_db < 10:
        return SignalQuality.POOR
    if snr_db < 15:
        return SignalQuality.FAIR
    if snr_db < 25:
        return SignalQuality.GOOD
    return SignalQuality.EXCELLENT
