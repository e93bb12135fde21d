"""Radio hardware profile definition."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from ..errors import InvalidConfigurationError

BASE_MCS_COUNT = 8


class Modulation(str, Enum):
    BPSK = "BPSK"
    QPSK = "QPSK"
    QAM16 = "16-QAM"
    QAM64 = "64-QAM"


@dataclass(frozen=True)
class MCSCharacteristics:
    """Modulation and coding of one base MCS index (single stream)."""

    modulation: Modulation
    coding_rate: float
    bits_per_symbol: int


# 802.11n base MCS 0–7; MCS 8–15 reuse these with two spatial streams
HT_MCS_TABLE: Tuple[MCSCharacteristics, ...] = (
    MCSCharacteristics(Modulation.BPSK, 1 / 2, 1),
    MCSCharacteristics(Modulation.QPSK, 1 / 2, 2),
    MCSCharacteristics(Modulation.QPSK, 3 / 4, 2),
    MCSCharacteristics(Modulation.QAM16, 1 / 2, 4),
    MCSCharacteristics(Modulation.QAM16, 3 / 4, 4),
    MCSCharacteristics(Modulation.QAM64, 2 / 3, 6),
    MCSCharacteristics(Modulation.QAM64, 3 / 4, 6),
    MCSCharacteristics(Modulation.QAM64, 5 / 6, 6),
)


@dataclass(frozen=True)
class RadioProfile:
    """One radio hardware variant.

    Parameters
    ----------
    key : str
        Short catalog key, e.g. ``"2L"``.
    power : Tuple[float, ...]
        Transmit power (dBm) per base MCS index 0–7.
    sensitivity : Tuple[float, ...]
        Receiver sensitivity (dBm) per base MCS index 0–7.
    mcs : Tuple[MCSCharacteristics, ...]
        Modulation/coding per base MCS index.
    """

    key: str
    name: str
    power: Tuple[float, ...]
    sensitivity: Tuple[float, ...]
    max_tx_power_dbm: float
    supported_frequencies_mhz: Tuple[float, ...] = (2400.0, 2450.0, 2500.0)
    mcs: Tuple[MCSCharacteristics, ...] = field(default=HT_MCS_TABLE)

    def __post_init__(self) -> None:
        # Normalise lists into tuples so profiles stay hashable
        for attr in ("power", "sensitivity", "mcs", "supported_frequencies_mhz"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))
        for attr in ("power", "sensitivity", "mcs"):
            n = len(getattr(self, attr))
            if n != BASE_MCS_COUNT:
                raise InvalidConfigurationError(
                    f"Profile '{self.key}': {attr} has {n} entries, expected {BASE_MCS_COUNT}"
                )

    @property
    def modulation(self) -> Tuple[Modulation, ...]:
        return tuple(m.modulation for m in self.mcs)

    @property
    def coding_rate(self) -> Tuple[float, ...]:
        return tuple(m.coding_rate for m in self.mcs)

    @property
    def bits_per_symbol(self) -> Tuple[int, ...]:
        return tuple(m.bits_per_symbol for m in self.mcs)

    def supports_frequency(self, freq_mhz: float) -> bool:
        return freq_mhz in self.supported_frequencies_mhz
