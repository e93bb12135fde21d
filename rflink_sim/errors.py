"""Typed failures raised by the link engine."""

from __future__ import annotations


class EngineError(ValueError):
    """Base class for every failure reported by the engine."""


class UnknownProfileError(EngineError):
    """Raised when a radio profile key or name is not in the catalog."""

    def __init__(self, key: str, known: list[str] | None = None) -> None:
        self.key = key
        msg = f"Unknown radio profile '{key}'"
        if known:
            msg += ". Choose from: " + ", ".join(sorted(known))
        super().__init__(msg)


class InvalidConfigurationError(EngineError):
    """Raised for non-positive or out-of-domain numeric input."""


class NonFiniteResultError(EngineError):
    """Raised when a formula would produce NaN or infinity."""
