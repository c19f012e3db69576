"""Severity levels for check results."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """How serious a problem is."""

    NONE = ""
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    def __str__(self) -> str:
        return self.value

    def is_valid(self) -> bool:
        """True for every level except NONE."""
        return self in VALID_SEVERITY

    def valid(self) -> list[Severity]:
        """All valid severity levels, most severe first."""
        return list(VALID_SEVERITY)

    def as_ordinal(self) -> int:
        """Rank of the level: 4 for CRITICAL down to 0 for NONE."""
        return _ORDINALS.get(self, 0)


VALID_SEVERITY: tuple[Severity, ...] = (
    Severity.CRITICAL,
    Severity.HIGH,
    Severity.MEDIUM,
    Severity.LOW,
)

_ORDINALS = {
    Severity.CRITICAL: 4,
    Severity.HIGH: 3,
    Severity.MEDIUM: 2,
    Severity.LOW: 1,
}

_ALIASES = {
    "ERROR": Severity.HIGH,
    "WARNING": Severity.MEDIUM,
    "INFO": Severity.LOW,
}


def string_to_severity(sev: str) -> Severity:
    """Parse a severity name, case-insensitively, accepting legacy aliases."""
    upper = sev.upper()
    if upper in {s.value for s in VALID_SEVERITY}:
        return Severity(upper)
    return _ALIASES.get(upper, Severity.NONE)