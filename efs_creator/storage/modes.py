"""EFS performance and throughput modes, parsed from raw config strings."""

from enum import Enum


class PerformanceMode(str, Enum):
    GENERAL_PURPOSE = "generalPurpose"
    MAX_IO = "maxIO"


class ThroughputMode(str, Enum):
    BURSTING = "bursting"
    ELASTIC = "elastic"


class InvalidModeError(ValueError):
    """Raw mode string is not one of the accepted values."""

    def __init__(self, kind: str, value: str, accepted: tuple[str, ...]) -> None:
        super().__init__(
            f"Invalid {kind} mode: {value!r}. Accepted values: {', '.join(accepted)}"
        )
        self.kind = kind
        self.value = value
        self.accepted = accepted


def parse_performance_mode(raw: str) -> PerformanceMode:
    """Map a raw string (exact, case-sensitive) to a PerformanceMode."""
    for mode in PerformanceMode:
        if raw == mode.value:
            return mode
    raise InvalidModeError("performance", raw, tuple(m.value for m in PerformanceMode))


def parse_throughput_mode(raw: str) -> ThroughputMode:
    """Map a raw string (exact, case-sensitive) to a ThroughputMode."""
    for mode in ThroughputMode:
        if raw == mode.value:
            return mode
    raise InvalidModeError("throughput", raw, tuple(m.value for m in ThroughputMode))
