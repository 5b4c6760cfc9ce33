"""Resolution status enumeration."""

from enum import Enum


class ResolutionStatus(str, Enum):
    """Enumeration for the outcome of a growth stage lookup."""

    IN_PROGRESS = "in_progress"
    CYCLE_COMPLETE = "cycle_complete"
    FUTURE_SOWING = "future_sowing"

    def describe(self) -> str:
        """Human readable description."""
        mapping = {
            ResolutionStatus.IN_PROGRESS: "Growing",
            ResolutionStatus.CYCLE_COMPLETE: "Harvest ready",
            ResolutionStatus.FUTURE_SOWING: "Not yet sown",
        }
        return mapping[self]
