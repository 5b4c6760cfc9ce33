"""Stage resolution result entity."""

from dataclasses import dataclass
from typing import Optional

from .resolution_status import ResolutionStatus

CYCLE_COMPLETE_LABEL = "Harvest Ready / Cycle Complete"


@dataclass(frozen=True)
class StageResolutionResult:
    """Represents where a crop stands in its growth profile on a given day."""

    status: ResolutionStatus
    elapsed_days: int
    stage_index: Optional[int] = None  # 0-based position in the profile
    stage_name: Optional[str] = None
    stage_start_day: Optional[int] = None  # Days from sowing, inclusive
    stage_end_day: Optional[int] = None  # Days from sowing, inclusive
    progress_percent: Optional[int] = None  # 0-100, None before sowing

    @classmethod
    def future_sowing(cls, elapsed_days: int) -> "StageResolutionResult":
        return cls(status=ResolutionStatus.FUTURE_SOWING, elapsed_days=elapsed_days)

    @classmethod
    def cycle_complete(cls, elapsed_days: int) -> "StageResolutionResult":
        return cls(
            status=ResolutionStatus.CYCLE_COMPLETE,
            elapsed_days=elapsed_days,
            stage_name=CYCLE_COMPLETE_LABEL,
            progress_percent=100,
        )

    @property
    def is_in_progress(self) -> bool:
        return self.status is ResolutionStatus.IN_PROGRESS

    @property
    def is_complete(self) -> bool:
        return self.status is ResolutionStatus.CYCLE_COMPLETE

    @property
    def is_future_sowing(self) -> bool:
        return self.status is ResolutionStatus.FUTURE_SOWING

    @property
    def days_remaining_in_stage(self) -> Optional[int]:
        """Days left in the active stage, counting today."""
        if not self.is_in_progress:
            return None
        return self.stage_end_day - self.elapsed_days + 1

    def __str__(self) -> str:
        if self.is_future_sowing:
            return self.status.describe()
        return self.stage_name
