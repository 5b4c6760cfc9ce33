"""Growth report entity."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..dates import format_date
from .stage_resolution import StageResolutionResult


@dataclass(frozen=True)
class GrowthReport:
    """Represents the growth status of one sown crop as of a reference date."""

    crop: str
    sowing_date: date
    reference_date: date
    total_duration: int  # Full cycle length in days
    resolution: StageResolutionResult
    stage_start_date: Optional[date] = None
    stage_end_date: Optional[date] = None

    @property
    def days_since_sowing(self) -> int:
        return self.resolution.elapsed_days

    @property
    def stage_date_range(self) -> Optional[str]:
        """Display range of the active stage, e.g. 'Sep 22 to Oct 21'."""
        if self.stage_start_date is None or self.stage_end_date is None:
            return None
        return f"{format_date(self.stage_start_date)} to {format_date(self.stage_end_date)}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "crop": self.crop,
            "sowing_date": self.sowing_date.isoformat(),
            "reference_date": self.reference_date.isoformat(),
            "days_since_sowing": self.days_since_sowing,
            "total_duration": self.total_duration,
            "status": self.resolution.status.value,
            "stage_index": self.resolution.stage_index,
            "stage": self.resolution.stage_name,
            "stage_start_day": self.resolution.stage_start_day,
            "stage_end_day": self.resolution.stage_end_day,
            "stage_start_date": (
                self.stage_start_date.isoformat() if self.stage_start_date else None
            ),
            "stage_end_date": self.stage_end_date.isoformat() if self.stage_end_date else None,
            "stage_date_range": self.stage_date_range,
            "days_remaining_in_stage": self.resolution.days_remaining_in_stage,
            "progress_percent": self.resolution.progress_percent,
        }

    def __str__(self) -> str:
        return f"{self.crop}_{self.sowing_date.isoformat()}"
