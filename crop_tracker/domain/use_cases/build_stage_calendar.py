"""Use case for building the stage calendar of a sown crop."""

from datetime import date
from typing import Optional

import pandas as pd

from ..dates import add_days, days_between
from ..entities.growth_profile import GrowthProfile

CALENDAR_COLUMNS = [
    "stage_index",
    "stage",
    "duration_days",
    "start_day",
    "end_day",
    "start_date",
    "end_date",
    "status",
]


class BuildStageCalendarUseCase:
    """Use case to lay out every growth stage of a profile on the calendar."""

    def _stage_status(self, start_day: int, end_day: int, elapsed_days: Optional[int]) -> str:
        if elapsed_days is None or elapsed_days < start_day:
            return "upcoming"
        if elapsed_days > end_day:
            return "done"
        return "current"

    def execute(
        self,
        profile: GrowthProfile,
        sowing_date: date,
        today: Optional[date] = None,
    ) -> pd.DataFrame:
        """
        Execute the use case.

        Args:
            profile: Growth profile of the crop
            sowing_date: Date the crop was sown
            today: Reference date for the status column (optional)

        Returns:
            DataFrame with one row per stage, in profile order
        """
        elapsed_days = days_between(sowing_date, today) if today is not None else None

        rows = []
        for index, (name, start_day, end_day) in enumerate(profile.stage_intervals()):
            rows.append(
                {
                    "stage_index": index,
                    "stage": name,
                    "duration_days": end_day - start_day + 1,
                    "start_day": start_day,
                    "end_day": end_day,
                    "start_date": add_days(sowing_date, start_day),
                    "end_date": add_days(sowing_date, end_day),
                    "status": self._stage_status(start_day, end_day, elapsed_days),
                }
            )

        return pd.DataFrame(rows, columns=CALENDAR_COLUMNS)
