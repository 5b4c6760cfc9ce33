"""Main service orchestrating the crop growth tracking workflow."""

import logging
from datetime import date, datetime
from typing import List, Optional, Union

import pandas as pd

from ...domain.dates import add_days, days_between, parse_date
from ...domain.entities.growth_profile import GrowthProfile
from ...domain.entities.growth_report import GrowthReport
from ...domain.repositories.growth_profile_repository import GrowthProfileRepository

# Use cases
from ...domain.use_cases.collect_growth_profile import CollectGrowthProfileUseCase
from ...domain.use_cases.resolve_growth_stage import ResolveGrowthStageUseCase
from ...domain.use_cases.build_stage_calendar import BuildStageCalendarUseCase

logger = logging.getLogger(__name__)

DateInput = Union[date, str]


class CropGrowthTrackerService:
    """Orchestrates profile lookup, elapsed-day computation and stage resolution."""

    def __init__(self, profile_repo: GrowthProfileRepository):
        self.profile_repo = profile_repo

        self.collect_profile_uc = CollectGrowthProfileUseCase(profile_repo)
        self.resolve_stage_uc = ResolveGrowthStageUseCase()
        self.build_calendar_uc = BuildStageCalendarUseCase()

    @staticmethod
    def _to_date(value: DateInput) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return parse_date(value)

    def list_crops(self) -> List[str]:
        """Crop names in menu order."""
        return self.collect_profile_uc.list_crops()

    def build_report(
        self,
        profile: GrowthProfile,
        sowing_date: DateInput,
        today: Optional[DateInput] = None,
    ) -> GrowthReport:
        """Resolve the growth stage of an already selected profile."""
        sowing = self._to_date(sowing_date)
        reference = self._to_date(today) if today is not None else date.today()

        elapsed_days = days_between(sowing, reference)
        resolution = self.resolve_stage_uc.execute(profile, elapsed_days)

        stage_start_date = stage_end_date = None
        if resolution.is_in_progress:
            stage_start_date = add_days(sowing, resolution.stage_start_day)
            stage_end_date = add_days(sowing, resolution.stage_end_day)

        if resolution.is_future_sowing:
            logger.info(f"{profile.crop} sowing date {sowing} is after {reference}")
        else:
            logger.info(
                f"{profile.crop} sown {elapsed_days} days ago: "
                f"{resolution.stage_name} ({resolution.progress_percent}%)"
            )

        return GrowthReport(
            crop=profile.crop,
            sowing_date=sowing,
            reference_date=reference,
            total_duration=profile.total_duration,
            resolution=resolution,
            stage_start_date=stage_start_date,
            stage_end_date=stage_end_date,
        )

    def track(
        self,
        crop: str,
        sowing_date: DateInput,
        today: Optional[DateInput] = None,
    ) -> GrowthReport:
        """
        Report the growth status of a crop.

        Args:
            crop: Crop name
            sowing_date: Sowing date as a date or 'YYYY-MM-DD' string
            today: Reference date (defaults to the current local date)

        Returns:
            GrowthReport for the crop
        """
        profile = self.collect_profile_uc.execute(crop)
        return self.build_report(profile, sowing_date, today)

    def track_choice(
        self,
        choice: int,
        sowing_date: DateInput,
        today: Optional[DateInput] = None,
    ) -> GrowthReport:
        """Report the growth status of the crop at a 1-based menu position."""
        profile = self.collect_profile_uc.execute_by_choice(choice)
        return self.build_report(profile, sowing_date, today)

    def stage_calendar(
        self,
        crop: str,
        sowing_date: DateInput,
        today: Optional[DateInput] = None,
    ) -> pd.DataFrame:
        """Lay out every stage of a crop on the calendar."""
        profile = self.collect_profile_uc.execute(crop)
        sowing = self._to_date(sowing_date)
        reference = self._to_date(today) if today is not None else None

        logger.info(f"Building stage calendar for {crop} sown on {sowing}")
        return self.build_calendar_uc.execute(profile, sowing, reference)
