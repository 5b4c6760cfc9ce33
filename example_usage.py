"""Example usage of the crop growth tracker."""

import logging
from datetime import date

from crop_tracker.application.services.crop_growth_tracker_service import (
    CropGrowthTrackerService,
)
from crop_tracker.infrastructure.repositories.static_growth_profile_repository import (
    StaticGrowthProfileRepository,
)
from config.settings import CROP_GROWTH_PROFILES

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    profile_repo = StaticGrowthProfileRepository(CROP_GROWTH_PROFILES)
    service = CropGrowthTrackerService(profile_repo=profile_repo)

    # Example 1: Current stage of a crop
    print("=" * 60)
    print("Example 1: Tracking Paddy (Boro) sown on 2025-01-10")
    print("=" * 60)
    report = service.track("Paddy (Boro)", "2025-01-10", today=date(2025, 2, 4))
    print(f"  Days since sowing: {report.days_since_sowing}")
    print(f"  Current stage:     {report.resolution.stage_name}")
    print(f"  Stage dates:       {report.stage_date_range}")
    print(f"  Progress:          {report.resolution.progress_percent}%")

    # Example 2: Stage calendar
    print("\n" + "=" * 60)
    print("Example 2: Stage calendar for Wheat sown on 2025-11-15")
    print("=" * 60)
    calendar = service.stage_calendar("Wheat", "2025-11-15", today="2026-01-01")
    print(calendar.to_string(index=False))


if __name__ == "__main__":
    main()
