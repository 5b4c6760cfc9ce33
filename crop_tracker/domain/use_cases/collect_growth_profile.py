"""Use case for collecting crop growth profiles."""

import logging
from typing import List

from ..entities.growth_profile import GrowthProfile
from ..repositories.growth_profile_repository import GrowthProfileRepository

logger = logging.getLogger(__name__)


class CollectGrowthProfileUseCase:
    """Use case to look up growth profiles from repository."""

    def __init__(self, repository: GrowthProfileRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for growth profile access
        """
        self.repository = repository

    def list_crops(self) -> List[str]:
        """Crop names in menu order."""
        return self.repository.list_crops()

    def execute(self, crop: str) -> GrowthProfile:
        """
        Execute the use case.

        Args:
            crop: Crop name as listed by the repository

        Returns:
            GrowthProfile for the crop
        """
        logger.info(f"Collecting growth profile: crop={crop}")
        profile = self.repository.get_profile(crop)
        logger.info(
            f"Collected {len(profile)} stages for {crop} ({profile.total_duration} days)"
        )
        return profile

    def execute_by_choice(self, choice: int) -> GrowthProfile:
        """
        Execute the use case with a 1-based menu number.

        Args:
            choice: Position of the crop in list_crops(), starting at 1

        Returns:
            GrowthProfile for the selected crop
        """
        logger.info(f"Collecting growth profile: choice={choice}")
        return self.repository.get_profile_by_choice(choice)
