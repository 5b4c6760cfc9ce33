"""Static (in-code) growth profile repository implementation."""

import logging
from typing import Dict, List, Mapping, Sequence, Tuple

from ...domain.entities.growth_profile import GrowthProfile
from ...domain.exceptions import UnknownCrop
from ...domain.repositories.growth_profile_repository import GrowthProfileRepository

logger = logging.getLogger(__name__)


class StaticGrowthProfileRepository(GrowthProfileRepository):
    """Repository for growth profiles defined as configuration data."""

    def __init__(self, definitions: Mapping[str, Sequence[Tuple[str, int]]]):
        """
        Initialize repository.

        Args:
            definitions: Mapping of crop name to ordered (stage name, duration) pairs.
                Its iteration order defines the crop menu order.
        """
        # Fail fast on a broken table rather than on the first lookup
        self._profiles: Dict[str, GrowthProfile] = {
            crop: GrowthProfile.from_definitions(crop, stages)
            for crop, stages in definitions.items()
        }
        logger.info(f"Loaded {len(self._profiles)} growth profiles")

    def list_crops(self) -> List[str]:
        """List crops in definition order."""
        return list(self._profiles)

    def get_profile(self, crop: str) -> GrowthProfile:
        """Retrieve growth profile by crop name."""
        try:
            return self._profiles[crop]
        except KeyError:
            raise UnknownCrop(crop) from None
