"""Growth profile repository interface."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.growth_profile import GrowthProfile
from ..exceptions import UnknownCrop


class GrowthProfileRepository(ABC):
    """Abstract repository for crop growth profile access."""

    @abstractmethod
    def list_crops(self) -> List[str]:
        """
        List available crops.

        Returns:
            Crop names in a stable order; menu choice N maps to the N-th name
        """
        pass

    @abstractmethod
    def get_profile(self, crop: str) -> GrowthProfile:
        """
        Retrieve the growth profile of a crop.

        Args:
            crop: Crop name

        Returns:
            GrowthProfile entity

        Raises:
            UnknownCrop: If the crop is not available
        """
        pass

    def get_profile_by_choice(self, choice: int) -> GrowthProfile:
        """
        Retrieve a growth profile by its 1-based menu number.

        Args:
            choice: Menu number, 1 to len(list_crops())

        Returns:
            GrowthProfile entity

        Raises:
            UnknownCrop: If the number is out of range
        """
        crops = self.list_crops()
        if isinstance(choice, bool) or not isinstance(choice, int) or not 1 <= choice <= len(crops):
            raise UnknownCrop(choice)
        return self.get_profile(crops[choice - 1])
