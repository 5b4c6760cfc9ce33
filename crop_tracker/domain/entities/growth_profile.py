"""Growth profile entity."""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ..exceptions import InvalidProfile
from .stage_definition import StageDefinition


@dataclass(frozen=True)
class GrowthProfile:
    """Ordered sequence of growth stages for one crop."""

    crop: str
    stages: Tuple[StageDefinition, ...]

    def __post_init__(self):
        # Accept any iterable but store an immutable tuple
        object.__setattr__(self, "stages", tuple(self.stages))
        if not self.stages:
            raise InvalidProfile(f"Growth profile for '{self.crop}' has no stages")
        for stage in self.stages:
            if not isinstance(stage, StageDefinition):
                raise InvalidProfile(
                    f"Growth profile for '{self.crop}' contains a non-stage entry: {stage!r}"
                )

    @classmethod
    def from_definitions(
        cls, crop: str, definitions: Iterable[Tuple[str, int]]
    ) -> "GrowthProfile":
        """Create GrowthProfile from a list of (stage name, duration) pairs."""
        if isinstance(definitions, (str, bytes)):
            raise InvalidProfile(f"Growth profile for '{crop}' must be a sequence of stages")
        try:
            stages = tuple(StageDefinition.from_tuple(d) for d in definitions)
        except TypeError as e:
            raise InvalidProfile(f"Growth profile for '{crop}' is not iterable") from e
        return cls(crop=crop, stages=stages)

    @property
    def total_duration(self) -> int:
        """Length of the full growth cycle in days."""
        return sum(stage.duration_days for stage in self.stages)

    def stage_intervals(self) -> List[Tuple[str, int, int]]:
        """
        Get the inclusive day interval covered by each stage.

        Returns:
            List of (stage name, start_day, end_day) with days counted from sowing
        """
        intervals = []
        cumulative = 0
        for stage in self.stages:
            intervals.append((stage.name, cumulative, cumulative + stage.duration_days - 1))
            cumulative += stage.duration_days
        return intervals

    def __len__(self) -> int:
        return len(self.stages)

    def __str__(self) -> str:
        return self.crop
