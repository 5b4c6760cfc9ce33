"""Stage definition entity."""

from dataclasses import dataclass
from typing import Tuple

from ..exceptions import InvalidProfile


@dataclass(frozen=True)
class StageDefinition:
    """Represents one named crop growth stage with a fixed duration."""

    name: str  # e.g., 'Seedling Stage', 'Tillering Stage'
    duration_days: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidProfile(f"Stage name must be a non-empty string, got {self.name!r}")
        if isinstance(self.duration_days, bool) or not isinstance(self.duration_days, int):
            raise InvalidProfile(
                f"Duration of stage '{self.name}' must be an integer, got {self.duration_days!r}"
            )
        if self.duration_days <= 0:
            raise InvalidProfile(
                f"Duration of stage '{self.name}' must be positive, got {self.duration_days}"
            )

    @classmethod
    def from_tuple(cls, definition: Tuple[str, int]) -> "StageDefinition":
        """Create StageDefinition from a (name, duration_days) pair."""
        try:
            name, duration_days = definition
        except (TypeError, ValueError) as e:
            raise InvalidProfile(f"Malformed stage definition: {definition!r}") from e
        return cls(name=name, duration_days=duration_days)

    def __str__(self) -> str:
        return self.name
