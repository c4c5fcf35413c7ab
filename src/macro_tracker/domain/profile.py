"""Domain models for the user profile."""

from dataclasses import dataclass
from enum import Enum


class ActivityLevel(float, Enum):
    """Activity multipliers applied to the basal metabolic rate."""

    SEDENTARY = 1.2
    LIGHTLY_ACTIVE = 1.375
    MODERATELY_ACTIVE = 1.55
    VERY_ACTIVE = 1.725

    @property
    def label(self) -> str:
        """Return the display label for the activity level."""
        return _LABELS[self]


_LABELS = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHTLY_ACTIVE: "Lightly Active",
    ActivityLevel.MODERATELY_ACTIVE: "Moderately Active",
    ActivityLevel.VERY_ACTIVE: "Very Active",
}


@dataclass(frozen=True)
class UserProfile:
    """Body metrics used to estimate daily energy needs.

    Weight is in kilograms, height in centimetres and age in years. Any of
    them may be missing while the user is still filling in the form.
    """

    weight: float | None = None
    height: float | None = None
    age: int | None = None
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY

    @property
    def is_complete(self) -> bool:
        """Return True when weight, height and age are all set and positive."""
        return all(
            value is not None and value > 0
            for value in (self.weight, self.height, self.age)
        )
