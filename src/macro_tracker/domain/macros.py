"""Macronutrient split and target models."""

from dataclasses import dataclass
from enum import StrEnum

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

FULL_SPLIT_PCT = 100


@dataclass(frozen=True)
class MacroSplit:
    """Share of daily calories per macronutrient, in percent."""

    protein_pct: float = 30
    carbs_pct: float = 40
    fat_pct: float = 30

    @property
    def total(self) -> float:
        """Return the sum of the three percentages."""
        return self.protein_pct + self.carbs_pct + self.fat_pct

    @property
    def is_complete(self) -> bool:
        """Return True when the percentages add up to exactly 100."""
        return self.total == FULL_SPLIT_PCT


@dataclass(frozen=True)
class MacroGramTargets:
    """Daily gram targets per macronutrient."""

    protein: int
    carbs: int
    fat: int


class CalorieStatus(StrEnum):
    """Consumed calories relative to the daily threshold."""

    OVER = "over"
    UNDER = "under"
