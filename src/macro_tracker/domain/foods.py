"""Food catalog and intake domain models."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """Nutrients for a single serving of a food."""

    protein: float
    carbs: float
    fat: float
    calories: float


FoodCatalog = Mapping[str, FoodItem]


@dataclass(frozen=True)
class NutrientTotals:
    """Summed nutrients for a food log."""

    protein: float = 0
    carbs: float = 0
    fat: float = 0
    calories: float = 0

    def plus(self, item: FoodItem) -> "NutrientTotals":
        """Return new totals with one serving of ``item`` added."""
        return NutrientTotals(
            protein=self.protein + item.protein,
            carbs=self.carbs + item.carbs,
            fat=self.fat + item.fat,
            calories=self.calories + item.calories,
        )


@dataclass(frozen=True)
class LogEntry:
    """A logged food at its position in the log."""

    index: int
    name: str
    calories: float
