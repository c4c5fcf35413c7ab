"""Nutrient totals for a food log."""

from collections.abc import Sequence

from macro_tracker.domain.errors import MissingCatalogEntryError
from macro_tracker.domain.foods import FoodCatalog, NutrientTotals


def aggregate_totals(log: Sequence[str], catalog: FoodCatalog) -> NutrientTotals:
    """Sum one serving of every logged food.

    Raises MissingCatalogEntryError on the first name the catalog does not
    know; no partial totals are returned.
    """
    total = NutrientTotals()
    for name in log:
        item = catalog.get(name)
        if item is None:
            raise MissingCatalogEntryError(name)
        total = total.plus(item)
    return total
