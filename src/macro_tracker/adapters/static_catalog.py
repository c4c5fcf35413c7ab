"""Built-in food catalog."""

from types import MappingProxyType

from macro_tracker.domain.foods import FoodCatalog, FoodItem

_FOODS = {
    "Chicken Breast (100g)": FoodItem(protein=31, carbs=0, fat=3.6, calories=165),
    "Brown Rice (100g)": FoodItem(protein=2.6, carbs=23, fat=0.9, calories=111),
    "Broccoli (100g)": FoodItem(protein=2.8, carbs=7, fat=0.4, calories=34),
    "Avocado (100g)": FoodItem(protein=2, carbs=9, fat=15, calories=160),
    "Egg (1 large)": FoodItem(protein=6, carbs=0.6, fat=5, calories=78),
}


def default_catalog() -> FoodCatalog:
    """Return a read-only view of the built-in catalog."""
    return MappingProxyType(_FOODS)
