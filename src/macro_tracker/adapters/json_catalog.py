"""Load a food catalog from a JSON file."""

import logging
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from macro_tracker.domain.foods import FoodCatalog, FoodItem

_logger = logging.getLogger(__name__)


class FoodItemPayload(BaseModel):
    """Per-serving nutrients as stored in a catalog file."""

    model_config = ConfigDict(extra="forbid")

    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    calories: float = Field(ge=0)


_CATALOG_ADAPTER = TypeAdapter(dict[str, FoodItemPayload])


def parse_catalog(raw: str | bytes) -> FoodCatalog:
    """Parse a JSON object mapping food names to nutrients.

    Raises pydantic.ValidationError for malformed or negative values.
    """
    payload = _CATALOG_ADAPTER.validate_json(raw)
    foods = {
        name: FoodItem(
            protein=item.protein,
            carbs=item.carbs,
            fat=item.fat,
            calories=item.calories,
        )
        for name, item in payload.items()
    }
    return MappingProxyType(foods)


def load_catalog(path: str | Path) -> FoodCatalog:
    """Read and parse a catalog file."""
    catalog = parse_catalog(Path(path).read_bytes())
    _logger.info("Loaded food catalog: path=%s foods=%s", path, len(catalog))
    return catalog
