"""Dependency container wiring for the application."""

from dataclasses import dataclass

from macro_tracker.adapters.json_catalog import load_catalog
from macro_tracker.adapters.static_catalog import default_catalog
from macro_tracker.config import Settings
from macro_tracker.domain.foods import FoodCatalog
from macro_tracker.domain.macros import MacroSplit
from macro_tracker.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    tracker_service: TrackerService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.catalog_path:
        catalog = load_catalog(resolved_settings.catalog_path)
    else:
        catalog = default_catalog()
    tracker_service = TrackerService(
        catalog=catalog,
        split=MacroSplit(
            protein_pct=resolved_settings.default_protein_pct,
            carbs_pct=resolved_settings.default_carbs_pct,
            fat_pct=resolved_settings.default_fat_pct,
        ),
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        tracker_service=tracker_service,
    )
