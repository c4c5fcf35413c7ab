"""Shared test fixtures."""

import pytest

from macro_tracker.adapters.static_catalog import default_catalog
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.foods import FoodCatalog
from macro_tracker.services.tracker import TrackerService


@pytest.fixture
def catalog() -> FoodCatalog:
    return default_catalog()


@pytest.fixture
def settings() -> Settings:
    return Settings(catalog_path=None)


@pytest.fixture
def tracker(catalog: FoodCatalog) -> TrackerService:
    return TrackerService(catalog=catalog)


@pytest.fixture
def container(settings: Settings, tracker: TrackerService) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog=tracker.catalog,
        tracker_service=tracker,
    )
