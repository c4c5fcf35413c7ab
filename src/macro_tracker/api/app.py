"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status

from macro_tracker.api.models import FoodLogPayload, MacroSplitPayload, ProfilePayload
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.domain.errors import LogIndexError, MissingCatalogEntryError
from macro_tracker.domain.macros import MacroGramTargets, MacroSplit
from macro_tracker.domain.profile import ActivityLevel, UserProfile
from macro_tracker.services.tracker import TrackerService, TrackerSummary


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Macro Tracker")
    app.state.container = container

    def _tracker(request: Request) -> TrackerService:
        state_container: AppContainer = request.app.state.container
        return state_container.tracker_service

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def list_foods(request: Request) -> dict[str, object]:
        """Return the food catalog in catalog order."""
        catalog = _tracker(request).catalog
        return {
            "foods": [{"name": name, **asdict(item)} for name, item in catalog.items()]
        }

    @app.get("/activity-levels")
    async def list_activity_levels() -> dict[str, object]:
        """Return the accepted activity multipliers."""
        return {
            "activity_levels": [
                {"factor": level.value, "label": level.label} for level in ActivityLevel
            ]
        }

    @app.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the current profile."""
        return _format_profile(_tracker(request).profile)

    @app.put("/profile")
    async def update_profile(
        payload: ProfilePayload, request: Request
    ) -> dict[str, object]:
        """Replace the profile."""
        tracker = _tracker(request)
        tracker.update_profile(payload.to_domain())
        return _format_profile(tracker.profile)

    @app.post("/profile/threshold")
    async def calculate_threshold(request: Request) -> dict[str, int]:
        """Recompute the daily calorie threshold; 0 means not yet computed."""
        return {"calories": _tracker(request).calculate_threshold()}

    @app.get("/log")
    async def get_log(request: Request) -> dict[str, object]:
        """Return logged foods with their calories."""
        return {"entries": [asdict(entry) for entry in _tracker(request).entries()]}

    @app.post("/log")
    async def add_food(payload: FoodLogPayload, request: Request) -> dict[str, object]:
        """Append a food to the log."""
        tracker = _tracker(request)
        try:
            tracker.add_food(payload.name)
        except MissingCatalogEntryError as exc:
            logger.warning("Rejected food log entry: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return {"entries": [asdict(entry) for entry in tracker.entries()]}

    @app.delete("/log/{index}")
    async def remove_food(index: int, request: Request) -> dict[str, object]:
        """Remove the food at a log position."""
        tracker = _tracker(request)
        try:
            tracker.remove_food(index)
        except LogIndexError as exc:
            logger.warning("Rejected food log removal: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return {"entries": [asdict(entry) for entry in tracker.entries()]}

    @app.get("/totals")
    async def get_totals(request: Request) -> dict[str, float]:
        """Return nutrient totals for the log."""
        return asdict(_tracker(request).totals())

    @app.get("/macro-split")
    async def get_split(request: Request) -> dict[str, object]:
        """Return the macro split and whether it is usable."""
        return _format_split(_tracker(request).split)

    @app.put("/macro-split")
    async def update_split(
        payload: MacroSplitPayload, request: Request
    ) -> dict[str, object]:
        """Replace the macro split."""
        tracker = _tracker(request)
        tracker.set_split(payload.to_domain())
        return _format_split(tracker.split)

    @app.get("/targets")
    async def get_targets(request: Request) -> dict[str, object]:
        """Return gram targets, or null while they cannot be computed."""
        return {"targets": _format_targets(_tracker(request).targets())}

    @app.get("/summary")
    async def get_summary(request: Request) -> dict[str, object]:
        """Return threshold, totals, status and targets."""
        return _format_summary(_tracker(request).summary())

    return app


def _format_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "weight": profile.weight,
        "height": profile.height,
        "age": profile.age,
        "activity_factor": profile.activity_level.value,
        "activity_label": profile.activity_level.label,
        "is_complete": profile.is_complete,
    }


def _format_split(split: MacroSplit) -> dict[str, object]:
    return {
        "protein": split.protein_pct,
        "carbs": split.carbs_pct,
        "fat": split.fat_pct,
        "total": split.total,
        "is_complete": split.is_complete,
    }


def _format_targets(targets: MacroGramTargets | None) -> dict[str, int] | None:
    if targets is None:
        return None
    return asdict(targets)


def _format_summary(summary: TrackerSummary) -> dict[str, object]:
    return {
        "threshold": summary.threshold,
        "totals": asdict(summary.totals),
        "status": summary.status.value if summary.status else None,
        "split": _format_split(summary.split),
        "targets": _format_targets(summary.targets),
    }
