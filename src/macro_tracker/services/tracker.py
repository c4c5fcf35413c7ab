"""Tracker service holding the user's in-progress inputs."""

import logging
from dataclasses import dataclass, field

from macro_tracker.domain.errors import LogIndexError, MissingCatalogEntryError
from macro_tracker.domain.foods import FoodCatalog, LogEntry, NutrientTotals
from macro_tracker.domain.macros import CalorieStatus, MacroGramTargets, MacroSplit
from macro_tracker.domain.profile import UserProfile
from macro_tracker.services.energy import estimate_daily_calories
from macro_tracker.services.macros import allocate_macro_grams, calorie_status
from macro_tracker.services.nutrients import aggregate_totals

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackerSummary:
    """Snapshot of everything the tracker shows."""

    threshold: int
    totals: NutrientTotals
    status: CalorieStatus | None
    split: MacroSplit
    targets: MacroGramTargets | None


@dataclass
class TrackerService:
    """Owns the profile, food log, macro split and calorie threshold.

    The calculations themselves are stateless; this service keeps the inputs
    between requests and recomputes derived values on every read.
    """

    catalog: FoodCatalog
    profile: UserProfile = field(default_factory=UserProfile)
    split: MacroSplit = field(default_factory=MacroSplit)
    threshold: int = 0
    _log: list[str] = field(default_factory=list)

    @property
    def log(self) -> tuple[str, ...]:
        """Return the logged food names in insertion order."""
        return tuple(self._log)

    def update_profile(self, profile: UserProfile) -> None:
        """Replace the profile; the threshold is only updated on request."""
        self.profile = profile

    def calculate_threshold(self) -> int:
        """Recompute the calorie threshold from the current profile.

        An incomplete profile leaves the previous threshold untouched.
        """
        calories = estimate_daily_calories(self.profile)
        if calories is None:
            _logger.info("Threshold not updated: profile incomplete")
            return self.threshold
        self.threshold = calories
        _logger.info("Threshold updated: calories=%s", calories)
        return calories

    def add_food(self, name: str) -> None:
        """Append a catalog food to the log. Blank names are ignored."""
        if not name.strip():
            return
        if name not in self.catalog:
            raise MissingCatalogEntryError(name)
        self._log.append(name)
        _logger.info("Food logged: name=%s entries=%s", name, len(self._log))

    def remove_food(self, index: int) -> str:
        """Remove and return the food at ``index``."""
        if not 0 <= index < len(self._log):
            raise LogIndexError(index, len(self._log))
        name = self._log.pop(index)
        _logger.info("Food removed: name=%s entries=%s", name, len(self._log))
        return name

    def set_split(self, split: MacroSplit) -> None:
        """Replace the macro split. Incomplete splits are kept as entered."""
        self.split = split

    def entries(self) -> list[LogEntry]:
        """Return the log with per-entry calories for display."""
        return [
            LogEntry(index=index, name=name, calories=self.catalog[name].calories)
            for index, name in enumerate(self._log)
        ]

    def totals(self) -> NutrientTotals:
        """Return nutrient totals for the current log."""
        return aggregate_totals(self._log, self.catalog)

    def targets(self) -> MacroGramTargets | None:
        """Return gram targets, or None while the split or threshold is invalid."""
        return allocate_macro_grams(self.split, self.threshold)

    def summary(self) -> TrackerSummary:
        """Return totals, status and targets in one snapshot."""
        totals = self.totals()
        return TrackerSummary(
            threshold=self.threshold,
            totals=totals,
            status=calorie_status(totals, self.threshold),
            split=self.split,
            targets=self.targets(),
        )
