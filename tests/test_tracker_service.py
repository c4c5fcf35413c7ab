"""Tests for the tracker service."""

import pytest

from macro_tracker.domain.errors import LogIndexError, MissingCatalogEntryError
from macro_tracker.domain.foods import LogEntry
from macro_tracker.domain.macros import CalorieStatus, MacroGramTargets, MacroSplit
from macro_tracker.domain.profile import UserProfile
from macro_tracker.services.tracker import TrackerService


def test_new_tracker_starts_empty(tracker: TrackerService) -> None:
    assert tracker.threshold == 0
    assert tracker.log == ()
    assert tracker.split == MacroSplit(30, 40, 30)
    assert tracker.targets() is None


def test_calculate_threshold_from_profile(tracker: TrackerService) -> None:
    tracker.update_profile(UserProfile(weight=70, height=175, age=25))

    assert tracker.calculate_threshold() == 2009
    assert tracker.threshold == 2009


def test_incomplete_profile_keeps_previous_threshold(tracker: TrackerService) -> None:
    tracker.update_profile(UserProfile(weight=70, height=175, age=25))
    tracker.calculate_threshold()

    tracker.update_profile(UserProfile(weight=70, height=175))

    assert tracker.calculate_threshold() == 2009
    assert tracker.threshold == 2009


def test_non_positive_estimate_leaves_threshold_unset(
    tracker: TrackerService,
) -> None:
    tracker.update_profile(UserProfile(weight=1, height=1, age=100))

    assert tracker.calculate_threshold() == 0
    assert tracker.summary().targets is None


def test_update_profile_does_not_recalculate(tracker: TrackerService) -> None:
    tracker.update_profile(UserProfile(weight=70, height=175, age=25))

    assert tracker.threshold == 0


def test_add_and_remove_food(tracker: TrackerService) -> None:
    tracker.add_food("Egg (1 large)")
    tracker.add_food("Broccoli (100g)")
    tracker.add_food("Egg (1 large)")

    removed = tracker.remove_food(1)

    assert removed == "Broccoli (100g)"
    assert tracker.log == ("Egg (1 large)", "Egg (1 large)")
    assert tracker.totals().calories == 156


def test_add_blank_food_is_ignored(tracker: TrackerService) -> None:
    tracker.add_food("")
    tracker.add_food("   ")

    assert tracker.log == ()


def test_add_unknown_food_raises(tracker: TrackerService) -> None:
    with pytest.raises(MissingCatalogEntryError):
        tracker.add_food("Pizza")

    assert tracker.log == ()


def test_remove_out_of_range_raises(tracker: TrackerService) -> None:
    tracker.add_food("Egg (1 large)")

    with pytest.raises(LogIndexError):
        tracker.remove_food(1)
    with pytest.raises(LogIndexError):
        tracker.remove_food(-1)

    assert tracker.log == ("Egg (1 large)",)


def test_entries_include_calories(tracker: TrackerService) -> None:
    tracker.add_food("Avocado (100g)")
    tracker.add_food("Brown Rice (100g)")

    assert tracker.entries() == [
        LogEntry(index=0, name="Avocado (100g)", calories=160),
        LogEntry(index=1, name="Brown Rice (100g)", calories=111),
    ]


def test_log_view_is_read_only_copy(tracker: TrackerService) -> None:
    tracker.add_food("Egg (1 large)")

    log = tracker.log

    assert isinstance(log, tuple)
    tracker.add_food("Egg (1 large)")
    assert log == ("Egg (1 large)",)


def test_targets_follow_split_and_threshold(tracker: TrackerService) -> None:
    tracker.update_profile(UserProfile(weight=70, height=175, age=25))
    tracker.calculate_threshold()

    assert tracker.targets() == MacroGramTargets(protein=151, carbs=201, fat=67)

    tracker.set_split(MacroSplit(50, 40, 30))
    assert tracker.targets() is None
    assert tracker.split.total == 120


def test_summary_reports_status(tracker: TrackerService) -> None:
    tracker.add_food("Chicken Breast (100g)")
    assert tracker.summary().status is None

    tracker.update_profile(UserProfile(weight=70, height=175, age=25))
    tracker.calculate_threshold()
    summary = tracker.summary()

    assert summary.threshold == 2009
    assert summary.totals.calories == 165
    assert summary.status is CalorieStatus.UNDER
    assert summary.targets == MacroGramTargets(protein=151, carbs=201, fat=67)
