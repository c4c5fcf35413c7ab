"""Macronutrient gram targets."""

from macro_tracker.domain.foods import NutrientTotals
from macro_tracker.domain.macros import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    CalorieStatus,
    MacroGramTargets,
    MacroSplit,
)
from macro_tracker.domain.rounding import round_half_up


def allocate_macro_grams(
    split: MacroSplit, threshold: int
) -> MacroGramTargets | None:
    """Convert a calorie threshold and percentage split into gram targets.

    Returns None when the split does not total 100 or the threshold is unset.
    Each macro is rounded on its own, so the grams may miss the threshold by a
    few kcal.
    """
    if not split.is_complete or threshold <= 0:
        return None
    return MacroGramTargets(
        protein=_grams(threshold, split.protein_pct, PROTEIN_KCAL_PER_G),
        carbs=_grams(threshold, split.carbs_pct, CARBS_KCAL_PER_G),
        fat=_grams(threshold, split.fat_pct, FAT_KCAL_PER_G),
    )


def calorie_status(totals: NutrientTotals, threshold: int) -> CalorieStatus | None:
    """Return whether consumed calories are over or under the threshold."""
    if threshold <= 0:
        return None
    if totals.calories > threshold:
        return CalorieStatus.OVER
    return CalorieStatus.UNDER


def _grams(threshold: int, pct: float, kcal_per_g: int) -> int:
    return round_half_up(threshold * (pct / 100) / kcal_per_g)
