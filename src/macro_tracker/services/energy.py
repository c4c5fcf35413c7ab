"""Daily energy requirement estimation."""

import math

from macro_tracker.domain.profile import UserProfile
from macro_tracker.domain.rounding import round_half_up


def estimate_daily_calories(profile: UserProfile) -> int | None:
    """Estimate daily calories from body metrics and activity level.

    Uses ``10 * weight + 6.25 * height - 5 * age + 5`` as the basal rate,
    scaled by the activity multiplier. Returns None until weight, height and
    age are all provided, and for metrics that give no finite positive
    estimate.
    """
    if not profile.is_complete:
        return None
    bmr = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age + 5
    calories = bmr * profile.activity_level.value
    if not math.isfinite(calories) or calories <= 0:
        return None
    return round_half_up(calories)
