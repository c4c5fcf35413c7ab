"""Pydantic request models for the tracker API."""

from pydantic import BaseModel, Field

from macro_tracker.domain.macros import MacroSplit
from macro_tracker.domain.profile import ActivityLevel, UserProfile


class ProfilePayload(BaseModel):
    """Body metrics entered by the user."""

    weight: float | None = Field(default=None, gt=0, le=500, allow_inf_nan=False)
    height: float | None = Field(default=None, gt=0, le=300, allow_inf_nan=False)
    age: int | None = Field(default=None, gt=0, le=150)
    activity_factor: ActivityLevel = ActivityLevel.SEDENTARY

    def to_domain(self) -> UserProfile:
        return UserProfile(
            weight=self.weight,
            height=self.height,
            age=self.age,
            activity_level=self.activity_factor,
        )


class FoodLogPayload(BaseModel):
    """Food selected for logging."""

    name: str


class MacroSplitPayload(BaseModel):
    """Macro percentages entered by the user."""

    protein: float
    carbs: float
    fat: float

    def to_domain(self) -> MacroSplit:
        return MacroSplit(
            protein_pct=self.protein, carbs_pct=self.carbs, fat_pct=self.fat
        )
