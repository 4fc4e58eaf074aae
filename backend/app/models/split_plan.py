"""
Split Planner Schemas
=====================
Pydantic models for the weekly split planner. These are the contract
between the onboarding/profile subsystem (which produces the input), the
planner, and the AI workout generator (which consumes one DayPlan at a
time).

Key design decisions:
- experience and preferred_split are plain strings, not Literals. They
  come from free-text-adjacent onboarding fields and unknown values fall
  back to defaults inside the planner instead of failing validation.
- Every output model is frozen and its sequences are tuples, so a
  WeeklyTemplate cannot be changed after the planner returns it, not even
  through ``template.days`` or ``day.avoid_patterns``.
- Day indices are anchored Sunday = 0 .. Saturday = 6, matching the
  mobile app's calendar.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Allowed values
# ---------------------------------------------------------------------------

DAYS_IN_WEEK = 7

DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

VALID_EXPERIENCE_LEVELS = frozenset({"beginner", "intermediate", "advanced"})

Focus = Literal[
    "upper",
    "lower",
    "full",
    "push",
    "pull",
    "legs",
    "chest",
    "back",
    "shoulders",
    "arms",
    "squat",
    "bench",
    "deadlift",
    "overhead",
    "cardio_strength",
    "hiit",
    "cardio",
    "recovery",
    "rest",
    "external_activity",
]

# Focus values that never carry a gym session.
NON_GYM_FOCUSES = frozenset({"rest", "external_activity"})


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class WeeklyActivity(BaseModel):
    """A fixed weekly commitment the user already has (sport, class)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=100, description="e.g. 'Football', 'Boxing class'.")
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday .. 6 = Saturday.")
    time_window: Literal["morning", "afternoon", "evening"]
    intensity: Literal["low", "moderate", "hard"]
    notes: Optional[str] = Field(default=None, max_length=500)


class SplitPlannerInput(BaseModel):
    """Everything the planner needs to lay out one training week."""

    model_config = ConfigDict(frozen=True)

    frequency: int = Field(
        ...,
        ge=1,
        le=7,
        description=(
            "Desired training days per week. External hard/moderate "
            "activities count toward this number."
        ),
    )
    experience: str = Field(
        default="intermediate",
        description="'beginner', 'intermediate' or 'advanced'. Unknown values plan as intermediate.",
    )
    goals: list[str] = Field(default_factory=list, description="e.g. ['muscle_gain', 'fat_loss'].")
    equipment: list[str] = Field(default_factory=list, description="e.g. ['barbell', 'dumbbells'].")
    injuries: Optional[str] = Field(default=None, max_length=1000)
    session_duration: int = Field(..., gt=0, le=600, description="Target session length in minutes.")
    weekly_activities: list[WeeklyActivity] = Field(default_factory=list)
    gym_days_available: Optional[list[int]] = Field(
        default=None,
        description=(
            "Days the user can physically get to a gym (0-6). Only used "
            "when schedule_flexibility is False. Empty or missing means "
            "every day."
        ),
    )
    schedule_flexibility: bool = Field(
        default=True,
        description="True if the planner may use any day of the week.",
    )
    preferred_split: Optional[str] = Field(
        default=None,
        description="Named split, e.g. 'push_pull_legs'. 'coach_choice' defers to the planner.",
    )
    week_number: int = Field(
        default=1,
        ge=1,
        description="Program week, used to rotate the split order for weekly variety.",
    )

    @field_validator("gym_days_available")
    @classmethod
    def _days_in_range(cls, value: Optional[list[int]]) -> Optional[list[int]]:
        if value is None:
            return value
        bad = [d for d in value if not 0 <= d < DAYS_IN_WEEK]
        if bad:
            raise ValueError(f"gym_days_available must only contain 0-6, got {bad}")
        return value


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

class CountRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)


class DayPlan(BaseModel):
    """One day of the weekly template."""

    model_config = ConfigDict(frozen=True)

    day_index: int = Field(..., ge=0, le=6)
    focus: Focus
    exercise_count: CountRange
    warmup_count: int = Field(..., ge=0)
    main_count: CountRange
    cooldown_count: int = Field(..., ge=0)
    avoid_patterns: tuple[str, ...] = Field(
        default=(),
        description="Movement categories to exclude that day, e.g. ('heavy_legs',).",
    )
    notes: Optional[str] = Field(
        default=None,
        description="Why the day is what it is, e.g. 'Football (hard) counts as training'.",
    )
    is_gym_training: bool = Field(
        ...,
        description="True only for days that get a generated gym session.",
    )
    muscles_focused: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _non_gym_days_are_empty(self) -> "DayPlan":
        if self.focus in NON_GYM_FOCUSES:
            counts = (
                self.exercise_count.min,
                self.exercise_count.max,
                self.warmup_count,
                self.main_count.min,
                self.main_count.max,
                self.cooldown_count,
            )
            if any(counts):
                raise ValueError(f"'{self.focus}' days must have zero exercise counts")
            if self.is_gym_training:
                raise ValueError(f"'{self.focus}' days cannot be gym training days")
        return self


class PlanConstraints(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_consecutive_heavy_days: int
    avoid_same_primary_pattern: bool
    respect_activity_conflicts: bool


class TimeBudget(BaseModel):
    """Minutes per session block. Applies to every gym day of the week."""

    model_config = ConfigDict(frozen=True)

    warmup_minutes: int
    main_work_minutes: int
    cooldown_minutes: int
    transition_time_per_exercise: int


class WeeklyTemplate(BaseModel):
    """The planner's output: exactly seven DayPlans, Sunday first."""

    model_config = ConfigDict(frozen=True)

    split_name: str = Field(..., description="e.g. 'push_pull_legs' or '5day_intermediate'.")
    days: tuple[DayPlan, ...]
    constraints: PlanConstraints
    time_budget: TimeBudget
    muscle_group_coverage: tuple[str, ...] = Field(
        default=(),
        description="Major muscle groups (chest, back, legs, shoulders, arms) trained this week.",
    )

    @model_validator(mode="after")
    def _seven_ordered_days(self) -> "WeeklyTemplate":
        indices = [d.day_index for d in self.days]
        if indices != list(range(DAYS_IN_WEEK)):
            raise ValueError(f"days must be indexed 0..6 in order, got {indices}")
        return self


class PromptConstraintsRequest(BaseModel):
    """Body for formatting one day's steering text for the AI generator."""

    day_plan: DayPlan
    experience: str = "intermediate"


class PromptConstraintsResponse(BaseModel):
    day_index: int
    focus: str
    constraints: str
