"""
Weekly Split Planner
====================
Lays out one training week (Sunday..Saturday) for a user.

Decision logic:
    1. Count the days already taken by hard/moderate external activities.
       They count toward the user's weekly frequency, so only
       ``frequency - activity_days`` gym sessions are generated (min 1).
    2. Pick the focus sequence for those gym days (split selector), then
       rotate it for weekly variety.
    3. Look up exercise counts for the user's tier and session length.
    4. Build the candidate day pool: every day if the schedule is
       flexible, otherwise the user's available gym days. Drop days whose
       activities conflict with a gym session. If that leaves nothing,
       fall back to any day not already taken by an activity.
    5. Spread the gym days evenly across the pool (Mon/Wed/Fri rather
       than Mon/Tue/Wed).
    6. Emit seven DayPlans: external activity, gym focus, or rest.
    7. Attach the time budget and week-level constraints.

The planner is a pure function of its input: no I/O, no clock, no
randomness, no shared mutable state. Equal inputs give equal templates,
and it is safe to call from any number of requests concurrently.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from app.models.split_plan import (
    DAY_NAMES,
    DAYS_IN_WEEK,
    VALID_EXPERIENCE_LEVELS,
    CountRange,
    DayPlan,
    PlanConstraints,
    SplitPlannerInput,
    TimeBudget,
    WeeklyActivity,
    WeeklyTemplate,
)
from app.services.conflicts import (
    EVENING_SESSION,
    activity_days,
    blocks_gym_session,
    day_conflicts,
)
from app.services.exercise_counts import ExerciseCounts, exercise_counts
from app.services.prompt_constraints import format_constraints
from app.services.split_selector import (
    SplitSelection,
    muscles_for,
    rotate_for_week,
    select_split,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ALL_DAYS: tuple[int, ...] = tuple(range(DAYS_IN_WEEK))
MIN_FREQUENCY = 1
MAX_FREQUENCY = DAYS_IN_WEEK

MAJOR_MUSCLE_GROUPS: tuple[str, ...] = ("chest", "back", "legs", "shoulders", "arms")

# A major group counts as covered if any of these muscles appear in a
# gym day's muscles_focused.
_MUSCLE_GROUP_ALIASES: dict[str, frozenset[str]] = {
    "chest": frozenset({"chest"}),
    "back": frozenset({"back", "lats", "rear_delts"}),
    "legs": frozenset({"legs", "quads", "hamstrings", "glutes", "calves"}),
    "shoulders": frozenset({"shoulders", "delts", "traps"}),
    "arms": frozenset({"arms", "biceps", "triceps", "forearms"}),
}

REST_DAY_PROMPT = "REST DAY - No workout generation needed"


class SplitPlannerValidationError(ValueError):
    """Raised when a planner input breaks the basic range invariants."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_planner_input(planner_input: SplitPlannerInput) -> None:
    """Check the invariants the scheduler relies on.

    Pydantic enforces these at the HTTP boundary already; this guards
    internal callers and anything built with ``model_construct``.
    """
    if not MIN_FREQUENCY <= planner_input.frequency <= MAX_FREQUENCY:
        raise SplitPlannerValidationError(
            f"frequency must be between {MIN_FREQUENCY} and {MAX_FREQUENCY}, "
            f"got {planner_input.frequency}"
        )
    if planner_input.session_duration <= 0:
        raise SplitPlannerValidationError(
            f"session_duration must be positive, got {planner_input.session_duration}"
        )
    if planner_input.week_number < 1:
        raise SplitPlannerValidationError(
            f"week_number must be at least 1, got {planner_input.week_number}"
        )
    bad_days = [d for d in (planner_input.gym_days_available or []) if d not in ALL_DAYS]
    if bad_days:
        raise SplitPlannerValidationError(f"gym_days_available must only contain 0-6, got {bad_days}")
    bad_activities = [a.name for a in planner_input.weekly_activities if a.day_of_week not in ALL_DAYS]
    if bad_activities:
        raise SplitPlannerValidationError(
            f"weekly activities must fall on days 0-6: {', '.join(bad_activities)}"
        )


# ---------------------------------------------------------------------------
# Scheduling helpers
# ---------------------------------------------------------------------------

def candidate_days(
    planner_input: SplitPlannerInput,
    busy_days: Sequence[int] = (),
) -> list[int]:
    """Days a fresh gym session may land on, in week order.

    *busy_days* are days already consumed by an external activity. They
    never come back through a fallback while any free day is left:

        1. base pool minus busy and conflicting days
        2. base pool minus busy days
        3. the whole week minus busy days
        4. the unfiltered base pool
    """
    if planner_input.schedule_flexibility or not planner_input.gym_days_available:
        base_pool = list(ALL_DAYS)
    else:
        base_pool = sorted(set(planner_input.gym_days_available))

    activities = planner_input.weekly_activities
    pool = [
        day
        for day in base_pool
        if day not in busy_days and not blocks_gym_session(day_conflicts(day, activities))
    ]
    if pool:
        return pool

    free_pool = [day for day in base_pool if day not in busy_days]
    if free_pool:
        logger.warning("Every candidate day conflicts with an activity, using free days %s", free_pool)
        return free_pool

    free_week = [day for day in ALL_DAYS if day not in busy_days]
    if free_week:
        logger.warning(
            "Available days %s are all taken by activities, using free days %s",
            base_pool, free_week,
        )
        return free_week

    logger.warning("Every day is taken by an activity, using unfiltered days %s", base_pool)
    return base_pool


def distribute_days(pool: Sequence[int], count: int) -> list[int]:
    """Pick *count* days from *pool*, spaced as evenly as the pool allows."""
    if count <= 0 or not pool:
        return []
    if count > len(pool):
        logger.warning(
            "Only %d day(s) available for %d gym session(s) — scheduling all of them",
            len(pool), count,
        )
        return list(pool)
    step = len(pool) // count
    picked: list[int] = []
    for i in range(count):
        day = pool[min(i * step, len(pool) - 1)]
        if day not in picked:
            picked.append(day)
    return picked


def _empty_counts() -> dict:
    return {
        "exercise_count": CountRange(min=0, max=0),
        "warmup_count": 0,
        "main_count": CountRange(min=0, max=0),
        "cooldown_count": 0,
    }


def _external_activity_day(day_index: int, activity: WeeklyActivity) -> DayPlan:
    return DayPlan(
        day_index=day_index,
        focus="external_activity",
        avoid_patterns=("gym_workout",),
        notes=f"{activity.name} ({activity.intensity}) counts as training",
        is_gym_training=False,
        **_empty_counts(),
    )


def _rest_day(day_index: int) -> DayPlan:
    return DayPlan(
        day_index=day_index,
        focus="rest",
        notes="Rest day - recovery",
        is_gym_training=False,
        **_empty_counts(),
    )


def _gym_day(
    day_index: int,
    focus: str,
    counts: ExerciseCounts,
    conflicts: frozenset[str],
) -> DayPlan:
    muscles = muscles_for(focus)
    target = ", ".join(muscles) if muscles else "general conditioning"
    return DayPlan(
        day_index=day_index,
        focus=focus,
        exercise_count=CountRange(min=counts.min, max=counts.max),
        warmup_count=counts.warmup,
        main_count=CountRange(min=max(0, counts.main_min), max=max(0, counts.main_max)),
        cooldown_count=counts.cooldown,
        # Only non-empty when the pool fallback forced a conflicting day in.
        avoid_patterns=tuple(sorted(tag for tag in conflicts if tag != EVENING_SESSION)),
        notes=f"Gym: {focus.upper()} - Target: {target}",
        is_gym_training=True,
        muscles_focused=tuple(muscles),
    )


def muscle_group_coverage(days: Sequence[DayPlan]) -> tuple[str, ...]:
    """Major muscle groups reached by at least one gym day, in fixed order."""
    trained = {m for day in days if day.is_gym_training for m in day.muscles_focused}
    return tuple(group for group in MAJOR_MUSCLE_GROUPS if trained & _MUSCLE_GROUP_ALIASES[group])


def time_budget(experience: str, session_duration: int) -> TimeBudget:
    """Beginners get longer warm-up/cooldown and more transition time."""
    beginner = experience == "beginner"
    warmup = 8 if beginner else 6
    cooldown = 5 if beginner else 4
    return TimeBudget(
        warmup_minutes=warmup,
        main_work_minutes=max(0, session_duration - warmup - cooldown),
        cooldown_minutes=cooldown,
        transition_time_per_exercise=2 if beginner else 1,
    )


def plan_constraints(experience: str) -> PlanConstraints:
    return PlanConstraints(
        max_consecutive_heavy_days=2 if experience == "beginner" else 3,
        avoid_same_primary_pattern=True,
        respect_activity_conflicts=True,
    )


# ---------------------------------------------------------------------------
# Planner
# ---------------------------------------------------------------------------

def generate_weekly_template(planner_input: SplitPlannerInput) -> WeeklyTemplate:
    """Build the seven-day WeeklyTemplate for *planner_input*.

    Raises SplitPlannerValidationError if frequency, session duration,
    week number or day indices are out of range. Every other oddity
    (unknown tier, unknown split, unmatched activity name) degrades to a
    default.
    """
    validate_planner_input(planner_input)
    experience = (planner_input.experience or "").lower().strip()
    if experience not in VALID_EXPERIENCE_LEVELS:
        logger.info("Unknown experience tier '%s' — planning as intermediate", planner_input.experience)

    # ------------------------------------------------------------------
    # Step 1: Days already taken by external activities
    # ------------------------------------------------------------------
    activities = planner_input.weekly_activities
    external_days = activity_days(activities)
    gym_days_needed = max(1, planner_input.frequency - len(external_days))

    logger.info(
        "Planning %d training day(s) for %s user: %d external activity day(s), %d gym session(s)",
        planner_input.frequency, experience or "unknown", len(external_days), gym_days_needed,
    )

    # ------------------------------------------------------------------
    # Step 2: Focus sequence
    # ------------------------------------------------------------------
    selection = select_split(gym_days_needed, experience, planner_input.preferred_split)
    selection = SplitSelection(
        split_name=selection.split_name,
        focuses=rotate_for_week(selection.focuses, planner_input.week_number),
    )
    logger.debug("Split %s: %s", selection.split_name, " → ".join(selection.focuses))

    # ------------------------------------------------------------------
    # Step 3: Exercise counts
    # ------------------------------------------------------------------
    counts = exercise_counts(experience, planner_input.session_duration)

    # ------------------------------------------------------------------
    # Step 4 + 5: Candidate pool and even distribution
    # ------------------------------------------------------------------
    pool = candidate_days(planner_input, busy_days=tuple(external_days))
    training_days = set(distribute_days(pool, gym_days_needed))

    # ------------------------------------------------------------------
    # Step 6: Seven day plans
    # ------------------------------------------------------------------
    days: list[DayPlan] = []
    position = 0
    for day_index in ALL_DAYS:
        activity = external_days.get(day_index)
        if activity is not None:
            days.append(_external_activity_day(day_index, activity))
        elif day_index in training_days:
            days.append(
                _gym_day(
                    day_index,
                    selection.focus_for(position),
                    counts,
                    day_conflicts(day_index, activities),
                )
            )
            position += 1
        else:
            days.append(_rest_day(day_index))

    coverage = muscle_group_coverage(days)
    missing = [g for g in MAJOR_MUSCLE_GROUPS if g not in coverage]
    if missing:
        logger.info("Split %s leaves muscle groups untrained: %s", selection.split_name, ", ".join(missing))

    logger.debug(
        "Schedule: %s",
        " | ".join(f"{DAY_NAMES[d.day_index][:3]} {d.focus}" for d in days),
    )

    # ------------------------------------------------------------------
    # Step 7: Time budget and constraints
    # ------------------------------------------------------------------
    return WeeklyTemplate(
        split_name=selection.split_name,
        days=tuple(days),
        constraints=plan_constraints(experience),
        time_budget=time_budget(experience, planner_input.session_duration),
        muscle_group_coverage=coverage,
    )


# ---------------------------------------------------------------------------
# Template helpers
# ---------------------------------------------------------------------------

def _find_day(template: WeeklyTemplate, day_index: int) -> Optional[DayPlan]:
    return next((d for d in template.days if d.day_index == day_index), None)


def get_day_focus(template: WeeklyTemplate, day_index: int) -> str:
    """Focus for *day_index*, or 'rest' if the template has no such day."""
    day = _find_day(template, day_index)
    return day.focus if day is not None else "rest"


def get_prompt_constraints(
    template: WeeklyTemplate,
    day_index: int,
    experience: str = "intermediate",
) -> str:
    """Steering text for the AI generator for one day of *template*."""
    day = _find_day(template, day_index)
    if day is None or not day.is_gym_training:
        return REST_DAY_PROMPT
    return format_constraints(day, experience)
