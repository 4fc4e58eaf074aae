"""
Conflict Detector
=================
Works out which gym movement patterns a day's external activities rule
out.

Only hard-intensity activities generate conflicts. Each one is classified
by a case-insensitive substring match of its name against a keyword
table (a football match stresses the legs, a boxing class the upper
body). This is a deliberate heuristic: "Sunday league footie" will not
match anything and simply produces no pattern tag. A hard activity in
the evening window additionally marks the evening slot as taken.

Moderate and low activities never block a gym focus here. Moderate ones
still count toward the weekly training total, which is the scheduler's
concern (see ``activity_days``).
"""

from __future__ import annotations

from typing import Iterable, Mapping

from app.models.split_plan import WeeklyActivity

# ---------------------------------------------------------------------------
# Conflict tags
# ---------------------------------------------------------------------------

HEAVY_LEGS = "heavy_legs"
HEAVY_HINGE = "heavy_hinge"
HEAVY_PUSH = "heavy_push"
HEAVY_PULL = "heavy_pull"
HEAVY_UPPER = "heavy_upper"
EVENING_SESSION = "evening_session"

# Intensities that count toward the weekly training frequency.
TRAINING_INTENSITIES = frozenset({"hard", "moderate"})

# ---------------------------------------------------------------------------
# Activity-family keyword table: (keywords, tags added on a match)
# ---------------------------------------------------------------------------

ACTIVITY_FAMILY_CONFLICTS: tuple[tuple[frozenset[str], frozenset[str]], ...] = (
    (
        frozenset({"running", "cycling", "football", "soccer", "basketball", "hiit", "sprinting"}),
        frozenset({HEAVY_LEGS, HEAVY_HINGE}),
    ),
    (
        frozenset({"boxing", "climbing", "swimming", "martial arts", "mma", "tennis"}),
        frozenset({HEAVY_PUSH, HEAVY_PULL, HEAVY_UPPER}),
    ),
)


def classify_activity(name: str) -> frozenset[str]:
    """Return the pattern tags implied by an activity name (no evening tag)."""
    lowered = name.lower()
    tags: set[str] = set()
    for keywords, family_tags in ACTIVITY_FAMILY_CONFLICTS:
        if any(keyword in lowered for keyword in keywords):
            tags |= family_tags
    return frozenset(tags)


def day_conflicts(day_index: int, activities: Iterable[WeeklyActivity]) -> frozenset[str]:
    """Return the conflict tags for *day_index* given the week's activities."""
    tags: set[str] = set()
    for activity in activities:
        if activity.day_of_week != day_index or activity.intensity != "hard":
            continue
        tags |= classify_activity(activity.name)
        if activity.time_window == "evening":
            tags.add(EVENING_SESSION)
    return frozenset(tags)


def blocks_gym_session(tags: Iterable[str]) -> bool:
    """True if a day's conflicts make it unsuitable for a fresh gym session."""
    return any(tag.startswith("heavy_") or tag == EVENING_SESSION for tag in tags)


def activity_days(activities: Iterable[WeeklyActivity]) -> Mapping[int, WeeklyActivity]:
    """Map day index → the hard/moderate activity that defines that day.

    A hard activity wins over a moderate one on the same day; otherwise
    the first one listed wins.
    """
    days: dict[int, WeeklyActivity] = {}
    for activity in activities:
        if activity.intensity not in TRAINING_INTENSITIES:
            continue
        current = days.get(activity.day_of_week)
        if current is None or (current.intensity != "hard" and activity.intensity == "hard"):
            days[activity.day_of_week] = activity
    return days
