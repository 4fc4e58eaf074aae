"""
Exercise-Count Policy
=====================
How many exercises a gym session should contain, keyed by experience
tier and session length.

Session length is bucketed:
    <= 30 min  → short
    <= 45 min  → medium
    otherwise  → long

Unknown experience tiers fall back to intermediate/medium. A slightly
mis-sized workout is a cosmetic problem, so this never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SHORT_SESSION_MAX_MINUTES = 30
MEDIUM_SESSION_MAX_MINUTES = 45

FALLBACK_EXPERIENCE = "intermediate"
FALLBACK_BUCKET = "medium"


@dataclass(frozen=True)
class ExerciseCounts:
    min: int
    max: int
    warmup: int
    cooldown: int

    @property
    def main_min(self) -> int:
        return self.min - self.warmup - self.cooldown

    @property
    def main_max(self) -> int:
        return self.max - self.warmup - self.cooldown


# ---------------------------------------------------------------------------
# Policy table keyed by experience → duration bucket
# ---------------------------------------------------------------------------

EXERCISE_COUNT_TABLE: Mapping[str, Mapping[str, ExerciseCounts]] = MappingProxyType({
    "beginner": MappingProxyType({
        "short": ExerciseCounts(min=3, max=4, warmup=1, cooldown=1),
        "medium": ExerciseCounts(min=4, max=6, warmup=1, cooldown=1),
        "long": ExerciseCounts(min=5, max=7, warmup=2, cooldown=1),
    }),
    "intermediate": MappingProxyType({
        "short": ExerciseCounts(min=4, max=5, warmup=1, cooldown=1),
        "medium": ExerciseCounts(min=5, max=7, warmup=1, cooldown=1),
        "long": ExerciseCounts(min=6, max=9, warmup=2, cooldown=2),
    }),
    "advanced": MappingProxyType({
        "short": ExerciseCounts(min=5, max=6, warmup=1, cooldown=1),
        "medium": ExerciseCounts(min=6, max=8, warmup=2, cooldown=1),
        "long": ExerciseCounts(min=7, max=10, warmup=2, cooldown=2),
    }),
})


def duration_bucket(session_duration_minutes: int) -> str:
    """Return 'short', 'medium' or 'long' for a session length in minutes."""
    if session_duration_minutes <= SHORT_SESSION_MAX_MINUTES:
        return "short"
    if session_duration_minutes <= MEDIUM_SESSION_MAX_MINUTES:
        return "medium"
    return "long"


def exercise_counts(experience: str, session_duration_minutes: int) -> ExerciseCounts:
    """Look up the exercise-count policy for *experience* and session length.

    An unrecognised experience tier returns the intermediate/medium entry
    regardless of duration.
    """
    by_bucket = EXERCISE_COUNT_TABLE.get((experience or "").lower().strip())
    if by_bucket is None:
        return EXERCISE_COUNT_TABLE[FALLBACK_EXPERIENCE][FALLBACK_BUCKET]
    return by_bucket[duration_bucket(session_duration_minutes)]
