"""
Split Selector
==============
Chooses the ordered sequence of day focuses for the gym days a user
actually needs this week.

Decision logic:
    1. If the user picked a named split (anything except 'coach_choice')
       and we know it, use it. Truncate to the number of gym days, or pad
       by repeating the last focus.
    2. Otherwise pick from the default table keyed by (gym days, tier).
       Novices get broader splits (fewer, bigger sessions, more recovery);
       advanced users get more granular body-part splits.
    3. Lookups follow an explicit fallback chain (see ``fallback_chain``)
       so an unknown tier or an unusual day count still yields a plan.

The sequence is conceptually infinite. Callers index it modulo its
length.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

COACH_CHOICE = "coach_choice"
FALLBACK_EXPERIENCE = "intermediate"
MIN_TABLE_DAYS = 2
FULL_BODY_FALLBACK: tuple[str, ...] = ("full",)

# ---------------------------------------------------------------------------
# Primary muscles trained by each focus
# ---------------------------------------------------------------------------

FOCUS_MUSCLES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "upper": ("chest", "back", "shoulders", "arms"),
    "lower": ("legs", "glutes", "calves"),
    "full": ("chest", "back", "legs", "shoulders", "arms"),
    "push": ("chest", "shoulders", "triceps"),
    "pull": ("back", "biceps", "rear_delts"),
    "legs": ("quads", "hamstrings", "glutes", "calves"),
    "chest": ("chest", "triceps"),
    "back": ("back", "biceps"),
    "shoulders": ("shoulders", "traps"),
    "arms": ("biceps", "triceps", "forearms"),
    "squat": ("quads", "glutes", "hamstrings"),
    "bench": ("chest", "shoulders", "triceps"),
    "deadlift": ("hamstrings", "glutes", "back"),
    "overhead": ("shoulders", "triceps", "traps"),
    "cardio_strength": ("legs", "glutes", "shoulders"),
    "hiit": ("legs", "glutes", "core"),
    "cardio": (),
    "recovery": (),
})

# ---------------------------------------------------------------------------
# Named splits a user can pick during onboarding
# ---------------------------------------------------------------------------

PREFERRED_SPLITS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "upper_lower": ("upper", "lower"),
    "upper_lower_full": ("upper", "lower", "full"),
    "push_pull_legs": ("push", "pull", "legs"),
    "bro_split": ("chest", "back", "shoulders", "legs", "arms"),
    "full_body": ("full", "full", "full", "full"),
    "strength": ("squat", "bench", "deadlift", "overhead"),
    "endurance": ("cardio_strength", "hiit", "cardio_strength"),
})

# ---------------------------------------------------------------------------
# Default splits keyed by (gym days needed, experience)
# ---------------------------------------------------------------------------

DEFAULT_SPLITS: Mapping[tuple[int, str], tuple[str, ...]] = MappingProxyType({
    (2, "beginner"): ("full", "full"),
    (2, "intermediate"): ("upper", "lower"),
    (2, "advanced"): ("upper", "lower"),

    (3, "beginner"): ("upper", "lower", "full"),
    (3, "intermediate"): ("push", "pull", "legs"),
    (3, "advanced"): ("push", "pull", "legs"),

    (4, "beginner"): ("upper", "lower", "upper", "lower"),
    (4, "intermediate"): ("upper", "lower", "push", "pull"),
    (4, "advanced"): ("push", "pull", "legs", "upper"),

    (5, "beginner"): ("upper", "lower", "push", "pull", "legs"),
    (5, "intermediate"): ("push", "pull", "legs", "upper", "lower"),
    (5, "advanced"): ("chest", "back", "shoulders", "legs", "arms"),

    (6, "beginner"): ("push", "pull", "legs", "push", "pull", "legs"),
    (6, "intermediate"): ("push", "pull", "legs", "push", "pull", "legs"),
    (6, "advanced"): ("chest", "back", "shoulders", "legs", "arms", "full"),
})


@dataclass(frozen=True)
class SplitSelection:
    split_name: str
    focuses: tuple[str, ...]

    def focus_for(self, position: int) -> str:
        """Focus for the *position*-th gym day, cycling through the sequence."""
        return self.focuses[position % len(self.focuses)]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def fallback_chain(gym_days_needed: int, experience: str) -> list[tuple[int, str]]:
    """Ordered DEFAULT_SPLITS keys to try for a (days, experience) request.

    Exact match first, then the same or nearest lower day count at
    intermediate. The caller falls back to a single full-body focus if
    none of these exist.
    """
    chain = [(gym_days_needed, experience)]
    for days in range(gym_days_needed, MIN_TABLE_DAYS - 1, -1):
        key = (days, FALLBACK_EXPERIENCE)
        if key not in chain:
            chain.append(key)
    return chain


def fit_to_length(focuses: Sequence[str], length: int, pad_with_last: bool) -> tuple[str, ...]:
    """Truncate *focuses* to *length*, or extend them.

    Extension repeats the last focus when *pad_with_last* is set, and
    cycles from the start otherwise.
    """
    if length <= len(focuses):
        return tuple(focuses[:length])
    if pad_with_last:
        return tuple(focuses) + (focuses[-1],) * (length - len(focuses))
    return tuple(focuses[i % len(focuses)] for i in range(length))


def rotate_for_week(focuses: Sequence[str], week_number: int) -> tuple[str, ...]:
    """Rotate the focus order by ``week_number - 1`` for weekly variety.

    Sequences of two or fewer focuses, and week 1, are left as-is.
    """
    if len(focuses) <= 2 or week_number <= 1:
        return tuple(focuses)
    shift = (week_number - 1) % len(focuses)
    return tuple(focuses[shift:]) + tuple(focuses[:shift])


def muscles_for(focus: str) -> list[str]:
    return list(FOCUS_MUSCLES.get(focus, ()))


# ---------------------------------------------------------------------------
# Selector
# ---------------------------------------------------------------------------

def select_split(
    gym_days_needed: int,
    experience: str,
    preferred_split: Optional[str] = None,
) -> SplitSelection:
    """Pick the focus sequence for *gym_days_needed* gym days.

    Returns a SplitSelection whose ``focuses`` has exactly
    ``max(1, gym_days_needed)`` entries.
    """
    length = max(1, gym_days_needed)
    tier = (experience or "").lower().strip()

    preferred = (preferred_split or "").lower().strip()
    if preferred and preferred != COACH_CHOICE:
        template = PREFERRED_SPLITS.get(preferred)
        if template is not None:
            return SplitSelection(
                split_name=preferred,
                focuses=fit_to_length(template, length, pad_with_last=True),
            )
        logger.info("Unknown preferred split '%s' — using coach choice", preferred_split)

    for days, resolved_tier in fallback_chain(length, tier):
        template = DEFAULT_SPLITS.get((days, resolved_tier))
        if template is not None:
            if (days, resolved_tier) != (length, tier):
                logger.debug(
                    "No default split for %d days/%s — falling back to %d days/%s",
                    length, tier, days, resolved_tier,
                )
            return SplitSelection(
                split_name=f"{length}day_{resolved_tier}",
                focuses=fit_to_length(template, length, pad_with_last=False),
            )

    return SplitSelection(
        split_name=f"{length}day_full_body",
        focuses=fit_to_length(FULL_BODY_FALLBACK, length, pad_with_last=False),
    )
