"""
Prompt-Constraint Formatter
===========================
Turns one DayPlan into the plain-text steering block handed to the AI
workout generator. The generator fills the day with named exercises;
this text tells it what the day is for and how big it should be.

Every focus value in the closed set has a fixed description, sentinels
included. Anything unrecognised is described as a full-body day.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from app.models.split_plan import DayPlan

# ---------------------------------------------------------------------------
# Focus descriptions
# ---------------------------------------------------------------------------

FOCUS_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "upper": "UPPER BODY focus: chest, back, shoulders, arms. Minimal or no leg exercises.",
    "lower": "LOWER BODY focus: quads, hamstrings, glutes, calves. Minimal or no upper-body pressing or pulling.",
    "full": "FULL BODY focus: one or two movements each for legs, push, pull and core.",
    "push": "PUSH focus: chest, shoulders, triceps. Horizontal and vertical pressing; no rows or pull-downs.",
    "pull": "PULL focus: back, biceps, rear delts. Rows, pull-downs, curls; no pressing.",
    "legs": "LEGS focus: quads, hamstrings, glutes, calves. Squat and hinge patterns plus accessories.",
    "chest": "CHEST focus: flat, incline and fly variations, with triceps as a secondary.",
    "back": "BACK focus: vertical and horizontal pulling, with biceps as a secondary.",
    "shoulders": "SHOULDERS focus: overhead pressing, lateral and rear delt work, traps.",
    "arms": "ARMS focus: biceps, triceps and forearms. Isolation work is appropriate.",
    "squat": "SQUAT focus: a squat variation as the main lift, then quad and glute accessories.",
    "bench": "BENCH focus: a bench press variation as the main lift, then chest and triceps accessories.",
    "deadlift": "DEADLIFT focus: a deadlift variation as the main lift, then posterior-chain accessories.",
    "overhead": "OVERHEAD focus: a standing overhead press as the main lift, then shoulder and upper-back accessories.",
    "cardio_strength": "CARDIO-STRENGTH focus: circuits mixing compound lifts with conditioning intervals.",
    "hiit": "HIIT focus: short high-intensity intervals with full recovery between rounds. Keep loads light.",
    "cardio": "CARDIO focus: steady-state conditioning. No heavy lifting.",
    "recovery": "RECOVERY focus: mobility, stretching and light movement only. No loaded exercises.",
    "rest": "REST DAY: no workout.",
    "external_activity": "EXTERNAL ACTIVITY DAY: the user's own sport or class is today's training. No gym workout.",
})

FALLBACK_FOCUS = "full"

EXPERIENCE_GUIDANCE: Mapping[str, str] = MappingProxyType({
    "beginner": "Beginner: prefer machines and simple free-weight movements; coach technique, avoid complex lifts.",
    "intermediate": "Intermediate: compound lifts first, moderate accessory volume.",
    "advanced": "Advanced: heavy compound work with higher volume and intensity techniques where suitable.",
})

FALLBACK_EXPERIENCE = "intermediate"


def describe_focus(focus: str) -> str:
    return FOCUS_DESCRIPTIONS.get(focus, FOCUS_DESCRIPTIONS[FALLBACK_FOCUS])


def format_constraints(day_plan: DayPlan, experience: str) -> str:
    """Format *day_plan* as a constraint block for the AI generator.

    Never raises. Rest and external-activity days produce just the
    description and notes.
    """
    lines = [describe_focus(day_plan.focus)]

    if day_plan.focus in ("rest", "external_activity"):
        if day_plan.notes:
            lines.append(day_plan.notes)
        return "\n".join(lines)

    if day_plan.muscles_focused:
        lines.append(f"TARGET MUSCLES: {', '.join(day_plan.muscles_focused)}")
    lines.extend([
        f"EXERCISE COUNT: {day_plan.exercise_count.min}-{day_plan.exercise_count.max} exercises total",
        f"WARMUP: {day_plan.warmup_count} exercise(s)",
        f"MAIN WORK: {day_plan.main_count.min}-{day_plan.main_count.max} exercises",
        f"COOLDOWN: {day_plan.cooldown_count} exercise(s)",
    ])
    if day_plan.avoid_patterns:
        lines.append(f"AVOID: {', '.join(day_plan.avoid_patterns)}")

    tier = (experience or "").lower().strip()
    lines.append(EXPERIENCE_GUIDANCE.get(tier, EXPERIENCE_GUIDANCE[FALLBACK_EXPERIENCE]))

    if day_plan.notes:
        lines.append(day_plan.notes)
    return "\n".join(lines)
