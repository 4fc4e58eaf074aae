"""
Tests for the prompt-constraint formatter
=========================================
Covers:
- Every focus in the closed set formats without raising (sentinels included)
- Every focus in the closed set has its own description
- Upper-body description wording
- Gym day block: muscles, exercise count, warm-up / main / cooldown, avoid, notes
- Experience guidance per tier; unknown tier → intermediate guidance
- Rest / external activity days: description and notes only, no counts
- Unrecognised focus (bypassing validation) → full-body description

Run: pytest tests/test_prompt_constraints.py -v
"""

from __future__ import annotations

from typing import get_args

import pytest

from app.models.split_plan import CountRange, DayPlan, Focus
from app.services.prompt_constraints import (
    EXPERIENCE_GUIDANCE,
    FOCUS_DESCRIPTIONS,
    describe_focus,
    format_constraints,
)

ALL_FOCUSES = get_args(Focus)


def _day(focus: str, **overrides) -> DayPlan:
    gym = focus not in ("rest", "external_activity")
    fields = {
        "day_index": 1,
        "focus": focus,
        "exercise_count": CountRange(min=5, max=7) if gym else CountRange(min=0, max=0),
        "warmup_count": 1 if gym else 0,
        "main_count": CountRange(min=3, max=5) if gym else CountRange(min=0, max=0),
        "cooldown_count": 1 if gym else 0,
        "is_gym_training": gym,
        "muscles_focused": ["chest", "shoulders", "triceps"] if gym else [],
    }
    fields.update(overrides)
    return DayPlan(**fields)


class TestCompleteness:

    @pytest.mark.parametrize("focus", ALL_FOCUSES)
    @pytest.mark.parametrize("experience", ["beginner", "intermediate", "advanced", "unknown", ""])
    def test_never_raises(self, focus: str, experience: str):
        text = format_constraints(_day(focus), experience)
        assert text.startswith(FOCUS_DESCRIPTIONS[focus])

    def test_every_focus_has_a_description(self):
        assert set(ALL_FOCUSES) == set(FOCUS_DESCRIPTIONS)

    def test_upper_description(self):
        assert describe_focus("upper") == (
            "UPPER BODY focus: chest, back, shoulders, arms. Minimal or no leg exercises."
        )

    def test_unknown_focus_falls_back_to_full(self):
        day = DayPlan.model_construct(
            day_index=2,
            focus="zumba",
            exercise_count=CountRange(min=4, max=6),
            warmup_count=1,
            main_count=CountRange(min=2, max=4),
            cooldown_count=1,
            avoid_patterns=[],
            notes=None,
            is_gym_training=True,
            muscles_focused=[],
        )
        assert format_constraints(day, "beginner").startswith(FOCUS_DESCRIPTIONS["full"])


class TestGymDayBlock:

    def test_block_contents(self):
        day = _day("push", avoid_patterns=["heavy_legs"], notes="Gym: PUSH - Target: chest")
        lines = format_constraints(day, "intermediate").splitlines()

        assert lines == [
            FOCUS_DESCRIPTIONS["push"],
            "TARGET MUSCLES: chest, shoulders, triceps",
            "EXERCISE COUNT: 5-7 exercises total",
            "WARMUP: 1 exercise(s)",
            "MAIN WORK: 3-5 exercises",
            "COOLDOWN: 1 exercise(s)",
            "AVOID: heavy_legs",
            EXPERIENCE_GUIDANCE["intermediate"],
            "Gym: PUSH - Target: chest",
        ]

    def test_no_avoid_line_when_nothing_to_avoid(self):
        assert "AVOID" not in format_constraints(_day("pull"), "advanced")

    def test_no_muscles_line_when_empty(self):
        assert "TARGET MUSCLES" not in format_constraints(_day("cardio", muscles_focused=[]), "advanced")

    @pytest.mark.parametrize("tier", ["beginner", "intermediate", "advanced"])
    def test_experience_guidance(self, tier: str):
        assert EXPERIENCE_GUIDANCE[tier] in format_constraints(_day("legs"), tier)

    def test_unknown_tier_gets_intermediate_guidance(self):
        assert EXPERIENCE_GUIDANCE["intermediate"] in format_constraints(_day("legs"), "elite")


class TestNonGymDays:

    def test_external_activity_day(self):
        day = _day("external_activity", notes="Football (hard) counts as training")
        assert format_constraints(day, "beginner") == (
            FOCUS_DESCRIPTIONS["external_activity"] + "\nFootball (hard) counts as training"
        )

    def test_rest_day_has_no_counts(self):
        text = format_constraints(_day("rest"), "advanced")
        assert text == FOCUS_DESCRIPTIONS["rest"]
        assert "EXERCISE COUNT" not in text
