"""
Tests for the split selector
============================
Covers:
- Default table: every (days, tier) entry has exactly `days` focuses
- Named examples: 3-day beginner, 3-day advanced, 5-day advanced/intermediate
- Split naming: '{days}day_{tier}' for auto-selection, preferred key otherwise
- Preferred splits: honoured for every tier, truncated, padded with last focus
- 'coach_choice' and unknown preferred names defer to the default table
- Fallback chain: unknown tier → intermediate, 7 days → 6-day bucket, 1 day → full
- rotate_for_week: week 1 unchanged, rotation wraps, short splits never rotate
- SplitSelection.focus_for cycles modulo length

Run: pytest tests/test_split_selector.py -v
"""

from __future__ import annotations

import pytest

from app.services.split_selector import (
    DEFAULT_SPLITS,
    PREFERRED_SPLITS,
    SplitSelection,
    fallback_chain,
    fit_to_length,
    muscles_for,
    rotate_for_week,
    select_split,
)

TIERS = ("beginner", "intermediate", "advanced")


class TestDefaultTable:

    @pytest.mark.parametrize("days", [2, 3, 4, 5, 6])
    @pytest.mark.parametrize("tier", TIERS)
    def test_every_entry_present_with_matching_length(self, days: int, tier: str):
        assert len(DEFAULT_SPLITS[(days, tier)]) == days

    def test_three_day_beginner(self):
        assert select_split(3, "beginner").focuses == ("upper", "lower", "full")

    def test_three_day_advanced(self):
        assert select_split(3, "advanced").focuses == ("push", "pull", "legs")

    def test_five_day_advanced_is_bro_split(self):
        assert select_split(5, "advanced").focuses == ("chest", "back", "shoulders", "legs", "arms")

    def test_five_day_intermediate(self):
        selection = select_split(5, "intermediate")
        assert selection.focuses == ("push", "pull", "legs", "upper", "lower")
        assert selection.split_name == "5day_intermediate"


class TestPreferredSplit:

    @pytest.mark.parametrize("tier", TIERS)
    def test_push_pull_legs_honoured_for_every_tier(self, tier: str):
        selection = select_split(3, tier, "push_pull_legs")
        assert selection.focuses == ("push", "pull", "legs")
        assert selection.split_name == "push_pull_legs"

    def test_truncated_when_fewer_days(self):
        # Literal truncation: two days of a three-focus split drops legs.
        assert select_split(2, "intermediate", "push_pull_legs").focuses == ("push", "pull")

    def test_padded_with_last_focus(self):
        assert select_split(5, "intermediate", "push_pull_legs").focuses == (
            "push", "pull", "legs", "legs", "legs",
        )

    def test_full_body(self):
        assert select_split(4, "beginner", "full_body").focuses == ("full",) * 4

    def test_strength(self):
        assert select_split(4, "advanced", "strength").focuses == ("squat", "bench", "deadlift", "overhead")

    def test_endurance(self):
        assert select_split(3, "beginner", "endurance").focuses == ("cardio_strength", "hiit", "cardio_strength")

    def test_coach_choice_uses_default_table(self):
        selection = select_split(3, "beginner", "coach_choice")
        assert selection.focuses == ("upper", "lower", "full")
        assert selection.split_name == "3day_beginner"

    def test_unknown_preferred_split_uses_default_table(self):
        assert select_split(3, "advanced", "crossfit_wod").focuses == ("push", "pull", "legs")

    @pytest.mark.parametrize("name", sorted(PREFERRED_SPLITS))
    @pytest.mark.parametrize("days", [1, 2, 3, 4, 5, 6, 7])
    def test_length_always_matches(self, name: str, days: int):
        assert len(select_split(days, "intermediate", name).focuses) == days


class TestFallbacks:

    def test_unknown_tier_uses_intermediate(self):
        selection = select_split(3, "elite")
        assert selection.focuses == ("push", "pull", "legs")
        assert selection.split_name == "3day_intermediate"

    def test_seven_days_uses_six_day_intermediate_cycled(self):
        selection = select_split(7, "advanced")
        assert selection.focuses == ("push", "pull", "legs", "push", "pull", "legs", "push")
        assert selection.split_name == "7day_intermediate"

    def test_one_day_is_full_body(self):
        selection = select_split(1, "beginner")
        assert selection.focuses == ("full",)
        assert selection.split_name == "1day_full_body"

    def test_zero_days_still_returns_one_focus(self):
        assert select_split(0, "intermediate").focuses == ("full",)

    def test_fallback_chain_order(self):
        assert fallback_chain(4, "elite") == [
            (4, "elite"), (4, "intermediate"), (3, "intermediate"), (2, "intermediate"),
        ]

    def test_fallback_chain_no_duplicates_for_intermediate(self):
        assert fallback_chain(3, "intermediate") == [(3, "intermediate"), (2, "intermediate")]


class TestRotation:

    def test_week_one_unchanged(self):
        assert rotate_for_week(("push", "pull", "legs"), 1) == ("push", "pull", "legs")

    def test_week_two_shifts_by_one(self):
        assert rotate_for_week(("push", "pull", "legs"), 2) == ("pull", "legs", "push")

    def test_rotation_wraps(self):
        assert rotate_for_week(("push", "pull", "legs"), 4) == ("push", "pull", "legs")

    def test_two_focus_split_never_rotates(self):
        assert rotate_for_week(("upper", "lower"), 2) == ("upper", "lower")


class TestHelpers:

    def test_focus_for_cycles(self):
        selection = SplitSelection(split_name="x", focuses=("upper", "lower"))
        assert [selection.focus_for(i) for i in range(5)] == ["upper", "lower", "upper", "lower", "upper"]

    def test_fit_to_length_cycles_without_pad(self):
        assert fit_to_length(("a", "b"), 5, pad_with_last=False) == ("a", "b", "a", "b", "a")

    def test_muscles_for_known_and_unknown(self):
        assert muscles_for("push") == ["chest", "shoulders", "triceps"]
        assert muscles_for("rest") == []
