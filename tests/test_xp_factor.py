"""Unit tests for catalog XP factor lookup."""
from workout_plan_api.parsers.models import CatalogEntry
from workout_plan_api.parsers.xp_factor import (
    resolve_xp_factor,
    clean_exercise_name,
    FALLBACK_XP_FACTOR,
)


def _entry(name, xp_factor=None, id=None):
    return CatalogEntry(id=id or name.lower().replace(" ", "_"), name=name, xp_factor=xp_factor)


class TestResolveXpFactor:
    """Test cases for resolve_xp_factor."""

    def test_exact_match(self):
        catalog = [_entry("Bench Press", 2)]
        assert resolve_xp_factor("bench press", catalog) == 2
        assert resolve_xp_factor("  Bench Press ", catalog) == 2

    def test_exact_match_ignores_ordinal_prefix(self):
        catalog = [_entry("Bench Press", 2)]
        assert resolve_xp_factor("3. Bench Press", catalog) == 2

    def test_exact_match_without_factor_is_zero(self):
        catalog = [_entry("Plank")]
        assert resolve_xp_factor("plank", catalog) == 0

    def test_fuzzy_match_needs_two_shared_tokens(self):
        catalog = [_entry("Bench Press", 2)]
        assert resolve_xp_factor("incline bench press", catalog) == 2
        assert resolve_xp_factor("press", catalog) == FALLBACK_XP_FACTOR

    def test_unrelated_name_falls_back(self):
        catalog = [_entry("Bench Press", 2)]
        assert resolve_xp_factor("totally unrelated move", catalog) == 0.5

    def test_empty_catalog_falls_back(self):
        assert resolve_xp_factor("Back Squat", []) == 0.5

    def test_best_candidate_wins_over_first_qualifying(self):
        catalog = [_entry("Front Squat", 1), _entry("Front Squat Hold", 4)]
        assert resolve_xp_factor("front squat hold pause", catalog) == 4

    def test_ties_keep_catalog_order(self):
        catalog = [_entry("Cable Row", 1), _entry("Row Cable Machine", 3)]
        assert resolve_xp_factor("seated cable row", catalog) == 1

    def test_fuzzy_match_without_factor_is_zero(self):
        catalog = [_entry("Hanging Leg Raise")]
        assert resolve_xp_factor("hanging knee leg raise", catalog) == 0


class TestCleanExerciseName:
    def test_strips_ordinal_and_case(self):
        assert clean_exercise_name("12. Back Squat ") == "back squat"

    def test_keeps_unnumbered_name(self):
        assert clean_exercise_name("Deadlift") == "deadlift"
