import pytest

from bulk_renamer.core import (
    MatchMode, matches_filter, replace_anywhere, replace_prefix, replace_suffix,
)


class TestMatchesFilter:
    @pytest.mark.parametrize("name, expected", [
        ("SM_Weapon_01", True),
        ("Weapon_Idle", True),
        ("Hero_Run", False),
    ])
    def test_contains(self, name, expected):
        assert matches_filter(name, MatchMode.CONTAINS, "Weapon") is expected

    @pytest.mark.parametrize("mode, name, expected", [
        (MatchMode.STARTS_WITH, "SM_Weapon", True),
        (MatchMode.STARTS_WITH, "Weapon_SM", False),
        (MatchMode.ENDS_WITH, "Weapon_LOD0", True),
        (MatchMode.ENDS_WITH, "LOD0_Weapon", False),
        (MatchMode.EXACT, "Hero", True),
        (MatchMode.EXACT, "Hero_01", False),
    ])
    def test_anchored_modes(self, mode, name, expected):
        text = {MatchMode.STARTS_WITH: "SM_", MatchMode.ENDS_WITH: "LOD0", MatchMode.EXACT: "Hero"}[mode]
        assert matches_filter(name, mode, text) is expected

    def test_case_insensitive(self):
        assert matches_filter("SM_WEAPON_01", MatchMode.CONTAINS, "weapon", case_sensitive=False)
        assert not matches_filter("SM_WEAPON_01", MatchMode.CONTAINS, "weapon", case_sensitive=True)

    @pytest.mark.parametrize("mode", list(MatchMode))
    def test_empty_filter_matches_everything(self, mode):
        assert matches_filter("anything", mode, "") is True


class TestPlainReplace:
    def test_anywhere_replaces_all_occurrences(self):
        assert replace_anywhere("SM_Wep_SM_01", "SM_", "Hero_") == "Hero_Wep_Hero_01"

    def test_anywhere_is_non_overlapping(self):
        assert replace_anywhere("aaaa", "aa", "b") == "bb"

    def test_anywhere_case_insensitive(self):
        assert replace_anywhere("SM_Weapon_sm_", "sm_", "Hero_", case_sensitive=False) == "Hero_Weapon_Hero_"

    def test_replacement_is_literal(self):
        assert replace_anywhere("SM_Weapon", "sm_", r"\1_", case_sensitive=False) == r"\1_Weapon"

    def test_empty_find_returns_text(self):
        assert replace_anywhere("SM_Weapon", "", "x") == "SM_Weapon"
        assert replace_prefix("SM_Weapon", "", "x") == "SM_Weapon"
        assert replace_suffix("SM_Weapon", "", "x") == "SM_Weapon"

    def test_prefix_only_touches_leading_match(self):
        assert replace_prefix("SM_Wep_SM_01", "SM_", "Hero_") == "Hero_Wep_SM_01"
        assert replace_prefix("Weapon_SM_01", "SM_", "Hero_") == "Weapon_SM_01"

    def test_suffix_only_touches_trailing_match(self):
        assert replace_suffix("LOD0_Weapon_LOD0", "_LOD0", "") == "LOD0_Weapon"
        assert replace_suffix("SM_LOD0_Weapon", "_LOD0", "") == "SM_LOD0_Weapon"

    def test_prefix_suffix_case_insensitive(self):
        assert replace_prefix("sm_Weapon", "SM_", "Hero_", case_sensitive=False) == "Hero_Weapon"
        assert replace_suffix("Weapon_lod0", "_LOD0", "", case_sensitive=False) == "Weapon"

    def test_find_longer_than_text(self):
        assert replace_prefix("SM", "SM_Weapon", "x") == "SM"
        assert replace_suffix("SM", "SM_Weapon", "x") == "SM"
