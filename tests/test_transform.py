import pytest

from bulk_renamer.core import ApplyMode, ReplaceMode, RenameSettings, transform_name


def plain(apply_mode=ApplyMode.ANYWHERE, find="", replace="", **kwargs) -> RenameSettings:
    return RenameSettings(
        replace_mode=ReplaceMode.PLAIN_TEXT, apply_mode=apply_mode,
        find_text=find, replace_text=replace, **kwargs
    )


def regex(apply_mode=ApplyMode.ANYWHERE, find="", replace="", **kwargs) -> RenameSettings:
    return RenameSettings(
        replace_mode=ReplaceMode.REGEX, apply_mode=apply_mode,
        find_text=find, replace_text=replace, **kwargs
    )


class TestPlainTextTransform:
    def test_anywhere(self):
        assert transform_name("SM_Wep_SM_01", plain(find="SM_", replace="Hero_")) == "Hero_Wep_Hero_01"

    def test_prefix_only(self):
        settings = plain(ApplyMode.PREFIX_ONLY, "SM_", "Hero_")
        assert transform_name("SM_Wep_SM_01", settings) == "Hero_Wep_SM_01"

    def test_suffix_only(self):
        settings = plain(ApplyMode.SUFFIX_ONLY, "_LOD0", "")
        assert transform_name("SM_Weapon_LOD0", settings) == "SM_Weapon"

    def test_case_insensitive(self):
        settings = plain(find="sm_", replace="Hero_", case_sensitive=False)
        assert transform_name("SM_Weapon", settings) == "Hero_Weapon"

    def test_case_sensitive_miss(self):
        assert transform_name("SM_Weapon", plain(find="sm_", replace="Hero_")) == "SM_Weapon"


class TestRegexTransform:
    def test_anywhere(self):
        assert transform_name("SM_Weapon_LOD0", regex(find=r"_LOD\d+")) == "SM_Weapon"

    def test_prefix_only_anchors_automatically(self):
        settings = regex(ApplyMode.PREFIX_ONLY, "SM_", "Hero_")
        assert transform_name("SM_Wep_SM_01", settings) == "Hero_Wep_SM_01"

    def test_suffix_only_anchors_automatically(self):
        settings = regex(ApplyMode.SUFFIX_ONLY, "SM_", "Hero_")
        assert transform_name("SM_Wep_SM_", settings) == "SM_Wep_Hero_"

    def test_group_references(self):
        settings = regex(find=r"(\w+?)_(\d+)", replace=r"\2_\1")
        assert transform_name("Wep_01", settings) == "01_Wep"

    def test_case_insensitive_uses_flag(self):
        settings = regex(ApplyMode.PREFIX_ONLY, "sm_", "Hero_", case_sensitive=False)
        assert transform_name("SM_Weapon", settings) == "Hero_Weapon"

    def test_prefix_only_with_leading_inline_flag(self):
        settings = regex(ApplyMode.PREFIX_ONLY, "(?i)sm_", "Hero_")
        assert transform_name("SM_Wep_SM_01", settings) == "Hero_Wep_SM_01"

    def test_suffix_only_with_leading_inline_flag(self):
        settings = regex(ApplyMode.SUFFIX_ONLY, r"(?i)_lod\d", "")
        assert transform_name("SM_Weapon_LOD0", settings) == "SM_Weapon"

    @pytest.mark.parametrize("stem", ["SM_Weapon", "x", "[invalid("])
    def test_invalid_pattern_returns_original(self, stem):
        assert transform_name(stem, regex(find="[invalid(", replace="x")) == stem

    def test_empty_find_returns_original(self):
        assert transform_name("SM_Weapon", regex(find="", replace="x")) == "SM_Weapon"


class TestDecoration:
    def test_prefix_and_suffix_added(self):
        settings = plain(find="SM_", replace="", add_prefix="P_", add_suffix="_S")
        assert transform_name("SM_Weapon", settings) == "P_Weapon_S"

    def test_whitespace_runs_replaced(self):
        settings = plain(replace_whitespace=True, whitespace_replacement="_")
        assert transform_name("My  Hero\tFile", settings) == "My_Hero_File"

    def test_whitespace_untouched_when_disabled(self):
        assert transform_name("My Hero", plain()) == "My Hero"


class TestTransformProperties:
    @pytest.mark.parametrize("stem", ["", "SM_Weapon", "a b c", "Ünïcode"])
    @pytest.mark.parametrize("mode", list(ReplaceMode))
    @pytest.mark.parametrize("apply_mode", list(ApplyMode))
    def test_empty_find_is_identity(self, stem, mode, apply_mode):
        settings = RenameSettings(replace_mode=mode, apply_mode=apply_mode, find_text="", replace_text="Hero_")
        assert transform_name(stem, settings) == stem

    def test_empty_stem_is_unchanged(self):
        assert transform_name("", plain(add_prefix="P_")) == ""

    def test_deterministic(self):
        settings = regex(find=r"\d+", replace="N")
        assert transform_name("a1b22", settings) == transform_name("a1b22", settings) == "aNbN"
