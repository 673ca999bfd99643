"""
Ruleset Matcher Tests

Qualification of applied mods under the three match policies, the failure
reasons shown to players, and the illustrative examples shown to admins.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.core.ruleset_matcher import RulesetMatcher
from ruleset_engine.models.modifier import ModifierInstance, RulesetFormatError
from ruleset_engine.models.ruleset import Ruleset


matcher = RulesetMatcher(ModifierCatalog.default())


def _mod(acronym, **settings):
    return {"acronym": acronym, "settings": settings}


def _ruleset(match_type, *mods):
    return Ruleset.from_record({"required_mods": list(mods), "ruleset_match_type": match_type})


# =============================================================================
# exact
# =============================================================================

def test_exact_same_mods_any_order():
    ruleset = _ruleset("exact", _mod("HD"), _mod("HR"))
    assert matcher.matches(ruleset, [_mod("HD"), _mod("HR")]).qualifies
    assert matcher.matches(ruleset, [_mod("HR"), _mod("HD")]).qualifies


def test_exact_extra_mod_fails_with_count_reason():
    ruleset = _ruleset("exact", _mod("HD"), _mod("HR"))
    verdict = matcher.matches(ruleset, [_mod("HD"), _mod("HR"), _mod("DT")])
    assert not verdict.qualifies
    assert verdict.reason == "Must have exactly 2 mod(s), but has 3"


def test_exact_missing_mod():
    ruleset = _ruleset("exact", _mod("HD"), _mod("HR"))
    verdict = matcher.matches(ruleset, [_mod("HD"), _mod("DT")])
    assert verdict.reason == "Missing required mod: HR"


def test_exact_requires_identical_settings():
    """A score with default DT does not satisfy DT(1.8x)."""
    ruleset = _ruleset("exact", _mod("DT", speed_change=1.8))

    assert matcher.matches(ruleset, [_mod("DT", speed_change=1.8)]).qualifies

    verdict = matcher.matches(ruleset, [_mod("DT", speed_change=1.5)])
    assert not verdict.qualifies
    assert verdict.reason == "Mod DT: speed_change should be 1.8, but is 1.5"

    verdict = matcher.matches(ruleset, [_mod("DT")])
    assert verdict.reason == "Mod DT: speed_change should be 1.8, but is unset"


def test_exact_rejects_extra_setting_keys():
    ruleset = _ruleset("exact", _mod("DT", speed_change=1.8))
    verdict = matcher.matches(ruleset, [_mod("DT", speed_change=1.8, adjust_pitch=True)])
    assert not verdict.qualifies
    assert verdict.reason == "Mod DT: adjust_pitch should be unset, but is true"


def test_exact_ignores_key_order():
    ruleset = _ruleset("exact", _mod("DT", speed_change=1.8, adjust_pitch=True))
    applied = [{"acronym": "DT", "settings": {"adjust_pitch": True, "speed_change": 1.8}}]
    assert matcher.matches(ruleset, applied).qualifies


def test_whole_floats_equal_integers():
    ruleset = _ruleset("exact", _mod("DT", speed_change=2))
    assert matcher.matches(ruleset, [_mod("DT", speed_change=2.0)]).qualifies


def test_booleans_never_equal_numbers():
    ruleset = _ruleset("exact", _mod("DT", adjust_pitch=True))
    assert not matcher.matches(ruleset, [_mod("DT", adjust_pitch=1)]).qualifies


# =============================================================================
# at_least
# =============================================================================

def test_at_least_allows_extras():
    ruleset = _ruleset("at_least", _mod("HD"))
    assert matcher.matches(ruleset, [_mod("HD"), _mod("HR")]).qualifies
    assert matcher.matches(ruleset, [_mod("HD")]).qualifies


def test_at_least_missing_mod():
    ruleset = _ruleset("at_least", _mod("HD"))
    verdict = matcher.matches(ruleset, [_mod("HR")])
    assert not verdict.qualifies
    assert verdict.reason == "Missing required mod: HD"


def test_at_least_allows_extra_setting_keys():
    ruleset = _ruleset("at_least", _mod("DT", speed_change=1.8))
    assert matcher.matches(ruleset, [_mod("DT", speed_change=1.8, adjust_pitch=True)]).qualifies


def test_at_least_setting_mismatch():
    ruleset = _ruleset("at_least", _mod("DT", speed_change=1.8))
    verdict = matcher.matches(ruleset, [_mod("DT", speed_change=1.5), _mod("HD")])
    assert verdict.reason == "Mod DT: speed_change should be 1.8, but is 1.5"


def test_at_least_reports_first_failing_entry_in_ruleset_order():
    ruleset = _ruleset("at_least", _mod("HD"), _mod("HR"), _mod("FL"))
    verdict = matcher.matches(ruleset, [_mod("HD")])
    assert verdict.reason == "Missing required mod: HR"


# =============================================================================
# any_of
# =============================================================================

def test_any_of_one_entry_suffices():
    ruleset = _ruleset("any_of", _mod("HD"), _mod("DT", speed_change=1.8))
    assert matcher.matches(ruleset, [_mod("DT", speed_change=1.8)]).qualifies
    assert matcher.matches(ruleset, [_mod("HD"), _mod("FL")]).qualifies


def test_any_of_settings_must_match_on_the_satisfying_entry():
    ruleset = _ruleset("any_of", _mod("HD"), _mod("DT", speed_change=1.8))
    verdict = matcher.matches(ruleset, [_mod("DT", speed_change=1.5)])
    assert not verdict.qualifies
    assert verdict.reason == (
        "Must have at least one of: HD, DT with correct settings (Missing required mod: HD)"
    )


# =============================================================================
# Edge cases
# =============================================================================

def test_acronyms_are_case_insensitive():
    ruleset = _ruleset("exact", _mod("hd"), _mod("HR"))
    assert matcher.matches(ruleset, [_mod("HD"), _mod("hr")]).qualifies


def test_unknown_applied_acronym_treated_as_present():
    """Unknown applied mods still count towards exact length."""
    assert matcher.matches(_ruleset("at_least", _mod("HD")), [_mod("HD"), _mod("ZZ")]).qualifies

    verdict = matcher.matches(_ruleset("exact", _mod("HD")), [_mod("HD"), _mod("ZZ")])
    assert verdict.reason == "Must have exactly 1 mod(s), but has 2"


def test_unknown_required_acronym_never_satisfied():
    ruleset = _ruleset("at_least", _mod("ZZ"))
    verdict = matcher.matches(ruleset, [_mod("ZZ")])
    assert not verdict.qualifies
    assert verdict.reason == "Unsupported mod: ZZ"


def test_empty_requirements_qualify():
    ruleset = Ruleset(required_mods=[], match_type="exact")
    assert matcher.matches(ruleset, [_mod("HD")]).qualifies


def test_invalid_match_type_never_qualifies():
    ruleset = Ruleset(required_mods=[ModifierInstance("HD")], match_type="most")
    verdict = matcher.matches(ruleset, [_mod("HD")])
    assert not verdict.qualifies
    assert verdict.reason == "Invalid match type: most"


def test_applied_mods_as_json_string():
    ruleset = _ruleset("exact", _mod("HD"))
    assert matcher.matches(ruleset, '[{"acronym": "HD", "settings": {}}]').qualifies


def test_malformed_applied_mods_raise():
    with pytest.raises(RulesetFormatError):
        matcher.matches(_ruleset("exact", _mod("HD")), "not json")


def test_verdict_is_deterministic():
    ruleset = _ruleset("exact", _mod("HD"), _mod("HR"))
    applied = [_mod("HD"), _mod("DT")]
    assert matcher.matches(ruleset, applied) == matcher.matches(ruleset, applied)


# =============================================================================
# Qualifying examples
# =============================================================================

def test_examples_exact():
    examples = matcher.qualifying_examples([_mod("HD"), _mod("HR")], "exact")
    assert examples == [{
        "description": "Exact match - only these mods",
        "mods": [_mod("HD"), _mod("HR")],
    }]


def test_examples_at_least_single_mod_gets_extra():
    examples = matcher.qualifying_examples([_mod("HD")], "at_least")
    assert [e["description"] for e in examples] == ["Minimum required mods", "Required mods + additional mod"]
    assert examples[1]["mods"] == [_mod("HD"), _mod("HR")]


def test_examples_extra_avoids_conflicts():
    """The additional mod never conflicts with the required one."""
    examples = matcher.qualifying_examples([_mod("EZ")], "at_least")
    extra = examples[1]["mods"][1]["acronym"]
    assert extra == "HD"

    examples = matcher.qualifying_examples([_mod("HR")], "at_least")
    assert examples[1]["mods"][1]["acronym"] == "HD"


def test_examples_any_of():
    examples = matcher.qualifying_examples([_mod("HD"), _mod("DT", speed_change=1.8)], "any_of")
    assert [e["description"] for e in examples] == [
        "Option 1: HD",
        "Option 2: DT with settings",
        "Multiple options + additional mod",
    ]
    assert examples[2]["mods"] == [_mod("HD"), _mod("HR")]


def test_examples_without_requirements():
    assert matcher.qualifying_examples([], "exact") == [
        {"description": "Any mods (no requirements)", "mods": []}
    ]


def test_examples_satisfy_the_ruleset():
    """Every generated example qualifies under its own ruleset."""
    cases = [
        ("exact", [_mod("HD"), _mod("DT", speed_change=1.8)]),
        ("at_least", [_mod("FL")]),
        ("any_of", [_mod("HD"), _mod("HR")]),
    ]
    for match_type, mods in cases:
        ruleset = _ruleset(match_type, *mods)
        for example in matcher.qualifying_examples(mods, match_type):
            assert matcher.matches(ruleset, example["mods"]).qualifies, example["description"]
