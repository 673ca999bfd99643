"""Tests for per-group conflict detection."""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.core.conflict_detector import ConflictDetector


detector = ConflictDetector(ModifierCatalog.default())


def test_no_conflicts():
    assert detector.detect(["HD", "HR", "DT"]) == []
    assert detector.detect([]) == []


def test_single_group_violation():
    reports = detector.detect(["EZ", "HD", "HR"])
    assert len(reports) == 1
    assert reports[0].group == "Difficulty adjustment"
    assert reports[0].acronyms == ("EZ", "HR")


def test_report_names_only_intersecting_acronyms():
    reports = detector.detect(["HT", "HD", "DT", "NC"])
    assert [r.acronyms for r in reports] == [("HT", "DT", "NC")]


def test_multiple_independent_reports():
    """One ruleset can break several groups at once."""
    reports = detector.detect(["EZ", "HR", "DT", "HT", "AL", "SG"])
    groups = [r.group for r in reports]
    assert groups == ["Speed/Rate", "Difficulty adjustment", "Input modification"]


def test_overlapping_groups_reported_separately():
    """MG and RP share two groups; both are reported."""
    reports = detector.detect(["MG", "RP"])
    assert len(reports) == 2
    assert all(r.acronyms == ("MG", "RP") for r in reports)


def test_conflicts_are_symmetric():
    for first, second in [("EZ", "HR"), ("DT", "HT"), ("NF", "SD"), ("HO", "NR")]:
        forward = detector.detect([first, second])
        backward = detector.detect([second, first])
        assert forward and backward
        assert [r.group for r in forward] == [r.group for r in backward]


def test_duplicates_collapse():
    """Repeating an acronym does not make it conflict with itself."""
    assert detector.detect(["DT", "DT"]) == []


def test_unknown_acronyms_are_ignored():
    assert detector.detect(["ZZ", "HR"]) == []


def test_message():
    report = detector.detect(["EZ", "HR"])[0]
    assert report.message() == (
        "Conflicting mods detected: EZ, HR cannot be used together (Difficulty adjustment)"
    )
