"""
Ruleset Engine - Main orchestrator for ruleset validation, matching and naming.

Flow for an administrator-submitted ruleset:
1. Validate (catalog lookup, setting checks, conflict detection)
2. Persist (surrounding application)
3. Match each played score's applied mods against the stored ruleset
4. Pick the highest qualifying score as the ruleset winner

Naming runs independently whenever a ruleset needs a display label.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import polars as pl

from .catalog import ModifierCatalog
from .ruleset_matcher import RulesetMatcher
from .ruleset_namer import RulesetNamer
from .ruleset_validator import RulesetValidator
from .score_evaluator import ScoreEvaluator
from ..models.enums import MatchType
from ..models.ruleset import MatchVerdict, Ruleset, ValidationResult
from ..telemetry import traced

logger = logging.getLogger(__name__)


class RulesetEngine:
    """Main orchestrator. Stateless apart from the injected read-only catalog."""

    def __init__(self, catalog: Optional[ModifierCatalog] = None):
        """
        Initialize the RulesetEngine.

        Args:
            catalog: Mod catalog to use; the bundled process-wide catalog by default
        """
        self.catalog = catalog or ModifierCatalog.default()
        self.validator = RulesetValidator(self.catalog)
        self.matcher = RulesetMatcher(self.catalog)
        self.namer = RulesetNamer(self.catalog)
        self.scores = ScoreEvaluator(self.matcher)

    @traced("ruleset.validate")
    def validate_ruleset(self, required_mods: Any, match_type: Any, *, span) -> ValidationResult:
        """Validate a candidate ruleset. Never raises for malformed content."""
        result = self.validator.validate(required_mods, match_type)
        span.set_attribute("ruleset.match_type", str(match_type))
        span.set_attribute("ruleset.mod_count", len(required_mods) if isinstance(required_mods, list) else 0)
        span.set_attribute("ruleset.valid", result.valid)
        span.set_attribute("ruleset.error_count", len(result.errors))
        return result

    @traced("ruleset.match")
    def match_score(self, ruleset: Any, applied_mods: Any, *, span) -> MatchVerdict:
        """Decide whether one score qualifies.

        Args:
            ruleset: Ruleset or persisted ``{required_mods, ruleset_match_type}`` record
            applied_mods: The score's ``[{acronym, settings}]`` list
        """
        ruleset = self._as_ruleset(ruleset)
        verdict = self.matcher.matches(ruleset, applied_mods)
        span.set_attribute("ruleset.match_type", ruleset.match_type)
        span.set_attribute("ruleset.qualifies", verdict.qualifies)
        return verdict

    def generate_name(self, required_mods: Any, match_type: Any = MatchType.AT_LEAST) -> str:
        return self.namer.name(required_mods, match_type)

    def generate_description(self, required_mods: Any, match_type: Any = MatchType.AT_LEAST) -> str:
        return self.namer.describe(required_mods, match_type)

    def preview_ruleset(self, required_mods: Any, match_type: Any = MatchType.AT_LEAST) -> Dict[str, Any]:
        return self.namer.preview(required_mods, match_type)

    def is_name_unique(self, name: str, existing_names: Optional[Sequence[str]] = None) -> bool:
        return self.namer.is_name_unique(name, existing_names)

    def qualifying_examples(self, required_mods: Any, match_type: Any) -> List[Dict[str, Any]]:
        return self.matcher.qualifying_examples(required_mods, match_type)

    def test_scores(self, ruleset: Any, test_scores: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return self.scores.score_tests(self._as_ruleset(ruleset), test_scores)

    @traced("ruleset.evaluate_scores")
    def evaluate_scores(self, ruleset: Any, scores: List[Dict[str, Any]], *, span) -> pl.DataFrame:
        ruleset = self._as_ruleset(ruleset)
        frame = self.scores.evaluate(ruleset, scores)
        span.set_attribute("ruleset.score_count", len(scores))
        span.set_attribute("ruleset.qualifying_count", int(frame["qualifies"].sum()))
        return frame

    @traced("ruleset.select_winner")
    def select_winner(self, ruleset: Any, scores: List[Dict[str, Any]],
                      evaluated: Optional[pl.DataFrame] = None, *, span) -> Optional[Dict[str, Any]]:
        ruleset = self._as_ruleset(ruleset)
        winner = self.scores.select_winner(ruleset, scores, evaluated)
        span.set_attribute("ruleset.score_count", len(scores))
        span.set_attribute("ruleset.has_winner", winner is not None)
        return winner

    @staticmethod
    def _as_ruleset(ruleset: Any) -> Ruleset:
        if isinstance(ruleset, Ruleset):
            return ruleset
        return Ruleset.from_record(ruleset)
