"""
High-level API for the Ruleset Engine.
"""

from typing import Any, Dict, Optional

from ruleset_engine.config import DEFAULT_MATCH_TYPE
from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.core.engine import RulesetEngine
from ruleset_engine.models.modifier import RulesetFormatError
from ruleset_engine.models.ruleset import Ruleset


class RulesetService:
    """
    Payload-level API for ruleset handling.

    Usage:
        service = RulesetService()

        result = service.validate({"required_mods": [...], "ruleset_match_type": "exact"})

    """

    def __init__(self, catalog: Optional[ModifierCatalog] = None):
        """
        Initialize the RulesetService.

        Args:
            catalog: Mod catalog override (the bundled catalog by default)
        """
        self.engine = RulesetEngine(catalog)

    def validate(self, request: Dict) -> Dict[str, Any]:
        """
        Validate a ruleset and dry-run it against optional test scores.

        Request fields:
        - required_mods: [{acronym, settings}]
        - ruleset_match_type: "exact" | "at_least" | "any_of"
        - test_scores: optional [{username, mods_detailed}]

        Returns:
            {"success": False, "errors": [...]} when invalid, otherwise
            {"success": True, "validation", "score_tests", "examples", "message"}
        """
        required_mods = request.get('required_mods')
        match_type = request.get('ruleset_match_type')

        validation = self.engine.validate_ruleset(required_mods, match_type)
        if not validation.valid:
            return {"success": False, "errors": validation.errors}

        ruleset = Ruleset.from_record({
            "required_mods": required_mods,
            "ruleset_match_type": match_type,
        })

        test_scores = request.get('test_scores')
        score_tests = []
        if isinstance(test_scores, list):
            score_tests = self.engine.test_scores(ruleset, test_scores)

        return {
            "success": True,
            "validation": {
                "valid": True,
                "required_mods": [mod.to_dict() for mod in ruleset.required_mods],
                "match_type": ruleset.match_type,
                "name": self.engine.generate_name(ruleset.required_mods, ruleset.match_type),
                "description": self.engine.generate_description(ruleset.required_mods, ruleset.match_type),
            },
            "score_tests": score_tests,
            "examples": self.engine.qualifying_examples(ruleset.required_mods, ruleset.match_type),
            "message": "Ruleset validation successful",
        }

    def match(self, request: Dict) -> Dict[str, Any]:
        """
        Check one score against a ruleset.

        Request fields:
        - ruleset: {required_mods, ruleset_match_type}
        - mods_detailed: the score's applied mods
        """
        ruleset = self._require_ruleset(request)
        verdict = self.engine.match_score(ruleset, request.get('mods_detailed') or [])
        return verdict.to_dict()

    def preview(self, request: Dict) -> Dict[str, Any]:
        """Name, description and length check for a ruleset being edited."""
        match_type = request.get('ruleset_match_type') or DEFAULT_MATCH_TYPE
        return self.engine.preview_ruleset(request.get('required_mods') or [], match_type)

    def winner(self, request: Dict) -> Dict[str, Any]:
        """
        Pick the ruleset winner among score records.

        Request fields:
        - ruleset: {required_mods, ruleset_match_type}
        - scores: [{score_id, user_id, username, score, mods_detailed, ended_at}]
        """
        ruleset = self._require_ruleset(request)
        scores = request.get('scores') or []
        if not isinstance(scores, list):
            raise RulesetFormatError("scores must be an array")

        frame = self.engine.evaluate_scores(ruleset, scores)
        return {
            "winner": self.engine.select_winner(ruleset, scores, frame),
            "qualifying_count": int(frame["qualifies"].sum()) if len(frame) else 0,
        }

    def mods(self, mode: Optional[str] = None) -> Dict[str, Any]:
        """Catalog export for mod pickers, optionally limited to one game mode."""
        return self.engine.catalog.to_dict(mode)

    @staticmethod
    def _require_ruleset(request: Dict) -> Ruleset:
        record = request.get('ruleset')
        if record is None:
            raise RulesetFormatError("Request is missing 'ruleset'")
        return Ruleset.from_record(record)
