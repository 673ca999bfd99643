"""
Score Evaluator - Batch qualification of score records and ruleset winner selection.
"""

import logging
from typing import Any, Dict, List, Optional

import polars as pl

from ruleset_engine.core.ruleset_matcher import RulesetMatcher
from ruleset_engine.models.modifier import RulesetFormatError
from ruleset_engine.models.ruleset import MatchVerdict, Ruleset

logger = logging.getLogger(__name__)

QUALIFIES_REASON = "Meets ruleset requirements"

SCORE_SCHEMA = {
    "row": pl.UInt32,
    "score_id": pl.Int64,
    "user_id": pl.Int64,
    "username": pl.Utf8,
    "score": pl.Float64,
    "ended_at": pl.Utf8,
    "qualifies": pl.Boolean,
    "reason": pl.Utf8,
}


class ScoreEvaluator:
    """Evaluates many score records against one ruleset."""

    def __init__(self, matcher: RulesetMatcher):
        self._matcher = matcher

    @staticmethod
    def applied_mods(score: Dict[str, Any]) -> Any:
        """Applied mods of a score record (``mods_detailed``, falling back to ``mods``)."""
        mods = score.get("mods_detailed")
        if mods is None:
            mods = score.get("mods")
        return mods or []

    def verdict(self, ruleset: Ruleset, score: Dict[str, Any]) -> MatchVerdict:
        """Verdict for one record; malformed applied mods do not qualify."""
        try:
            return self._matcher.matches(ruleset, self.applied_mods(score))
        except RulesetFormatError as e:
            logger.debug(f"Score {score.get('score_id')} has malformed mods: {e}")
            return MatchVerdict(qualifies=False, reason=str(e))

    def evaluate(self, ruleset: Ruleset, scores: List[Dict[str, Any]]) -> pl.DataFrame:
        """
        Evaluate score records.

        Args:
            ruleset: Ruleset to check against
            scores: Records with score_id, user_id, username, score, mods_detailed, ended_at

        Returns:
            DataFrame with one row per record (``row`` is the input index) and
            ``qualifies``/``reason`` columns
        """
        rows = []
        for index, score in enumerate(scores):
            verdict = self.verdict(ruleset, score)
            rows.append({
                "row": index,
                "score_id": score.get("score_id", score.get("id")),
                "user_id": score.get("user_id"),
                "username": score.get("username"),
                "score": score.get("score"),
                "ended_at": score.get("ended_at"),
                "qualifies": verdict.qualifies,
                "reason": verdict.reason,
            })
        return pl.DataFrame(rows, schema=SCORE_SCHEMA, strict=False)

    def select_winner(self, ruleset: Ruleset, scores: List[Dict[str, Any]],
                      evaluated: Optional[pl.DataFrame] = None) -> Optional[Dict[str, Any]]:
        """
        Pick the ruleset winner: the highest qualifying score.

        Ties go to the earliest ``ended_at`` (ISO-8601 strings), then the lowest
        ``score_id``.

        Args:
            evaluated: Frame already returned by ``evaluate`` for the same
                ruleset and scores; evaluated here when omitted

        Returns:
            The winning input record, or None when no score qualifies
        """
        if not scores:
            return None

        if evaluated is None:
            evaluated = self.evaluate(ruleset, scores)

        winners = (
            evaluated
            .filter(pl.col("qualifies") & pl.col("score").is_not_null())
            .sort(["score", "ended_at", "score_id"], descending=[True, False, False], nulls_last=True)
            .head(1)
        )
        if winners.is_empty():
            return None

        winner = scores[winners["row"][0]]
        logger.debug(f"Ruleset winner: score {winner.get('score_id', winner.get('id'))}")
        return winner

    def score_tests(self, ruleset: Ruleset, test_scores: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Dry-run results for admin-provided test scores."""
        results = []
        for score in test_scores:
            verdict = self.verdict(ruleset, score)
            results.append({
                "username": score.get("username") or "Test User",
                "mods_detailed": self.applied_mods(score),
                "qualifies": verdict.qualifies,
                "reason": QUALIFIES_REASON if verdict.qualifies else verdict.reason,
            })
        return results

    def qualifying_count(self, ruleset: Ruleset, scores: List[Dict[str, Any]]) -> int:
        if not scores:
            return 0
        return int(self.evaluate(ruleset, scores)["qualifies"].sum())
