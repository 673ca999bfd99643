"""
Ruleset Engine - Validation, matching and naming of custom mod rulesets.

Usage:
    from ruleset_engine import RulesetEngine

    engine = RulesetEngine()
    result = engine.validate_ruleset(required_mods, "at_least")
    verdict = engine.match_score(ruleset_record, score_mods)
"""

from .api import RulesetService
from .core.catalog import ModifierCatalog
from .core.engine import RulesetEngine
from .models.enums import MatchType
from .models.ruleset import Ruleset, MatchVerdict, ValidationResult

__all__ = [
    'RulesetService',
    'RulesetEngine',
    'ModifierCatalog',
    'MatchType',
    'Ruleset',
    'MatchVerdict',
    'ValidationResult',
]

__version__ = "0.1.0"
