"""Core processing components."""

from .engine import RulesetEngine
from .catalog import ModifierCatalog
from .conflict_detector import ConflictDetector
from .setting_validator import SettingValidator
from .ruleset_validator import RulesetValidator
from .ruleset_matcher import RulesetMatcher
from .ruleset_namer import RulesetNamer
from .score_evaluator import ScoreEvaluator

__all__ = [
    'RulesetEngine',
    'ModifierCatalog',
    'ConflictDetector',
    'SettingValidator',
    'RulesetValidator',
    'RulesetMatcher',
    'RulesetNamer',
    'ScoreEvaluator',
]
