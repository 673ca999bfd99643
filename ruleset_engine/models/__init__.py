"""Data models."""

from ruleset_engine.models.enums import MatchType, SettingType, GameMode
from ruleset_engine.models.modifier import ModifierDefinition, SettingSpec, ModifierInstance, RulesetFormatError
from ruleset_engine.models.ruleset import Ruleset, ConflictReport, ValidationResult, MatchVerdict, parse_mod_list

__all__ = [
    'MatchType',
    'SettingType',
    'GameMode',
    'ModifierDefinition',
    'SettingSpec',
    'ModifierInstance',
    'RulesetFormatError',
    'Ruleset',
    'ConflictReport',
    'ValidationResult',
    'MatchVerdict',
    'parse_mod_list',
]
