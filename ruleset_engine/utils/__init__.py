"""Catalog tables and value helpers."""

from .supported_mods import SUPPORTED_MODS, SETTING_SPECS, CONFLICT_GROUPS, MODE_SPECIFIC_MODS
from .values import values_equal, format_number, display_value

__all__ = [
    'SUPPORTED_MODS',
    'SETTING_SPECS',
    'CONFLICT_GROUPS',
    'MODE_SPECIFIC_MODS',
    'values_equal',
    'format_number',
    'display_value',
]
