"""
Ruleset Validator - Accepts or rejects a proposed ruleset with itemized errors.
"""

from typing import Any, List

from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.core.conflict_detector import ConflictDetector
from ruleset_engine.core.setting_validator import SettingValidator
from ruleset_engine.models.enums import MatchType
from ruleset_engine.models.modifier import ModifierInstance
from ruleset_engine.models.ruleset import ValidationResult


class RulesetValidator:
    """Composes catalog lookup, setting validation and conflict detection.

    Never raises for bad input: every problem becomes an entry in
    ``ValidationResult.errors``.
    """

    def __init__(self, catalog: ModifierCatalog):
        self._catalog = catalog
        self._settings = SettingValidator(catalog)
        self._conflicts = ConflictDetector(catalog)

    def validate(self, required_mods: Any, match_type: Any) -> ValidationResult:
        """
        Validate a candidate ruleset.

        Args:
            required_mods: List of ``{acronym, settings}`` payloads or ModifierInstances
            match_type: One of "exact", "at_least", "any_of"

        Returns:
            ValidationResult whose ``valid`` is True iff no errors were recorded
        """
        result = ValidationResult()

        if MatchType.from_value(match_type) is None:
            result.errors.append(f"Invalid match type. Must be {self._match_type_choices()}")

        if not isinstance(required_mods, (list, tuple)):
            result.errors.append("Required mods must be an array")
            return result
        if not required_mods:
            result.errors.append("At least one mod must be specified")
            return result

        seen: List[str] = []
        for index, entry in enumerate(required_mods, start=1):
            instance = self._parse_entry(index, entry, result)
            if instance is None:
                continue

            if instance.acronym in seen:
                result.errors.append(f'Mod {index}: "{instance.acronym}" is specified multiple times')
                continue
            seen.append(instance.acronym)

            if not self._catalog.is_supported(instance.acronym):
                result.errors.append(f'Mod {index}: "{instance.acronym}" is not a supported mod')
                continue

            result.errors.extend(self._settings.validate(instance))

        for report in self._conflicts.detect(seen):
            result.errors.append(report.message())

        return result

    @staticmethod
    def _parse_entry(index: int, entry: Any, result: ValidationResult):
        if isinstance(entry, ModifierInstance):
            return entry
        if not isinstance(entry, dict):
            result.errors.append(f"Mod {index}: must be an object with an acronym")
            return None

        acronym = entry.get("acronym")
        if not acronym or not isinstance(acronym, str):
            result.errors.append(f"Mod {index}: acronym is required")
            return None
        acronym = acronym.strip().upper()

        settings = entry.get("settings") or {}
        if not isinstance(settings, dict):
            result.errors.append(f"Mod {acronym}: settings must be an object")
            settings = {}
        return ModifierInstance(acronym=acronym, settings=dict(settings))

    @staticmethod
    def _match_type_choices() -> str:
        choices = [f'"{m.value}"' for m in MatchType]
        return ", ".join(choices[:-1]) + f', or {choices[-1]}'
