"""
Setting Validator - Checks a mod's settings against the catalog's type and range rules.
"""

from typing import Any, List

from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.models.enums import SettingType
from ruleset_engine.models.modifier import ModifierInstance, SettingSpec
from ruleset_engine.utils.values import display_value, format_number, is_finite_number, is_number, is_whole_number


class SettingValidator:
    """Validates the settings of one mod instance; collects every failure."""

    def __init__(self, catalog: ModifierCatalog):
        self._catalog = catalog

    def validate(self, instance: ModifierInstance) -> List[str]:
        """
        Validate ``instance.settings``.

        Every key is checked: not allowed for the mod, wrong type, then out of
        range. A type failure makes the range check inapplicable for that key.

        Returns:
            List of error strings prefixed with the mod acronym (empty when valid)
        """
        definition = self._catalog.lookup(instance.acronym)
        if definition is None:
            return [f'Mod {instance.acronym}: "{instance.acronym}" is not a supported mod']

        errors: List[str] = []
        for key, value in instance.settings.items():
            prefix = f'Mod {definition.acronym}: "{key}"'
            if not definition.allows(key):
                errors.append(f'{prefix} is not a valid setting')
                continue

            spec = self._catalog.setting_spec(key)
            if spec is None:
                continue

            type_error = self._check_type(spec, value)
            if type_error:
                errors.append(f'{prefix} {type_error}')
                continue

            errors.extend(f'{prefix} {message}' for message in self._check_range(spec, definition.acronym, value))
        return errors

    @staticmethod
    def _check_type(spec: SettingSpec, value: Any) -> str:
        if spec.setting_type == SettingType.BOOLEAN and not isinstance(value, bool):
            return "must be a boolean"
        if spec.setting_type == SettingType.NUMBER and not is_number(value):
            return "must be a number"
        if spec.setting_type == SettingType.NUMBER and not is_finite_number(value):
            return "must be a finite number"
        if spec.setting_type == SettingType.INTEGER and not is_whole_number(value):
            return "must be an integer"
        if spec.setting_type == SettingType.CHOICE and value not in spec.options:
            options = ", ".join(display_value(option) for option in spec.options)
            return f"must be one of: {options}"
        return ""

    def _check_range(self, spec: SettingSpec, acronym: str, value: Any) -> List[str]:
        if not is_number(value):
            return []
        minimum, maximum = self._catalog.resolve_bounds(acronym, spec.key)
        messages = []
        if minimum is not None and value < minimum:
            messages.append(f"must be at least {format_number(minimum)}")
        if maximum is not None and value > maximum:
            messages.append(f"must be at most {format_number(maximum)}")
        return messages
