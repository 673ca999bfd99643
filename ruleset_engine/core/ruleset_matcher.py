"""
Ruleset Matcher - Decides whether a score's applied mods satisfy a ruleset.
"""

import logging
from typing import Any, Dict, List, Optional

from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.models.enums import MatchType
from ruleset_engine.models.modifier import ModifierInstance
from ruleset_engine.models.ruleset import MatchVerdict, Ruleset, parse_mod_list
from ruleset_engine.utils.supported_mods import PREFERRED_EXTRA_MODS
from ruleset_engine.utils.values import first_settings_difference, lookup_display

logger = logging.getLogger(__name__)


class RulesetMatcher:
    """Evaluates applied mods against a ruleset under its match policy.

    Required entries are always walked in ruleset order so the failure reason
    is deterministic; the verdict itself does not depend on order.
    """

    def __init__(self, catalog: ModifierCatalog):
        self._catalog = catalog
        self._policies = {
            MatchType.EXACT: self._match_exact,
            MatchType.AT_LEAST: self._match_at_least,
            MatchType.ANY_OF: self._match_any_of,
        }

    def matches(self, ruleset: Ruleset, applied_mods: Any) -> MatchVerdict:
        """
        Decide qualification for one score.

        Args:
            ruleset: Ruleset to satisfy
            applied_mods: Mods the score used (ModifierInstances or ``{acronym, settings}`` dicts)

        Returns:
            MatchVerdict; ``reason`` explains the first failing required entry
        """
        applied = parse_mod_list(applied_mods)

        # No requirements: everything qualifies (only reachable when validation is bypassed)
        if not ruleset.required_mods:
            return MatchVerdict(qualifies=True)

        policy = ruleset.policy
        if policy is None:
            return MatchVerdict(qualifies=False, reason=f"Invalid match type: {ruleset.match_type}")

        unsupported = [mod.acronym for mod in applied if not self._catalog.is_supported(mod.acronym)]
        if unsupported:
            logger.debug(f"Applied mods include unsupported acronyms: {', '.join(unsupported)}")

        reason = self._policies[policy](ruleset.required_mods, applied)
        return MatchVerdict(qualifies=reason is None, reason=reason)

    def _match_exact(self, required: List[ModifierInstance], applied: List[ModifierInstance]) -> Optional[str]:
        if len(applied) != len(required):
            return f"Must have exactly {len(required)} mod(s), but has {len(applied)}"
        for mod in required:
            reason = self._check_entry(mod, applied, whole=True)
            if reason:
                return reason
        return None

    def _match_at_least(self, required: List[ModifierInstance], applied: List[ModifierInstance]) -> Optional[str]:
        for mod in required:
            reason = self._check_entry(mod, applied, whole=False)
            if reason:
                return reason
        return None

    def _match_any_of(self, required: List[ModifierInstance], applied: List[ModifierInstance]) -> Optional[str]:
        first_failure = None
        for mod in required:
            reason = self._check_entry(mod, applied, whole=False)
            if reason is None:
                return None
            first_failure = first_failure or reason

        names = ", ".join(mod.acronym for mod in required)
        return f"Must have at least one of: {names} with correct settings ({first_failure})"

    def _check_entry(self, required: ModifierInstance, applied: List[ModifierInstance],
                     whole: bool) -> Optional[str]:
        """Return why ``required`` is not satisfied by ``applied``, or None when it is."""
        if not self._catalog.is_supported(required.acronym):
            logger.debug(f"Required mod {required.acronym} is not in the catalog")
            return f"Unsupported mod: {required.acronym}"

        match = next((mod for mod in applied if mod.acronym == required.acronym), None)
        if match is None:
            return f"Missing required mod: {required.acronym}"

        key = first_settings_difference(required.settings, match.settings, whole=whole)
        if key is not None:
            return (f"Mod {required.acronym}: {key} should be {lookup_display(required.settings, key)}, "
                    f"but is {lookup_display(match.settings, key)}")
        return None

    def qualifying_examples(self, required_mods: Any, match_type: Any) -> List[Dict[str, Any]]:
        """
        Build illustrative mod lists that would satisfy the ruleset.

        Returns:
            List of ``{"description": str, "mods": [{acronym, settings}]}``
        """
        required = parse_mod_list(required_mods)
        if not required:
            return [{"description": "Any mods (no requirements)", "mods": []}]

        mods = [mod.to_dict() for mod in required]
        policy = MatchType.from_value(match_type)
        examples: List[Dict[str, Any]] = []

        if policy == MatchType.EXACT:
            examples.append({"description": "Exact match - only these mods", "mods": mods})

        elif policy == MatchType.AT_LEAST:
            examples.append({"description": "Minimum required mods", "mods": mods})
            if len(required) == 1:
                extra = self._pick_extra_mod(required)
                if extra:
                    examples.append({"description": "Required mods + additional mod", "mods": mods + [extra]})

        elif policy == MatchType.ANY_OF:
            for index, mod in enumerate(required, start=1):
                suffix = " with settings" if mod.settings else ""
                examples.append({"description": f"Option {index}: {mod.acronym}{suffix}", "mods": [mod.to_dict()]})
            if len(required) > 1:
                extra = self._pick_extra_mod(required, present=required[:1])
                if extra:
                    examples.append({
                        "description": "Multiple options + additional mod",
                        "mods": [required[0].to_dict(), extra],
                    })

        return examples

    def _pick_extra_mod(self, required: List[ModifierInstance],
                        present: Optional[List[ModifierInstance]] = None) -> Optional[Dict[str, Any]]:
        """First mod (preferring common ones) that is neither required nor conflicting with ``present``."""
        taken = {mod.acronym for mod in required}
        present_acronyms = [mod.acronym for mod in (present if present is not None else required)]
        candidates = PREFERRED_EXTRA_MODS + [mod.acronym for mod in self._catalog]
        for acronym in candidates:
            if acronym in taken or not self._catalog.is_supported(acronym):
                continue
            if any(self._catalog.conflicts_between(acronym, other) for other in present_acronyms):
                continue
            return {"acronym": acronym, "settings": {}}
        return None
