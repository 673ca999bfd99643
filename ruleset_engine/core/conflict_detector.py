"""
Conflict Detector - Reports which conflict groups a set of acronyms violates.
"""

from typing import Iterable, List

from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.models.ruleset import ConflictReport


class ConflictDetector:
    """Checks acronyms against every conflict group independently."""

    def __init__(self, catalog: ModifierCatalog):
        self._catalog = catalog

    def detect(self, acronyms: Iterable[str]) -> List[ConflictReport]:
        """
        Find violated conflict groups.

        Args:
            acronyms: Acronyms in ruleset order. Duplicates are collapsed.

        Returns:
            One report per group that more than one acronym falls into, naming
            the intersecting acronyms in input order. Empty when nothing conflicts.
        """
        ordered = list(dict.fromkeys(a.upper() for a in acronyms if isinstance(a, str)))

        reports = []
        for group_name, members in self._catalog.conflict_groups():
            found = [acronym for acronym in ordered if acronym in members]
            if len(found) > 1:
                reports.append(ConflictReport(group=group_name, acronyms=tuple(found)))
        return reports
