"""Key -> group classification.

Groups decide which output destinations receive a key. The classification
is a declared prefix table: the text before the first separator is looked up
in explicit overrides, then in the list of known groups, and anything
unmatched lands in the fallback group.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet


@dataclass(frozen=True)
class GroupClassifier:
    """Deterministic, side-effect free key classifier.

    Attributes:
        known: Prefixes that name their own group (e.g. ``common``, ``mail``).
        overrides: Explicit ``prefix -> group`` assignments.
        fallback: Group for keys whose prefix is not declared.
        separator: Separator ending the prefix.

    Example:
        >>> classify = GroupClassifier(known=frozenset({"common", "mail"}))
        >>> classify("common_save")
        'common'
        >>> classify("dashboard_title")
        'web'
    """

    known: FrozenSet[str] = frozenset()
    overrides: Dict[str, str] = field(default_factory=dict)
    fallback: str = "web"
    separator: str = "_"

    def prefix(self, key: str) -> str:
        return key.split(self.separator, 1)[0]

    def __call__(self, key: str) -> str:
        prefix = self.prefix(key)
        if prefix in self.overrides:
            return self.overrides[prefix]
        if prefix in self.known:
            return prefix
        return self.fallback
