"""Named partitions of the measurement set, each rendered as its own sub-report."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Pattern

from .errors import ConfigError
from .models import Metrics


@dataclass(frozen=True)
class Group:
    """A named selection rule over analysed units.

    The name doubles as the output subdirectory; it is not checked here,
    so an unusable name only fails once that directory is created.
    """
    name: str
    match: str
    _pattern: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        try:
            pattern = re.compile(self.match)
        except re.error as e:
            raise ConfigError(f"groups.{self.name}.match", self.match, str(e))
        object.__setattr__(self, "_pattern", pattern)

    def matches(self, unit) -> bool:
        return self._pattern.search(getattr(unit, "name", "")) is not None

    def reduce(self, metrics: Metrics) -> Metrics:
        """Return the subset of *metrics* selected by this group."""
        return metrics.subset(self.matches)


def build_groups(definitions: List[dict]) -> List[Group]:
    """Build groups from ``{"name": ..., "match": ...}`` definitions.

    Order is preserved; duplicated names are rejected.
    """
    groups: List[Group] = []
    seen = set()
    for i, definition in enumerate(definitions or []):
        if not isinstance(definition, dict):
            raise ConfigError(f"groups[{i}]", definition, "expected a mapping")
        name = definition.get("name")
        match = definition.get("match")
        if not isinstance(name, str) or not name:
            raise ConfigError(f"groups[{i}].name", name, "expected a non-empty string")
        if not isinstance(match, str):
            raise ConfigError(f"groups[{i}].match", match, "expected a regular expression")
        if name in seen:
            raise ConfigError(f"groups[{i}].name", name, "duplicated group name")
        seen.add(name)
        groups.append(Group(name=name, match=match))
    return groups
