"""Ignore rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from pathspec.pattern import Pattern

from project_publish.ignore.patterns import match


@dataclass(frozen=True)
class Rule:
    pattern: str
    negated: bool
    anchored_to_root: bool
    directory_only: bool
    source_order: int
    matcher: Optional[Pattern] = field(compare=False, repr=False)
    raw: str = field(default="", compare=False)
    source: Optional[Path] = field(default=None, compare=False)
    line_number: Optional[int] = field(default=None, compare=False)

    def matches(self, candidate: str, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        return match(self.matcher, candidate + "/" if is_dir else candidate)

    def location(self) -> str:
        if self.source is None:
            return f"<rules>:{self.line_number or self.source_order + 1}"
        return f"{self.source}:{self.line_number}"


@dataclass(frozen=True)
class RuleSet:
    rules: tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def is_empty(self) -> bool:
        return not self.rules

    def extend(self, other: RuleSet) -> RuleSet:
        """Return a new set with ``other`` appended, renumbering its order."""
        offset = len(self.rules)
        shifted = tuple(
            Rule(
                pattern=rule.pattern,
                negated=rule.negated,
                anchored_to_root=rule.anchored_to_root,
                directory_only=rule.directory_only,
                source_order=offset + index,
                matcher=rule.matcher,
                raw=rule.raw,
                source=rule.source,
                line_number=rule.line_number,
            )
            for index, rule in enumerate(other.rules)
        )
        return RuleSet(rules=self.rules + shifted)
