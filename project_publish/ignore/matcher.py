"""Last-match-wins evaluation of ignore rules against candidate paths.

Candidate paths are root-relative (``/`` is the project root), use ``/``
separators and end with ``/`` when they denote a directory. A rule is tested
against the path itself and against each of its ancestor directories, so a
rule excluding a directory also covers everything beneath it unless a later
negated rule matches.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from project_publish.ignore.models import Rule, RuleSet
from project_publish.ignore.parser import load_rule_set


def _candidates(path: str) -> list[tuple[str, bool]]:
    is_dir = path.endswith("/")
    segments = [segment for segment in path.split("/") if segment]
    candidates: list[tuple[str, bool]] = []
    for index in range(1, len(segments) + 1):
        candidate_is_dir = index < len(segments) or is_dir
        candidates.append(("/".join(segments[:index]), candidate_is_dir))
    return candidates


def _rule_matches(rule: Rule, candidates: list[tuple[str, bool]]) -> bool:
    return any(rule.matches(text, is_dir) for text, is_dir in candidates)


def deciding_rule(rule_set: RuleSet, path: str) -> Optional[Rule]:
    candidates = _candidates(path)
    if not candidates:
        return None
    for rule in reversed(rule_set.rules):
        if _rule_matches(rule, candidates):
            return rule
    return None


def is_ignored(rule_set: RuleSet, path: str) -> bool:
    rule = deciding_rule(rule_set, path)
    return rule is not None and not rule.negated


class PathFilter:
    def __init__(self, rule_set: RuleSet | None = None) -> None:
        self._rule_set = rule_set or RuleSet()

    @classmethod
    def from_files(cls, paths: Sequence[Path]) -> "PathFilter":
        return cls(load_rule_set(paths))

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    def is_ignored(self, path: str) -> bool:
        return is_ignored(self._rule_set, path)

    def deciding_rule(self, path: str) -> Optional[Rule]:
        return deciding_rule(self._rule_set, path)

    def may_reinclude_below(self, directory_path: str) -> bool:
        """Whether a path beneath an ignored directory can still be included.

        Every descendant also matches the rule that ignored the directory, so
        only a negated rule defined after it can win.
        """
        rule = self.deciding_rule(directory_path)
        if rule is None or rule.negated:
            return True
        return any(
            later.negated and later.source_order > rule.source_order
            for later in self._rule_set.rules
        )
