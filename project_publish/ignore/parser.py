"""Parse ignore rule files into rule sets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from project_publish.errors import RuleParseError
from project_publish.ignore.models import Rule, RuleSet
from project_publish.ignore.patterns import compile_pattern

logger = logging.getLogger(__name__)


def parse_rule_line(
    line: str,
    source_order: int,
    source: Optional[Path] = None,
    line_number: Optional[int] = None,
) -> Rule | None:
    text = line.rstrip()
    if not text or text.startswith("#"):
        return None

    raw = text
    negated = text.startswith("!")
    if negated:
        text = text[1:]
    elif text.startswith(("\\!", "\\#")):
        text = text[1:]

    anchored = text.startswith("/")
    if anchored:
        text = text[1:]

    directory_only = text.endswith("/")
    if directory_only:
        text = text.rstrip("/")

    return Rule(
        pattern=text,
        negated=negated,
        anchored_to_root=anchored,
        directory_only=directory_only,
        source_order=source_order,
        matcher=compile_pattern(text, anchored, directory_only),
        raw=raw,
        source=source,
        line_number=line_number,
    )


def parse_rules(
    lines: Iterable[str], source: Optional[Path] = None, start_order: int = 0
) -> RuleSet:
    rules: list[Rule] = []
    for line_number, line in enumerate(lines, start=1):
        rule = parse_rule_line(
            line,
            source_order=start_order + len(rules),
            source=source,
            line_number=line_number,
        )
        if rule is not None:
            rules.append(rule)
    return RuleSet(rules=tuple(rules))


def read_rule_file(path: Path) -> RuleSet:
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise RuleParseError(path, f"not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise RuleParseError(path, exc.strerror or str(exc)) from exc
    return parse_rules(text.split("\n"), source=path)


def load_rule_set(paths: Sequence[Path]) -> RuleSet:
    rule_set = RuleSet()
    for path in paths:
        loaded = read_rule_file(path)
        logger.debug("Loaded %d ignore rules from %s", len(loaded), path)
        rule_set = rule_set.extend(loaded)
    return rule_set


load = load_rule_set
