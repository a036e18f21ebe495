"""Compile parsed ignore rules into ``pathspec`` patterns.

The rule flags are folded back into the pattern text: anchored rules get a
leading ``/``, unanchored ones a leading ``**/`` (so a pattern containing a
``/`` still matches at any depth), directory-only rules a trailing ``/``.
Negation is not part of the text; the matcher decides it.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from pathspec.pattern import Pattern, RegexPattern
from pathspec.patterns import GitWildMatchPattern

logger = logging.getLogger(__name__)


def pattern_text(pattern: str, anchored: bool, directory_only: bool) -> str:
    if anchored:
        text = "/" + pattern
    elif pattern == "**" or pattern.startswith("**/"):
        text = pattern
    else:
        text = "**/" + pattern
    if directory_only:
        text += "/"
    return text


def _literal_pattern(pattern: str, anchored: bool, directory_only: bool) -> Pattern:
    prefix = "^" if anchored else "^(?:.+/)?"
    suffix = "/.*$" if directory_only else "(?:/.*)?$"
    return RegexPattern(re.compile(prefix + re.escape(pattern) + suffix), include=True)


def compile_pattern(
    pattern: str, anchored: bool, directory_only: bool = False
) -> Optional[Pattern]:
    """Compile ``pattern`` for root-relative paths without a leading ``/``.

    Returns ``None`` for an empty pattern, which matches nothing. Patterns
    that do not compile fall back to matching their literal text.
    """
    if not pattern:
        return None
    text = pattern_text(pattern, anchored, directory_only)
    try:
        return GitWildMatchPattern(text)
    except (ValueError, re.error) as exc:
        logger.debug("Treating ignore pattern %r as literal text: %s", pattern, exc)
        return _literal_pattern(pattern, anchored, directory_only)


def match(matcher: Optional[Pattern], path: str) -> bool:
    if matcher is None:
        return False
    return matcher.match_file(path) is not None
