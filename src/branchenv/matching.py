"""Wildcard matching of branch names against environment patterns.

Patterns are plain strings where ``*`` stands for any run of characters,
including none. Every other character is literal::

    develop    -> ^develop$
    feature/*  -> ^feature/.*$
    v1.2.*     -> ^v1\\.2\\..*$

Patterns are tried in descending string order, not by length. ``"z"`` is
therefore tried before ``"feature/*"`` and ``"release/*"`` before ``"*"``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Mapping, Optional

__all__ = [
    "WILDCARD",
    "find_match",
    "match_branch",
    "sort_patterns",
    "wildcard_to_regex",
]

WILDCARD = "*"


@lru_cache(maxsize=256)
def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` into a regex.

    The result is meant for :meth:`re.Pattern.fullmatch` so the pattern has to
    cover the entire branch name.
    """

    segments = (re.escape(segment) for segment in pattern.split(WILDCARD))
    return re.compile(".*".join(segments), re.DOTALL)


def sort_patterns(patterns: Iterable[str]) -> list[str]:
    """Return ``patterns`` in the order they are tried."""

    return sorted(patterns, reverse=True)


def find_match(branch: str, patterns: Iterable[str]) -> Optional[str]:
    """Return the first pattern that matches ``branch``, if any."""

    for pattern in sort_patterns(patterns):
        if wildcard_to_regex(pattern).fullmatch(branch):
            return pattern
    return None


def match_branch(branch: str, mapping: Mapping[str, str], fallback: str) -> str:
    """Return the environment mapped to ``branch`` or ``fallback``."""

    pattern = find_match(branch, mapping)
    if pattern is None:
        return fallback
    return mapping[pattern]
