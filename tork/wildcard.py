"""Glob-style matching where ``*`` stands for any run of characters."""

from __future__ import annotations

WILDCARD = "*"


def is_wild_pattern(pattern: str) -> bool:
    """Return True if the pattern contains a wildcard."""
    return WILDCARD in pattern


def match(pattern: str, s: str) -> bool:
    """Return True if ``s`` matches ``pattern`` as a whole."""
    if pattern == WILDCARD:
        return True
    if not pattern:
        return s == ""
    if not is_wild_pattern(pattern):
        return pattern == s

    # previous[j] tells whether the pattern consumed so far matches s[:j].
    previous = [True] + [False] * len(s)
    for pc in pattern:
        is_wild = pc == WILDCARD
        row = [is_wild and previous[0]]
        for j, sc in enumerate(s):
            if is_wild:
                row.append(previous[j] or previous[j + 1] or row[j])
            else:
                row.append(pc == sc and previous[j])
        previous = row
    return previous[-1]