from __future__ import annotations

from typing import List

from .textutils import coerce_text


def levenshtein(source: str | None, target: str | None) -> int:
    """
    Character-level edit distance with unit insert, delete and substitute costs.

    Keeps a single rolling row sized ``len(target) + 1``.
    """
    s = coerce_text(source)
    t = coerce_text(target)
    n = len(s)
    m = len(t)
    if not n:
        return m
    if not m:
        return n

    row: List[int] = list(range(m + 1))
    for i in range(1, n + 1):
        prev = row[0]
        row[0] = i
        for j in range(1, m + 1):
            upper = row[j]
            cost = 0 if s[i - 1] == t[j - 1] else 1
            row[j] = min(upper + 1, row[j - 1] + 1, prev + cost)
            prev = upper
    return row[m]
