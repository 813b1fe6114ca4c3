"""Typo-tolerant suggestions for queries that match nothing.

Lookups are exact-token, so ``loadsh`` finds nothing. Rather than loosen
matching, the CLI offers "did you mean" suggestions drawn from the index
vocabulary within a small edit distance of the term.

Edit budget by term length:
- 1-2 chars: none (too many false positives)
- 3-5 chars: 1 edit
- 6+ chars: 2 edits
"""

from __future__ import annotations

from collections.abc import Iterable


def edit_distance(source: str, target: str, limit: int | None = None) -> int:
    """Levenshtein distance between ``source`` and ``target``.

    When ``limit`` is given the computation stops as soon as the distance is
    known to exceed it and ``limit + 1`` is returned.

    Examples:
        >>> edit_distance("lodash", "loadsh")
        2
        >>> edit_distance("", "jquery")
        6
    """
    if len(source) < len(target):
        source, target = target, source
    if not target:
        return len(source)
    if limit is not None and len(source) - len(target) > limit:
        return limit + 1

    previous = list(range(len(target) + 1))
    for row, source_char in enumerate(source, start=1):
        current = [row]
        for col, target_char in enumerate(target, start=1):
            substitution = previous[col - 1] + (source_char != target_char)
            current.append(min(previous[col] + 1, current[col - 1] + 1, substitution))
        if limit is not None and min(current) > limit:
            return limit + 1
        previous = current
    if limit is not None and previous[-1] > limit:
        return limit + 1
    return previous[-1]


def edit_budget(term_length: int) -> int:
    if term_length <= 2:
        return 0
    if term_length <= 5:
        return 1
    return 2


def suggest_tokens(term: str, vocabulary: Iterable[str], *, limit: int = 5) -> list[str]:
    """Vocabulary tokens close to ``term``, closest first.

    Comparison ignores case. Ties are broken alphabetically. An exact
    (case-insensitive) hit is returned with distance 0, which lets the CLI
    point out casing mistakes on case-sensitive stores.
    """
    needle = term.strip().casefold()
    budget = edit_budget(len(needle))
    if not needle or limit <= 0:
        return []

    scored: list[tuple[int, str]] = []
    for token in vocabulary:
        candidate = token.casefold()
        if abs(len(candidate) - len(needle)) > budget:
            continue
        distance = edit_distance(needle, candidate, budget)
        if distance <= budget:
            scored.append((distance, token))

    scored.sort(key=lambda item: (item[0], item[1].casefold(), item[1]))
    return [token for _, token in scored[:limit]]
