"""
"Did you mean" suggestions for item lookups that miss.

Candidates are ranked with prefix matches first, then by Levenshtein edit
distance. Vocabularies are a few hundred names at most, so every name is
scored on each query.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein

from .models import ascii_lower

DEFAULT_MAX_RESULTS = 3
DEFAULT_MAX_DISTANCE = 2


@dataclass
class Suggestion:
    """A ranked candidate name."""

    name: str
    score: int
    is_prefix: bool
    distance: int

    def sort_key(self) -> tuple[int, bool, str]:
        return (self.score, not self.is_prefix, self.name)


def edit_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance between two strings."""
    return Levenshtein.distance(a, b)


def rank_candidates(query: str, names: Iterable[str]) -> list[Suggestion]:
    """Score every name against the query, best first."""
    query_lower = ascii_lower(query)
    ranked = []
    for name in names:
        name_lower = ascii_lower(name)
        is_prefix = name_lower.startswith(query_lower)
        distance = edit_distance(query_lower, name_lower)
        ranked.append(
            Suggestion(
                name=name,
                score=0 if is_prefix else distance,
                is_prefix=is_prefix,
                distance=distance,
            )
        )
    ranked.sort(key=Suggestion.sort_key)
    return ranked


def suggestions_for(
    query: str,
    entries: Iterable[tuple[str, int]],
    max_results: int = DEFAULT_MAX_RESULTS,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> list[str]:
    """
    Names the user most likely meant by ``query``.

    Args:
        query: The lookup string that found no item
        entries: (display_name, count) pairs, e.g. FrequencyTable.items_sorted_by_name()
        max_results: Maximum number of names to return
        max_distance: Largest edit distance kept for non-prefix candidates

    Returns:
        Up to max_results display names, best first
    """
    results = []
    for candidate in rank_candidates(query, (name for name, _ in entries)):
        if not candidate.is_prefix and candidate.distance > max_distance:
            continue
        results.append(candidate.name)
        if len(results) >= max_results:
            break
    return results
