"""Lexical overlap scoring between index tokens and query tokens."""

from collections.abc import Iterable, Sequence
from typing import Protocol

EXACT_MATCH_SCORE = 6
PREFIX_MATCH_SCORE = 2
INFIX_MATCH_SCORE = 1
SHORT_NEEDLE_SCORE = 1
SHORT_NEEDLE_LENGTH = 2


class Scorer(Protocol):
    def __call__(self, haystack: str, needles: Sequence[str]) -> int: ...


def score_token(haystack: str, needles: Sequence[str]) -> int:
    """Score every query token (needle) against one index token.

    Per needle: absent 0, shorter than two chars 1, equal 6, prefix 2,
    anywhere else 1.
    """
    score = 0
    for needle in needles:
        position = haystack.find(needle)
        if position == -1:
            continue
        if len(needle) < SHORT_NEEDLE_LENGTH:
            score += SHORT_NEEDLE_SCORE
        elif haystack == needle:
            score += EXACT_MATCH_SCORE
        elif position == 0:
            score += PREFIX_MATCH_SCORE
        else:
            score += INFIX_MATCH_SCORE
    return score


def score_entry(
    tokens: Iterable[str],
    needles: Sequence[str],
    scorer: Scorer = score_token,
) -> int:
    """Raw score of an entry: scorer summed over all of its tokens."""
    if not needles:
        return 0
    return sum(scorer(token, needles) for token in tokens)
