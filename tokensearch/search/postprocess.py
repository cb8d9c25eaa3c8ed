"""Score normalization, threshold cutoff and identity deduplication."""

from collections.abc import Sequence
import copy
from typing import Any, Mapping, Protocol

from .types import Candidate, ScoredResult


class Postprocessor(Protocol):
    def __call__(
        self,
        candidates: Sequence[Candidate],
        max_score: int,
        threshold: float,
        *,
        unique: bool,
        keys: Sequence[str],
    ) -> list[ScoredResult]: ...


def normalize_score(raw_score: int, max_score: int) -> float:
    """Map a raw score to [0, 1]; the best candidate of a query maps to 0."""
    return 1.0 - raw_score / max_score


def identity_key(record: Mapping[str, Any], keys: Sequence[str]) -> str:
    """Concatenate indexed field values in key order."""
    return "".join(str(record[key]) for key in keys)


def postprocess(
    candidates: Sequence[Candidate],
    max_score: int,
    threshold: float,
    *,
    unique: bool = False,
    keys: Sequence[str] = (),
) -> list[ScoredResult]:
    """Normalize candidates and keep those within the threshold.

    Args:
        candidates: Entries with a non-zero raw score, in collection order
        max_score: Highest raw score among the candidates
        threshold: Largest normalized score that is kept
        unique: Keep only the first candidate per identity key
        keys: Indexed keys forming the identity key

    Returns:
        Results in candidate order, each with its own copy of the record
    """
    if not candidates or max_score <= 0:
        return []

    results: list[ScoredResult] = []
    seen: set[str] = set()

    for candidate in candidates:
        normalized = normalize_score(candidate.raw_score, max_score)
        if normalized > threshold:
            continue

        if unique:
            ident = identity_key(candidate.record, keys)
            if ident in seen:
                continue
            seen.add(ident)

        results.append(
            ScoredResult(
                record=copy.deepcopy(dict(candidate.record)),
                raw_score=candidate.raw_score,
                normalized_score=normalized,
                max_score=max_score,
            )
        )

    return results
