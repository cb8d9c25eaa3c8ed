"""Deterministic ordering of search results."""

from typing import Protocol

from .types import ScoredResult

DEFAULT_TIE_BREAK_KEY = "name"


class Sorter(Protocol):
    def __call__(
        self,
        results: list[ScoredResult],
        tie_break_key: str | None = DEFAULT_TIE_BREAK_KEY,
    ) -> list[ScoredResult]: ...


def _tie_break_value(result: ScoredResult, tie_break_key: str | None) -> str:
    if tie_break_key is None:
        return ""
    value = result.record.get(tie_break_key)
    if value is None:
        return ""
    return str(value)


def _result_sort_key(
    result: ScoredResult, tie_break_key: str | None
) -> tuple[float, str]:
    return (result.normalized_score, _tie_break_value(result, tie_break_key))


def sort_results(
    results: list[ScoredResult],
    tie_break_key: str | None = DEFAULT_TIE_BREAK_KEY,
) -> list[ScoredResult]:
    """Sort by normalized score, then by the tie-break field.

    The sort is stable, so remaining ties keep collection order.
    """
    return sorted(results, key=lambda result: _result_sort_key(result, tie_break_key))
