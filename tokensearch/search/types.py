"""Typed contracts for the token search pipeline."""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class IndexedEntry:
    position: int
    record: Mapping[str, Any]
    tokens: frozenset[str]


@dataclass(frozen=True)
class SearchIndex:
    entries: tuple[IndexedEntry, ...]
    keys: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Candidate:
    """An entry that overlapped the query (raw score above zero)."""

    record: Mapping[str, Any]
    raw_score: int


@dataclass(frozen=True)
class ScoredResult:
    record: dict[str, Any]
    raw_score: int
    normalized_score: float
    max_score: int
