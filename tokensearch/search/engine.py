"""Token search engine: index once, search many times."""

from collections.abc import Callable, Sequence
import copy
import logging
from typing import Any, Mapping

from .config import PreprocessCheck, SearchConfig
from .index import build_index
from .scorer import score_entry
from .tokenize import tokenize_query
from .types import Candidate, ScoredResult, SearchIndex

log = logging.getLogger(__name__)


class TokenSearch:
    """Fuzzy token search over a small, fixed collection of records.

    The index is built at construction and never mutated afterwards, so a
    single instance can serve concurrent readers. Use ``rebuild`` to index
    a new collection and swap the returned instance in.
    """

    def __init__(
        self,
        collection: Sequence[Mapping[str, Any]],
        config: SearchConfig | None = None,
        **overrides: Any,
    ):
        base = config or SearchConfig()
        self.config = base.with_overrides(**overrides)
        self.index: SearchIndex = build_index(collection, self.config)

    def __len__(self) -> int:
        return len(self.index)

    def query_tokens(self, query: str | None) -> tuple[str, ...]:
        """Tokens a search string resolves to under this configuration."""
        return tokenize_query(query, self.config.delimiter, self.config.max_query_tokens)

    def search(
        self,
        query: str | None,
        *,
        threshold: float | None = None,
        preprocess_check: PreprocessCheck | None = None,
    ) -> list[ScoredResult]:
        """Rank records against a free-text query.

        Args:
            query: Search text; empty or blank text yields no results
            threshold: Overrides the configured threshold for this call
            preprocess_check: Overrides the configured record filter

        Returns:
            Fresh list of results, best match (normalized score 0) first
        """
        config = self.config
        effective_threshold = (
            config.threshold
            if threshold is None
            else SearchConfig.check_threshold(threshold)
        )
        check = preprocess_check or config.preprocess_check

        needles = self.query_tokens(query)
        if not needles:
            log.debug("Empty query, nothing to search")
            return []

        candidates: list[Candidate] = []
        max_score = 0
        for entry in self.index.entries:
            if not check(entry.record):
                continue

            raw_score = score_entry(entry.tokens, needles, config.scorer)
            if not raw_score:
                continue

            max_score = max(max_score, raw_score)
            candidates.append(Candidate(record=entry.record, raw_score=raw_score))

        results = config.postprocessor(
            candidates,
            max_score,
            effective_threshold,
            unique=config.unique,
            keys=self.index.keys,
        )
        ranked = config.sorter(results, config.tie_break_key)

        log.debug(
            f"Query {list(needles)}: candidates={len(candidates)} "
            f"max_score={max_score} results={len(ranked)}"
        )
        return ranked

    def find_first(
        self, predicate: Callable[[Mapping[str, Any]], bool]
    ) -> dict[str, Any] | None:
        """Return a copy of the first record matching predicate, in collection order."""
        for entry in self.index.entries:
            if predicate(entry.record):
                return copy.deepcopy(dict(entry.record))
        return None

    def rebuild(self, collection: Sequence[Mapping[str, Any]]) -> "TokenSearch":
        """Index another collection with the same configuration."""
        return TokenSearch(collection, self.config)
