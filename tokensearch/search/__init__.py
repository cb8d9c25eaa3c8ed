"""Deterministic in-memory token search."""

from .config import SearchConfig
from .engine import TokenSearch
from .errors import (
    ConstructionError,
    EmptyCollectionError,
    FieldMissingError,
    NoIndexedKeysError,
)
from .tokenize import DEFAULT_DELIMITER, tokenize, tokenize_query
from .types import IndexedEntry, ScoredResult, SearchIndex

__all__ = [
    "ConstructionError",
    "DEFAULT_DELIMITER",
    "EmptyCollectionError",
    "FieldMissingError",
    "IndexedEntry",
    "NoIndexedKeysError",
    "ScoredResult",
    "SearchConfig",
    "SearchIndex",
    "TokenSearch",
    "tokenize",
    "tokenize_query",
]
