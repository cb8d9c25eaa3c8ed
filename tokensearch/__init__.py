"""tokensearch - fuzzy token search over small record collections."""

from .search import (
    ConstructionError,
    EmptyCollectionError,
    FieldMissingError,
    NoIndexedKeysError,
    ScoredResult,
    SearchConfig,
    TokenSearch,
)

__all__ = [
    "ConstructionError",
    "EmptyCollectionError",
    "FieldMissingError",
    "NoIndexedKeysError",
    "ScoredResult",
    "SearchConfig",
    "TokenSearch",
]
