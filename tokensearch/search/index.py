"""Build the immutable token index over a record collection."""

from collections.abc import Sequence
import copy
import logging
from types import MappingProxyType
from typing import Any, Mapping

from .config import SearchConfig
from .errors import EmptyCollectionError, FieldMissingError, NoIndexedKeysError
from .tokenize import Delimiter, tokenize
from .types import IndexedEntry, SearchIndex

log = logging.getLogger(__name__)


def record_tokens(
    record: Mapping[str, Any],
    keys: Sequence[str],
    delimiter: Delimiter,
    *,
    position: int = 0,
) -> frozenset[str]:
    """Union of tokens over the indexed keys of one record."""
    tokens: set[str] = set()
    for key in keys:
        value = record.get(key) if isinstance(record, Mapping) else None
        if not isinstance(value, str):
            raise FieldMissingError(key, position)
        tokens.update(tokenize(value, delimiter))
    return frozenset(tokens)


def build_index(
    collection: Sequence[Mapping[str, Any]] | None,
    config: SearchConfig,
) -> SearchIndex:
    """Tokenize every record once.

    Records are deep-copied behind a read-only view so neither the
    caller's collection nor the index can alter the other.

    Raises:
        EmptyCollectionError: the collection has no records
        NoIndexedKeysError: no indexed keys are configured
        FieldMissingError: a record lacks a string value for an indexed key
    """
    if not collection:
        raise EmptyCollectionError()
    if not config.keys:
        raise NoIndexedKeysError()

    entries: list[IndexedEntry] = []
    for position, record in enumerate(collection):
        tokens = record_tokens(record, config.keys, config.delimiter, position=position)
        entries.append(
            IndexedEntry(
                position=position,
                record=MappingProxyType(copy.deepcopy(dict(record))),
                tokens=tokens,
            )
        )

    log.info(f"Indexed {len(entries)} records on keys {list(config.keys)}")
    return SearchIndex(entries=tuple(entries), keys=config.keys)
