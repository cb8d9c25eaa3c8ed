"""Deterministic tokenization for indexing and queries."""

import re

# Whitespace, dashes and underscores separate tokens.
DEFAULT_DELIMITER = re.compile(r"[\s\-_]+")

Delimiter = str | re.Pattern


def _split(text: str, delimiter: Delimiter) -> list[str]:
    if isinstance(delimiter, re.Pattern):
        return delimiter.split(text)
    return text.split(delimiter)


def tokenize(text: str | None, delimiter: Delimiter = DEFAULT_DELIMITER) -> tuple[str, ...]:
    """Split text into lowercase tokens.

    A ``str`` delimiter is matched literally, a compiled pattern as a regex.
    Empty fragments (leading/trailing delimiters, empty input) are dropped.
    """
    if text is None:
        return ()
    normalized = text.strip().lower()
    if not normalized:
        return ()
    return tuple(token for token in _split(normalized, delimiter) if token)


def tokenize_query(
    text: str | None,
    delimiter: Delimiter = DEFAULT_DELIMITER,
    max_tokens: int = 5,
) -> tuple[str, ...]:
    """Tokenize a search string: dedupe by first occurrence, then truncate."""
    if max_tokens < 1:
        return ()
    seen: set[str] = set()
    tokens: list[str] = []
    for token in tokenize(text, delimiter):
        if token in seen:
            continue
        seen.add(token)
        tokens.append(token)
        if len(tokens) >= max_tokens:
            break
    return tuple(tokens)
