"""CLI for tokensearch."""

from dataclasses import asdict
import json
import logging
from pathlib import Path
import re

import click

from .parser.collection import CollectionFileError, LoadedCollection, load_collection
from .search.config import SearchConfig
from .search.engine import TokenSearch
from .search.errors import ConstructionError
from .search.ranker import DEFAULT_TIE_BREAK_KEY
from .search.tokenize import tokenize_query

DEFAULT_KEYS = ["name"]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """tokensearch - Fuzzy token search over record collections."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _load(collection_path: Path) -> LoadedCollection:
    try:
        return load_collection(collection_path)
    except CollectionFileError as exc:
        raise SystemExit(str(exc)) from exc


def _build_config(
    loaded: LoadedCollection | None,
    keys: tuple[str, ...],
    overrides: dict,
) -> SearchConfig:
    file_keys = loaded.keys if loaded else []
    options = loaded.options if loaded else {}
    index_keys = list(keys) or file_keys or DEFAULT_KEYS
    try:
        config = SearchConfig.from_mapping(index_keys, options)
        return config.with_overrides(
            **{k: v for k, v in overrides.items() if v is not None}
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


def _build_engine(
    loaded: LoadedCollection,
    keys: tuple[str, ...],
    overrides: dict,
) -> TokenSearch:
    config = _build_config(loaded, keys, overrides)
    try:
        return TokenSearch(loaded.records, config)
    except ConstructionError as exc:
        raise SystemExit(str(exc)) from exc


def _compile_pattern(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise SystemExit(f"Invalid delimiter pattern {pattern!r}: {exc}") from exc


def _display_name(record: dict, keys: list[str]) -> str:
    for key in [DEFAULT_TIE_BREAK_KEY, *keys]:
        value = record.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return "unknown"


@cli.command()
@click.argument("collection", type=click.Path(exists=True, path_type=Path))
@click.argument("query", type=str)
@click.option("--key", "-k", "keys", multiple=True, help="Field to index (repeatable)")
@click.option(
    "--threshold",
    "-t",
    type=float,
    default=None,
    envvar="TOKENSEARCH_THRESHOLD",
    help="Largest normalized score to keep (0 = perfect match only)",
)
@click.option(
    "--max-tokens",
    type=int,
    default=None,
    envvar="TOKENSEARCH_MAX_TOKENS",
    help="How many query tokens are considered",
)
@click.option("--unique", is_flag=True, help="Drop duplicate records")
@click.option("--tie-break-key", default=None, help="Field used to order equal scores")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
def search(
    collection: Path,
    query: str,
    keys: tuple[str, ...],
    threshold: float | None,
    max_tokens: int | None,
    unique: bool,
    tie_break_key: str | None,
    as_json: bool,
):
    """Search a collection file for QUERY."""
    loaded = _load(collection)
    engine = _build_engine(
        loaded,
        keys,
        {
            "threshold": threshold,
            "max_query_tokens": max_tokens,
            "unique": unique or None,
            "tie_break_key": tie_break_key,
        },
    )

    results = engine.search(query)

    if as_json:
        click.echo(json.dumps([asdict(r) for r in results], indent=2, default=str))
        return

    click.echo(f"Searching for: {query} {list(engine.query_tokens(query))}")
    click.echo(f"\nFound {len(results)} results:\n")
    for i, r in enumerate(results, 1):
        name = _display_name(r.record, list(engine.config.keys))
        click.echo(f"{i}. [{r.normalized_score:.3f}] {name} (score {r.raw_score}/{r.max_score})")


@cli.command()
@click.argument("collection", type=click.Path(exists=True, path_type=Path))
@click.option("--field", "-f", "field_name", required=True, help="Field to compare")
@click.option("--value", required=True, help="Value the field must equal")
@click.option("--key", "-k", "keys", multiple=True, help="Field to index (repeatable)")
@click.option("--ignore-case", "-i", is_flag=True, help="Compare case-insensitively")
def find(
    collection: Path,
    field_name: str,
    value: str,
    keys: tuple[str, ...],
    ignore_case: bool,
):
    """Print the first record whose FIELD equals VALUE."""
    loaded = _load(collection)
    engine = _build_engine(loaded, keys, {})

    def matches(record) -> bool:
        candidate = record.get(field_name)
        if candidate is None:
            return False
        if ignore_case:
            return str(candidate).lower() == value.lower()
        return str(candidate) == value

    record = engine.find_first(matches)
    if record is None:
        click.echo(f"No record with {field_name} = {value}", err=True)
        raise SystemExit(1)

    click.echo(json.dumps(record, indent=2, default=str))


@cli.command()
@click.argument("text", type=str)
@click.option(
    "--collection",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Use the delimiter and token limit declared in a collection file",
)
@click.option(
    "--delimiter-pattern", default=None, help="Regex to split on instead"
)
@click.option("--max-tokens", type=int, default=None, help="How many tokens to keep")
def tokens(
    text: str,
    collection: Path | None,
    delimiter_pattern: str | None,
    max_tokens: int | None,
):
    """Show the query tokens TEXT resolves to."""
    loaded = _load(collection) if collection else None
    config = _build_config(loaded, (), {"max_query_tokens": max_tokens})
    if delimiter_pattern is not None:
        config = config.with_overrides(delimiter=_compile_pattern(delimiter_pattern))

    for token in tokenize_query(text, config.delimiter, config.max_query_tokens):
        click.echo(token)


if __name__ == "__main__":
    cli()
