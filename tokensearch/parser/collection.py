"""Loader for record collections stored as YAML or JSON."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


class CollectionFileError(ValueError):
    """The collection file cannot be read as a list of records."""


@dataclass
class LoadedCollection:
    """Records plus the search settings declared next to them."""

    path: Path
    records: list[dict[str, Any]]
    keys: list[str] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)


def _check_records(records: Any, path: Path) -> list[dict[str, Any]]:
    if not isinstance(records, list):
        raise CollectionFileError(f"{path}: records must be a list")
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise CollectionFileError(f"{path}: record {index} is not a mapping")
    return records


def parse_collection(document: Any, path: Path) -> LoadedCollection:
    """Interpret a loaded document.

    Accepted shapes:
        - a list of records
        - a mapping with ``records`` and optional ``keys`` / ``options``
    """
    if document is None:
        return LoadedCollection(path=path, records=[])

    if isinstance(document, list):
        return LoadedCollection(path=path, records=_check_records(document, path))

    if not isinstance(document, dict):
        raise CollectionFileError(f"{path}: expected a list or a mapping")

    records = _check_records(document.get("records", []), path)

    keys = document.get("keys") or []
    if isinstance(keys, str):
        keys = [keys]
    if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
        raise CollectionFileError(f"{path}: keys must be a list of field names")

    options = document.get("options") or {}
    if not isinstance(options, dict):
        raise CollectionFileError(f"{path}: options must be a mapping")

    return LoadedCollection(path=path, records=records, keys=keys, options=options)


def load_collection(path: str | Path) -> LoadedCollection:
    """Read a collection file (JSON is parsed as YAML)."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CollectionFileError(f"Cannot read {path}: {exc}") from exc

    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise CollectionFileError(f"{path}: invalid YAML: {exc}") from exc

    return parse_collection(document, path)
