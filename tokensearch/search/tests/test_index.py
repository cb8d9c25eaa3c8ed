"""Tests for index construction."""

import pytest

from tokensearch.search.config import SearchConfig
from tokensearch.search.errors import (
    ConstructionError,
    EmptyCollectionError,
    FieldMissingError,
    NoIndexedKeysError,
)
from tokensearch.search.index import build_index


class TestBuildIndex:
    @pytest.fixture
    def config(self):
        return SearchConfig(keys=("name", "room"))

    def test_tokens_union_over_keys(self, config):
        index = build_index(
            [{"name": "Ceiling Light", "room": "Living-Room"}], config
        )

        entry = index.entries[0]
        assert entry.tokens == frozenset({"ceiling", "light", "living", "room"})
        assert entry.position == 0
        assert index.keys == ("name", "room")

    def test_duplicate_tokens_collapse(self, config):
        index = build_index([{"name": "Light Light", "room": "light"}], config)

        assert index.entries[0].tokens == frozenset({"light"})

    def test_empty_collection_fails(self, config):
        with pytest.raises(EmptyCollectionError):
            build_index([], config)
        with pytest.raises(EmptyCollectionError):
            build_index(None, config)

    def test_no_keys_fails(self):
        with pytest.raises(NoIndexedKeysError):
            build_index([{"name": "Lamp"}], SearchConfig(keys=()))

    def test_missing_field_fails_with_key_and_position(self, config):
        collection = [
            {"name": "Lamp", "room": "Hall"},
            {"name": "Fan"},
        ]

        with pytest.raises(FieldMissingError) as excinfo:
            build_index(collection, config)

        assert excinfo.value.key == "room"
        assert excinfo.value.record_index == 1
        assert isinstance(excinfo.value, ConstructionError)

    def test_non_string_field_fails(self, config):
        with pytest.raises(FieldMissingError):
            build_index([{"name": "Lamp", "room": 12}], config)

    def test_source_collection_is_not_mutated(self, config):
        record = {"name": "Lamp", "room": "Hall"}
        collection = [record]

        index = build_index(collection, config)

        assert record == {"name": "Lamp", "room": "Hall"}
        assert collection == [record]
        record["name"] = "Changed"
        assert index.entries[0].record["name"] == "Lamp"

    def test_index_records_are_read_only(self, config):
        index = build_index([{"name": "Lamp", "room": "Hall"}], config)

        with pytest.raises(TypeError):
            index.entries[0].record["name"] = "Other"

    def test_nested_values_are_copied(self, config):
        record = {"name": "Lamp", "room": "Hall", "meta": {"ports": [1, 2]}}

        index = build_index([record], config)
        record["meta"]["ports"].append(3)

        assert index.entries[0].record["meta"] == {"ports": [1, 2]}
