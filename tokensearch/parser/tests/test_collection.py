"""Tests for collection file loading."""

import json

import pytest

from tokensearch.parser.collection import CollectionFileError, load_collection


class TestLoadCollection:
    def test_yaml_list_of_records(self, tmp_path):
        path = tmp_path / "devices.yaml"
        path.write_text(
            "- name: Living Room Light\n  id: aa:01\n- name: Bedroom Light\n",
            encoding="utf-8",
        )

        loaded = load_collection(path)

        assert loaded.path == path
        assert [r["name"] for r in loaded.records] == [
            "Living Room Light",
            "Bedroom Light",
        ]
        assert loaded.keys == []
        assert loaded.options == {}

    def test_mapping_with_keys_and_options(self, tmp_path):
        path = tmp_path / "devices.yaml"
        path.write_text(
            "keys: [name, room]\n"
            "options:\n"
            "  threshold: 0.5\n"
            "  unique: true\n"
            "records:\n"
            "  - {name: Lamp, room: Hall}\n",
            encoding="utf-8",
        )

        loaded = load_collection(path)

        assert loaded.keys == ["name", "room"]
        assert loaded.options == {"threshold": 0.5, "unique": True}
        assert loaded.records == [{"name": "Lamp", "room": "Hall"}]

    def test_single_key_string(self, tmp_path):
        path = tmp_path / "devices.yaml"
        path.write_text("keys: name\nrecords: [{name: Lamp}]\n", encoding="utf-8")

        assert load_collection(path).keys == ["name"]

    def test_json_file(self, tmp_path):
        path = tmp_path / "devices.json"
        path.write_text(json.dumps([{"name": "Garage Door"}]), encoding="utf-8")

        assert load_collection(path).records == [{"name": "Garage Door"}]

    def test_empty_file_has_no_records(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_collection(path).records == []

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("records: [unclosed\n", encoding="utf-8")

        with pytest.raises(CollectionFileError, match="invalid YAML"):
            load_collection(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CollectionFileError, match="Cannot read"):
            load_collection(tmp_path / "missing.yaml")

    @pytest.mark.parametrize(
        "content",
        [
            "just a string\n",
            "records: {name: Lamp}\n",
            "- name: Lamp\n- plain\n",
            "keys: [1, 2]\nrecords: []\n",
            "options: [threshold]\nrecords: []\n",
        ],
    )
    def test_malformed_documents(self, tmp_path, content):
        path = tmp_path / "bad.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(CollectionFileError):
            load_collection(path)
