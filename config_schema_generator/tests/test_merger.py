"""
Tests for reconciling fresh extension entries with a persisted schema.
"""

from __future__ import annotations

import json

import pytest

from config_schema_generator.config import WriterConfig
from config_schema_generator.errors import SchemaFileError
from config_schema_generator.schema import (
    ExtensionMerger,
    SchemaExtension,
    SchemaWriter,
    group_by_name,
    load_existing,
)

OWNED = ["OPS", "DocFX"]


def entry(name, source="OPS", type_name="string", **kwargs):
    return SchemaExtension(name=name, type=type_name, nullable=True, from_=source, **kwargs)


class TestGroupByName:
    def test_keys_are_dotted_paths(self):
        grouped = group_by_name([entry("a"), entry("a.b")])
        assert list(grouped) == ["a", "a.b"]

    def test_last_write_wins(self):
        grouped = group_by_name([entry("a", description="first"), entry("a", description="second")])
        assert grouped["a"].description == "second"


class TestLoadExisting:
    """Test cases for load_existing"""

    def test_missing_file_is_empty(self, tmp_path):
        assert load_existing(tmp_path / "schema.json") == {}

    def test_malformed_file_is_fatal(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_existing(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(SchemaFileError):
            load_existing(path)

    def test_entries_are_kept_as_json_objects(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(
            json.dumps(
                {
                    "a.b": {
                        "name": "a.b",
                        "type": "number",
                        "nullable": False,
                        "from": "manual",
                        "description": "Hand written",
                        "owner": "docs-team",
                    }
                }
            ),
            encoding="utf-8",
        )

        existing = load_existing(path)

        assert existing["a.b"] == {
            "name": "a.b",
            "type": "number",
            "nullable": False,
            "from": "manual",
            "description": "Hand written",
            "owner": "docs-team",
        }

    def test_entries_need_no_known_members(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"x": {"name": "x", "from": "manual", "description": "hand written"}, "y": {}}), encoding="utf-8")

        existing = load_existing(path)

        assert existing["x"] == {"name": "x", "from": "manual", "description": "hand written"}
        assert existing["y"] == {}

    def test_entries_must_be_objects(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"x": "string"}), encoding="utf-8")
        with pytest.raises(SchemaFileError):
            load_existing(path)


class TestExtensionMerger:
    """Test cases for ExtensionMerger.merge"""

    def test_fresh_entries_inserted_and_replaced(self):
        existing = {"a": entry("a", description="old")}
        fresh = {"a": entry("a", description="new"), "b": entry("b")}

        result = ExtensionMerger(OWNED).merge(fresh, existing)

        assert result.extensions["a"].description == "new"
        assert "b" in result.extensions
        assert result.added == ["b"]
        assert result.updated == ["a"]

    def test_stale_owned_entry_is_deleted(self):
        existing = {"gone": entry("gone", source="OPS"), "docfx.gone": entry("docfx.gone", source="DocFX")}

        result = ExtensionMerger(OWNED).merge({}, existing)

        assert result.extensions == {}
        assert sorted(result.removed) == ["docfx.gone", "gone"]

    def test_foreign_entry_is_preserved(self):
        manual = entry("manual.key", source="manual", description="kept")
        existing = {"manual.key": manual}

        result = ExtensionMerger(OWNED).merge({"a": entry("a")}, existing)

        assert result.extensions["manual.key"] is manual
        assert result.kept == ["manual.key"]

    def test_entry_without_source_is_foreign(self):
        existing = {"x": SchemaExtension(name="x", type="object")}
        result = ExtensionMerger(OWNED).merge({}, existing)
        assert "x" in result.extensions

    def test_persisted_json_entries(self):
        manual = {"name": "manual.key", "from": "manual"}
        existing = {
            "gone": {"name": "gone", "type": "string", "from": "OPS"},
            "manual.key": manual,
            "odd": {"from": ["OPS"]},
            "bare": {},
        }

        result = ExtensionMerger(OWNED).merge({}, existing)

        assert result.removed == ["gone"]
        assert result.extensions["manual.key"] is manual
        assert sorted(result.kept) == ["bare", "manual.key", "odd"]

    def test_foreign_entry_written_back_verbatim(self, tmp_path):
        path = tmp_path / "schema.json"
        manual = {
            "name": "x",
            "type": "string",
            "nullable": True,
            "from": "manual",
            "tag_id": "Custom",
            "default": None,
            "example": {"nested": [1, None]},
        }
        partial = {"name": "y", "from": "manual", "description": "hand written"}
        path.write_text(json.dumps({"x": manual, "y": partial}), encoding="utf-8")

        result = ExtensionMerger(OWNED).merge({"a": entry("a")}, load_existing(path))
        SchemaWriter().write(path, result.extensions, WriterConfig())

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["x"] == manual
        assert data["y"] == partial
        assert data["a"]["from"] == "OPS"

    def test_foreign_entry_replaced_when_derived_again(self):
        existing = {"a": entry("a", source="manual")}
        result = ExtensionMerger(OWNED).merge({"a": entry("a", source="OPS")}, existing)
        assert result.extensions["a"].from_ == "OPS"

    def test_output_sorted_by_key(self):
        existing = {"z": entry("z", source="manual"), "m": entry("m", source="manual")}
        fresh = {"b.c": entry("b.c"), "a": entry("a"), "b": entry("b")}

        result = ExtensionMerger(OWNED).merge(fresh, existing)

        assert list(result.extensions) == ["a", "b", "b.c", "m", "z"]

    def test_existing_mapping_not_modified(self):
        existing = {"gone": entry("gone")}
        ExtensionMerger(OWNED).merge({}, existing)
        assert "gone" in existing

    def test_merge_is_idempotent(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(
            json.dumps({"manual.key": {"name": "manual.key", "type": "string", "from": "manual", "owner": "me"}}),
            encoding="utf-8",
        )
        fresh = {"a": entry("a", description="A", example=["x"]), "a.b": entry("a.b", source="DocFX", default=1)}
        writer = SchemaWriter()
        config = WriterConfig()

        first = ExtensionMerger(OWNED).merge(fresh, load_existing(path))
        writer.write(path, first.extensions, config)
        first_text = path.read_text(encoding="utf-8")

        second = ExtensionMerger(OWNED).merge(fresh, load_existing(path))
        writer.write(path, second.extensions, config)

        assert path.read_text(encoding="utf-8") == first_text
