"""Unit tests for local configuration file loading."""
from pathlib import Path
from unittest.mock import patch

import pytest

from configenv.core.exceptions import ConfigFileError
from configenv.loader import merge_file_values, parse_flat_yaml, read_flat_yaml
from configenv.store import ValueStore


class TestParseFlatYaml:

    def test_scalars_are_kept_as_text(self):
        values = parse_flat_yaml("name: demo\nport: 8080\nenabled: true\nratio: 0.5\n")

        assert values == {"name": "demo", "port": "8080", "enabled": "true", "ratio": "0.5"}

    def test_quoted_values(self):
        values = parse_flat_yaml("greeting: 'hello: world'\n")

        assert values == {"greeting": "hello: world"}

    def test_empty_value_is_empty_string(self):
        assert parse_flat_yaml("key:\n") == {"key": ""}

    def test_null_values_are_empty_strings(self):
        values = parse_flat_yaml("a: null\nb: ~\nc: NULL\nd: Null\n")

        assert values == {"a": "", "b": "", "c": "", "d": ""}

    def test_quoted_null_is_kept_as_text(self):
        values = parse_flat_yaml("a: 'null'\nb: \"~\"\nc: nullable\n")

        assert values == {"a": "null", "b": "~", "c": "nullable"}

    def test_empty_document(self):
        assert parse_flat_yaml("") == {}
        assert parse_flat_yaml("# only a comment\n") == {}

    def test_keeps_file_order(self):
        assert list(parse_flat_yaml("b: 1\na: 2\nc: 3\n")) == ["b", "a", "c"]

    def test_nested_mapping_rejected(self):
        with pytest.raises(ValueError, match="value for key db must be a string"):
            parse_flat_yaml("db:\n  host: localhost\n")

    def test_sequence_rejected(self):
        with pytest.raises(ValueError, match="must be a string"):
            parse_flat_yaml("hosts:\n  - a\n  - b\n")

    def test_top_level_must_be_mapping(self):
        with pytest.raises(ValueError, match="expected a mapping"):
            parse_flat_yaml("- a\n- b\n")

    def test_duplicate_key_rejected(self):
        with pytest.raises(ValueError, match="key a already set"):
            parse_flat_yaml("a: 1\na: 2\n")


class TestReadFlatYaml:

    def test_missing_file_returns_none(self, tmp_path):
        assert read_flat_yaml(tmp_path / "does-not-exist.yaml") is None

    def test_reads_file(self, tmp_path):
        path = tmp_path / "local-config.yaml"
        path.write_text("k: b\n", encoding="utf-8")

        assert read_flat_yaml(path) == {"k": "b"}

    def test_unreadable_path(self, tmp_path):
        # a directory exists but cannot be read as a file
        with pytest.raises(ConfigFileError, match="error reading local configuration yaml file"):
            read_flat_yaml(tmp_path)

    def test_stat_failure_is_wrapped(self, tmp_path):
        # Arrange
        path = tmp_path / "local-config.yaml"

        # Act / Assert
        with patch.object(Path, "stat", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(ConfigFileError, match="error reading local configuration yaml file") as exc_info:
                read_flat_yaml(path)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_parent_is_a_file_counts_as_missing(self, tmp_path):
        parent = tmp_path / "not-a-dir"
        parent.write_text("x", encoding="utf-8")

        assert read_flat_yaml(parent / "local-config.yaml") is None

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("a: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigFileError, match="both keys and values must be strings") as exc_info:
            read_flat_yaml(path)
        assert exc_info.value.__cause__ is not None

    def test_nested_structure_error(self, tmp_path):
        path = tmp_path / "nested.yaml"
        path.write_text("a:\n  b: c\n", encoding="utf-8")

        with pytest.raises(ConfigFileError, match="error parsing local configuration flat yaml file"):
            read_flat_yaml(path)


class TestMergeFileValues:

    def test_known_and_unknown_keys_are_merged(self):
        # Arrange
        store = ValueStore({"k": "a"})

        # Act
        unknown = merge_file_values({"k": "b", "extra": "x"}, {"k"}, store)

        # Assert
        assert store.get("k") == "b"
        assert store.get("extra") == "x"
        assert unknown == ["extra"]

    def test_strict_mode_rejects_unknown_keys_without_merging(self):
        store = ValueStore({"k": "a"})

        with pytest.raises(ConfigFileError, match="unknown configuration key extra, bailing out"):
            merge_file_values({"k": "b", "extra": "x"}, {"k"}, store, strict_unknown_keys=True)

        assert store.to_dict() == {"k": "a"}
