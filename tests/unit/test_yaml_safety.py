"""Tests for YAML parsing DoS safeguards in StatementLoader."""

from __future__ import annotations

import pytest

from ddlforge.parser.loader import _MAX_DOCUMENT_SIZE, StatementLoader, YAMLSafetyError


class TestAnchorRejection:
    """Statement files never need YAML anchors/aliases, so they are rejected."""

    def test_billion_laughs_rejected(self, loader: StatementLoader) -> None:
        yaml = (
            "a: &a ['lol','lol','lol','lol','lol']\n"
            "b: &b [*a,*a,*a,*a,*a]\n"
            "c: &c [*b,*b,*b,*b,*b]\n"
        )
        with pytest.raises(YAMLSafetyError, match="anchors/aliases"):
            loader.load_string(yaml)

    def test_anchor_in_sequence(self, loader: StatementLoader) -> None:
        yaml = "columns:\n  - &col id\n  - *col\n"
        with pytest.raises(YAMLSafetyError, match="anchors/aliases"):
            loader.load_string(yaml)

    def test_ampersand_in_comment_not_rejected(self, loader: StatementLoader) -> None:
        yaml = "# R&D tables\ncreateTable:\n  tableName: t\n"
        raw, _ = loader.load_string(yaml)
        assert raw["createTable"]["tableName"] == "t"


class TestDocumentSize:
    def test_oversized_document_rejected(self, loader: StatementLoader) -> None:
        yaml = "key: " + "x" * (_MAX_DOCUMENT_SIZE + 1) + "\n"
        with pytest.raises(YAMLSafetyError, match="maximum size"):
            loader.load_string(yaml)


class TestNodeCount:
    def test_excessive_node_count_rejected(self, loader: StatementLoader) -> None:
        yaml = "columns:\n" + "".join(f"  - c{i}\n" for i in range(50_001))
        with pytest.raises(YAMLSafetyError, match="node count"):
            loader.load_string(yaml)


class TestLoading:
    def test_empty_document(self, loader: StatementLoader) -> None:
        raw, source_map = loader.load_string("")
        assert raw == {}
        assert source_map.paths == []

    def test_plain_values(self, loader: StatementLoader) -> None:
        raw, _ = loader.load_string("a: 1\nb: true\nc: [x, 2.5]\nd: {e: f}\n")
        assert raw == {"a": 1, "b": True, "c": ["x", 2.5], "d": {"e": "f"}}
        assert type(raw["d"]) is dict
        assert type(raw["c"]) is list

    def test_positions_tracked(self, loader: StatementLoader, sample_statements_yaml: str) -> None:
        _, source_map = loader.load_string(sample_statements_yaml, filename="tables.yaml")
        span = source_map.get("statements[0].createTable.tableName")
        assert span is not None
        assert span.file == "tables.yaml"
        assert span.line == 3
        assert source_map.get("statements[1].createTable.foreignKeys[0].column") is not None

    def test_nearest_falls_back_to_ancestor(
        self, loader: StatementLoader, sample_statements_yaml: str
    ) -> None:
        _, source_map = loader.load_string(sample_statements_yaml)
        span = source_map.nearest("statements[0].createTable.primaryKey.constraintName")
        assert span == source_map.get("statements[0].createTable.primaryKey")

    def test_load_file(self, loader: StatementLoader, tmp_path, sample_statements_yaml) -> None:
        path = tmp_path / "tables.yaml"
        path.write_text(sample_statements_yaml, encoding="utf-8")
        raw, source_map = loader.load(path)
        assert len(raw["statements"]) == 2
        span = source_map.get("statements")
        assert span is not None
        assert span.file == str(path)
