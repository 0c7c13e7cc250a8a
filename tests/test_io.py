"""Tests for loading RDF sources."""

from pathlib import Path

import pytest
from conftest import EX, NUMBER_LINE_TTL
from rdflib import Literal

from treepath._errors import GraphLoadError
from treepath._io import load_graph, load_triples, parse_triples


class TestLoadTriples:
    def test_turtle_file(self, tmp_path: Path) -> None:
        source = tmp_path / "data.ttl"
        source.write_text(NUMBER_LINE_TTL)

        triples = load_triples(source)

        assert len(triples) == 28
        assert (EX["5"], EX.value, Literal("5")) in triples

    def test_format_guessed_from_extension(self, tmp_path: Path) -> None:
        source = tmp_path / "data.nt"
        source.write_text('<http://ex.org/5> <http://ex.org/value> "5" .\n')

        assert load_triples(source) == [(EX["5"], EX.value, Literal("5"))]

    def test_unknown_extension_defaults_to_turtle(self, tmp_path: Path) -> None:
        source = tmp_path / "data.txt"
        source.write_text('@prefix ex: <http://ex.org/> .\nex:5 ex:value "5" .\n')

        assert load_triples(source) == [(EX["5"], EX.value, Literal("5"))]

    def test_explicit_format(self, tmp_path: Path) -> None:
        source = tmp_path / "data.txt"
        source.write_text('<http://ex.org/5> <http://ex.org/value> "5" .\n')

        assert load_triples(source, "nt") == [(EX["5"], EX.value, Literal("5"))]

    def test_prefixes_are_kept(self, tmp_path: Path) -> None:
        source = tmp_path / "path.ttl"
        source.write_text("@prefix ex: <http://ex.org/> .\n_:r <http://www.w3.org/ns/shacl#path> ex:value .\n")

        graph = load_graph(source)

        assert EX.value.n3(graph.namespace_manager) == "ex:value"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GraphLoadError, match="Failed to load"):
            load_triples(tmp_path / "missing.ttl")

    def test_syntax_error(self, tmp_path: Path) -> None:
        source = tmp_path / "broken.ttl"
        source.write_text("@prefix ex: <http://ex.org/> .\nex:5 ex:value .\n")

        with pytest.raises(GraphLoadError, match=r"broken\.ttl"):
            load_triples(source)

    def test_unknown_parser(self, tmp_path: Path) -> None:
        source = tmp_path / "data.ttl"
        source.write_text(NUMBER_LINE_TTL)

        with pytest.raises(GraphLoadError):
            load_triples(source, "no-such-format")


class TestParseTriples:
    def test_parse_turtle(self) -> None:
        assert len(parse_triples(NUMBER_LINE_TTL)) == 28

    def test_parse_error(self) -> None:
        with pytest.raises(GraphLoadError, match="Failed to parse"):
            parse_triples("this is not turtle")
