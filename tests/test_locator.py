"""Tests for locating the declared path root."""

import logging

import pytest
from conftest import EX, path_triples
from rdflib import BNode

from treepath._errors import NoPathFoundError
from treepath._index import TripleIndex
from treepath._locator import locate_path_root


def index(body: str) -> TripleIndex:
    return TripleIndex.from_triples(path_triples(body))


class TestLocatePathRoot:
    def test_shacl_path(self):
        assert locate_path_root(index("ex:r sh:path ex:value .")) == EX.value

    def test_tree_path(self):
        assert locate_path_root(index("ex:r tree:path ex:value .")) == EX.value

    def test_shacl_path_takes_priority(self):
        paths = index("ex:a tree:path ex:value . ex:b sh:path ex:plus .")
        assert locate_path_root(paths) == EX.plus

    def test_entry_restricts_subject(self):
        paths = index("ex:a tree:path ex:value . ex:b sh:path ex:plus .")
        assert locate_path_root(paths, EX.a) == EX.value
        assert locate_path_root(paths, EX.b) == EX.plus

    def test_blank_node_root(self):
        root = locate_path_root(index("ex:r sh:path ( ex:plus ex:value ) ."))
        assert isinstance(root, BNode)

    def test_ambiguous_declarations_pick_first(self, caplog):
        paths = index("ex:r sh:path ex:value, ex:plus .")
        with caplog.at_level(logging.DEBUG, logger="treepath"):
            root = locate_path_root(paths, EX.r)
        assert root in {EX.value, EX.plus}
        assert "declarations" in caplog.text

    def test_missing_declaration(self):
        with pytest.raises(NoPathFoundError, match="No"):
            locate_path_root(index("ex:r ex:unrelated ex:value ."))

    def test_missing_declaration_for_entry(self):
        with pytest.raises(NoPathFoundError, match="ex.org/other"):
            locate_path_root(index("ex:r sh:path ex:value ."), EX.other)
