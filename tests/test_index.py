"""Tests for TripleIndex."""

from conftest import EX
from rdflib import Graph, Literal

from treepath._index import TripleIndex

TRIPLES = [
    (EX.a, EX.p, EX.b),
    (EX.a, EX.p, EX.c),
    (EX.a, EX.q, Literal("x")),
    (EX.d, EX.p, EX.b),
]


class TestTripleIndexConstruction:
    def test_empty_index(self):
        index = TripleIndex()
        assert len(index) == 0
        assert index.match() == []

    def test_from_triples(self):
        index = TripleIndex.from_triples(TRIPLES)
        assert len(index) == 4
        assert (EX.a, EX.q, Literal("x")) in index

    def test_duplicates_collapse(self):
        index = TripleIndex.from_triples([*TRIPLES, TRIPLES[0]])
        assert len(index) == 4

    def test_wraps_existing_graph(self):
        graph = Graph()
        graph.add(TRIPLES[0])
        assert TripleIndex(graph=graph).match() == [TRIPLES[0]]


class TestTripleIndexQueries:
    def test_match_by_subject(self):
        index = TripleIndex.from_triples(TRIPLES)
        assert sorted(index.match(EX.a)) == sorted(TRIPLES[:3])

    def test_match_by_predicate_and_object(self):
        index = TripleIndex.from_triples(TRIPLES)
        assert sorted(index.match(None, EX.p, EX.b)) == sorted([TRIPLES[0], TRIPLES[3]])

    def test_match_nothing(self):
        index = TripleIndex.from_triples(TRIPLES)
        assert index.match(EX.b) == []

    def test_objects(self):
        index = TripleIndex.from_triples(TRIPLES)
        assert sorted(index.objects(EX.a, EX.p)) == [EX.b, EX.c]

    def test_subjects(self):
        index = TripleIndex.from_triples(TRIPLES)
        assert sorted(index.subjects(EX.p, EX.b)) == [EX.a, EX.d]

    def test_first_object(self):
        index = TripleIndex.from_triples(TRIPLES)
        assert index.first_object(EX.a, EX.q) == Literal("x")
        assert index.first_object(EX.a, EX.missing) is None
