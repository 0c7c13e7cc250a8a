"""Pytest fixtures shared across all test modules."""

import pytest
from rdflib import Graph, Literal, Namespace

from treepath._io import parse_triples
from treepath._terms import Triple

EX = Namespace("http://ex.org/")

PREFIXES = """
@prefix tree: <https://w3id.org/tree#> .
@prefix sh: <http://www.w3.org/ns/shacl#> .
@prefix rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#> .
@prefix ex: <http://ex.org/> .
"""

# ex:0 .. ex:9 linked by ex:plus (i -> i+1) and ex:min (i -> i-1), each with ex:value "i".
NUMBER_LINE_TTL = PREFIXES + "\n".join(
    [f'ex:{i} ex:value "{i}" .' for i in range(10)]
    + [f"ex:{i} ex:plus ex:{i + 1} ." for i in range(9)]
    + [f"ex:{i} ex:min ex:{i - 1} ." for i in range(1, 10)],
)


def path_graph(body: str) -> Graph:
    """Parse a Turtle path declaration, keeping the prefixes for rendering."""
    return Graph().parse(data=PREFIXES + body, format="turtle")


def path_triples(body: str) -> list[Triple]:
    """Parse a Turtle path declaration with the shared prefixes."""
    return parse_triples(PREFIXES + body)


def values(*numbers: int) -> list[Literal]:
    """The ex:value literals of the given number line nodes."""
    return [Literal(str(n)) for n in numbers]


@pytest.fixture(scope="session")
def number_line() -> list[Triple]:
    """The number line data graph as a list of triples."""
    return parse_triples(NUMBER_LINE_TTL)
