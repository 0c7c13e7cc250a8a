"""Vocabulary recognized in path graphs.

All tables here are built once at import time and are read-only.
"""

from enum import StrEnum, auto
from types import MappingProxyType

from rdflib import URIRef
from rdflib.namespace import RDF, SH, Namespace

TREE = Namespace("https://w3id.org/tree#")

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "PATH_DECLARATIONS",
    "PATH_STEP_KINDS",
    "QUANTIFIER_PREDICATES",
    "RDF",
    "SH",
    "TREE",
    "PathKind",
]

# Depth of nested dispatches allowed before evaluation fails closed.
DEFAULT_MAX_DEPTH = 256


class PathKind(StrEnum):
    """The shape of a path graph node that is not a bare predicate."""

    INVERSE = auto()  # sh:inversePath
    ALTERNATIVE = auto()  # sh:alternativePath
    SEQUENCE = auto()  # RDF list cell (rdf:first / rdf:rest)
    ZERO_OR_MORE = auto()
    ONE_OR_MORE = auto()
    ZERO_OR_ONE = auto()


# Predicates declaring the path root, in lookup priority order.
PATH_DECLARATIONS: tuple[URIRef, ...] = (SH.path, TREE.path)

# Outgoing edges of a path node that the evaluator knows how to traverse.
PATH_STEP_KINDS: MappingProxyType[URIRef, PathKind] = MappingProxyType(
    {
        SH.inversePath: PathKind.INVERSE,
        SH.alternativePath: PathKind.ALTERNATIVE,
        RDF.first: PathKind.SEQUENCE,
    },
)

# Recognized but not traversed.
QUANTIFIER_PREDICATES: MappingProxyType[URIRef, PathKind] = MappingProxyType(
    {
        SH.zeroOrMorePath: PathKind.ZERO_OR_MORE,
        SH.oneOrMorePath: PathKind.ONE_OR_MORE,
        SH.zeroOrOnePath: PathKind.ZERO_OR_ONE,
    },
)
