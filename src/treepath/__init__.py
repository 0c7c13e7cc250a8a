"""SHACL and TREE property path evaluation over RDF graphs."""

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "RDF",
    "SH",
    "TREE",
    "GraphLoadError",
    "InvalidInputError",
    "NoPathFoundError",
    "PathDepthExceededError",
    "PathEvaluator",
    "PathKind",
    "PathMapping",
    "PathResult",
    "TermKind",
    "TermRecord",
    "TreePathError",
    "TripleIndex",
    "coerce_entry_term",
    "evaluate_path",
    "evaluate_path_mappings",
    "load_graph",
    "load_triples",
    "locate_path_root",
    "parse_triples",
    "render_path",
]

from ._errors import GraphLoadError, InvalidInputError, NoPathFoundError, PathDepthExceededError, TreePathError
from ._eval_engine import PathEvaluator, evaluate_path, evaluate_path_mappings
from ._index import TripleIndex
from ._io import load_graph, load_triples, parse_triples
from ._locator import locate_path_root
from ._mapping import PathMapping
from ._models import PathResult, TermKind, TermRecord
from ._render import render_path
from ._terms import coerce_entry_term
from ._vocab import DEFAULT_MAX_DEPTH, RDF, SH, TREE, PathKind
