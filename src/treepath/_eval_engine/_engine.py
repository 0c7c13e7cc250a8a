"""Recursive evaluation of SHACL property paths."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from treepath._errors import PathDepthExceededError
from treepath._index import TripleIndex
from treepath._locator import locate_path_root
from treepath._mapping import PathMapping
from treepath._terms import coerce_entry_term, coerce_optional_entry_term
from treepath._vocab import DEFAULT_MAX_DEPTH, PATH_STEP_KINDS, QUANTIFIER_PREDICATES, RDF, PathKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rdflib.term import Node

    from treepath._terms import Triple

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PathEvaluator:
    """Interprets a path graph against a data graph.

    The evaluator holds no per-call state, so a single instance can evaluate
    any number of paths and entry nodes.

    Attributes:
        data_graph: Index over the data graph.
        path_graph: Index over the graph encoding the path expression.
        max_depth: Maximum nesting of dispatches before evaluation fails.
            Guards against cyclic path graphs.

    """

    data_graph: TripleIndex
    path_graph: TripleIndex
    max_depth: int = DEFAULT_MAX_DEPTH

    def evaluate(
        self,
        path_node: Node,
        mapping: PathMapping,
        *,
        inverted: bool = False,
        in_alternative: bool = False,
    ) -> list[PathMapping]:
        """Evaluate the path expression rooted at ``path_node``.

        Args:
            path_node: Node of the path graph to interpret.
            mapping: Input state; only its data nodes are read.
            inverted: Follow predicate steps from object to subject.
            in_alternative: The node is a cell of an ``sh:alternativePath``
                list, so each remaining cell is an independent branch.

        Returns:
            One mapping per result branch. Flattening their data nodes in
            order gives the reached terms.

        Raises:
            PathDepthExceededError: If nesting exceeds ``max_depth`` or the
                interpreter recursion limit.

        """
        try:
            return self._dispatch(
                path_node,
                mapping.at(path_node),
                inverted=inverted,
                in_alternative=in_alternative,
                depth=0,
            )
        except RecursionError as e:
            # max_depth above what the interpreter stack allows
            raise PathDepthExceededError(self.max_depth, path_node) from e

    def _dispatch(
        self,
        path_node: Node,
        mapping: PathMapping,
        *,
        inverted: bool,
        in_alternative: bool,
        depth: int,
    ) -> list[PathMapping]:
        if depth > self.max_depth:
            raise PathDepthExceededError(self.max_depth, path_node)

        edges = self.path_graph.match(path_node, None, None)
        if not edges:
            return [self._predicate_step(path_node, mapping, inverted=inverted)]

        logger.debug(
            "Dispatching %s (inverted=%s, alternative=%s, depth=%d)",
            path_node,
            inverted,
            in_alternative,
            depth,
        )

        results: list[PathMapping] = []
        for _, predicate, target in edges:
            match PATH_STEP_KINDS.get(predicate):
                case PathKind.INVERSE:
                    results.extend(
                        self._dispatch(
                            target,
                            mapping.at(target),
                            inverted=not inverted,
                            in_alternative=False,
                            depth=depth + 1,
                        ),
                    )
                case PathKind.ALTERNATIVE:
                    results.extend(
                        self._dispatch(
                            target,
                            mapping.at(target),
                            inverted=inverted,
                            in_alternative=True,
                            depth=depth + 1,
                        ),
                    )
                case PathKind.SEQUENCE:
                    results.extend(
                        self._sequence_step(
                            path_node,
                            target,
                            mapping,
                            inverted=inverted,
                            in_alternative=in_alternative,
                            depth=depth,
                        ),
                    )
                case _ if predicate in QUANTIFIER_PREDICATES:
                    logger.warning(
                        "%s paths are not supported; %s yields no results",
                        QUANTIFIER_PREDICATES[predicate],
                        path_node,
                    )
                case _:
                    # rdf:rest is consumed by the sequence step; anything else is ignored.
                    pass
        return results

    def _predicate_step(self, predicate: Node, mapping: PathMapping, *, inverted: bool) -> PathMapping:
        reached: list[Node] = []
        for node in mapping.data_nodes:
            if inverted:
                reached.extend(self.data_graph.subjects(predicate, node))
            else:
                reached.extend(self.data_graph.objects(node, predicate))
        logger.debug(
            "Predicate %s%s: %d -> %d node(s)",
            "^" if inverted else "",
            predicate,
            len(mapping.data_nodes),
            len(reached),
        )
        return PathMapping(path_node=predicate, data_nodes=tuple(reached))

    def _sequence_step(  # noqa: PLR0913
        self,
        cell: Node,
        head: Node,
        mapping: PathMapping,
        *,
        inverted: bool,
        in_alternative: bool,
        depth: int,
    ) -> list[PathMapping]:
        # The head is always a single step; only the tail may continue an
        # alternative enumeration.
        head_results = self._dispatch(
            head,
            mapping.at(head),
            inverted=inverted,
            in_alternative=False,
            depth=depth + 1,
        )

        rest = self.path_graph.first_object(cell, RDF.rest)
        if rest is None or rest == RDF.nil:
            return head_results

        if in_alternative:
            # Each remaining cell is another branch over the original input.
            tail_results = self._dispatch(
                rest,
                mapping.at(rest),
                inverted=inverted,
                in_alternative=True,
                depth=depth + 1,
            )
            return [*head_results, *tail_results]

        results: list[PathMapping] = []
        for head_result in head_results:
            results.extend(
                self._dispatch(
                    rest,
                    head_result.at(rest),
                    inverted=inverted,
                    in_alternative=False,
                    depth=depth + 1,
                ),
            )
        return results


def evaluate_path_mappings(
    data_triples: Iterable[Triple],
    path_triples: Iterable[Triple],
    object_entry: object,
    path_entry: object = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[PathMapping]:
    """Evaluate a property path and return the un-flattened result mappings.

    Takes the same arguments as `evaluate_path`.
    """
    start = coerce_entry_term(object_entry, parameter="object_entry")
    entry = coerce_optional_entry_term(path_entry, parameter="path_entry")

    evaluator = PathEvaluator(
        data_graph=TripleIndex.from_triples(data_triples),
        path_graph=TripleIndex.from_triples(path_triples),
        max_depth=max_depth,
    )
    root = locate_path_root(evaluator.path_graph, entry)

    logger.debug("Evaluating path %s from %s", root, start)
    return evaluator.evaluate(root, PathMapping(path_node=root, data_nodes=(start,)))


def evaluate_path(
    data_triples: Iterable[Triple],
    path_triples: Iterable[Triple],
    object_entry: object,
    path_entry: object = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Node]:
    """Evaluate a SHACL or TREE property path over a data graph.

    This is a pure function:
    1. Coerces the entry points into terms
    2. Locates the path declared in the path graph (``sh:path`` or ``tree:path``)
    3. Walks the path from ``object_entry`` through the data graph
    4. Flattens all result branches, in order, without deduplication

    Args:
        data_triples: Triples of the data graph the path is evaluated over.
        path_triples: Triples of the graph containing the path expression.
        object_entry: IRI string, ``URIRef`` or ``BNode`` of the start node in the data graph.
        path_entry: IRI string, ``URIRef`` or ``BNode`` carrying the path
            declaration, or None to search the whole path graph.
        max_depth: Nesting limit for the evaluator.

    Returns:
        The terms reached by the path. May contain duplicates.

    Raises:
        InvalidInputError: If an entry point is not a valid IRI or blank node.
        NoPathFoundError: If the path graph declares no path.
        PathDepthExceededError: If the path graph nests deeper than ``max_depth``.

    Example:
        >>> terms = evaluate_path(data, path, "http://ex.org/5")
        >>> [str(t) for t in terms]
        ['7']

    """
    mappings = evaluate_path_mappings(
        data_triples,
        path_triples,
        object_entry,
        path_entry,
        max_depth=max_depth,
    )
    return [term for mapping in mappings for term in mapping.data_nodes]
