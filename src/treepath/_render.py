"""Rendering of path graphs in SPARQL property path syntax."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._errors import PathDepthExceededError
from ._vocab import DEFAULT_MAX_DEPTH, PATH_STEP_KINDS, QUANTIFIER_PREDICATES, RDF, PathKind

if TYPE_CHECKING:
    from rdflib.namespace import NamespaceManager
    from rdflib.term import Node

    from ._index import TripleIndex

_QUANTIFIER_SUFFIX = {
    PathKind.ZERO_OR_MORE: "*",
    PathKind.ONE_OR_MORE: "+",
    PathKind.ZERO_OR_ONE: "?",
}


def render_path(
    path_graph: TripleIndex,
    root: Node,
    *,
    namespace_manager: NamespaceManager | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """Render the path expression rooted at ``root`` as a SPARQL property path.

    Quantifier paths are rendered even though they are not evaluated.

    Args:
        path_graph: Index over the path graph.
        root: Root node of the path expression.
        namespace_manager: Used to abbreviate IRIs to prefixed names.
        max_depth: Nesting limit, as for evaluation.

    Returns:
        The rendered expression, e.g. ``(ex:plus|ex:min)/ex:value``.

    Raises:
        PathDepthExceededError: If the path graph nests deeper than ``max_depth``.

    """
    try:
        text, _ = _render(path_graph, root, namespace_manager, max_depth, 0)
    except RecursionError as e:
        raise PathDepthExceededError(max_depth, root) from e
    return text


def _render(
    path_graph: TripleIndex,
    node: Node,
    namespace_manager: NamespaceManager | None,
    max_depth: int,
    depth: int,
) -> tuple[str, bool]:
    """Render one node; the flag tells whether nesting it needs parentheses."""
    if depth > max_depth:
        raise PathDepthExceededError(max_depth, node)

    def nested(target: Node) -> str:
        text, composite = _render(path_graph, target, namespace_manager, max_depth, depth + 1)
        return f"({text})" if composite else text

    rendered: list[tuple[str, bool]] = []
    for _, predicate, target in path_graph.match(node, None, None):
        kind = PATH_STEP_KINDS.get(predicate) or QUANTIFIER_PREDICATES.get(predicate)
        match kind:
            case PathKind.INVERSE:
                rendered.append((f"^{nested(target)}", False))
            case PathKind.ALTERNATIVE:
                items = _list_items(path_graph, target, max_depth)
                rendered.append(("|".join(nested(item) for item in items), len(items) > 1))
            case PathKind.SEQUENCE:
                items = _list_items(path_graph, node, max_depth)
                rendered.append(("/".join(nested(item) for item in items), len(items) > 1))
            case PathKind.ZERO_OR_MORE | PathKind.ONE_OR_MORE | PathKind.ZERO_OR_ONE:
                rendered.append((f"{nested(target)}{_QUANTIFIER_SUFFIX[kind]}", False))
            case _:
                pass

    if not rendered:
        return node.n3(namespace_manager), False
    if len(rendered) == 1:
        return rendered[0]
    return "|".join(f"({text})" if composite else text for text, composite in rendered), True


def _list_items(path_graph: TripleIndex, head: Node, max_depth: int) -> list[Node]:
    """Collect the ``rdf:first`` values of an RDF list."""
    items: list[Node] = []
    cell: Node | None = head
    steps = 0
    while cell is not None and cell != RDF.nil:
        steps += 1
        if steps > max_depth:
            raise PathDepthExceededError(max_depth, cell)
        first = path_graph.first_object(cell, RDF.first)
        if first is not None:
            items.append(first)
        cell = path_graph.first_object(cell, RDF.rest)
    return items
