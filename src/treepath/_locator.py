"""Discovery of the path expression root in a path graph."""

import logging

from rdflib.term import Node

from ._errors import NoPathFoundError
from ._index import TripleIndex
from ._vocab import PATH_DECLARATIONS

logger = logging.getLogger(__name__)


def locate_path_root(path_graph: TripleIndex, entry: Node | None = None) -> Node:
    """Find the root node of the path expression declared in ``path_graph``.

    ``sh:path`` is looked up first and ``tree:path`` second. With an
    ``entry`` only declarations on that subject are considered; without one
    the whole path graph is searched. If several declarations match, the
    first one wins.

    Args:
        path_graph: Index over the path graph.
        entry: Subject carrying the path declaration, or None for any subject.

    Returns:
        The object of the first matching declaration.

    Raises:
        NoPathFoundError: If no declaration exists in either vocabulary.

    """
    for predicate in PATH_DECLARATIONS:
        roots = path_graph.objects(entry, predicate)
        if not roots:
            continue
        if len(roots) > 1:
            logger.debug("Found %d %s declarations, using %s", len(roots), predicate, roots[0])
        logger.debug("Path root located via %s: %s", predicate, roots[0])
        return roots[0]

    where = f"on {entry.n3()}" if entry is not None else "in path graph"
    names = " or ".join(p.n3() for p in PATH_DECLARATIONS)
    msg = f"No {names} declaration found {where}"
    raise NoPathFoundError(msg)
