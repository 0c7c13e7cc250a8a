"""Working state of the path evaluator."""

from dataclasses import dataclass, replace
from typing import Self

from rdflib.term import Node


@dataclass(frozen=True, slots=True)
class PathMapping:
    """A path graph cursor paired with the data nodes reached so far.

    Attributes:
        path_node: The node of the path graph currently being interpreted.
        data_nodes: Data graph nodes reached by the part of the path already
            consumed, in traversal order. Duplicates are kept. May be empty
            when a predicate step found no matching edge.

    """

    path_node: Node
    data_nodes: tuple[Node, ...] = ()

    def at(self, path_node: Node) -> Self:
        """Return a copy of this mapping with the cursor moved to ``path_node``."""
        return replace(self, path_node=path_node)

