"""Exceptions raised while loading and evaluating property paths."""


class TreePathError(Exception):
    """Base class for all treepath errors."""


class InvalidInputError(TreePathError):
    """An entry term is missing, has the wrong kind, or cannot be parsed."""


class NoPathFoundError(TreePathError):
    """No ``sh:path`` or ``tree:path`` declaration exists in the path graph."""


class PathDepthExceededError(TreePathError):
    """Path evaluation recursed deeper than the configured limit.

    This usually means the path graph is cyclic, e.g. an RDF list whose
    ``rdf:rest`` points back to an earlier cell.
    """

    def __init__(self, max_depth: int, path_node: object) -> None:
        self.max_depth = max_depth
        self.path_node = path_node
        super().__init__(f"Path evaluation exceeded maximum depth {max_depth} at {path_node}")


class GraphLoadError(TreePathError):
    """An RDF source could not be read or parsed."""
