"""Read-only triple pattern index backed by an rdflib graph."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Self

from rdflib import Graph
from rdflib.term import Node

from ._terms import Triple

__all__ = ["TripleIndex"]


@dataclass(frozen=True, slots=True)
class TripleIndex:
    """Answers (subject, predicate, object) pattern queries over a set of triples.

    Any position of a pattern may be ``None`` to act as a wildcard. The
    index never changes after construction, so one instance can be shared by
    concurrent evaluations.

    Attributes:
        graph: The rdflib graph holding the triples. Treat as read-only.

    """

    graph: Graph = field(default_factory=Graph)

    @classmethod
    def from_triples(cls, triples: Iterable[Triple]) -> Self:
        """Build an index from (subject, predicate, object) triples.

        Args:
            triples: Triples of rdflib terms. Duplicates collapse, as in any RDF graph.

        Returns:
            A new TripleIndex instance.

        Example:
            >>> from rdflib import Literal, URIRef
            >>> ex = "http://ex.org/"
            >>> index = TripleIndex.from_triples([(URIRef(ex + "5"), URIRef(ex + "value"), Literal("5"))])
            >>> index.objects(URIRef(ex + "5"), URIRef(ex + "value"))
            [rdflib.term.Literal('5')]

        """
        graph = Graph()
        for triple in triples:
            graph.add(triple)
        return cls(graph=graph)

    def match(
        self,
        subject: Node | None = None,
        predicate: Node | None = None,
        obj: Node | None = None,
    ) -> list[Triple]:
        """Get all triples matching a pattern.

        Args:
            subject: Subject to match, or None for any.
            predicate: Predicate to match, or None for any.
            obj: Object to match, or None for any.

        Returns:
            Matching triples, in store iteration order.

        """
        return list(self.graph.triples((subject, predicate, obj)))

    def objects(self, subject: Node | None, predicate: Node | None) -> list[Node]:
        """Get the objects of all triples ``(subject, predicate, ?)``."""
        return [o for _, _, o in self.match(subject, predicate, None)]

    def subjects(self, predicate: Node | None, obj: Node | None) -> list[Node]:
        """Get the subjects of all triples ``(?, predicate, obj)``."""
        return [s for s, _, _ in self.match(None, predicate, obj)]

    def first_object(self, subject: Node | None, predicate: Node | None) -> Node | None:
        """Get the object of the first triple ``(subject, predicate, ?)``, or None."""
        for _, _, o in self.graph.triples((subject, predicate, None)):
            return o
        return None

    def __len__(self) -> int:
        """Return the number of triples in the index."""
        return len(self.graph)

    def __contains__(self, triple: Triple) -> bool:
        """Check if a triple is in the index."""
        return triple in self.graph
