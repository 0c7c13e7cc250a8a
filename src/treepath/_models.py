"""Serializable records of evaluation results."""

from enum import StrEnum, auto
from typing import Self

from pydantic import BaseModel, ConfigDict
from rdflib import BNode, Literal, URIRef
from rdflib.term import Node

__all__ = ["PathResult", "TermKind", "TermRecord"]


class TermKind(StrEnum):
    """The kind of an RDF term."""

    IRI = auto()
    BLANK_NODE = auto()
    LITERAL = auto()


class TermRecord(BaseModel):
    """JSON-friendly description of a single RDF term."""

    model_config = ConfigDict(frozen=True)

    kind: TermKind
    value: str
    datatype: str | None = None
    language: str | None = None

    @classmethod
    def from_term(cls, term: Node) -> Self:
        match term:
            case Literal():
                return cls(
                    kind=TermKind.LITERAL,
                    value=str(term),
                    datatype=str(term.datatype) if term.datatype is not None else None,
                    language=term.language,
                )
            case BNode():
                return cls(kind=TermKind.BLANK_NODE, value=str(term))
            case URIRef():
                return cls(kind=TermKind.IRI, value=str(term))
            case _:
                msg = f"Unsupported term type: {type(term).__name__}"
                raise TypeError(msg)

    def to_term(self) -> Node:
        match self.kind:
            case TermKind.IRI:
                return URIRef(self.value)
            case TermKind.BLANK_NODE:
                return BNode(self.value)
            case TermKind.LITERAL:
                return Literal(
                    self.value,
                    lang=self.language,
                    datatype=URIRef(self.datatype) if self.datatype is not None else None,
                )


class PathResult(BaseModel):
    """Outcome of evaluating one path from one entry node.

    Attributes:
        entry: The data graph node the path was evaluated from.
        path: The path expression in SPARQL property path syntax.
        terms: The reached terms, in traversal order, duplicates kept.

    """

    model_config = ConfigDict(frozen=True)

    entry: TermRecord
    path: str
    terms: list[TermRecord]

    @classmethod
    def from_terms(cls, entry: Node, path: str, terms: list[Node]) -> Self:
        return cls(
            entry=TermRecord.from_term(entry),
            path=path,
            terms=[TermRecord.from_term(t) for t in terms],
        )
