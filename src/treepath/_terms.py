"""Coercion of user-supplied entry points into RDF terms."""

import re
from typing import TypeAlias

from rdflib import BNode, Literal, URIRef
from rdflib.term import Identifier, Node

from ._errors import InvalidInputError

__all__ = ["EntryTerm", "Triple", "coerce_entry_term", "coerce_optional_entry_term"]

Triple: TypeAlias = tuple[Node, Node, Node]
EntryTerm: TypeAlias = URIRef | BNode

# Characters that can never appear in an IRI reference (RFC 3987).
_INVALID_IRI_CHARS = re.compile(r'[\s<>"{}|\\^`]')


def coerce_entry_term(value: object, *, parameter: str = "entry") -> EntryTerm:
    """Resolve an entry point into a node term.

    Accepted shapes:
    - ``str``: interpreted as an IRI
    - ``URIRef`` / ``BNode``: returned unchanged

    Args:
        value: The raw entry value.
        parameter: Name of the argument, used in error messages.

    Returns:
        The canonical term for ``value``.

    Raises:
        InvalidInputError: If ``value`` is missing, a literal or any other
            term kind, not a string, or a string that is not a valid IRI.

    Example:
        >>> coerce_entry_term("http://ex.org/5")
        rdflib.term.URIRef('http://ex.org/5')

    """
    # Order matters: every rdflib Identifier is also a str.
    match value:
        case None:
            msg = f"Please provide a valid string or term as {parameter} parameter"
            raise InvalidInputError(msg)
        case URIRef() | BNode():
            return value
        case Literal():
            msg = f"Literal {value.n3()} cannot be used as {parameter}; expected an IRI or blank node"
            raise InvalidInputError(msg)
        case Identifier():
            msg = f"Unsupported term type {type(value).__name__} for {parameter}; expected an IRI or blank node"
            raise InvalidInputError(msg)
        case str():
            if not value:
                msg = f"Please provide a valid string or term as {parameter} parameter"
                raise InvalidInputError(msg)
            if _INVALID_IRI_CHARS.search(value):
                msg = f"{value!r} is not a valid IRI for {parameter}"
                raise InvalidInputError(msg)
            return URIRef(value)
        case _:
            msg = f"Unsupported value of type {type(value).__name__} for {parameter}; expected a string or term"
            raise InvalidInputError(msg)


def coerce_optional_entry_term(value: object, *, parameter: str = "entry") -> EntryTerm | None:
    """Like `coerce_entry_term`, but ``None`` means "no entry" and is passed through."""
    if value is None:
        return None
    return coerce_entry_term(value, parameter=parameter)
