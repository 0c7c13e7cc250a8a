"""Loading RDF sources into triples."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING
from xml.sax import SAXException

from rdflib import Graph
from rdflib.exceptions import ParserError
from rdflib.plugin import PluginException
from rdflib.plugins.parsers.ntriples import ParseError as NTriplesParseError
from rdflib.util import guess_format

from ._errors import GraphLoadError

if TYPE_CHECKING:
    from ._terms import Triple

logger = logging.getLogger(__name__)

DEFAULT_RDF_FORMAT = "turtle"


def load_graph(source: Path, rdf_format: str | None = None) -> Graph:
    """Parse an RDF file into an rdflib graph.

    Args:
        source: Path to the RDF file.
        rdf_format: rdflib parser name (e.g. ``turtle``, ``nt``, ``xml``).
            Guessed from the file extension when omitted, falling back to Turtle.

    Returns:
        The parsed graph. Its namespace manager keeps the prefixes declared in the file.

    Raises:
        GraphLoadError: If the file cannot be read or parsed.

    """
    if rdf_format is None:
        rdf_format = guess_format(str(source)) or DEFAULT_RDF_FORMAT

    logger.debug("Parsing %s as %s", source, rdf_format)
    graph = Graph()
    try:
        graph.parse(source, format=rdf_format)
    except (OSError, SyntaxError, ValueError, ParserError, NTriplesParseError, PluginException, SAXException) as e:
        msg = f"Failed to load RDF from {source}: {e}"
        raise GraphLoadError(msg) from e

    logger.debug("Loaded %d triples from %s", len(graph), source)
    return graph


def load_triples(source: Path, rdf_format: str | None = None) -> list[Triple]:
    """Parse an RDF file into a list of triples.

    See `load_graph` for the arguments.
    """
    return list(load_graph(source, rdf_format))


def parse_triples(data: str, rdf_format: str = DEFAULT_RDF_FORMAT) -> list[Triple]:
    """Parse RDF text (Turtle by default) into a list of triples.

    Raises:
        GraphLoadError: If the text cannot be parsed.

    """
    graph = Graph()
    try:
        graph.parse(data=data, format=rdf_format)
    except (SyntaxError, ValueError, ParserError, NTriplesParseError, PluginException, SAXException) as e:
        msg = f"Failed to parse RDF data: {e}"
        raise GraphLoadError(msg) from e
    return list(graph)
