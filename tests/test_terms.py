"""Tests for entry term coercion."""

import pytest
from rdflib import BNode, Literal, URIRef

from treepath._errors import InvalidInputError
from treepath._terms import coerce_entry_term, coerce_optional_entry_term


class TestCoerceEntryTerm:
    def test_string_becomes_iri(self):
        term = coerce_entry_term("http://ex.org/5")
        assert term == URIRef("http://ex.org/5")
        assert isinstance(term, URIRef)

    @pytest.mark.parametrize("term", [URIRef("http://ex.org/5"), BNode("b0")])
    def test_node_terms_pass_through(self, term):
        assert coerce_entry_term(term) is term

    def test_relative_iri_is_accepted(self):
        assert coerce_entry_term("ex:5") == URIRef("ex:5")

    @pytest.mark.parametrize("value", ["http://ex.org/a<b", 'http://ex.org/"q"', "http://ex.org/a\tb"])
    def test_illegal_iri_characters(self, value):
        with pytest.raises(InvalidInputError, match="not a valid IRI"):
            coerce_entry_term(value)

    def test_literal_is_rejected(self):
        with pytest.raises(InvalidInputError, match="Literal"):
            coerce_entry_term(Literal("http://ex.org/5"))

    def test_parameter_name_in_message(self):
        with pytest.raises(InvalidInputError, match="--entry"):
            coerce_entry_term(None, parameter="--entry")


class TestCoerceOptionalEntryTerm:
    def test_none_is_absent(self):
        assert coerce_optional_entry_term(None) is None

    def test_value_is_coerced(self):
        assert coerce_optional_entry_term("http://ex.org/r") == URIRef("http://ex.org/r")

    def test_invalid_value_raises(self):
        with pytest.raises(InvalidInputError):
            coerce_optional_entry_term(12)
