"""Tests for roundtrip XML serialization (arguments → XML → arguments)."""

import pytest

from intacct_functions.serialization import arguments_to_xml, xml_to_arguments


def _roundtrip(arguments):
    return xml_to_arguments(f"<root>{arguments_to_xml(arguments)}</root>")


def test_flat_roundtrip():
    """Test flat string mappings survive a roundtrip."""
    original = {"name": "Acme", "id": "C1"}

    assert _roundtrip(original) == original


def test_nested_roundtrip():
    """Test nested mappings come back isomorphic."""
    original = {
        "name": "Acme",
        "address": {"city": "Reno", "geo": {"lat": "39.5", "lon": "-119.8"}},
        "contact": {"email": "ap@acme.test"},
    }

    restored = _roundtrip(original)

    assert restored == original
    assert list(restored) == list(original)
    assert list(restored["address"]) == list(original["address"])


def test_escaped_roundtrip():
    """Test special characters survive a roundtrip."""
    original = {"name": 'A & B <"quoted">'}

    assert _roundtrip(original) == original


@pytest.mark.parametrize("depth", [1, 5, 50])
def test_deep_roundtrip(depth):
    """Test arbitrarily deep nesting survives a roundtrip."""
    original = "leaf"
    for level in range(depth):
        original = {f"n{level}": original}

    assert _roundtrip(original) == original


def test_repeated_records_roundtrip():
    """Test records sharing a tag come back as a list under that tag."""
    original = {"ENTRIES": [{"LINE": {"AMOUNT": "10"}}, {"LINE": {"AMOUNT": "20"}}]}

    restored = _roundtrip(original)

    assert restored == {"ENTRIES": {"LINE": [{"AMOUNT": "10"}, {"AMOUNT": "20"}]}}


def test_whitespace_roundtrip():
    """Test leading and trailing spaces in values are kept."""
    original = {"name": " Acme ", "address": {"line1": "  12 Main St"}}

    assert _roundtrip(original) == original
