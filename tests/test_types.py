"""Tests for core data types."""

import dataclasses

import pytest
from intacct_functions.types import ReadPolicy, TagCase, Verb, VerbFamily


def test_verb_values():
    """Test verbs carry the API's spelling."""
    assert Verb("readByQuery") is Verb.READ_BY_QUERY
    assert Verb("readMore") is Verb.READ_MORE
    assert Verb("readByName") is Verb.READ_BY_NAME
    assert Verb.CREATE.value == "create"
    assert len(Verb) == 7


def test_verb_rejects_unknown_value():
    """Test Verb lookup fails for unknown names."""
    with pytest.raises(ValueError):
        Verb("bogus")


def test_verb_is_case_sensitive():
    """Test verbs are matched exactly."""
    with pytest.raises(ValueError):
        Verb("READBYQUERY")


def test_verb_family_values():
    """Test VerbFamily members."""
    assert {family.value for family in VerbFamily} == {"read", "write"}


def test_tag_case_preserve():
    """Test PRESERVE keeps keys as given."""
    assert TagCase.PRESERVE.apply("RecordNo") == "RecordNo"


def test_tag_case_upper():
    """Test UPPER upper-cases keys."""
    assert TagCase.UPPER.apply("RecordNo") == "RECORDNO"


def test_tag_case_stringifies_keys():
    """Test non-string keys are converted to strings."""
    assert TagCase.PRESERVE.apply(42) == "42"


def test_tag_case_from_value():
    """Test TagCase can be looked up by its value."""
    assert TagCase("upper") is TagCase.UPPER


def test_read_policy_defaults():
    """Test ReadPolicy with no required keys."""
    policy = ReadPolicy(candidates=("keys",))
    assert policy.candidates == ("keys",)
    assert policy.required == ()


def test_read_policy_is_frozen():
    """Test ReadPolicy cannot be modified."""
    policy = ReadPolicy(candidates=("keys",), required=("keys",))
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.required = ()
