# tests/test_lexicon.py
"""Tests for the read-only lexicon view."""

import json

import pytest

from offdict.core.lexicon import Lexicon, Sense


@pytest.fixture
def lexicon(sample_lexicon):
    return Lexicon(sample_lexicon)


def test_sense_from_dict():
    sense = Sense.from_dict({"definition": "feeling joy", "synonyms": ["glad"]})
    assert sense == Sense("feeling joy", ("glad",))


def test_sense_missing_synonyms():
    assert Sense.from_dict({"definition": "x"}).synonyms == ()


def test_lookup(lexicon):
    entry = lexicon.lookup("bank")

    assert list(entry) == ["noun", "verb"]
    assert entry["noun"][0].definition == "a financial institution"


def test_lookup_not_found(lexicon):
    assert lexicon.lookup("nonexistent") is None


def test_lookup_is_exact(lexicon):
    # callers normalize; the view does not
    assert lexicon.lookup("Happy") is None


def test_empty_entry_is_a_hit():
    assert Lexicon({"happy": {}}).lookup("happy") == {}


def test_lookup_skips_non_sense_fields():
    lexicon = Lexicon({"happy": {"word": "happy", "adj": [{"definition": "feeling joy", "synonyms": []}]}})
    assert list(lexicon.lookup("happy")) == ["adj"]


def test_contains_and_len(lexicon):
    assert "happy" in lexicon
    assert "sad" not in lexicon
    assert len(lexicon) == 3


def test_lookup_does_not_mutate(lexicon, sample_lexicon):
    before = json.dumps(sample_lexicon, sort_keys=True)
    lexicon.lookup("happy")
    assert json.dumps(lexicon.raw, sort_keys=True) == before


def test_rejects_non_object():
    with pytest.raises(ValueError):
        Lexicon([1, 2, 3])


@pytest.mark.parametrize("mapping", [
    {"happy": "not an entry"},
    {"happy": ["adj"]},
    {"happy": {"adj": ["not a sense"]}},
    {"happy": {"adj": [{"definition": 3, "synonyms": []}]}},
    {"happy": {"adj": [{"definition": "feeling joy", "synonyms": "glad"}]}},
])
def test_rejects_malformed_entries(mapping):
    with pytest.raises(ValueError):
        Lexicon(mapping)
