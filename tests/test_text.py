import pytest

from homevoice.nlu.text import normalize, tokenize


@pytest.mark.parametrize("raw, expected", [
    ("Turn ON the Kitchen Fan", "turn on the kitchen fan"),
    ("  turn   off\tthe lamp  ", "turn off the lamp"),
    ("what's the light's status?", "what s the light s status"),
    ("Light-2, please!!", "light 2 please"),
    ("", ""),
    ("?!...", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", [
    "Turn ON the Kitchen Fan!",
    "  what's   up?? ",
    "a-b_c d.e",
    "",
    "ÉCLAIRAGE du salon",
])
def test_normalize_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_tokenize_ngrams():
    t = tokenize("turn on the kitchen fan")
    assert t.words == ["turn", "on", "the", "kitchen", "fan"]
    assert t.bigrams == ["turn on", "on the", "the kitchen", "kitchen fan"]
    assert t.trigrams == ["turn on the", "on the kitchen", "the kitchen fan"]


def test_tokenize_short():
    t = tokenize("on")
    assert t.words == ["on"]
    assert t.bigrams == []
    assert t.trigrams == []


def test_tokenize_empty_has_no_words():
    t = tokenize("")
    assert t.words == []
    assert t.bigrams == []
    assert t.trigrams == []
