"""Utterance normalization and tokenization.

    >>> normalize("  Turn ON the Kitchen-Fan, please! ")
    'turn on the kitchen fan please'
    >>> tokenize("turn on the fan").bigrams
    ['turn on', 'on the', 'the fan']
"""

import re

from homevoice.nlu.parse import Tokens

_PUNCT_RE = re.compile(r"[^\w\s]")
_SPACE_RE = re.compile(r"\s+")


def normalize(raw):
    """Lowercase, turn punctuation into spaces, collapse whitespace."""
    t = _PUNCT_RE.sub(" ", raw.lower())
    return _SPACE_RE.sub(" ", t).strip()


def tokenize(normalized):
    """Split a normalized command into words, bigrams and trigrams.

    Bigrams and trigrams aren't used by the resolver yet; they're kept so
    phrase-level matching can be added without touching callers.
    """
    # "".split(" ") would give [""], which then substring-matches everything
    words = normalized.split(" ") if normalized else []
    bigrams = [f"{words[i]} {words[i + 1]}" for i in range(len(words) - 1)]
    trigrams = [f"{words[i]} {words[i + 1]} {words[i + 2]}"
                for i in range(len(words) - 2)]
    return Tokens(words=words, bigrams=bigrams, trigrams=trigrams)
