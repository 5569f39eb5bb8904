"""Text preprocessing: turning document content into word sets.

Tokens are separated by runs of ASCII whitespace (space, tab, newline,
carriage return, form feed, vertical tab) and compared by exact string
equality. No case folding, stemming, or punctuation stripping is
applied, so ``"Buy"`` and ``"buy"`` are distinct words, and other
Unicode spaces such as ``\\xa0`` stay inside a token.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")


def unique_words(text: str) -> frozenset[str]:
    """Return the set of distinct whitespace-separated tokens in *text*.

    Empty or whitespace-only input yields an empty set.

    Example::

        >>> sorted(unique_words("buy now buy"))
        ['buy', 'now']
    """
    return frozenset(token for token in _WHITESPACE_RE.split(text) if token)


def sorted_words(words: Iterable[str]) -> tuple[str, ...]:
    """De-duplicate *words* and return them in sorted order.

    Raises:
        TypeError: If *words* is a single string rather than a collection
            of words. Use ``unique_words`` to tokenize raw text first.
    """
    if isinstance(words, str):
        raise TypeError(
            "Expected a collection of words, got a str. "
            "Tokenize raw text with unique_words() first."
        )
    return tuple(sorted(set(words)))
