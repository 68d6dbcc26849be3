"""Word tokenization for the Naive Bayes classifier.

A token is a maximal run of Unicode ``Alphabetic`` characters, lowercased.
That property covers letters, letter-numbers such as Roman numerals, and
combining vowel signs of scripts like Devanagari. Every other character
(digits, punctuation, whitespace, symbols, viramas) separates tokens and is
dropped. Tokenization never fails: any string, including an empty one, yields
a (possibly empty) list.
"""

from __future__ import annotations

import regex

_WORD_RE = regex.compile(r"\p{Alphabetic}+")


def tokenize(document: str) -> list[str]:
    """Split text into lowercase alphabetic tokens.

    Order of appearance is preserved and duplicates are kept, so a word that
    occurs three times yields three tokens.

    Args:
        document: Raw document text.

    Returns:
        List of tokens, empty if the text contains no letters.

    Example::

        >>> tokenize("Rust IS Fun, 2 times!")
        ['rust', 'is', 'fun', 'times']
    """
    return _WORD_RE.findall(document.lower())
