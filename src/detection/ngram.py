"""Character normalization and n-gram extraction.

This module folds near-equivalent glyphs onto one representative and
slides a three-character window over normalized text to emit the
1-, 2- and 3-gram candidates used as detection features.
"""

from __future__ import annotations

from typing import Container, Iterable

from core.constants import BOUNDARY_CHAR, NGRAM_MAX_LENGTH
from detection.unicode_block import (
    ARABIC,
    BASIC_LATIN,
    BOPOMOFO,
    BOPOMOFO_EXTENDED,
    GENERAL_PUNCTUATION,
    HALFWIDTH_AND_FULLWIDTH_FORMS,
    HANGUL_SYLLABLES,
    HIRAGANA,
    KATAKANA,
    LATIN_1_SUPPLEMENT,
    LATIN_EXTENDED_ADDITIONAL,
    LATIN_EXTENDED_B,
    block_of,
)

_LATIN1_EXCLUDED = frozenset("\u00a0\u00ab\u00b0\u00bb")
_LATIN_EXTENDED_B_FOLDING = {"\u0219": "\u015f", "\u021b": "\u0163"}
_BLOCK_REPRESENTATIVES = {
    HIRAGANA: "あ",
    KATAKANA: "ア",
    BOPOMOFO: "ㄅ",
    BOPOMOFO_EXTENDED: "ㄅ",
    HANGUL_SYLLABLES: "가",
}
_FULLWIDTH_FIRST = "\uff01"
_FULLWIDTH_LAST = "\uff5e"
_FULLWIDTH_OFFSET = 0xFEE0


def normalize_char(character: str) -> str:
    """Fold one character to its canonical comparison form.

    Args:
        character: One-character string.

    Returns:
        Normalized character, or the boundary marker for separators.
    """
    block = block_of(character)
    if block == BASIC_LATIN:
        return character if is_ascii_letter(character) else BOUNDARY_CHAR
    if block == LATIN_1_SUPPLEMENT:
        return BOUNDARY_CHAR if character in _LATIN1_EXCLUDED else character
    if block == LATIN_EXTENDED_B:
        return _LATIN_EXTENDED_B_FOLDING.get(character, character)
    if block == GENERAL_PUNCTUATION:
        return BOUNDARY_CHAR
    if block == ARABIC:
        return "\u064a" if character == "\u06cc" else character
    if block == LATIN_EXTENDED_ADDITIONAL:
        return "\u1ea1" if character >= "\u1ea0" else character
    if block == HALFWIDTH_AND_FULLWIDTH_FORMS:
        if _FULLWIDTH_FIRST <= character <= _FULLWIDTH_LAST:
            return normalize_char(chr(ord(character) - _FULLWIDTH_OFFSET))
        return character
    return _BLOCK_REPRESENTATIVES.get(block, character)


def normalize_text(text: Iterable[str]) -> str:
    """Normalize every character of a text."""
    return "".join(normalize_char(character) for character in text)


def is_ascii_letter(character: str) -> bool:
    """Return True for ``A``-``Z`` and ``a``-``z``."""
    return "A" <= character <= "Z" or "a" <= character <= "z"


class NGramBuffer:
    """Rolling window over the most recent normalized characters."""

    def __init__(self) -> None:
        self._grams = BOUNDARY_CHAR
        self._capital_word = False

    def add_char(self, character: str) -> None:
        """Push one normalized character into the window.

        A boundary resets the window; consecutive boundaries collapse.

        Args:
            character: Normalized character.
        """
        last_char = self._grams[-1]
        if last_char == BOUNDARY_CHAR:
            self._grams = BOUNDARY_CHAR
            self._capital_word = False
            if character == BOUNDARY_CHAR:
                return
        elif len(self._grams) >= NGRAM_MAX_LENGTH:
            self._grams = self._grams[1:]
        self._grams += character
        if character.isupper():
            if last_char.isupper():
                self._capital_word = True
        else:
            self._capital_word = False

    def get(self, length: int) -> str | None:
        """Return the trailing n-gram of the given length.

        Args:
            length: N-gram length between 1 and 3.

        Returns:
            The n-gram, or None when unavailable. N-grams inside
            all-capitals words are never returned.
        """
        if self._capital_word:
            return None
        if length < 1 or length > NGRAM_MAX_LENGTH or len(self._grams) < length:
            return None
        if length == 1:
            character = self._grams[-1]
            return None if character == BOUNDARY_CHAR else character
        return self._grams[-length:]


def extract_ngrams(text: Iterable[str], known_ngrams: Container[str]) -> list[str]:
    """Extract every known n-gram from normalized text.

    Args:
        text: Normalized characters.
        known_ngrams: N-grams present in the probability table.

    Returns:
        Known n-grams in text order, duplicates preserved.
    """
    ngram_buffer = NGramBuffer()
    ngrams: list[str] = []
    for character in text:
        ngram_buffer.add_char(character)
        for length in range(1, NGRAM_MAX_LENGTH + 1):
            ngram = ngram_buffer.get(length)
            if ngram is not None and ngram in known_ngrams:
                ngrams.append(ngram)
    return ngrams
