"""Unicode block classification.

This module maps characters to the named blocks used by character
normalization and the script-dominance filter.
"""

from __future__ import annotations

from bisect import bisect_right

BASIC_LATIN = "BASIC_LATIN"
LATIN_1_SUPPLEMENT = "LATIN_1_SUPPLEMENT"
LATIN_EXTENDED_A = "LATIN_EXTENDED_A"
LATIN_EXTENDED_B = "LATIN_EXTENDED_B"
ARABIC = "ARABIC"
LATIN_EXTENDED_ADDITIONAL = "LATIN_EXTENDED_ADDITIONAL"
GENERAL_PUNCTUATION = "GENERAL_PUNCTUATION"
CJK_SYMBOLS_AND_PUNCTUATION = "CJK_SYMBOLS_AND_PUNCTUATION"
HIRAGANA = "HIRAGANA"
KATAKANA = "KATAKANA"
BOPOMOFO = "BOPOMOFO"
BOPOMOFO_EXTENDED = "BOPOMOFO_EXTENDED"
CJK_UNIFIED_IDEOGRAPHS = "CJK_UNIFIED_IDEOGRAPHS"
HANGUL_SYLLABLES = "HANGUL_SYLLABLES"
HALFWIDTH_AND_FULLWIDTH_FORMS = "HALFWIDTH_AND_FULLWIDTH_FORMS"

# (first, last, name) sorted by first code point.
_BLOCK_RANGES = (
    (0x0000, 0x007F, BASIC_LATIN),
    (0x0080, 0x00FF, LATIN_1_SUPPLEMENT),
    (0x0100, 0x017F, LATIN_EXTENDED_A),
    (0x0180, 0x024F, LATIN_EXTENDED_B),
    (0x0600, 0x06FF, ARABIC),
    (0x1E00, 0x1EFF, LATIN_EXTENDED_ADDITIONAL),
    (0x2000, 0x206F, GENERAL_PUNCTUATION),
    (0x3000, 0x303F, CJK_SYMBOLS_AND_PUNCTUATION),
    (0x3040, 0x309F, HIRAGANA),
    (0x30A0, 0x30FF, KATAKANA),
    (0x3100, 0x312F, BOPOMOFO),
    (0x31A0, 0x31BF, BOPOMOFO_EXTENDED),
    (0x4E00, 0x9FFF, CJK_UNIFIED_IDEOGRAPHS),
    (0xAC00, 0xD7AF, HANGUL_SYLLABLES),
    (0xFF00, 0xFFEF, HALFWIDTH_AND_FULLWIDTH_FORMS),
)
_BLOCK_STARTS = [first for first, _, _ in _BLOCK_RANGES]


def block_of(character: str) -> str | None:
    """Return the block name of a single character.

    Args:
        character: One-character string.

    Returns:
        Block name, or None when the block is not tracked.
    """
    code_point = ord(character)
    index = bisect_right(_BLOCK_STARTS, code_point) - 1
    if index < 0:
        return None
    first, last, name = _BLOCK_RANGES[index]
    if first <= code_point <= last:
        return name
    return None


def is_latin_extended_additional(character: str) -> bool:
    """Return True when the character is in Latin Extended Additional."""
    return block_of(character) == LATIN_EXTENDED_ADDITIONAL
