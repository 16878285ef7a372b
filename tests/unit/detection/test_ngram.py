"""Unit tests for character normalization and n-gram extraction."""

from __future__ import annotations

from detection.ngram import NGramBuffer, extract_ngrams, normalize_char, normalize_text


def test_normalize_char_maps_ascii_punctuation_to_boundary() -> None:
    """Digits and punctuation should become the boundary marker."""
    assert normalize_text("a1,b") == "a  b"


def test_normalize_char_keeps_letters_unchanged() -> None:
    """Plain letters should pass through."""
    assert normalize_char("Q") == "Q"
    assert normalize_char("\u00e9") == "\u00e9"


def test_normalize_char_folds_fullwidth_letters() -> None:
    """Fullwidth ASCII letters should fold to halfwidth."""
    assert normalize_char("\uff41") == "a"
    assert normalize_char("\uff01") == " "


def test_normalize_char_folds_kana_to_representatives() -> None:
    """Hiragana and katakana should fold to one representative each."""
    assert normalize_char("\u304b") == "\u3042"
    assert normalize_char("\u30ab") == "\u30a2"


def test_normalize_char_folds_romanian_comma_below() -> None:
    """Comma-below letters should fold to their cedilla forms."""
    assert normalize_char("\u0219") == "\u015f"


def test_ngram_buffer_emits_word_initial_ngrams() -> None:
    """The window should include the leading boundary."""
    buffer = NGramBuffer()
    for character in "th":
        buffer.add_char(character)

    assert [buffer.get(length) for length in (1, 2, 3)] == ["h", "th", " th"]


def test_ngram_buffer_never_emits_boundary_unigram() -> None:
    """A trailing boundary is not a 1-gram."""
    buffer = NGramBuffer()
    for character in "he ":
        buffer.add_char(character)

    assert buffer.get(1) is None
    assert buffer.get(2) == "e "


def test_ngram_buffer_suppresses_all_capital_words() -> None:
    """N-grams inside all-capitals words should be suppressed."""
    buffer = NGramBuffer()
    for character in "NASA":
        buffer.add_char(character)

    assert buffer.get(2) is None


def test_ngram_buffer_rejects_out_of_range_length() -> None:
    """Lengths outside 1 to 3 should return None."""
    buffer = NGramBuffer()
    buffer.add_char("a")

    assert buffer.get(0) is None and buffer.get(4) is None


def test_extract_ngrams_keeps_only_known_ngrams() -> None:
    """Unknown n-grams should be discarded during extraction."""
    ngrams = extract_ngrams("the", {"th", "the", "x"})

    assert ngrams == ["th", "the"]


def test_extract_ngrams_returns_empty_for_unknown_text() -> None:
    """Text without known n-grams should yield no features."""
    assert extract_ngrams("xyz", {"th"}) == []


def test_normalize_char_maps_latin1_separators_to_boundary() -> None:
    """No-break space, guillemets and the degree sign should become boundaries."""
    for character in ("\u00a0", "\u00ab", "\u00b0", "\u00bb"):
        assert normalize_char(character) == " "
    assert normalize_char("\u00e0") == "\u00e0"


def test_normalize_char_maps_general_punctuation_to_boundary() -> None:
    """Dashes and typographic quotes should become boundaries."""
    assert normalize_char("\u2014") == " "
    assert normalize_char("\u201c") == " "


def test_normalize_char_folds_arabic_farsi_yeh() -> None:
    """Farsi yeh should fold to Arabic yeh."""
    assert normalize_char("\u06cc") == "\u064a"
    assert normalize_char("\u0628") == "\u0628"


def test_normalize_char_folds_vietnamese_letters_from_first_dotted_a() -> None:
    """Latin Extended Additional letters fold only from U+1EA0 upward."""
    assert normalize_char("\u1e9f") == "\u1e9f"
    assert normalize_char("\u1ea0") == "\u1ea1"
    assert normalize_char("\u1ec7") == "\u1ea1"


def test_normalize_char_folds_hangul_and_bopomofo() -> None:
    """Hangul syllables and Bopomofo letters should fold to representatives."""
    assert normalize_char("\ud55c") == "\uac00"
    assert normalize_char("\u3106") == "\u3105"
    assert normalize_char("\u31a0") == "\u3105"


def test_normalize_char_maps_fullwidth_punctuation_to_boundary() -> None:
    """Fullwidth punctuation should fold to ASCII and then to a boundary."""
    assert normalize_char("\uff0c") == " "
    assert normalize_char("\uff1f") == " "
