"""Unit tests for probability table aggregation."""

from __future__ import annotations

import pytest

from core.errors import (
    DuplicateProfileError,
    NoProfilesLoadedError,
    ProfileFormatError,
    ProfileTableFrozenError,
)
from core.types import DetectorOptions, LanguageProfile
from detection.probability_table import ProbabilityTable
from profiles.profile_loader import build_profile


def test_register_builds_relative_frequencies(en_fr_table: ProbabilityTable) -> None:
    """Each vector slot should hold count divided by the length total."""
    prob_map = en_fr_table.word_lang_prob_map

    assert prob_map["th"].tolist() == [pytest.approx(0.625), 0.0]
    assert prob_map["e"].tolist() == [pytest.approx(0.5), pytest.approx(0.6)]


def test_register_sizes_every_vector_to_language_count(en_fr_table: ProbabilityTable) -> None:
    """Vectors should be indexed like the language list."""
    prob_map = en_fr_table.word_lang_prob_map

    assert en_fr_table.lang_list == ("en", "fr")
    assert all(len(vector) == 2 for vector in prob_map.values())
    assert all(0.0 <= value <= 1.0 for vector in prob_map.values() for value in vector)


def test_register_rejects_duplicate_without_partial_merge(
    en_fr_table: ProbabilityTable,
) -> None:
    """A duplicate language code should leave the table unchanged."""
    before = {ngram: vector.tolist() for ngram, vector in en_fr_table.word_lang_prob_map.items()}

    with pytest.raises(DuplicateProfileError):
        en_fr_table.register(build_profile("en", {"zz": 10}))

    after = {ngram: vector.tolist() for ngram, vector in en_fr_table.word_lang_prob_map.items()}
    assert en_fr_table.lang_list == ("en", "fr") and after == before


def test_register_skips_ngrams_with_zero_totals() -> None:
    """N-grams whose length total is zero should not be merged."""
    table = ProbabilityTable()
    table.register(LanguageProfile(name="xx", freq={"a": 1, "ab": 0}, n_words=(1, 0, 0)))

    assert set(table.word_lang_prob_map) == {"a"}


def test_create_detector_requires_profiles() -> None:
    """Creating a detector from an empty table should fail."""
    with pytest.raises(NoProfilesLoadedError):
        ProbabilityTable().create_detector()


def test_create_detector_applies_alpha_override(en_fr_table: ProbabilityTable) -> None:
    """An explicit alpha should override option defaults."""
    detector = en_fr_table.create_detector(0.123)

    assert detector.alpha == 0.123


def test_create_detector_keeps_custom_options(en_fr_table: ProbabilityTable) -> None:
    """Custom options should reach the detector."""
    detector = en_fr_table.create_detector(options=DetectorOptions(trial_count=3))

    assert detector.options.trial_count == 3


def test_create_detector_freezes_table(en_fr_table: ProbabilityTable) -> None:
    """Registration after sharing the table should be rejected."""
    en_fr_table.create_detector()

    with pytest.raises(ProfileTableFrozenError):
        en_fr_table.register(build_profile("de", {"ei": 5}))

    assert en_fr_table.is_frozen and len(en_fr_table) == 2


def test_frozen_vectors_are_read_only(en_fr_table: ProbabilityTable) -> None:
    """Shared vectors should reject in-place writes."""
    shared = en_fr_table.freeze()

    with pytest.raises(ValueError):
        shared.word_lang_prob_map["th"][0] = 1.0

    assert en_fr_table.freeze() is shared


def test_repr_reports_profile_count() -> None:
    """Representation should include class name and profile count."""
    table = ProbabilityTable()
    table.register(build_profile("sample", {"a": 1}))

    assert "ProbabilityTable" in repr(table) and "1 profile(s)" in repr(table)
    assert hex(id(table)) in repr(table)


def test_profile_rejects_totals_below_counts() -> None:
    """Totals smaller than the summed counts should be rejected."""
    table = ProbabilityTable()

    with pytest.raises(ProfileFormatError):
        table.register(LanguageProfile(name="xx", freq={"a": 5, "b": 5}, n_words=(1, 0, 0)))

    assert table.lang_list == ()


def test_profile_rejects_wrong_number_of_totals() -> None:
    """Profiles need exactly one total per n-gram length."""
    with pytest.raises(ProfileFormatError):
        LanguageProfile(name="xx", freq={"a": 1}, n_words=(1, 0))  # type: ignore[arg-type]


def test_profile_counts_are_read_only() -> None:
    """Profile counts should not be mutable after construction."""
    source = {"a": 2, "ab": 1}
    profile = LanguageProfile(name="xx", freq=source, n_words=(2, 1, 0))
    source["a"] = 100

    with pytest.raises(TypeError):
        profile.freq["a"] = 3  # type: ignore[index]

    assert profile.freq["a"] == 2


def test_registered_probabilities_never_exceed_one() -> None:
    """Valid profiles should only produce relative frequencies in [0, 1]."""
    table = ProbabilityTable()
    table.register(build_profile("xx", {"a": 5, "b": 5, "ab": 7}))

    assert all(vector.max() <= 1.0 for vector in table.word_lang_prob_map.values())
