"""Unit tests for JSON language profile loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.errors import ProfileFormatError
from profiles.profile_loader import build_profile, load_profile, load_profiles
from tests.fixture_paths import profile_fixture_dir


def test_load_profiles_reads_directory_in_name_order() -> None:
    """All fixture profiles should load sorted by file name."""
    profiles = load_profiles(profile_fixture_dir())

    assert [profile.name for profile in profiles] == ["en", "fr", "ja"]


def test_load_profile_totals_match_counts() -> None:
    """Fixture totals should equal the per-length sums of counts."""
    profile = load_profile(profile_fixture_dir() / "en.json")

    for length in (1, 2, 3):
        expected = sum(count for ngram, count in profile.freq.items() if len(ngram) == length)
        assert profile.n_words[length - 1] == expected


def test_load_profiles_raises_for_missing_directory(tmp_path: Path) -> None:
    """A missing profile directory should be reported."""
    with pytest.raises(ProfileFormatError):
        load_profiles(tmp_path / "missing")


def test_load_profiles_raises_for_empty_directory(tmp_path: Path) -> None:
    """A directory without profile files should be reported."""
    with pytest.raises(ProfileFormatError):
        load_profiles(tmp_path)


def test_load_profile_raises_for_invalid_json(tmp_path: Path) -> None:
    """Malformed JSON should raise a profile format error."""
    profile_path = tmp_path / "xx.json"
    profile_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ProfileFormatError):
        load_profile(profile_path)


def test_load_profile_raises_for_short_totals(tmp_path: Path) -> None:
    """Profiles must define three n-gram totals."""
    profile_path = tmp_path / "xx.json"
    profile_path.write_text(
        json.dumps({"name": "xx", "freq": {"a": 1}, "n_words": [1, 0]}),
        encoding="utf-8",
    )

    with pytest.raises(ProfileFormatError):
        load_profile(profile_path)


def test_load_profile_raises_for_negative_count(tmp_path: Path) -> None:
    """Negative n-gram counts should be rejected."""
    profile_path = tmp_path / "xx.json"
    profile_path.write_text(
        json.dumps({"name": "xx", "freq": {"a": -1}, "n_words": [1, 0, 0]}),
        encoding="utf-8",
    )

    with pytest.raises(ProfileFormatError):
        load_profile(profile_path)


def test_build_profile_computes_totals() -> None:
    """In-memory profiles should get per-length totals."""
    profile = build_profile("xx", {"a": 2, "b": 3, "ab": 4, "abc": 1, "abcd": 9})

    assert profile.n_words == (5, 4, 1)


def test_load_profile_raises_for_mismatched_totals(tmp_path: Path) -> None:
    """Totals that disagree with the counts should name the file."""
    profile_path = tmp_path / "xx.json"
    profile_path.write_text(
        json.dumps({"name": "xx", "freq": {"a": 5, "b": 5}, "n_words": [1, 0, 0]}),
        encoding="utf-8",
    )

    with pytest.raises(ProfileFormatError, match="xx.json"):
        load_profile(profile_path)
