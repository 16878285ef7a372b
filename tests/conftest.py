"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def en_fr_table():
    """Probability table with small English and French profiles."""
    from detection.probability_table import ProbabilityTable
    from profiles.profile_loader import build_profile

    table = ProbabilityTable(seed=1234)
    table.register(
        build_profile(
            "en",
            {"t": 300, "h": 200, "e": 500, "th": 500, "he": 300, "the": 400},
        )
    )
    table.register(
        build_profile(
            "fr",
            {"l": 300, "e": 600, "d": 100, "le": 500, "de": 300, "les": 300},
        )
    )
    return table
