"""Raw text scrubbing before n-gram extraction.

This module removes URL and e-mail spans and collapses whitespace
runs so they cannot leak spurious n-grams into detection.
"""

from __future__ import annotations

import re

from core.constants import BOUNDARY_CHAR

_URL_PATTERN = re.compile(r"https?://[-_.?&~;+=/#0-9A-Za-z]{1,2076}")
_MAIL_PATTERN = re.compile(r"[-_.0-9A-Za-z]{1,64}@[-_0-9A-Za-z]{1,255}[-_.0-9A-Za-z]{1,255}")
_SPACE_PATTERN = re.compile(r"\s+")


def strip_urls_and_mail(text: str) -> str:
    """Replace URL-like and e-mail-like spans with the boundary marker.

    Args:
        text: Raw input text.

    Returns:
        Text without URL or e-mail spans.
    """
    text = _URL_PATTERN.sub(BOUNDARY_CHAR, text)
    return _MAIL_PATTERN.sub(BOUNDARY_CHAR, text)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs into a single boundary marker."""
    return _SPACE_PATTERN.sub(BOUNDARY_CHAR, text)
