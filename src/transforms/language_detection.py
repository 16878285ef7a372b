"""Batch language detection transform.

This module classifies many texts against one shared facade.
Texts without recognizable n-grams map to the unknown code.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import UNKNOWN_LANGUAGE_CODE
from core.errors import NoFeaturesError
from core.logging_config import get_logger
from detection.facade import LanguageDetectionFacade

_LOGGER = get_logger(__name__)


def detect_language(text: str, facade: LanguageDetectionFacade) -> str:
    """Detect language code for a text sample.

    Args:
        text: Input text to classify.
        facade: Loaded detection facade.

    Returns:
        Language code, or "unknown" when the text has no known n-grams
        or no language is confident enough.
    """
    try:
        return facade.detect(text)
    except NoFeaturesError:
        _LOGGER.debug("language_detection_skipped", text_length=len(text))
        return UNKNOWN_LANGUAGE_CODE


def detect_languages(texts: Iterable[str], facade: LanguageDetectionFacade) -> list[str]:
    """Detect language codes for multiple texts.

    Args:
        texts: Iterable of text documents.
        facade: Loaded detection facade.

    Returns:
        List of language codes aligned to the input order.
    """
    return [detect_language(text, facade) for text in texts]
