"""Translation lookup for Finnish and English."""

from __future__ import annotations

import logging

from reacto.i18n.catalog import CATALOG, DEFAULT_LANGUAGE, Language

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_LANGUAGE", "Language", "parse_language", "translate", "window_title"]


def parse_language(value: object) -> Language:
    """Map a stored preference to a Language. Anything but ``"en"`` means Finnish."""
    return Language.EN if value == Language.EN.value else DEFAULT_LANGUAGE


def translate(key: str, language: Language = DEFAULT_LANGUAGE) -> str:
    """Return the text for *key*; unknown keys fall back to the key itself."""
    text = CATALOG[language].get(key)
    if text is None:
        logger.warning("Missing translation key=%s language=%s", key, language.value)
        return key
    return text


def window_title(language: Language = DEFAULT_LANGUAGE) -> str:
    return f"{translate('appName', language)} - {translate('appTagline', language)}"
