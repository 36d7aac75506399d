"""Message catalogs for user-facing error messages."""

from __future__ import annotations

import json
from enum import Enum


class ValidationMessage(str, Enum):
    """Validation messages raised by the skill service."""

    USER_GOOGLE_ENDPOINT_NULL = "Invalid user: null caller reference!"
    USER_NOT_EXIST = "User do not exists on datastore!"
    SKILL_CANNOT_BLANK = "Skill cannot be blank!"
    SKILL_RANGE = "Skill value must be between 0 and 5!"
    TECHNOLOGY_ID_CANNOT_BLANK = "Technology id cannot be blank!"
    TECHNOLOGY_NOT_EXIST = "Technology do not exists!"

    def message(self, i18n: I18n | None = None) -> str:
        """Return the translated message text."""
        return (i18n or get_i18n()).t(self.value)


class I18n:
    """
    Translate message texts for a locale.

    Catalogs map the English text to its translation. Texts without a
    translation are returned unchanged, so English needs no catalog.
    """

    def __init__(self, locale: str = "en", catalogs: dict[str, dict[str, str]] | None = None) -> None:
        """
        Initialize the translator.

        Args:
            locale: Active locale code (e.g. 'en', 'pt-BR')
            catalogs: Mapping of locale code to {english text: translation}
        """
        self.locale = locale
        self.catalogs: dict[str, dict[str, str]] = dict(catalogs or {})

    @classmethod
    def from_file(cls, filepath: str, locale: str = "en") -> I18n:
        """
        Load catalogs from a JSON file shaped ``{"pt-BR": {"text": "texto"}}``.

        Args:
            filepath: Path to the catalog file
            locale: Active locale code

        Returns:
            I18n instance
        """
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(locale=locale, catalogs=data)

    def add_catalog(self, locale: str, messages: dict[str, str]) -> None:
        """Merge ``messages`` into the catalog for ``locale``."""
        self.catalogs.setdefault(locale, {}).update(messages)

    def t(self, text: str) -> str:
        """
        Translate a message text into the active locale.

        Args:
            text: English message text

        Returns:
            Translated text, or ``text`` itself when no translation exists

        Examples:
            >>> I18n("pt-BR", {"pt-BR": {"Skill cannot be blank!": "Skill vazio!"}}).t(
            ...     "Skill cannot be blank!"
            ... )
            'Skill vazio!'
        """
        return self.catalogs.get(self.locale, {}).get(text, text)


_i18n: I18n | None = None


def get_i18n() -> I18n:
    """Return the process-wide translator for the configured default locale."""
    global _i18n
    if _i18n is None:
        from techgallery.config import settings

        _i18n = I18n(locale=settings.default_locale)
    return _i18n
