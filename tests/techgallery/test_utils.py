"""Tests for utility functions."""

import json
import os
import tempfile

from techgallery.utils.i18n import I18n, ValidationMessage
from techgallery.utils.slug import create_slug


class TestSlugUtils:
    """Tests for slug generation utilities."""

    def test_create_slug_basic(self):
        """Test basic slug creation."""
        assert create_slug("Java") == "java"

    def test_create_slug_with_spaces(self):
        """Test slug creation with multiple words."""
        assert create_slug("Ruby   on   Rails") == "ruby-on-rails"

    def test_create_slug_with_special_chars(self):
        """Test slug creation with punctuation."""
        assert create_slug("Node.js") == "node-js"
        assert create_slug("[Go") == "go"

    def test_create_slug_unicode(self):
        """Test slug creation with unicode characters."""
        assert create_slug("Café") == "cafe"

    def test_create_slug_empty(self):
        """Punctuation-only input yields an empty slug."""
        assert create_slug("[]") == ""


class TestI18n:
    """Tests for message translation."""

    def test_untranslated_text_returned_as_is(self):
        """English needs no catalog."""
        assert I18n().t("Skill cannot be blank!") == "Skill cannot be blank!"

    def test_translation_for_active_locale(self):
        """Catalog entries of the active locale are used."""
        i18n = I18n("pt-BR", {"pt-BR": {"Skill cannot be blank!": "Skill não pode ser vazio!"}})
        assert i18n.t("Skill cannot be blank!") == "Skill não pode ser vazio!"

    def test_other_locale_catalog_ignored(self):
        """Catalogs of inactive locales do not leak."""
        i18n = I18n("en", {"pt-BR": {"Skill cannot be blank!": "Skill não pode ser vazio!"}})
        assert i18n.t("Skill cannot be blank!") == "Skill cannot be blank!"

    def test_add_catalog_merges(self):
        """add_catalog merges into an existing locale."""
        i18n = I18n("es", {"es": {"a": "A"}})
        i18n.add_catalog("es", {"b": "B"})
        assert i18n.t("a") == "A"
        assert i18n.t("b") == "B"

    def test_from_file(self):
        """Catalogs load from a JSON file."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".json", delete=False, encoding="utf-8"
        ) as f:
            json.dump({"pt-BR": {ValidationMessage.SKILL_RANGE.value: "Valor inválido!"}}, f)
            temp_path = f.name

        try:
            i18n = I18n.from_file(temp_path, locale="pt-BR")
            assert ValidationMessage.SKILL_RANGE.message(i18n) == "Valor inválido!"
        finally:
            os.unlink(temp_path)

    def test_validation_message_default_english(self):
        """Validation messages render in English without a catalog."""
        assert ValidationMessage.SKILL_RANGE.message(I18n()) == "Skill value must be between 0 and 5!"
