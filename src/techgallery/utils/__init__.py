"""Utility functions package."""

from techgallery.utils.i18n import I18n, ValidationMessage, get_i18n
from techgallery.utils.slug import create_slug

__all__ = ["create_slug", "I18n", "ValidationMessage", "get_i18n"]
