"""Slug generation utilities."""

from slugify import slugify


def create_slug(text: str) -> str:
    """
    Create a URL-friendly slug from text.

    Technology ids in the catalog are slugs of the technology name.

    Args:
        text: The text to convert to a slug

    Returns:
        A lowercase, hyphenated slug

    Examples:
        >>> create_slug("Java")
        'java'
        >>> create_slug("Ruby on Rails")
        'ruby-on-rails'
        >>> create_slug("[Node.js")
        'node-js'
    """
    return slugify(text, lowercase=True, separator="-")
