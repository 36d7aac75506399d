"""Errors raised by the skill services.

Each error carries a human-readable (already translated) ``message``. The HTTP
layer maps the classes to status codes; nothing here retries.
"""


class TechGalleryError(Exception):
    """Base class for all service errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(TechGalleryError):
    """Raised when required input is missing or malformed."""

    status_code = 400


class SkillImportParseError(BadRequestError):
    """Raised when a skill-list entry in an import feed cannot be parsed."""


class NotFoundError(TechGalleryError):
    """Raised when a referenced technology, user or skill does not exist."""

    status_code = 404


class AuthorizationError(TechGalleryError):
    """Raised when the caller was never authenticated."""

    status_code = 401


class InternalServerError(TechGalleryError):
    """Raised on unexpected persistence or provider failures."""

    status_code = 500


class PeopleProviderError(InternalServerError):
    """Raised when the people provider cannot be reached or answers with an error."""
