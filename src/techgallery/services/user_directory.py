"""Directory user resolution and provider sync."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from techgallery.exceptions import InternalServerError, NotFoundError, PeopleProviderError
from techgallery.models.user import TechGalleryUser
from techgallery.services.people_provider import PeopleProviderClient
from techgallery.utils.i18n import get_i18n

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    Resolves callers to directory users.

    Users are looked up locally by their identity token (``google_id``). The
    import path syncs users by login, creating them from the people provider
    when the directory does not know them yet.
    """

    def __init__(self, db: Session, provider: PeopleProviderClient | None = None) -> None:
        """
        Initialize the directory.

        Args:
            db: SQLAlchemy database session
            provider: People provider client (sync is local-only without it)
        """
        self.db = db
        self.provider = provider

    def resolve(self, identity_token: str | None) -> TechGalleryUser | None:
        """
        Get the directory user for an identity token.

        Args:
            identity_token: Caller's ``google_id``

        Returns:
            TechGalleryUser, or None if no user holds the token
        """
        if not identity_token:
            return None
        return (
            self.db.query(TechGalleryUser)
            .filter(TechGalleryUser.google_id == identity_token)
            .first()
        )

    def get_by_login(self, login: str) -> TechGalleryUser | None:
        """Get a directory user by login."""
        return self.db.query(TechGalleryUser).filter(TechGalleryUser.login == login).first()

    def sync_from_provider(self, login: str) -> TechGalleryUser:
        """
        Get a directory user by login, creating it from the people provider if needed.

        Args:
            login: Local part of the user's e-mail address

        Returns:
            The directory TechGalleryUser

        Raises:
            NotFoundError: If neither the directory nor the provider knows the login
            PeopleProviderError: If the provider request fails or the profile is unusable
            InternalServerError: If the new user cannot be stored
        """
        user = self.get_by_login(login)
        if user is not None:
            return user

        person = self.provider.get_person(login) if self.provider is not None else None
        if person is None:
            raise NotFoundError(f"{get_i18n().t('User not found on provider!')} ({login})")
        if not person.get("email"):
            raise PeopleProviderError(f"People provider profile for '{login}' has no e-mail")

        logger.info("Creating directory user from provider: %s", login)
        user = TechGalleryUser(
            login=login,
            email=person["email"],
            name=person.get("name"),
            google_id=person.get("google_id"),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise InternalServerError(f"Directory user sync failed for '{login}': {exc}") from exc
        self.db.refresh(user)
        return user
