"""Skill Store - persistence for Skill records."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from techgallery.exceptions import InternalServerError
from techgallery.models.skill import Skill
from techgallery.models.technology import Technology
from techgallery.models.user import TechGalleryUser


class SkillStore:
    """
    Repository for Skill records.

    Every write commits on its own. Callers composing several writes get no
    transaction around them.
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the store.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def find_by_user_and_technology(
        self, user: TechGalleryUser, technology: Technology
    ) -> Skill | None:
        """
        Get the active skill of a user for a technology.

        Args:
            user: Directory user
            technology: Rated technology

        Returns:
            The active Skill record, or None if the user never rated it
        """
        return (
            self.db.query(Skill)
            .filter(
                Skill.user_id == user.id,
                Skill.technology_id == technology.id,
                Skill.active.is_(True),
            )
            .order_by(Skill.id.desc())
            .first()
        )

    def add(self, skill: Skill) -> int:
        """
        Insert a new skill record.

        Args:
            skill: Unsaved Skill instance

        Returns:
            The store-generated id

        Raises:
            InternalServerError: If the insert fails
        """
        self.db.add(skill)
        self._commit()
        self.db.refresh(skill)
        return skill.id

    def update(self, skill: Skill) -> None:
        """
        Persist changes made to an existing skill record.

        Raises:
            InternalServerError: If the update fails
        """
        self.db.add(skill)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise InternalServerError(f"Skill store write failed: {exc}") from exc
