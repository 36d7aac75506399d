"""Skill database model."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from techgallery.database import Base


class Skill(Base):
    """
    Skill model: one historical assertion of a user's proficiency in a technology.

    Rows are never deleted and their rating is never changed. Superseding a
    rating inserts a new active row and flips the previous one to inactive.

    Attributes:
        id: Primary key
        user_id: Foreign key to users table
        technology_id: Foreign key to technologies table (technology slug)
        value: Proficiency rating (0-5)
        active: Whether this is the current rating for (user, technology)
        inactivated_date: When the record was superseded (None while active)
        created_at: Timestamp when record was created
    """

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    technology_id = Column(String, ForeignKey("technologies.id"), nullable=False, index=True)
    value = Column(Integer, nullable=False)
    active = Column(Boolean, default=True, nullable=False, index=True)
    inactivated_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Skill."""
        return (
            f"<Skill(id={self.id}, user_id={self.user_id}, "
            f"technology_id='{self.technology_id}', value={self.value}, active={self.active})>"
        )
