"""TechGalleryUser database model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from techgallery.database import Base


class TechGalleryUser(Base):
    """
    Directory user known to the catalog.

    Attributes:
        id: Primary key
        google_id: Identity token issued by the authentication layer (unique)
        email: User e-mail address (unique)
        login: Local part of the e-mail, used to sync with the people provider (unique)
        name: Display name
        created_at: Timestamp when record was created
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    google_id = Column(String, nullable=True, unique=True, index=True)
    email = Column(String, nullable=False, unique=True, index=True)
    login = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of TechGalleryUser."""
        return f"<TechGalleryUser(id={self.id}, login='{self.login}', email='{self.email}')>"
