"""Technology database model."""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from techgallery.database import Base


class Technology(Base):
    """
    Technology model representing a catalog entry users can rate.

    Attributes:
        id: Canonical slug of the technology name (primary key)
        name: Display name
        created_at: Timestamp when record was created
    """

    __tablename__ = "technologies"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Technology."""
        return f"<Technology(id='{self.id}', name='{self.name}')>"
