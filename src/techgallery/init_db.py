"""Database initialization script."""

from pathlib import Path

from techgallery.config import settings
from techgallery.database import Base, engine
from techgallery.models import Skill, TechGalleryUser, Technology  # noqa: F401


def init_database():
    """
    Initialize the database by creating all tables.

    Safe to run multiple times: existing tables are left untouched.
    """
    Path(settings.data_root).mkdir(parents=True, exist_ok=True)
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    print("Database tables created successfully!")
    print(f"Tables created: {', '.join(Base.metadata.tables.keys())}")


if __name__ == "__main__":
    init_database()
