"""Technology catalog lookups."""

from __future__ import annotations

from sqlalchemy.orm import Session

from techgallery.models.technology import Technology


class TechnologyCatalog:
    """Resolves technology ids (slugs) to catalog records."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def resolve(self, tech_id: str | None) -> Technology | None:
        """
        Get a technology by id.

        Args:
            tech_id: Technology slug

        Returns:
            Technology record, or None if the catalog has no such id
        """
        if not tech_id:
            return None
        return self.db.query(Technology).filter(Technology.id == tech_id).first()
