"""Database models package."""

from techgallery.models.skill import Skill
from techgallery.models.technology import Technology
from techgallery.models.user import TechGalleryUser

__all__ = ["Skill", "TechGalleryUser", "Technology"]
