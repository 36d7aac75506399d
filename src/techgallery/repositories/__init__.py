"""Data access layer."""

from techgallery.repositories.skill_store import SkillStore

__all__ = ["SkillStore"]
