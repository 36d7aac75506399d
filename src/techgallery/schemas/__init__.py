"""Pydantic schemas package."""

from techgallery.schemas.skill import (
    CallerIdentity,
    ImportUserSkill,
    SkillImportResponse,
    SkillInput,
    SkillRead,
)

__all__ = [
    "CallerIdentity",
    "ImportUserSkill",
    "SkillImportResponse",
    "SkillInput",
    "SkillRead",
]
