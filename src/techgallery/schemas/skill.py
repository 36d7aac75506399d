"""Skill Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CallerIdentity(BaseModel):
    """Identity of the authenticated caller, as handed over by the auth layer."""

    user_id: str | None = None
    email: str | None = None


class SkillInput(BaseModel):
    """
    Schema for creating or updating a skill.

    Both fields are optional here: the service reports missing or out-of-range
    values as bad requests with a translated message.
    """

    technology: str | None = None
    value: int | None = None


class SkillRead(BaseModel):
    """Complete skill schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    technology_id: str
    value: int
    active: bool
    inactivated_date: datetime | None = None


class ImportUserSkill(BaseModel):
    """
    One record of a bulk skill import feed.

    ``tech_skills`` holds ``[Name];rating`` pairs separated by semicolons,
    either as one string or split across several strings.
    """

    email: str
    tech_skills: str | list[str] = Field(default_factory=list)


class SkillImportResponse(BaseModel):
    """Schema for bulk import response."""

    status: str
    users_processed: int
    skills_imported: int
