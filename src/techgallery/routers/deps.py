"""Shared FastAPI dependencies for the caller identity and the skill service."""

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from techgallery.config import settings
from techgallery.database import get_db
from techgallery.repositories.skill_store import SkillStore
from techgallery.schemas.skill import CallerIdentity
from techgallery.services.people_provider import PeopleProviderClient
from techgallery.services.skill_service import SkillService
from techgallery.services.technology_catalog import TechnologyCatalog
from techgallery.services.user_directory import UserDirectory


def get_caller(
    x_user_id: str | None = Header(default=None),
    x_user_email: str | None = Header(default=None),
) -> CallerIdentity | None:
    """
    Build the caller identity from the headers set by the authentication proxy.

    Returns None when the request carries no identity at all.
    """
    if x_user_id is None and x_user_email is None:
        return None
    return CallerIdentity(user_id=x_user_id, email=x_user_email)


def get_people_provider() -> PeopleProviderClient | None:
    """Provide the people provider client, if one is configured."""
    if not settings.people_api_url:
        return None
    return PeopleProviderClient(
        settings.people_api_url, timeout_seconds=settings.people_api_timeout_seconds
    )


def get_skill_service(
    db: Session = Depends(get_db),
    provider: PeopleProviderClient | None = Depends(get_people_provider),
) -> SkillService:
    """Provide a SkillService wired to the current DB session."""
    return SkillService(
        store=SkillStore(db),
        users=UserDirectory(db, provider=provider),
        technologies=TechnologyCatalog(db),
    )
