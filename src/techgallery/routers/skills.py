"""Skills API router - add/update, read and bulk import endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from techgallery.exceptions import TechGalleryError
from techgallery.routers.deps import get_caller, get_skill_service
from techgallery.schemas.skill import (
    CallerIdentity,
    ImportUserSkill,
    SkillImportResponse,
    SkillInput,
    SkillRead,
)
from techgallery.services.skill_service import SkillService

router = APIRouter()


def _to_http(exc: TechGalleryError) -> HTTPException:
    """Map a service error to an HTTPException carrying its translated message."""
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.post("/skills", response_model=SkillRead)
def add_or_update_skill(
    skill: SkillInput,
    caller: CallerIdentity | None = Depends(get_caller),
    service: SkillService = Depends(get_skill_service),
) -> SkillRead:
    """
    Record the caller's rating for a technology.

    Returns:
        The new active skill record.

    Raises:
        HTTPException 400: If the input is invalid.
        HTTPException 404: If the technology does not exist.
    """
    try:
        new_skill = service.add_or_update_skill(skill, caller)
    except TechGalleryError as exc:
        raise _to_http(exc) from exc
    return SkillRead.model_validate(new_skill)


@router.get("/skills/{tech_id}", response_model=SkillRead)
def get_user_skill(
    tech_id: str,
    caller: CallerIdentity | None = Depends(get_caller),
    service: SkillService = Depends(get_skill_service),
) -> SkillRead:
    """
    Get the caller's current rating for a technology.

    Raises:
        HTTPException 401: If the request is not authenticated.
        HTTPException 400: If the caller or technology cannot be resolved.
        HTTPException 404: If the caller never rated the technology.
    """
    try:
        user_skill = service.get_user_skill(tech_id, caller)
    except TechGalleryError as exc:
        raise _to_http(exc) from exc
    return SkillRead.model_validate(user_skill)


@router.post("/skills/import", response_model=SkillImportResponse)
def import_user_skills(
    records: list[ImportUserSkill],
    caller: CallerIdentity | None = Depends(get_caller),
    service: SkillService = Depends(get_skill_service),
) -> SkillImportResponse:
    """
    Import skill ratings from the skills feed.

    The batch stops at the first failing record or pair.
    """
    try:
        return service.import_user_skill(records, caller)
    except TechGalleryError as exc:
        raise _to_http(exc) from exc
