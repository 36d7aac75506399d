"""Skill rating service: validation, soft-versioned writes and bulk import."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from techgallery.config import SkillRatingConfig
from techgallery.exceptions import AuthorizationError, BadRequestError, NotFoundError
from techgallery.models.skill import Skill
from techgallery.models.technology import Technology
from techgallery.models.user import TechGalleryUser
from techgallery.repositories.skill_store import SkillStore
from techgallery.schemas.skill import (
    CallerIdentity,
    ImportUserSkill,
    SkillImportResponse,
    SkillInput,
)
from techgallery.services.skill_import import parse_skill_list
from techgallery.services.technology_catalog import TechnologyCatalog
from techgallery.services.user_directory import UserDirectory
from techgallery.utils.i18n import I18n, ValidationMessage, get_i18n

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SkillService:
    """
    Service for users' technology skill ratings.

    Handles:
    - Validating and recording a caller's rating for a technology
    - Keeping rating history: a new rating inactivates the previous record
    - Reading the current rating of a user
    - Bulk import of ratings from the skills feed

    The inactivate-then-insert sequence is two separate store writes; two
    concurrent updates of the same (user, technology) can both end up active.
    """

    def __init__(
        self,
        store: SkillStore,
        users: UserDirectory,
        technologies: TechnologyCatalog,
        rating_config: SkillRatingConfig | None = None,
        i18n: I18n | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the skill service.

        Args:
            store: Skill persistence
            users: Directory used to resolve callers
            technologies: Technology catalog
            rating_config: Accepted rating range (0-5 if not provided)
            i18n: Translator for error messages (process default if not provided)
            clock: Source of the inactivation timestamp
        """
        self.store = store
        self.users = users
        self.technologies = technologies
        self.rating_config = rating_config or SkillRatingConfig()
        self.i18n = i18n or get_i18n()
        self.clock = clock

    def add_or_update_skill(self, skill: SkillInput | None, caller: CallerIdentity | None) -> Skill:
        """
        Record the caller's rating for a technology.

        An existing active rating is inactivated and a new active record is
        created; ratings are never edited in place.

        Args:
            skill: Technology id and rating
            caller: Authenticated caller

        Returns:
            The newly created Skill record

        Raises:
            BadRequestError: If the caller, user, skill, value or technology is invalid
            NotFoundError: If the technology does not exist
            InternalServerError: If a store write fails
        """
        logger.info("Starting creating or updating skill")

        tech_user = self._validate_inputs(skill, caller)

        technology = self.technologies.resolve(skill.technology)
        if technology is None:
            raise NotFoundError(ValidationMessage.TECHNOLOGY_NOT_EXIST.message(self.i18n))

        return self._record_skill(tech_user, technology, skill.value)

    def _record_skill(self, tech_user: TechGalleryUser, technology: Technology, value: int) -> Skill:
        """Inactivate the user's current rating, if any, and add the new one."""
        current = self.store.find_by_user_and_technology(tech_user, technology)
        if current is not None:
            logger.info("Inactivating skill: %s", current.id)
            current.inactivated_date = self.clock()
            current.active = False
            self.store.update(current)

        return self._add_new_skill(value, tech_user, technology)

    def _validate_inputs(
        self, skill: SkillInput | None, caller: CallerIdentity | None
    ) -> TechGalleryUser:
        """
        Validate add-or-update inputs in order; the first failure wins.

        Returns:
            The caller's directory user

        Raises:
            BadRequestError: For each validation failure
        """
        logger.info("Validating inputs of skill")

        if caller is None or not caller.user_id:
            raise BadRequestError(ValidationMessage.USER_GOOGLE_ENDPOINT_NULL.message(self.i18n))

        tech_user = self.users.resolve(caller.user_id)
        if tech_user is None:
            raise BadRequestError(ValidationMessage.USER_NOT_EXIST.message(self.i18n))

        if skill is None:
            raise BadRequestError(ValidationMessage.SKILL_CANNOT_BLANK.message(self.i18n))

        if skill.value is None or not self.rating_config.in_range(skill.value):
            raise BadRequestError(ValidationMessage.SKILL_RANGE.message(self.i18n))

        if skill.technology is None:
            raise BadRequestError(ValidationMessage.TECHNOLOGY_ID_CANNOT_BLANK.message(self.i18n))

        return tech_user

    def _add_new_skill(self, value: int, tech_user: TechGalleryUser, technology: Technology) -> Skill:
        logger.info("Adding new skill...")

        new_skill = Skill(
            user_id=tech_user.id,
            technology_id=technology.id,
            value=value,
            active=True,
        )
        new_skill.id = self.store.add(new_skill)

        logger.info("New skill added: %s", new_skill.id)
        return new_skill

    def get_user_skill(self, tech_id: str, caller: CallerIdentity | None) -> Skill:
        """
        Get the caller's current skill for a technology.

        Args:
            tech_id: Technology id
            caller: Authenticated caller

        Returns:
            The active Skill record

        Raises:
            AuthorizationError: If there is no caller
            BadRequestError: If the caller or technology cannot be resolved
            NotFoundError: If the caller never rated the technology
        """
        if caller is None:
            raise AuthorizationError(self.i18n.t("OAuth error, null user reference!"))

        if not caller.user_id:
            raise BadRequestError(self.i18n.t("Current user was not found!"))

        tech_user = self.users.resolve(caller.user_id)
        if tech_user is None:
            raise BadRequestError(self.i18n.t("Endorser user do not exists on datastore!"))

        technology = self.technologies.resolve(tech_id)
        if technology is None:
            raise BadRequestError(ValidationMessage.TECHNOLOGY_NOT_EXIST.message(self.i18n))

        user_skill = self.store.find_by_user_and_technology(tech_user, technology)
        if user_skill is None:
            raise NotFoundError(self.i18n.t("User skill do not exist!"))
        return user_skill

    def get_resolved_user_skill(self, tech_id: str, user: TechGalleryUser | None) -> Skill | None:
        """
        Get an already resolved user's current skill for a technology.

        Unlike ``get_user_skill``, a missing rating is not an error.

        Args:
            tech_id: Technology id
            user: Directory user

        Returns:
            The active Skill record, or None if the user never rated the technology

        Raises:
            AuthorizationError: If there is no user
            NotFoundError: If the technology does not exist
        """
        if user is None:
            raise AuthorizationError(self.i18n.t("Null user reference!"))

        technology = self.technologies.resolve(tech_id)
        if technology is None:
            raise NotFoundError(ValidationMessage.TECHNOLOGY_NOT_EXIST.message(self.i18n))

        return self.store.find_by_user_and_technology(user, technology)

    def import_user_skill(
        self, records: Iterable[ImportUserSkill], caller: CallerIdentity | None
    ) -> SkillImportResponse:
        """
        Import skill ratings from the skills feed.

        Each record's user is synced from the people provider using the local
        part of its e-mail, then every ``[Technology];rating`` pair is recorded
        for that user with the same range and technology checks as
        ``add_or_update_skill``. The feed user does not need an identity token.
        The first failure aborts the batch; pairs already recorded stay recorded.

        Args:
            records: Feed records
            caller: Authenticated caller running the import

        Returns:
            Import summary

        Raises:
            AuthorizationError: If there is no caller
            SkillImportParseError: If a skill list is malformed
            NotFoundError: If a user or technology cannot be resolved
            BadRequestError: If a rating is out of range
        """
        if caller is None:
            raise AuthorizationError(self.i18n.t("OAuth error, null user reference!"))

        users_processed = 0
        skills_imported = 0

        for record in records:
            login = record.email.split("@")[0]
            tech_user = self.users.sync_from_provider(login)
            logger.info("Importing skills for %s", login)

            for tech_id, value in parse_skill_list(record.tech_skills):
                if not self.rating_config.in_range(value):
                    raise BadRequestError(ValidationMessage.SKILL_RANGE.message(self.i18n))
                technology = self.technologies.resolve(tech_id)
                if technology is None:
                    raise NotFoundError(
                        f"{ValidationMessage.TECHNOLOGY_NOT_EXIST.message(self.i18n)} ({tech_id})"
                    )
                self._record_skill(tech_user, technology, value)
                skills_imported += 1

            users_processed += 1

        return SkillImportResponse(
            status="success",
            users_processed=users_processed,
            skills_imported=skills_imported,
        )
