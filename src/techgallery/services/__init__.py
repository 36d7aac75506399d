"""Services package."""

from techgallery.services.people_provider import PeopleProviderClient
from techgallery.services.skill_service import SkillService
from techgallery.services.technology_catalog import TechnologyCatalog
from techgallery.services.user_directory import UserDirectory

__all__ = ["PeopleProviderClient", "SkillService", "TechnologyCatalog", "UserDirectory"]
