"""Service providers for FastAPI routes. All services in a request share one session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from projectmatch.config import Settings, get_settings
from projectmatch.models.base import get_db
from projectmatch.services import ProjectSearchEngine, ProjectService, RelationshipManager
from projectmatch.stores import ProjectStore, RelationshipStore, UserDirectory


def get_relationship_manager(db: AsyncSession = Depends(get_db)) -> RelationshipManager:
    return RelationshipManager(RelationshipStore(db), ProjectStore(db), UserDirectory(db))


def get_search_engine(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ProjectSearchEngine:
    return ProjectSearchEngine(
        ProjectStore(db),
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
        default_status=settings.search_default_status,
    )


def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    return ProjectService(ProjectStore(db))
