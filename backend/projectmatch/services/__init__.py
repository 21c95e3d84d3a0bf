"""Business logic services."""

from projectmatch.services.project_search import ProjectSearchEngine
from projectmatch.services.project_service import ProjectService
from projectmatch.services.relationship_manager import RelationshipManager

__all__ = ["ProjectSearchEngine", "ProjectService", "RelationshipManager"]
