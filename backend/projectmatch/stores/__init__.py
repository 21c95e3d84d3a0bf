"""Data-access collaborators used by the services."""

from projectmatch.stores.project_store import ProjectStore
from projectmatch.stores.relationship_store import RelationshipStore
from projectmatch.stores.user_directory import UserDirectory

__all__ = ["ProjectStore", "RelationshipStore", "UserDirectory"]
