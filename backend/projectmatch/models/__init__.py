"""SQLAlchemy models. Importing this package registers every table on Base.metadata."""

from projectmatch.models.base import Base
from projectmatch.models.organization import Organization
from projectmatch.models.job_title import JobTitle
from projectmatch.models.skill import Skill
from projectmatch.models.user import User
from projectmatch.models.project import Project, project_job_titles, project_skills
from projectmatch.models.user_project import UserProject

__all__ = [
    "Base",
    "Organization",
    "JobTitle",
    "Skill",
    "User",
    "Project",
    "project_job_titles",
    "project_skills",
    "UserProject",
]
