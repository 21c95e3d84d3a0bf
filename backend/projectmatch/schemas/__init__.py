"""Pydantic schemas package."""

from projectmatch.schemas.project import (
    ProjectBase,
    ProjectCreate,
    ProjectUpdate,
    ProjectRead,
    ProjectPage,
    SearchCriteria,
)
from projectmatch.schemas.user_project import (
    ApplicationPayload,
    RelationshipStatusPayload,
    UserProjectRead,
    Applicant,
)
from projectmatch.schemas.job_title import JobTitleRead

__all__ = [
    # Project
    "ProjectBase",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectRead",
    "ProjectPage",
    "SearchCriteria",
    # UserProject
    "ApplicationPayload",
    "RelationshipStatusPayload",
    "UserProjectRead",
    "Applicant",
    # JobTitle
    "JobTitleRead",
]
