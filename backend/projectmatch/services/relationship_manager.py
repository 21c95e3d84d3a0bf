"""Relationship manager — bookmarks and applications between users and projects.

A user has at most one relationship per project. Creating a relationship for
a pair that already has one overwrites it in place (last write wins), and any
status may follow any other: B (bookmarked), A (applied), C (accepted),
D (declined).
"""

import logging

from projectmatch.exceptions import BadRequestError, NotFoundError
from projectmatch.models.user_project import (
    APPLICATION_STATUSES,
    BOOKMARKED,
    RELATIONSHIP_STATUSES,
)
from projectmatch.schemas.project import ProjectRead
from projectmatch.schemas.user_project import Applicant, ApplicationPayload, UserProjectRead
from projectmatch.stores import ProjectStore, RelationshipStore, UserDirectory

logger = logging.getLogger(__name__)


def validate_status(status: str | None) -> str:
    """Return the status code or raise BadRequestError for a missing or unknown one."""
    if status is None or not status.strip():
        raise BadRequestError("User project status is required")
    if status not in RELATIONSHIP_STATUSES:
        raise BadRequestError(
            f"Invalid user project status {status!r}; expected one of {', '.join(RELATIONSHIP_STATUSES)}"
        )
    return status


class RelationshipManager:
    def __init__(self, relationships: RelationshipStore, projects: ProjectStore, users: UserDirectory):
        self.relationships = relationships
        self.projects = projects
        self.users = users

    async def _require_user(self, user_id: int) -> None:
        if not await self.users.exists(user_id):
            raise NotFoundError(f"User {user_id} not found")

    async def create(
        self,
        user_id: int,
        project_id: int,
        status: str,
        comment: str | None = None,
        resume_flag: bool = False,
    ) -> UserProjectRead:
        """Bookmark or apply to a project, replacing any existing relationship for the pair."""
        status = validate_status(status)
        await self._require_user(user_id)
        await self.projects.find_by_id(project_id)

        if status == BOOKMARKED:
            # Bookmarks carry no application metadata
            user_project = await self.relationships.upsert(user_id, project_id, BOOKMARKED, None, False)
            logger.info("User %s bookmarked project %s", user_id, project_id)
        else:
            user_project = await self.relationships.upsert(user_id, project_id, status, comment, resume_flag)
            logger.info("User %s application to project %s saved with status %s", user_id, project_id, status)

        return UserProjectRead.model_validate(user_project)

    async def update(self, application: ApplicationPayload) -> UserProjectRead:
        """Apply a new status, comment and resume flag to an existing relationship."""
        status = validate_status(application.status)

        user_project = await self.relationships.find(application.user_id, application.project_id)
        if not user_project:
            raise NotFoundError(
                f"No application found for user {application.user_id} and project {application.project_id}"
            )

        previous = user_project.status
        user_project.status = status
        user_project.comment = application.comment
        user_project.resume_flag = application.resume_flag
        user_project = await self.relationships.save(user_project)

        logger.info(
            "User %s relationship to project %s moved %s -> %s",
            application.user_id, application.project_id, previous, status,
        )
        return UserProjectRead.model_validate(user_project)

    async def get_applicants(self, project_id: int) -> list[Applicant]:
        """Users who applied to the project (bookmarks excluded), most recent first."""
        await self.projects.find_by_id(project_id)
        user_projects = await self.relationships.list_by_project(project_id, APPLICATION_STATUSES)
        return [
            Applicant(
                user_id=up.user_id,
                first_name=up.user.first_name,
                last_name=up.user.last_name,
                email=up.user.email,
                title=up.user.title,
                status=up.status,
                comment=up.comment,
                resume_flag=up.resume_flag,
                applied_at=up.created_at,
            )
            for up in user_projects
        ]

    async def get_by_user_and_status(self, user_id: int, status: str | None = None) -> list[ProjectRead]:
        """Projects related to a user, optionally narrowed to one status, most recently bound first.

        ``None`` returns every related project; a blank or unknown status is rejected.
        """
        if status is not None:
            status = validate_status(status)
        await self._require_user(user_id)

        user_projects = await self.relationships.list_by_user_and_status(user_id, status)
        return [ProjectRead.model_validate(up.project) for up in user_projects]
