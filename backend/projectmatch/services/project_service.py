"""Project catalogue operations — listing, lookup, create/update/delete, images, job titles."""

import logging
from urllib.parse import urlparse

from projectmatch.exceptions import BadRequestError, NotFoundError
from projectmatch.models.project import PROJECT_STATUSES, Project
from projectmatch.schemas.job_title import JobTitleRead
from projectmatch.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from projectmatch.stores import ProjectStore

logger = logging.getLogger(__name__)

# Columns that may be omitted from an update but never cleared
_REQUIRED_FIELDS = ("title", "status", "remote")


class ProjectService:
    def __init__(self, projects: ProjectStore):
        self.projects = projects

    async def list_projects(self) -> list[ProjectRead]:
        return [ProjectRead.model_validate(p) for p in await self.projects.list_all()]

    async def get_project(self, project_id: int) -> ProjectRead:
        return ProjectRead.model_validate(await self.projects.find_by_id(project_id))

    async def list_by_organization(self, organization_id: int, status: str | None = None) -> list[ProjectRead]:
        if status is not None and status not in PROJECT_STATUSES:
            raise BadRequestError(f"Invalid project status {status!r}; expected one of N, A, C")
        if not await self.projects.organization_exists(organization_id):
            raise NotFoundError(f"Organization {organization_id} not found")
        projects = await self.projects.list_by_organization(organization_id, status)
        return [ProjectRead.model_validate(p) for p in projects]

    async def create_project(self, data: ProjectCreate) -> ProjectRead:
        if not await self.projects.organization_exists(data.organization_id):
            raise NotFoundError(f"Organization {data.organization_id} not found")

        project = Project(
            organization_id=data.organization_id,
            title=data.title,
            description=data.description,
            status=data.status,
            remote=data.remote,
            image_url=data.image_url,
            job_titles=await self.projects.get_job_titles(data.job_title_ids),
            skills=await self.projects.get_skills(data.skill_ids),
        )
        project = await self.projects.add(project)
        logger.info("Created project %s for organization %s", project.id, project.organization_id)
        return ProjectRead.model_validate(project)

    async def update_project(self, project_id: int, data: ProjectUpdate) -> ProjectRead:
        project = await self.projects.find_by_id(project_id)
        changes = data.model_dump(exclude_unset=True)

        for field in _REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                raise BadRequestError(f"Project {field} cannot be empty")

        job_title_ids = changes.pop("job_title_ids", None)
        skill_ids = changes.pop("skill_ids", None)
        if job_title_ids is not None:
            project.job_titles = await self.projects.get_job_titles(job_title_ids)
        if skill_ids is not None:
            project.skills = await self.projects.get_skills(skill_ids)
        for field, value in changes.items():
            setattr(project, field, value)

        project = await self.projects.save(project)
        logger.info("Updated project %s", project_id)
        return ProjectRead.model_validate(project)

    async def delete_project(self, project_id: int) -> None:
        """Delete a project together with its bookmarks and applications."""
        project = await self.projects.find_by_id(project_id)
        await self.projects.delete(project)
        logger.info("Deleted project %s", project_id)

    async def save_image(self, project_id: int, url: str) -> None:
        parsed = urlparse(url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise BadRequestError(f"Invalid image URL {url!r}")
        await self.projects.save_image(project_id, url)
        logger.info("Saved image for project %s", project_id)

    async def list_job_titles(self) -> list[JobTitleRead]:
        return [JobTitleRead.model_validate(jt) for jt in await self.projects.list_job_titles()]
