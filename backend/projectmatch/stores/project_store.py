"""Project persistence: lookups, filtered search, and catalogue writes."""

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from projectmatch.exceptions import NotFoundError
from projectmatch.models.job_title import JobTitle
from projectmatch.models.organization import Organization
from projectmatch.models.project import Project, project_job_titles, project_skills
from projectmatch.models.skill import Skill
from projectmatch.schemas.project import SearchCriteria
from projectmatch.stores.base import escape_like, store_operation

# Newest first, id breaks ties so pages never overlap
SEARCH_ORDER = (Project.created_at.desc(), Project.id.desc())


def _search_filters(criteria: SearchCriteria) -> list:
    """Build WHERE clauses for already-validated criteria. Filters AND together."""
    filters = []

    if criteria.keyword:
        pattern = f"%{escape_like(criteria.keyword)}%"
        filters.append(or_(
            Project.title.ilike(pattern, escape="\\"),
            Project.description.ilike(pattern, escape="\\"),
        ))
    if criteria.job_titles:
        filters.append(Project.id.in_(
            select(project_job_titles.c.project_id)
            .where(project_job_titles.c.job_title_id.in_(criteria.job_titles))
        ))
    if criteria.skills:
        filters.append(Project.id.in_(
            select(project_skills.c.project_id)
            .where(project_skills.c.skill_id.in_(criteria.skills))
        ))
    if criteria.status:
        filters.append(Project.status == criteria.status)
    if criteria.remote:
        filters.append(Project.remote == (criteria.remote == "Y"))

    return filters


class ProjectStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation
    async def find_by_id(self, project_id: int) -> Project:
        result = await self.db.execute(select(Project).where(Project.id == project_id))
        project = result.scalar_one_or_none()
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    @store_operation
    async def search(self, criteria: SearchCriteria) -> tuple[list[Project], int]:
        """Return (rows for the requested page, total matching count)."""
        filters = _search_filters(criteria)

        count_query = select(func.count(Project.id)).where(*filters)
        total = (await self.db.execute(count_query)).scalar() or 0

        query = (
            select(Project)
            .where(*filters)
            .order_by(*SEARCH_ORDER)
            .offset(criteria.page * criteria.size)
            .limit(criteria.size)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all()), total

    @store_operation
    async def list_all(self) -> list[Project]:
        result = await self.db.execute(select(Project).order_by(*SEARCH_ORDER))
        return list(result.scalars().all())

    @store_operation
    async def list_by_organization(self, organization_id: int, status: str | None = None) -> list[Project]:
        query = select(Project).where(Project.organization_id == organization_id)
        if status:
            query = query.where(Project.status == status)
        result = await self.db.execute(query.order_by(*SEARCH_ORDER))
        return list(result.scalars().all())

    @store_operation
    async def list_job_titles(self) -> list[JobTitle]:
        result = await self.db.execute(select(JobTitle).order_by(JobTitle.display_order, JobTitle.name))
        return list(result.scalars().all())

    @store_operation
    async def organization_exists(self, organization_id: int) -> bool:
        result = await self.db.execute(select(Organization.id).where(Organization.id == organization_id))
        return result.scalar_one_or_none() is not None

    @store_operation
    async def get_job_titles(self, job_title_ids: list[int]) -> list[JobTitle]:
        """Load job titles by id; every id must exist."""
        return await self._load_all(JobTitle, job_title_ids, "Job title")

    @store_operation
    async def get_skills(self, skill_ids: list[int]) -> list[Skill]:
        """Load skills by id; every id must exist."""
        return await self._load_all(Skill, skill_ids, "Skill")

    async def _load_all(self, model, ids: list[int], label: str) -> list:
        wanted = set(ids)
        if not wanted:
            return []
        result = await self.db.execute(select(model).where(model.id.in_(wanted)).order_by(model.id))
        rows = list(result.scalars().all())
        missing = wanted - {row.id for row in rows}
        if missing:
            raise NotFoundError(f"{label} not found: {', '.join(str(i) for i in sorted(missing))}")
        return rows

    @store_operation
    async def add(self, project: Project) -> Project:
        self.db.add(project)
        await self.db.flush()
        await self.db.refresh(project)
        return project

    @store_operation
    async def save(self, project: Project) -> Project:
        await self.db.flush()
        await self.db.refresh(project)
        return project

    @store_operation
    async def delete(self, project: Project) -> None:
        await self.db.delete(project)
        await self.db.flush()

    @store_operation
    async def save_image(self, project_id: int, url: str) -> None:
        result = await self.db.execute(
            update(Project).where(Project.id == project_id).values(image_url=url)
        )
        if result.rowcount == 0:
            raise NotFoundError(f"Project {project_id} not found")
