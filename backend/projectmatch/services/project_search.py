"""Project search — keyword, job title, skill, status and remote filters with pagination."""

import logging
import re

from projectmatch.exceptions import BadRequestError
from projectmatch.schemas.project import ProjectPage, ProjectRead, SearchCriteria
from projectmatch.stores import ProjectStore

logger = logging.getLogger(__name__)

STATUS_PATTERN = re.compile(r"[AC]")
REMOTE_PATTERN = re.compile(r"[YN]")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class ProjectSearchEngine:
    """Resolve search criteria into one page of projects.

    Filters combine with AND; job titles and skills each match when any of
    the given ids is attached to the project. ``default_status`` is applied
    only when the caller omits a status.
    """

    def __init__(
        self,
        projects: ProjectStore,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
        default_status: str | None = None,
    ):
        self.projects = projects
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size
        self.default_status = default_status or None

    def normalize(self, criteria: SearchCriteria) -> SearchCriteria:
        """Validate criteria and fill defaults. Raises BadRequestError before any query runs."""
        keyword = criteria.keyword.strip() if criteria.keyword else None
        status = criteria.status if criteria.status is not None else self.default_status
        size = criteria.size if criteria.size is not None else self.default_page_size

        if status is not None and not STATUS_PATTERN.fullmatch(status):
            raise BadRequestError(f"Invalid project status {status!r}; expected A or C")
        if criteria.remote is not None and not REMOTE_PATTERN.fullmatch(criteria.remote):
            raise BadRequestError(f"Invalid remote flag {criteria.remote!r}; expected Y or N")
        if criteria.page < 0:
            raise BadRequestError("Page must be zero or greater")
        if size < 1 or size > self.max_page_size:
            raise BadRequestError(f"Size must be between 1 and {self.max_page_size}")

        return criteria.model_copy(update={
            "keyword": keyword or None,
            "job_titles": sorted(set(criteria.job_titles)) if criteria.job_titles else None,
            "skills": sorted(set(criteria.skills)) if criteria.skills else None,
            "status": status,
            "size": size,
        })

    async def search(self, criteria: SearchCriteria | None = None) -> ProjectPage:
        criteria = self.normalize(criteria or SearchCriteria())
        rows, total = await self.projects.search(criteria)
        logger.debug(
            "Project search keyword=%r job_titles=%s skills=%s status=%s remote=%s page=%d size=%d -> %d of %d",
            criteria.keyword, criteria.job_titles, criteria.skills, criteria.status,
            criteria.remote, criteria.page, criteria.size, len(rows), total,
        )
        return ProjectPage(
            items=[ProjectRead.model_validate(project) for project in rows],
            total=total,
            page=criteria.page,
            size=criteria.size,
        )
