"""Pydantic schemas for Project model and project search."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

ProjectStatus = Literal["N", "A", "C"]


class ProjectBase(BaseModel):
    """Base fields for project."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    status: ProjectStatus = "N"
    remote: bool = False
    image_url: str | None = None


class ProjectCreate(ProjectBase):
    """Fields for creating a project."""

    organization_id: int
    job_title_ids: list[int] = []
    skill_ids: list[int] = []


class ProjectUpdate(BaseModel):
    """Partial update; only fields that were sent are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: ProjectStatus | None = None
    remote: bool | None = None
    image_url: str | None = None
    job_title_ids: list[int] | None = None
    skill_ids: list[int] | None = None


class ProjectRead(ProjectBase):
    """Full project output."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    organization_id: int
    job_title_ids: list[int] = []
    skill_ids: list[int] = []
    created_at: datetime
    updated_at: datetime


class SearchCriteria(BaseModel):
    """Project search filters. Omitted filters impose no constraint."""

    keyword: str | None = None
    job_titles: list[int] | None = None
    skills: list[int] | None = None
    status: str | None = None
    remote: str | None = None
    page: int = 0
    size: int | None = None


class ProjectPage(BaseModel):
    """One page of search results with the metadata clients paginate with."""

    items: list[ProjectRead]
    total: int
    page: int
    size: int

    @computed_field
    @property
    def total_pages(self) -> int:
        return -(-self.total // self.size) if self.size else 0
