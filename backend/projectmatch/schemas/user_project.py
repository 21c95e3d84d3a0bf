"""Pydantic schemas for user-project relationships (bookmarks and applications)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ApplicationPayload(BaseModel):
    """Input for creating or updating a relationship.

    ``status`` is validated by the relationship manager so an illegal code
    is reported as a bad request rather than a schema error.
    """

    user_id: int
    project_id: int
    status: str
    comment: str | None = None
    resume_flag: bool = False


class RelationshipStatusPayload(BaseModel):
    """Body of the per-user/per-project endpoint; ids come from the path."""

    status: str
    comment: str | None = None
    resume_flag: bool = False


class UserProjectRead(BaseModel):
    """Persisted relationship."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    project_id: int
    status: str
    comment: str | None = None
    resume_flag: bool
    created_at: datetime
    updated_at: datetime


class Applicant(BaseModel):
    """A user who applied to a project, with the application metadata."""

    user_id: int
    first_name: str
    last_name: str
    email: str
    title: str | None = None
    status: str
    comment: str | None = None
    resume_flag: bool
    applied_at: datetime
