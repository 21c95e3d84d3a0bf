"""Pydantic schemas for JobTitle model."""

from pydantic import BaseModel, ConfigDict


class JobTitleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    display_order: int
