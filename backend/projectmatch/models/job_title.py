"""Job title lookup table."""

from sqlalchemy import Column, Integer, String

from projectmatch.models.base import Base, IntegerIdMixin


class JobTitle(IntegerIdMixin, Base):
    __tablename__ = "job_titles"

    name = Column(String(100), unique=True, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
