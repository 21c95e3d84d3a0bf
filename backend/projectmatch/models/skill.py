"""Skill lookup table."""

from sqlalchemy import Column, String

from projectmatch.models.base import Base, IntegerIdMixin


class Skill(IntegerIdMixin, Base):
    __tablename__ = "skills"

    name = Column(String(100), unique=True, nullable=False)
