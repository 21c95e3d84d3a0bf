"""User model — volunteers. Identity is resolved upstream."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from projectmatch.models.base import Base, IntegerIdMixin, TimestampMixin


class User(IntegerIdMixin, TimestampMixin, Base):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    title = Column(String(100))

    # Relationships
    user_projects = relationship("UserProject", back_populates="user", cascade="all, delete-orphan")
