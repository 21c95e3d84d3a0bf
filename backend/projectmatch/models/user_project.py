"""User-project relationship — a bookmark or an application, one row per pair."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from projectmatch.models.base import Base, IntegerIdMixin, TimestampMixin

BOOKMARKED = "B"
APPLIED = "A"
ACCEPTED = "C"
DECLINED = "D"
RELATIONSHIP_STATUSES = (BOOKMARKED, APPLIED, ACCEPTED, DECLINED)
APPLICATION_STATUSES = (APPLIED, ACCEPTED, DECLINED)


class UserProject(IntegerIdMixin, TimestampMixin, Base):
    __tablename__ = "user_projects"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(1), nullable=False)  # B, A, C, D
    comment = Column(Text)
    resume_flag = Column(Boolean, default=False, nullable=False)

    # Relationships
    user = relationship("User", back_populates="user_projects")
    project = relationship("Project", back_populates="user_projects")

    __table_args__ = (
        UniqueConstraint("user_id", "project_id", name="uq_user_projects_user_project"),
        CheckConstraint("status IN ('B', 'A', 'C', 'D')", name="ck_user_projects_status"),
        Index("idx_user_projects_user_status", "user_id", "status"),
    )
