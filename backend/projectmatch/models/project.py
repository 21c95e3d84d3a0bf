"""Project model — volunteer opportunities published by organizations."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship

from projectmatch.models.base import Base, IntegerIdMixin, TimestampMixin

NEW = "N"
ACTIVE = "A"
CLOSED = "C"
PROJECT_STATUSES = (NEW, ACTIVE, CLOSED)

project_job_titles = Table(
    "project_job_titles",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("job_title_id", Integer, ForeignKey("job_titles.id", ondelete="CASCADE"), primary_key=True),
)

project_skills = Table(
    "project_skills",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", Integer, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)


class Project(IntegerIdMixin, TimestampMixin, Base):
    __tablename__ = "projects"

    organization_id = Column(Integer, ForeignKey("organizations.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(String(1), default=NEW, nullable=False, index=True)  # N, A, C
    remote = Column(Boolean, default=False, nullable=False)
    image_url = Column(String(500))

    # Relationships (selectin: loaded together with the project)
    organization = relationship("Organization", back_populates="projects")
    job_titles = relationship("JobTitle", secondary=project_job_titles, lazy="selectin", order_by="JobTitle.id")
    skills = relationship("Skill", secondary=project_skills, lazy="selectin", order_by="Skill.id")
    user_projects = relationship("UserProject", back_populates="project", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("status IN ('N', 'A', 'C')", name="ck_projects_status"),
        Index("idx_projects_status_remote", "status", "remote"),
    )

    @property
    def job_title_ids(self) -> list[int]:
        return [job_title.id for job_title in self.job_titles]

    @property
    def skill_ids(self) -> list[int]:
        return [skill.id for skill in self.skills]
