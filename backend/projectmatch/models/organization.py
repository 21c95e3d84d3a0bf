"""Organization model — nonprofits that publish projects."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from projectmatch.models.base import Base, IntegerIdMixin, TimestampMixin


class Organization(IntegerIdMixin, TimestampMixin, Base):
    __tablename__ = "organizations"

    name = Column(String(255), nullable=False)
    website_url = Column(String(500))

    # Relationships
    projects = relationship("Project", back_populates="organization")
