"""Shared fixtures: an in-memory SQLite database seeded with a small catalogue."""

import os

# Must be set before projectmatch is imported so the app engine targets SQLite
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy import event, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from projectmatch.models import (
    Base,
    JobTitle,
    Organization,
    Project,
    Skill,
    User,
    UserProject,
)
from projectmatch.services import ProjectSearchEngine, ProjectService, RelationshipManager
from projectmatch.stores import ProjectStore, RelationshipStore, UserDirectory


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@dataclass
class Catalogue:
    organization: Organization
    alice: User
    bob: User
    developer: JobTitle
    designer: JobTitle
    python: Skill
    writing: Skill
    clean_water: Project
    education: Project
    food_bank: Project
    archive: Project


@pytest_asyncio.fixture
async def catalogue(db) -> Catalogue:
    """Four projects with distinct statuses, remote flags, job titles and skills.

    Creation times are spaced so newest-first ordering is deterministic:
    archive (oldest), food_bank, education, clean_water (newest).
    """
    organization = Organization(name="Water for All")
    alice = User(email="alice@example.org", first_name="Alice", last_name="Ng", title="Engineer")
    bob = User(email="bob@example.org", first_name="Bob", last_name="Ruiz")
    developer = JobTitle(name="Developer", display_order=2)
    designer = JobTitle(name="Designer", display_order=1)
    python = Skill(name="Python")
    writing = Skill(name="Writing")
    db.add_all([organization, alice, bob, developer, designer, python, writing])
    await db.flush()

    base = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def project(title, description, status, remote, job_titles, skills, days):
        return Project(
            organization_id=organization.id,
            title=title,
            description=description,
            status=status,
            remote=remote,
            job_titles=job_titles,
            skills=skills,
            created_at=base + timedelta(days=days),
            updated_at=base + timedelta(days=days),
        )

    archive = project("Archive digitization", "Scan 100% of records", "C", True, [designer], [writing], 0)
    food_bank = project("Food bank logistics", "Route planning for deliveries", "A", False, [developer], [python], 1)
    education = project("Education", "After-school tutoring portal", "A", False, [designer], [writing], 2)
    clean_water = project("Clean water", "Map wells with sensors", "A", True, [developer, designer], [python], 3)
    db.add_all([archive, food_bank, education, clean_water])
    await db.flush()

    return Catalogue(
        organization=organization,
        alice=alice,
        bob=bob,
        developer=developer,
        designer=designer,
        python=python,
        writing=writing,
        clean_water=clean_water,
        education=education,
        food_bank=food_bank,
        archive=archive,
    )


@pytest.fixture
def manager(db) -> RelationshipManager:
    return RelationshipManager(RelationshipStore(db), ProjectStore(db), UserDirectory(db))


@pytest.fixture
def search_engine(db) -> ProjectSearchEngine:
    return ProjectSearchEngine(ProjectStore(db))


@pytest.fixture
def project_service(db) -> ProjectService:
    return ProjectService(ProjectStore(db))


@pytest.fixture
def count_relationships(db):
    """Return a coroutine counting user_projects rows, optionally for one pair."""

    async def _count(user_id: int | None = None, project_id: int | None = None) -> int:
        query = select(func.count(UserProject.id))
        if user_id is not None:
            query = query.where(UserProject.user_id == user_id)
        if project_id is not None:
            query = query.where(UserProject.project_id == project_id)
        return (await db.execute(query)).scalar()

    return _count
