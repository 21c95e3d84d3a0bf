"""User-project relationship persistence, keyed by the (user, project) pair."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from projectmatch.exceptions import StoreError
from projectmatch.models.user_project import UserProject
from projectmatch.stores.base import store_operation

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

RECENT_FIRST = (UserProject.created_at.desc(), UserProject.id.desc())


class RelationshipStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation
    async def find(self, user_id: int, project_id: int) -> UserProject | None:
        result = await self.db.execute(
            select(UserProject).where(
                UserProject.user_id == user_id,
                UserProject.project_id == project_id,
            )
        )
        return result.scalar_one_or_none()

    @store_operation
    async def upsert(
        self,
        user_id: int,
        project_id: int,
        status: str,
        comment: str | None,
        resume_flag: bool,
    ) -> UserProject:
        """Insert the relationship or overwrite the existing row for the pair.

        One INSERT ... ON CONFLICT DO UPDATE statement, so a repeat call never
        yields a second row. The created timestamp is reset on overwrite.
        """
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise StoreError(f"Relationship upsert is not supported on {dialect}")

        now = datetime.now(timezone.utc)
        stmt = insert(UserProject).values(
            user_id=user_id,
            project_id=project_id,
            status=status,
            comment=comment,
            resume_flag=resume_flag,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "project_id"],
            set_={
                "status": stmt.excluded.status,
                "comment": stmt.excluded.comment,
                "resume_flag": stmt.excluded.resume_flag,
                "created_at": stmt.excluded.created_at,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        result = await self.db.scalars(
            stmt.returning(UserProject),
            execution_options={"populate_existing": True},
        )
        return result.one()

    @store_operation
    async def save(self, user_project: UserProject) -> UserProject:
        await self.db.flush()
        await self.db.refresh(user_project)
        return user_project

    @store_operation
    async def list_by_project(self, project_id: int, statuses: tuple[str, ...] | None = None) -> list[UserProject]:
        """Relationships for a project with their users loaded, most recent first."""
        query = (
            select(UserProject)
            .options(selectinload(UserProject.user))
            .where(UserProject.project_id == project_id)
        )
        if statuses:
            query = query.where(UserProject.status.in_(statuses))
        result = await self.db.execute(query.order_by(*RECENT_FIRST))
        return list(result.scalars().all())

    @store_operation
    async def list_by_user_and_status(self, user_id: int, status: str | None = None) -> list[UserProject]:
        """Relationships for a user with their projects loaded, most recent first."""
        query = (
            select(UserProject)
            .options(selectinload(UserProject.project))
            .where(UserProject.user_id == user_id)
        )
        if status:
            query = query.where(UserProject.status == status)
        result = await self.db.execute(query.order_by(*RECENT_FIRST))
        return list(result.scalars().all())
