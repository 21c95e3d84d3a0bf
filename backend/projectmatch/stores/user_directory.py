"""User existence checks. Users are owned elsewhere; the core only references ids."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projectmatch.models.user import User
from projectmatch.stores.base import store_operation


class UserDirectory:
    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation
    async def exists(self, user_id: int) -> bool:
        result = await self.db.execute(select(User.id).where(User.id == user_id))
        return result.scalar_one_or_none() is not None
