from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, or_

from userhub.crud.base import CRUDBase
from userhub.models.user import User
from userhub.schemas.user import UserCreate


class UserCRUD(CRUDBase[User, UserCreate]):
    async def get_all(self, db: AsyncSession) -> List[User]:
        """All users, oldest first"""
        return await self.get_multi(db, order_by=User.created_at)

    async def get_by_username_or_email(
        self, db: AsyncSession, *, username: str, email: str
    ) -> Optional[User]:
        stmt = select(User).where(or_(User.username == username, User.email == email))
        result = await db.execute(stmt)
        return result.scalars().first()


user_crud = UserCRUD(User)
