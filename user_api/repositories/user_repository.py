"""用户数据访问层"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.database import filter_active, utc_now
from user_api.core.exceptions import ConflictError, StoreError
from user_api.models.user import User


@asynccontextmanager
async def translate_store_errors(message: str) -> AsyncIterator[None]:
    """将 SQLAlchemy 异常转换为业务异常"""
    try:
        yield
    except IntegrityError as e:
        raise ConflictError(
            f"{message}: email already exists",
            detail={"reason": str(e.orig)},
        ) from e
    except SQLAlchemyError as e:
        raise StoreError(message, detail={"reason": str(e)}) from e


class UserRepository:
    """
    用户数据访问层

    注意：
    - 事务由 get_db() 依赖自动管理，Repository 只用 flush/refresh
    - 查询排除已软删除的记录
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_all(self) -> list[User]:
        """查询全部用户（按创建顺序）"""
        async with translate_store_errors("Failed to fetch users"):
            stmt = filter_active(select(User).order_by(User.created_at, User.id))
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def find_by_id(self, user_id: UUID) -> User | None:
        """根据 ID 获取用户"""
        async with translate_store_errors("Failed to fetch user"):
            stmt = filter_active(select(User).where(User.id == user_id))
            result = await self.db.execute(stmt)
            return result.scalar_one_or_none()

    async def create(self, user: User) -> User:
        """创建用户"""
        async with translate_store_errors("Failed to create user"):
            self.db.add(user)
            await self.db.flush()
            await self.db.refresh(user)
            return user

    async def save(self, user: User) -> User:
        """整体保存用户（updated_at 总是刷新）"""
        async with translate_store_errors("Failed to update user"):
            user.updated_at = utc_now()
            await self.db.flush()
            await self.db.refresh(user)
            return user

    async def delete(self, user: User) -> None:
        """软删除用户"""
        async with translate_store_errors("Failed to delete user"):
            user.soft_delete()
            await self.db.flush()
