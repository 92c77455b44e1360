"""共享依赖"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.database import get_db
from user_api.repositories.user_repository import UserRepository
from user_api.services.user_service import UserService

# 数据库会话依赖（自动管理事务）
DBSession = Annotated[AsyncSession, Depends(get_db)]


def get_user_repository(db: DBSession) -> UserRepository:
    return UserRepository(db)


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    return UserService(repository)


# 类型别名，简化路由中的依赖声明
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
