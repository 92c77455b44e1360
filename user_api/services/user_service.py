"""用户服务"""

from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from user_api.core.exceptions import NotFoundError, ParseError
from user_api.models.user import User
from user_api.repositories.user_repository import UserRepository
from user_api.schemas.user import UserCreate, UserResponse, UserUpdate
from user_api.services.validation import validate_user


class UserService:
    """
    用户业务逻辑层

    注意：事务由 get_db() 依赖自动管理，Service 层不调用 commit
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def _get_or_404(self, user_id: str) -> User:
        """按 ID 查找，ID 格式非法同样视为不存在"""
        not_found = NotFoundError("User not found", detail={"user_id": user_id})
        try:
            parsed_id = UUID(user_id)
        except ValueError:
            raise not_found from None

        user = await self.repository.find_by_id(parsed_id)
        if user is None:
            raise not_found
        return user

    async def get_list(self) -> list[UserResponse]:
        """获取全部用户"""
        users = await self.repository.find_all()
        return [UserResponse.model_validate(u) for u in users]

    async def get_one(self, user_id: str) -> UserResponse:
        """获取单个用户"""
        user = await self._get_or_404(user_id)
        return UserResponse.model_validate(user)

    async def create(self, user_in: UserCreate) -> UserResponse:
        """创建用户"""
        validate_user(user_in)

        user = User(
            username=user_in.username,
            email=user_in.email,
            password_hash=user_in.password_hash,
            is_active=user_in.is_active,
        )
        user = await self.repository.create(user)
        return UserResponse.model_validate(user)

    async def update(self, user_id: str, body: bytes) -> UserResponse:
        """
        整体更新用户

        先查找再解析请求体：不存在的 ID 总是返回 404。
        更新不经过 validate_user，空字符串会原样写入。
        """
        user = await self._get_or_404(user_id)

        try:
            user_in = UserUpdate.model_validate_json(body)
        except PydanticValidationError as e:
            raise ParseError.from_errors(e.errors()) from e

        user.username = user_in.username
        user.email = user_in.email
        user.password_hash = user_in.password_hash
        user.is_active = user_in.is_active

        user = await self.repository.save(user)
        return UserResponse.model_validate(user)

    async def delete(self, user_id: str) -> None:
        """软删除用户"""
        user = await self._get_or_404(user_id)
        await self.repository.delete(user)
