"""用户 Schema"""

from datetime import datetime
from uuid import UUID

from user_api.schemas.response import BaseSchema


class UserCreate(BaseSchema):
    """创建用户请求（三个字符串字段必须提供，非空由校验层检查）"""

    username: str
    email: str
    password_hash: str
    is_active: bool = False


class UserUpdate(BaseSchema):
    """更新用户请求（整体覆盖，四个字段均需提供）"""

    username: str
    email: str
    password_hash: str
    is_active: bool


class UserResponse(BaseSchema):
    """用户响应模型"""

    id: UUID
    username: str
    email: str
    password_hash: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
