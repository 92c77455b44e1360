"""用户字段校验"""

from user_api.core.exceptions import ValidationError
from user_api.schemas.user import UserCreate

REQUIRED_FIELDS = ("username", "email", "password_hash")


def validate_user(candidate: UserCreate) -> None:
    """必填字段不能为空（唯一性由数据库约束保证）"""
    missing = [name for name in REQUIRED_FIELDS if not getattr(candidate, name)]
    if missing:
        raise ValidationError(
            "username, email, and password_hash are required",
            detail={"missing": missing},
        )
