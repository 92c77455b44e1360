"""通用响应模型"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_serializer


class BaseSchema(BaseModel):
    """
    所有 Schema 的基类

    特性：
    - from_attributes: 支持 ORM 模型转换
    - str_strip_whitespace: 自动去除字符串首尾空白
    - datetime 序列化为 ISO8601 格式（Z 后缀）
    """

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    @field_serializer("*", mode="wrap")
    def serialize_datetime(self, value, handler):
        """datetime 序列化为 ISO8601 格式（Z 后缀）"""
        if isinstance(value, datetime):
            # SQLite 返回 naive datetime，按 UTC 处理
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
        return handler(value)


class MessageResponse(BaseModel):
    """消息响应"""

    message: str


class ErrorResponse(BaseModel):
    """错误响应"""

    error: str
