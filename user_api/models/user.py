"""用户模型"""

from sqlalchemy import Boolean, Index, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from user_api.core.database import Base


class User(Base):
    """
    用户模型

    继承自 Base，自动获得：
    - id: UUIDv7 主键
    - created_at, updated_at: 时间戳
    - deleted_at: 软删除
    """

    __tablename__ = "app_go_users"

    username: Mapped[str] = mapped_column(Text)
    email: Mapped[str] = mapped_column(Text)
    # 调用方传入已哈希的值，服务端不做哈希
    password_hash: Mapped[str] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False)

    __table_args__ = (
        # 未删除记录内唯一（软删除后邮箱可复用）
        Index(
            "uq_app_go_users_email_active",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )
