"""数据库配置 - 增强型基类与连接管理"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from typing import Any, TypeVar
from uuid import UUID

from fastapi import Request
from loguru import logger
from sqlalchemy import DateTime, MetaData, Select, text
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_utils.compat import uuid7

from user_api.config import Settings

# 命名约定（Alembic 自动生成迁移友好）
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utc_now() -> datetime:
    """返回当前 UTC 时间（aware datetime）"""
    return datetime.now(timezone.utc)


class Base(AsyncAttrs, DeclarativeBase):
    """
    增强型 ORM 基类

    特性：
    - UUIDv7 主键（时间有序，分布式友好）
    - 自动时间戳（created_at, updated_at）
    - 软删除支持（deleted_at）
    - 时区感知（所有时间 UTC）
    """

    metadata = MetaData(naming_convention=convention)

    # UUIDv7 主键
    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid7)

    # 时间戳（带时区，应用层 UTC）
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
    )

    # 软删除
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        default=None,
        index=True,
    )

    @property
    def is_deleted(self) -> bool:
        """是否已软删除"""
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """标记为软删除"""
        self.deleted_at = utc_now()


T = TypeVar("T", bound=Base)


def filter_active(stmt: Select[tuple[T]]) -> Select[tuple[T]]:
    """过滤已删除记录的通用方法"""
    entity = stmt.column_descriptions[0]["entity"]
    return stmt.where(entity.deleted_at.is_(None))


class Database:
    """
    数据库连接管理（引擎 + 会话工厂）

    启动时显式创建并挂到 app.state.database，请求内通过 get_db() 取会话，
    不使用模块级全局引擎。
    """

    def __init__(self, url: str, **engine_kwargs: Any) -> None:
        # SQL 输出由 setup_logging(echo_sql=...) 控制，不使用 echo
        self.engine: AsyncEngine = create_async_engine(
            url,
            pool_pre_ping=True,
            **engine_kwargs,
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """按配置创建 PostgreSQL 连接池"""
        return cls(
            settings.database_url,
            pool_size=settings.db.pool_size,
            max_overflow=settings.db.max_overflow,
            pool_timeout=30,
            pool_recycle=3600,
            connect_args=settings.db.connect_args(),
        )

    async def ping(self) -> None:
        """验证数据库连接"""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """自动建表（已存在的表不会变更）"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """关闭连接池"""
        await self.engine.dispose()


async def init_database(database: Database, *, auto_migrate: bool) -> None:
    """初始化数据库：验证连接，按需建表（连接失败直接抛出，启动中止）"""
    await database.ping()
    logger.info("数据库连接成功")

    if auto_migrate:
        await database.create_all()
        logger.info("数据表已同步")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """数据库会话依赖，自动管理事务"""
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
