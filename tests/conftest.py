"""
Pytest 配置

必填环境变量需在导入 user_api 之前设置（user_api.main 导入时即加载配置）。
"""

import os

os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from user_api.config import DatabaseConfig, Settings
from user_api.core.database import Database
from user_api.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_database() -> Database:
    """内存 SQLite，所有会话共享同一连接"""
    return Database(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        db=DatabaseConfig(password="test-password"),
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings=settings, database=make_database())


@pytest.fixture
def client(app):
    # with 语句触发 lifespan（建表）
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def session():
    """直接访问数据库的会话（Repository 测试）"""
    database = make_database()
    await database.create_all()
    async with database.session_factory() as db_session:
        yield db_session
    await database.dispose()


@pytest.fixture
def alice_payload() -> dict:
    return {"username": "alice", "email": "a@x.com", "password_hash": "h1"}
