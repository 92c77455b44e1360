"""
用户 API - 应用入口

特点：
- create_app 工厂模式，数据库对象显式注入，便于测试
- setup_xxx 函数分离注册逻辑
- 三层架构：Router → Service → Repository

启动：uv run user-api  或  uvicorn user_api.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from loguru import logger

from user_api.config import Settings, get_settings
from user_api.core.database import Database, init_database
from user_api.core.exception_handlers import setup_exception_handlers
from user_api.core.logging import setup_logging
from user_api.core.middlewares import setup_middlewares
from user_api.routers import root, users


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """应用工厂函数"""
    settings = settings or get_settings()
    database = database or Database.from_settings(settings)

    setup_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        echo_sql=settings.debug,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # 启动：验证连接，按需建表
        logger.info("Starting {}", settings.app_name)
        await init_database(database, auto_migrate=settings.db.auto_migrate)
        yield
        # 关闭：释放连接池
        await database.dispose()
        logger.info("Shut down {}", settings.app_name)

    application = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )
    application.state.database = database

    # 注册组件（顺序重要）
    setup_middlewares(application, settings)
    application.include_router(root.router)
    application.include_router(users.router, prefix="/users", tags=["users"])
    setup_exception_handlers(application)

    return application


app = create_app()


def run() -> None:
    """命令行入口"""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
