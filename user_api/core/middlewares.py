"""中间件配置"""

import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from user_api.config import Settings


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求日志中间件（Loguru）"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid4().hex[:8]
        start_time = time.perf_counter()

        with logger.contextualize(request_id=request_id):
            logger.info("{} {}", request.method, request.url.path)
            response = await call_next(request)
            duration = time.perf_counter() - start_time
            logger.info("Completed {} in {:.3f}s", response.status_code, duration)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{duration:.3f}"
        return response


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """注册中间件（注册顺序与执行顺序相反）"""
    # CORS（最内层）
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # 请求日志（最外层）
    app.add_middleware(LoggingMiddleware)
