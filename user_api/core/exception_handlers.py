"""全局异常处理器注册

所有错误响应统一为 {"error": "<message>"}。
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.core.exceptions import ApiError, ParseError


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """业务异常处理"""
    logger.warning(
        "业务异常: {} | status={} path={} detail={}",
        exc.message,
        exc.status_code,
        request.url.path,
        exc.detail,
    )
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """请求体解析失败按 400 处理"""
    error = ParseError.from_errors(list(exc.errors()))
    logger.warning("请求解析失败: {} | path={}", error.message, request.url.path)
    return error_response(error.status_code, error.message)


async def http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """HTTP 异常处理（未知路由、方法不允许等）"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """未捕获异常处理"""
    logger.exception(
        "未捕获异常 {method} {path}", method=request.method, path=request.url.path
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def setup_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理器"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
