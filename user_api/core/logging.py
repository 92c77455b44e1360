"""日志配置"""

import logging
import sys
from typing import Literal

from loguru import logger

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# request_id 由 LoggingMiddleware 通过 logger.contextualize 注入
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[request_id]}</cyan> | "
    "{name}:{function}:{line} - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """拦截标准库日志并转发到 Loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    level: LogLevel = "INFO",
    *,
    json_format: bool = False,
    echo_sql: bool = False,
) -> None:
    """
    配置日志

    Args:
        level: 日志级别
        json_format: 是否使用 JSON 格式（生产环境建议开启）
        echo_sql: 是否输出 SQL 语句（调试用）
    """
    logger.remove()
    logger.configure(extra={"request_id": "-"})
    if json_format:
        logger.add(sys.stderr, level=level, serialize=True, enqueue=True)
    else:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT, enqueue=True)

    # 拦截标准库日志（uvicorn、sqlalchemy）
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # uvicorn 访问日志与 LoggingMiddleware 重复
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if echo_sql else logging.WARNING
    )
