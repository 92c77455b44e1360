"""业务异常定义"""


class ApiError(Exception):
    """业务异常基类"""

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        detail: dict | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(self.message)


class ParseError(ApiError):
    """请求体无法解析（JSON 格式错误、缺少字段、类型不符）"""

    def __init__(
        self,
        message: str = "Invalid request body",
        detail: dict | None = None,
    ) -> None:
        super().__init__(message, status_code=400, detail=detail)

    @classmethod
    def from_errors(cls, errors: list) -> "ParseError":
        """由 Pydantic 错误列表构造，消息压缩为一行"""
        parts = []
        for error in errors:
            loc = [str(x) for x in error.get("loc", ()) if x != "body"]
            # json_invalid 的 loc 是字符偏移，不是字段名
            field = "" if error.get("type") == "json_invalid" else ".".join(loc)
            parts.append(f"{field}: {error['msg']}" if field else error["msg"])
        if not parts:
            return cls()
        return cls("; ".join(parts), detail={"errors": len(parts)})


class ValidationError(ApiError):
    """业务验证失败"""

    def __init__(
        self,
        message: str = "Validation failed",
        detail: dict | None = None,
    ) -> None:
        super().__init__(message, status_code=400, detail=detail)


class NotFoundError(ApiError):
    """资源不存在"""

    def __init__(
        self,
        message: str = "Resource not found",
        detail: dict | None = None,
    ) -> None:
        super().__init__(message, status_code=404, detail=detail)


class StoreError(ApiError):
    """存储层失败（连接、SQL 执行）"""

    def __init__(
        self,
        message: str = "Store operation failed",
        detail: dict | None = None,
    ) -> None:
        super().__init__(message, status_code=500, detail=detail)


class ConflictError(StoreError):
    """唯一约束冲突（仍按存储错误返回 500）"""

    def __init__(
        self,
        message: str = "Resource conflict",
        detail: dict | None = None,
    ) -> None:
        super().__init__(message, detail=detail)
