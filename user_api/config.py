"""配置管理"""

from functools import lru_cache
from typing import Annotated, Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DatabaseConfig(BaseModel):
    """数据库配置（环境变量前缀 DB_）"""

    host: str = "localhost"
    port: int = Field(default=5432, ge=1, le=65535)
    name: str = "mydb"
    user: str = "postgres"
    password: SecretStr
    sslmode: Literal["disable", "allow", "prefer", "require", "verify-ca", "verify-full"] = (
        "disable"
    )
    timezone: str = "UTC"

    # 连接池：常驻 pool_size，峰值 pool_size + max_overflow
    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=90, ge=0)

    # 启动时自动建表
    auto_migrate: bool = True

    @computed_field
    @property
    def url(self) -> str:
        """构建数据库连接 URL"""
        user = quote(self.user, safe="")
        password = quote(self.password.get_secret_value(), safe="")
        return f"postgresql+asyncpg://{user}:{password}@{self.host}:{self.port}/{self.name}"

    def connect_args(self) -> dict[str, Any]:
        """asyncpg 连接参数（sslmode、会话时区）"""
        return {
            "ssl": self.sslmode,
            "server_settings": {"timezone": self.timezone},
        }


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="_",
        env_nested_max_split=1,
        extra="ignore",
    )

    # 应用配置
    app_name: str = "User API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)

    # 日志
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False

    # 数据库（嵌套配置）
    db: DatabaseConfig

    # CORS（逗号分隔：CORS_ORIGINS=http://a.com,http://b.com）
    cors_origins: Annotated[list[str], NoDecode] = []

    @computed_field
    @property
    def database_url(self) -> str:
        """数据库连接 URL（供 SQLAlchemy 使用）"""
        return self.db.url

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    """全局单例"""
    return Settings()
