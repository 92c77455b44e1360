"""ORM 模型"""

from .user import User

__all__ = ["User"]
