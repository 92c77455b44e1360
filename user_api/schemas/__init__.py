"""Schema 模块"""

from .response import ErrorResponse, MessageResponse
from .user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
]
