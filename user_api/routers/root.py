"""根路由与健康检查"""

from fastapi import APIRouter

from user_api.schemas.response import MessageResponse

router = APIRouter()

WELCOME_MESSAGE = "Welcome to the User API"


@router.get("/", response_model=MessageResponse)
async def index() -> MessageResponse:
    return MessageResponse(message=WELCOME_MESSAGE)


@router.get("/health", response_model=dict[str, str])
async def health_check() -> dict[str, str]:
    return {"status": "ok"}
