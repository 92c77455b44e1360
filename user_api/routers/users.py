"""用户路由"""

from fastapi import APIRouter, Request, status

from user_api.dependencies import UserServiceDep
from user_api.schemas.response import ErrorResponse, MessageResponse
from user_api.schemas.user import UserCreate, UserResponse, UserUpdate

router = APIRouter(
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_user(
    user_in: UserCreate,
    service: UserServiceDep,
) -> UserResponse:
    """创建用户"""
    return await service.create(user_in)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    """获取用户列表"""
    return await service.get_list()


@router.get("/{user_id}", response_model=UserResponse, responses=NOT_FOUND)
async def get_user(user_id: str, service: UserServiceDep) -> UserResponse:
    """获取单个用户"""
    return await service.get_one(user_id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": UserUpdate.model_json_schema()},
            },
        },
    },
)
async def update_user(
    user_id: str,
    request: Request,
    service: UserServiceDep,
) -> UserResponse:
    """整体更新用户（请求体在确认用户存在后才解析）"""
    body = await request.body()
    return await service.update(user_id, body)


@router.delete("/{user_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_user(user_id: str, service: UserServiceDep) -> MessageResponse:
    """删除用户（软删除）"""
    await service.delete(user_id)
    return MessageResponse(message="User deleted")
