"""User CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import (
    ApiResponse,
    PaginatedResponse,
    PaginationResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from app.application.services import UserService
from app.domain.entities import QueryParams
from app.infrastructure.dependencies import get_user_service
from app.presentation.api.v1.endpoints.list_params import list_query_params

router = APIRouter(prefix="/users", tags=["Users"])


def _to_response(user) -> UserResponse:
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("", response_model=PaginatedResponse[UserResponse])
async def list_users(
    params: QueryParams = Depends(list_query_params),
    service: UserService = Depends(get_user_service),
) -> PaginatedResponse[UserResponse]:
    """Search, sort, and paginate users (search matches name and email)."""
    page = await service.list_records(params)
    return PaginatedResponse[UserResponse](
        data=[_to_response(u) for u in page.items],
        pagination=PaginationResponse.from_domain(page.pagination),
        message="Users fetched successfully",
    )


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserResponse]:
    user = await service.get_record(user_id)
    return ApiResponse[UserResponse](data=_to_response(user), message="User fetched successfully")


@router.post("", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserResponse]:
    user = await service.create_record(data)
    return ApiResponse[UserResponse](data=_to_response(user), message="User created successfully")


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(
    user_id: str,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[UserResponse]:
    """Update only the supplied fields."""
    user = await service.update_record(user_id, data)
    return ApiResponse[UserResponse](data=_to_response(user), message="User updated successfully")


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[None]:
    await service.delete_record(user_id)
    return ApiResponse[None](data=None, message="User deleted successfully")
