from typing import List
from fastapi import APIRouter, Depends
from taskboard.api.dependencies import get_current_identity, get_user_service
from taskboard.schemas.user import UserResponse, UserUpdate
from taskboard.services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(get_current_identity)],
)


@router.get("", response_model=List[UserResponse])
async def list_users(user_service: UserService = Depends(get_user_service)):
    return user_service.list()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    return user_service.get(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user_update: UserUpdate,
    user_service: UserService = Depends(get_user_service)
):
    return user_service.update(user_id, user_update)


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    """Soft-delete a user; the row and its tasks are kept"""
    return user_service.soft_delete(user_id)
