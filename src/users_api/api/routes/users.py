"""
User API routes
All data access goes through UsersService; errors propagate to the
centralized handlers in utils.error_handling.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Request, Response, status

from users_api.models.user import UserCreateRequest, UserUpdateRequest, UserResponse
from users_api.services.users_service import UsersService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_users_service(request: Request) -> UsersService:
    """Service instance built once at startup and stored on app.state"""
    return request.app.state.users_service


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def create_user(
    request: UserCreateRequest,
    users_service: UsersService = Depends(get_users_service)
):
    """Create a new user"""
    return await users_service.create_user(name=request.name, dob=request.dob)


@router.get("", response_model=List[UserResponse])
async def list_users(users_service: UsersService = Depends(get_users_service)):
    """List all users ordered by id"""
    return await users_service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    users_service: UsersService = Depends(get_users_service)
):
    """Get user details"""
    return await users_service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    users_service: UsersService = Depends(get_users_service)
):
    """Overwrite name and dob of a user"""
    return await users_service.update_user(user_id, name=request.name, dob=request.dob)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(
    user_id: int,
    users_service: UsersService = Depends(get_users_service)
):
    """Delete a user"""
    await users_service.delete_user(user_id)
    logger.info(f"User {user_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
