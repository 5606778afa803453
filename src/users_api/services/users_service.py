"""
Users service - business logic for user records
"""

import logging
from datetime import date
from typing import Callable, List

from users_api.models.user import MAX_NAME_LENGTH, MIN_DATE_OF_BIRTH, User, UserResponse
from users_api.services.age import compute_age
from users_api.services.user_repository import UserRepository
from users_api.utils.errors import ValidationError

logger = logging.getLogger(__name__)


class UsersService:
    """Orchestrates repository calls and attaches the derived age"""

    def __init__(self, repository: UserRepository, clock: Callable[[], date] = date.today):
        self.repository = repository
        self.clock = clock
        logger.info(f"UsersService initialized with {type(repository).__name__}")

    def _to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            name=user.name,
            dob=user.dob,
            age=compute_age(user.dob, self.clock())
        )

    def _check_input(self, name: str, dob: date):
        """Same constraints as the request models, for callers that bypass HTTP"""
        details = []
        if not name or not name.strip():
            details.append({"field": "name", "message": "name cannot be empty", "type": "value_error"})
        elif len(name.strip()) > MAX_NAME_LENGTH:
            details.append({"field": "name", "message": "name is too long", "type": "value_error"})
        if dob > self.clock():
            details.append({"field": "dob", "message": "dob cannot be in the future", "type": "value_error"})
        elif dob < MIN_DATE_OF_BIRTH:
            details.append({"field": "dob", "message": "dob is before the earliest accepted date", "type": "value_error"})
        if details:
            raise ValidationError("Invalid user data", details)

    async def create_user(self, name: str, dob: date) -> UserResponse:
        """
        Create a new user

        Args:
            name: Display name
            dob: Date of birth

        Returns:
            The stored user with its generated id and current age
        """
        self._check_input(name, dob)
        user = await self.repository.create(name.strip(), dob)
        return self._to_response(user)

    async def get_user(self, user_id: int) -> UserResponse:
        """Get a user by id; raises NotFoundError when absent"""
        user = await self.repository.get_by_id(user_id)
        return self._to_response(user)

    async def list_users(self) -> List[UserResponse]:
        users = await self.repository.list()
        return [self._to_response(user) for user in users]

    async def update_user(self, user_id: int, name: str, dob: date) -> UserResponse:
        """
        Overwrite name and dob of an existing user

        Args:
            user_id: Id of the user to update
            name: New display name
            dob: New date of birth

        Returns:
            The updated user with its current age
        """
        self._check_input(name, dob)
        user = await self.repository.update(user_id, name.strip(), dob)
        return self._to_response(user)

    async def delete_user(self, user_id: int) -> None:
        await self.repository.delete(user_id)

    async def ping(self) -> None:
        """Raises StoreError when the store cannot be reached"""
        await self.repository.ping()
