"""User profile service"""

from pymongo.database import Database

from primekart.dtos import MessageResponse, UserResponse, UserUpdate
from primekart.entities.user import User
from primekart.middleware.auth import Principal
from primekart.middleware.rbac import ensure_self_or_admin
from primekart.repositories.user import UserRepository
from primekart.services.exceptions import InvalidInputError, NotFoundError


class UserService:
    def __init__(self, db: Database):
        self.user_repo = UserRepository(db)

    @staticmethod
    def _to_response(user: User) -> UserResponse:
        return UserResponse.model_validate(user.model_dump(exclude={"password"}))

    def get_profile(self, principal: Principal) -> UserResponse:
        user = self.user_repo.find_by_id(principal.id)
        if not user:
            raise NotFoundError("User not found")
        return self._to_response(user)

    def update_profile(
        self, principal: Principal, user_id: str, payload: UserUpdate
    ) -> MessageResponse:
        ensure_self_or_admin(principal, user_id)

        updates = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not updates:
            raise InvalidInputError("No fields to update")

        if not self.user_repo.update_profile(user_id, updates):
            raise NotFoundError("User not found")
        return MessageResponse(message="Profile updated")
