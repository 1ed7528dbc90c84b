"""Application service (use case) for User operations."""

from app.application.schemas import UserCreate, UserUpdate
from app.application.services.record_query import SearchPredicate, contains_ignore_case
from app.application.services.record_service import RecordService
from app.domain.entities import User


class UserService(RecordService[User]):
    """Orchestrates user CRUD logic. Depends on the repository port (DI)."""

    entity_name = "User"
    record_type = User
    plural_name = "users"

    async def create_record(self, data: UserCreate) -> User:
        await self._faults.maybe_fail("Failed to create user")
        user = User(
            name=data.name,
            email=data.email,
            role=data.role,
            avatar=data.avatar,
        )
        return await self._repository.create(user)

    async def update_record(self, user_id: str, data: UserUpdate) -> User:
        await self._faults.maybe_fail("Failed to update user")
        user = await self._require(user_id)
        user.update(**data.model_dump(exclude_unset=True, exclude_none=True))
        return await self._repository.update(user)

    async def _search_predicate(self) -> SearchPredicate:
        return lambda user, search: contains_ignore_case(user.name, user.email)(search)
