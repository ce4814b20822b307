from typing import AsyncContextManager, Callable, Optional

from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.marketplace.domain.entity.user_entity import UserEntity, UserRole
from src.service.marketplace.domain.value_object.owner_contact import OwnerContact
from src.service.marketplace.driven_adapter.model.user_model import UserModel


def model_to_user(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        email=user_model.email,
        name=user_model.name,
        town=user_model.town,
        role=UserRole(user_model.role),
        hashed_password=user_model.hashed_password,
        is_active=user_model.is_active,
        created_at=user_model.created_at,
    )


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: IPasswordHasher,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher

    @Logger.io
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_id)
            return model_to_user(user_model) if user_model else None

    @Logger.io
    async def exists_by_email(self, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel.id).where(UserModel.email == email.strip().lower())
            )
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def verify_password(self, email: str, plain_password: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email.strip().lower())
            )
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            if not self.password_hasher.verify_password(
                plain_password=SecretStr(plain_password),
                hashed_password=user_model.hashed_password,
            ):
                return None

            return model_to_user(user_model)

    @Logger.io
    async def get_owner_contact(self, owner_id: int) -> Optional[OwnerContact]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel.id, UserModel.name, UserModel.email).where(
                    UserModel.id == owner_id, UserModel.is_active.is_(True)
                )
            )
            row = result.one_or_none()
            if row is None:
                return None
            return OwnerContact(user_id=row.id, name=row.name, email=row.email)
