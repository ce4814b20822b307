from abc import ABC, abstractmethod
from typing import Optional

from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.value_object.owner_contact import OwnerContact


class IUserQueryRepo(ABC):
    """Read side of the identity gateway"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def verify_password(self, email: str, plain_password: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_owner_contact(self, owner_id: int) -> Optional[OwnerContact]:
        """Name and email to notify for an offer owner, None when the owner is unknown"""
        pass
