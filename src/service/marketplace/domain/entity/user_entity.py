from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import ForbiddenError, InputValidationError, LoginError


if TYPE_CHECKING:
    from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher


class UserRole(str, Enum):
    PUBLISHER = 'publisher'
    SUBSCRIBER = 'subscriber'


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    town: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    role: UserRole = UserRole.SUBSCRIBER
    is_active: bool = True
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, email: str, name: str, town: str, role: UserRole) -> 'UserEntity':
        name, town = name.strip(), town.strip()
        errors: dict[str, str] = {}
        if len(name) < 2:
            errors['name'] = 'must be at least 2 characters'
        if len(town) < 2:
            errors['town'] = 'must be at least 2 characters'
        if errors:
            raise InputValidationError(errors)
        return cls(email=email.strip().lower(), name=name, town=town, role=role)

    def validate_active(self) -> None:
        if not self.is_active:
            raise ForbiddenError('User is inactive')

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('LOGIN_BAD_CREDENTIALS')

        return user_entity

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )
